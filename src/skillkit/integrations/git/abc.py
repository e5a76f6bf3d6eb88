"""Abstract git operations interface.

Defines the narrow set of git operations the skill commands need, so the
pipelines can run against an in-memory fake in tests.

Design:
- Every method takes the working directory explicitly
- LBYL pattern: queries return bool/None/list, mutations return success flags
- Pull returns a CommandResult so callers can show git's own output
"""

from abc import ABC, abstractmethod
from pathlib import Path

from skillkit.subprocess_utils import CommandResult


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def is_inside_repository(self, cwd: Path) -> bool:
        """Check whether cwd is inside a git working tree or git directory."""
        ...

    @abstractmethod
    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check for uncommitted changes to tracked files relative to HEAD.

        Returns:
            True if changes exist or the comparison with HEAD fails
        """
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch.

        Returns:
            Branch name, or None on failure or detached HEAD
        """
        ...

    @abstractmethod
    def local_branch_exists(self, cwd: Path, branch: str) -> bool:
        """Check whether refs/heads/<branch> exists."""
        ...

    @abstractmethod
    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        """Check whether refs/remotes/<remote>/<branch> exists locally."""
        ...

    @abstractmethod
    def get_remote_default_branch(self, cwd: Path, remote: str) -> str | None:
        """Resolve the remote's symbolic HEAD (refs/remotes/<remote>/HEAD).

        Returns:
            Branch name the remote HEAD points to, or None if unset
        """
        ...

    @abstractmethod
    def list_local_branches(self, cwd: Path) -> list[str]:
        """List local branch names in git's listing order.

        Returns:
            Branch names, empty if the listing fails
        """
        ...

    @abstractmethod
    def checkout_branch(self, cwd: Path, branch: str) -> bool:
        """Check out an existing branch.

        Returns:
            True on success, False on failure
        """
        ...

    @abstractmethod
    def pull_branch(self, cwd: Path, remote: str, branch: str) -> CommandResult:
        """Pull a branch from a remote into the current branch (single attempt).

        Returns:
            CommandResult with git's combined output
        """
        ...

    @abstractmethod
    def create_and_checkout_branch(self, cwd: Path, branch: str) -> bool:
        """Create a new branch at HEAD and check it out (`git checkout -b`).

        Returns:
            True on success, False on failure
        """
        ...
