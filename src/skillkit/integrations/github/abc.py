"""Abstract base class for GitHub operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from skillkit.integrations.github.types import IssueComment, PRMetadata, RepoInfo, ReviewComment


class GitHub(ABC):
    """Abstract interface for GitHub operations performed through the gh CLI.

    All implementations (real and fake) must implement this interface.
    Methods follow LBYL conventions: failures are reported as False/None,
    never raised.
    """

    @abstractmethod
    def is_installed(self) -> bool:
        """Check whether the gh CLI is available on PATH."""
        ...

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check whether the gh CLI is logged in (`gh auth status`)."""
        ...

    @abstractmethod
    def get_authenticated_username(self) -> str | None:
        """Get the login of the authenticated user.

        Returns:
            Username, or None if the lookup fails or returns nothing
        """
        ...

    @abstractmethod
    def get_pr_for_current_branch(self, cwd: Path) -> PRMetadata | None:
        """Get the open pull request whose head is the checked-out branch.

        Args:
            cwd: Directory inside the repository

        Returns:
            PRMetadata, or None if no PR exists or it is merged/closed
        """
        ...

    @abstractmethod
    def get_repo_info(self, cwd: Path) -> RepoInfo | None:
        """Get the owner and name of the repository.

        Args:
            cwd: Directory inside the repository

        Returns:
            RepoInfo, or None if the query fails
        """
        ...

    @abstractmethod
    def get_review_comments(
        self, cwd: Path, owner: str, repo: str, pr_number: int
    ) -> list[ReviewComment] | None:
        """Get inline review comments for a pull request.

        Returns:
            List of comments (possibly empty), or None if the query fails
        """
        ...

    @abstractmethod
    def get_issue_comments(
        self, cwd: Path, owner: str, repo: str, pr_number: int
    ) -> list[IssueComment] | None:
        """Get general discussion comments for a pull request.

        Returns:
            List of comments (possibly empty), or None if the query fails
        """
        ...
