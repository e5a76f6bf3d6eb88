"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state in
its constructor and applies mutations (checkout, branch creation) to that
state, so a pipeline run can be verified end to end without a repository.
"""

from pathlib import Path

from skillkit.integrations.git.abc import Git
from skillkit.subprocess_utils import CommandResult


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults. Mutating calls are recorded
    for test assertions.
    """

    def __init__(
        self,
        *,
        is_repository: bool = True,
        uncommitted_changes: bool = False,
        current_branch: str | None = "main",
        local_branches: list[str] | None = None,
        remote_branches: dict[str, list[str]] | None = None,
        remote_default_branch: dict[str, str] | None = None,
        pull_result: CommandResult | None = None,
        checkout_fails: bool = False,
        create_fails: bool = False,
        create_switches_branch: bool = True,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            is_repository: Whether cwd is inside a git repository
            uncommitted_changes: Whether the working tree differs from HEAD
            current_branch: Checked-out branch (None = detached HEAD)
            local_branches: Local branch names in listing order (defaults to ["main"])
            remote_branches: Mapping of remote name -> branch names known locally
            remote_default_branch: Mapping of remote name -> branch its HEAD points to
            pull_result: Result returned by pull_branch (defaults to success)
            checkout_fails: Simulate a failing `git checkout <branch>`
            create_fails: Simulate a failing `git checkout -b <branch>`
            create_switches_branch: If False, a successful create leaves HEAD
                where it was (for verification failure tests)
        """
        self._is_repository = is_repository
        self._uncommitted_changes = uncommitted_changes
        self._current_branch = current_branch
        self._local_branches = list(local_branches) if local_branches is not None else ["main"]
        self._remote_branches = remote_branches or {}
        self._remote_default_branch = remote_default_branch or {}
        self._pull_result = (
            pull_result
            if pull_result is not None
            else CommandResult(success=True, stdout="Already up to date.\n", stderr="")
        )
        self._checkout_fails = checkout_fails
        self._create_fails = create_fails
        self._create_switches_branch = create_switches_branch

        self._checked_out_branches: list[str] = []
        self._pulled_branches: list[tuple[str, str]] = []
        self._created_branches: list[str] = []

    @property
    def current_branch(self) -> str | None:
        """Currently checked-out branch after any recorded mutations."""
        return self._current_branch

    @property
    def local_branches(self) -> list[str]:
        """Local branches after any recorded mutations."""
        return self._local_branches

    @property
    def checked_out_branches(self) -> list[str]:
        """Branches passed to checkout_branch(), in call order."""
        return self._checked_out_branches

    @property
    def pulled_branches(self) -> list[tuple[str, str]]:
        """(remote, branch) pairs passed to pull_branch(), in call order."""
        return self._pulled_branches

    @property
    def created_branches(self) -> list[str]:
        """Branches passed to create_and_checkout_branch(), in call order."""
        return self._created_branches

    @property
    def mutation_count(self) -> int:
        """Total number of mutating calls (checkout, pull, create)."""
        return (
            len(self._checked_out_branches)
            + len(self._pulled_branches)
            + len(self._created_branches)
        )

    def is_inside_repository(self, cwd: Path) -> bool:
        return self._is_repository

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        return self._uncommitted_changes

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branch

    def local_branch_exists(self, cwd: Path, branch: str) -> bool:
        return branch in self._local_branches

    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        return branch in self._remote_branches.get(remote, [])

    def get_remote_default_branch(self, cwd: Path, remote: str) -> str | None:
        return self._remote_default_branch.get(remote)

    def list_local_branches(self, cwd: Path) -> list[str]:
        return list(self._local_branches)

    def checkout_branch(self, cwd: Path, branch: str) -> bool:
        self._checked_out_branches.append(branch)
        if self._checkout_fails or branch not in self._local_branches:
            return False
        self._current_branch = branch
        return True

    def pull_branch(self, cwd: Path, remote: str, branch: str) -> CommandResult:
        self._pulled_branches.append((remote, branch))
        return self._pull_result

    def create_and_checkout_branch(self, cwd: Path, branch: str) -> bool:
        self._created_branches.append(branch)
        if self._create_fails or branch in self._local_branches:
            return False
        self._local_branches.append(branch)
        if self._create_switches_branch:
            self._current_branch = branch
        return True
