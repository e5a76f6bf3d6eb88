"""Fake GitHub operations for testing.

FakeGitHub is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from skillkit.integrations.github.abc import GitHub
from skillkit.integrations.github.types import IssueComment, PRMetadata, RepoInfo, ReviewComment


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        installed: bool = True,
        authenticated: bool = True,
        username: str | None = "test-user",
        pr: PRMetadata | None = None,
        repo_info: RepoInfo | None = None,
        repo_info_fail: bool = False,
        review_comments: list[ReviewComment] | None = None,
        issue_comments: list[IssueComment] | None = None,
        review_comments_fail: bool = False,
        issue_comments_fail: bool = False,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            installed: Whether the gh CLI is reported as installed
            authenticated: Whether gh auth status succeeds
            username: Login returned for the authenticated user (None = lookup fails)
            pr: Open PR for the current branch (None = no open PR)
            repo_info: Repository owner/name (defaults to owner/repo)
            repo_info_fail: Simulate a failing repository lookup
            review_comments: Inline review comments returned for the PR
            issue_comments: Discussion comments returned for the PR
            review_comments_fail: Simulate a failing review comment query
            issue_comments_fail: Simulate a failing issue comment query
        """
        self._installed = installed
        self._authenticated = authenticated
        self._username = username
        self._pr = pr
        self._repo_info = repo_info if repo_info is not None else RepoInfo("owner", "repo")
        self._repo_info_fail = repo_info_fail
        self._review_comments = review_comments or []
        self._issue_comments = issue_comments or []
        self._review_comments_fail = review_comments_fail
        self._issue_comments_fail = issue_comments_fail
        self._username_lookups = 0
        self._comment_queries: list[tuple[str, str, str, int]] = []

    @property
    def username_lookups(self) -> int:
        """Number of get_authenticated_username() calls, for test assertions."""
        return self._username_lookups

    @property
    def comment_queries(self) -> list[tuple[str, str, str, int]]:
        """Comment queries made, as (kind, owner, repo, pr_number) tuples."""
        return self._comment_queries

    def is_installed(self) -> bool:
        return self._installed

    def is_authenticated(self) -> bool:
        return self._authenticated

    def get_authenticated_username(self) -> str | None:
        self._username_lookups += 1
        if not self._username:
            return None
        return self._username

    def get_pr_for_current_branch(self, cwd: Path) -> PRMetadata | None:
        return self._pr

    def get_repo_info(self, cwd: Path) -> RepoInfo | None:
        if self._repo_info_fail:
            return None
        return self._repo_info

    def get_review_comments(
        self, cwd: Path, owner: str, repo: str, pr_number: int
    ) -> list[ReviewComment] | None:
        self._comment_queries.append(("review", owner, repo, pr_number))
        if self._review_comments_fail:
            return None
        return list(self._review_comments)

    def get_issue_comments(
        self, cwd: Path, owner: str, repo: str, pr_number: int
    ) -> list[IssueComment] | None:
        self._comment_queries.append(("issue", owner, repo, pr_number))
        if self._issue_comments_fail:
            return None
        return list(self._issue_comments)
