"""Production implementation of GitHub operations using the gh CLI."""

import json
import shutil
from pathlib import Path

from skillkit.integrations.github.abc import GitHub
from skillkit.integrations.github.parsing import (
    parse_issue_comments,
    parse_pr_metadata,
    parse_repo_info,
    parse_review_comments,
)
from skillkit.integrations.github.types import IssueComment, PRMetadata, RepoInfo, ReviewComment
from skillkit.subprocess_utils import run_command


class RealGitHub(GitHub):
    """Production implementation using gh CLI.

    This is a thin wrapper around subprocess calls to gh. It contains
    NO business logic, only command execution and parsing.
    """

    def is_installed(self) -> bool:
        return shutil.which("gh") is not None

    def is_authenticated(self) -> bool:
        # gh auth status returns non-zero if not authenticated
        return run_command(["gh", "auth", "status"]).success

    def get_authenticated_username(self) -> str | None:
        result = run_command(["gh", "api", "user", "--jq", ".login"])
        if not result.success:
            return None

        username = result.stdout.strip()
        if not username:
            return None
        return username

    def get_pr_for_current_branch(self, cwd: Path) -> PRMetadata | None:
        result = run_command(
            ["gh", "pr", "view", "--json", "number,title,headRefName,url,state"],
            cwd=cwd,
        )
        if not result.success:
            return None

        try:
            return parse_pr_metadata(result.stdout)
        except json.JSONDecodeError:
            return None

    def get_repo_info(self, cwd: Path) -> RepoInfo | None:
        result = run_command(["gh", "repo", "view", "--json", "owner,name"], cwd=cwd)
        if not result.success:
            return None

        try:
            return parse_repo_info(result.stdout)
        except json.JSONDecodeError:
            return None

    def get_review_comments(
        self, cwd: Path, owner: str, repo: str, pr_number: int
    ) -> list[ReviewComment] | None:
        result = run_command(
            ["gh", "api", "--paginate", f"repos/{owner}/{repo}/pulls/{pr_number}/comments"],
            cwd=cwd,
        )
        if not result.success:
            return None

        try:
            return parse_review_comments(result.stdout)
        except (json.JSONDecodeError, KeyError, AttributeError):
            return None

    def get_issue_comments(
        self, cwd: Path, owner: str, repo: str, pr_number: int
    ) -> list[IssueComment] | None:
        result = run_command(
            ["gh", "api", "--paginate", f"repos/{owner}/{repo}/issues/{pr_number}/comments"],
            cwd=cwd,
        )
        if not result.success:
            return None

        try:
            return parse_issue_comments(result.stdout)
        except (json.JSONDecodeError, KeyError, AttributeError):
            return None
