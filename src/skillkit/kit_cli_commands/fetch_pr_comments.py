"""Fetch PR review comments for the current branch as structured JSON.

This command supports the address-pr-feedback workflow. It detects the open
PR for the checked-out branch and fetches both inline code review comments
and general discussion comments:

1. Verify the current directory is a git repository
2. Verify the gh CLI is installed and authenticated
3. Resolve the open PR for the current branch
4. Resolve the repository owner and name
5. Fetch inline review comments (degrades to [] with a warning on failure)
6. Fetch general discussion comments (degrades to [] with a warning on failure)
7. Write the combined JSON document to stdout

Usage:
    fetch-pr-comments [--verbose]
    skillkit fetch-pr-comments

Output:
    JSON object on stdout; all progress and error text goes to stderr:
    {
      "pr": {"number": 42, "title": "...", "url": "...", "branch": "..."},
      "review_comments": [...],
      "issue_comments": [...]
    }

Exit Codes:
    0: Success (JSON on stdout)
    1: Not a git repository (also: detached HEAD, invalid arguments)
    2: gh CLI not installed
    3: Not authenticated with gh
    4: No open PR found for current branch
    5: Failed to fetch comments

Error Types:
    - not_a_repository: Current directory is not inside a git repository
    - gh_not_installed: gh executable not found on PATH
    - gh_not_authenticated: gh auth status failed
    - no_current_branch: HEAD is detached or cannot be read
    - no_pr_found: No open PR for the current branch (missing, merged or closed)
    - fetch_failed: Repository info could not be resolved
"""

from dataclasses import dataclass
from typing import Literal

import click

from skillkit.cli_command import CONTEXT_SETTINGS, ExitCodeCommand
from skillkit.context import SkillContext, create_context
from skillkit.integrations.github.types import IssueComment, PRMetadata, RepoInfo, ReviewComment
from skillkit.json_schemas import build_pr_comments_response
from skillkit.output import emit_json
from skillkit.subprocess_utils import configure_debug_logging

ErrorType = Literal[
    "not_a_repository",
    "gh_not_installed",
    "gh_not_authenticated",
    "no_current_branch",
    "no_pr_found",
    "fetch_failed",
]

EXIT_SUCCESS = 0
EXIT_INVALID_ARGS = 1

EXIT_CODES: dict[ErrorType, int] = {
    "not_a_repository": 1,
    "gh_not_installed": 2,
    "gh_not_authenticated": 3,
    "no_pr_found": 4,
    "fetch_failed": 5,
    "no_current_branch": 1,
}


@dataclass
class FetchPrCommentsSuccess:
    """Success result with everything needed for the JSON document."""

    success: bool
    pr: PRMetadata
    review_comments: list[ReviewComment]
    issue_comments: list[IssueComment]


@dataclass
class FetchPrCommentsError:
    """Error result from fetching PR comments."""

    success: bool
    error_type: ErrorType
    message: str
    details: dict[str, str]


def _error(error_type: ErrorType, message: str, **details: str) -> FetchPrCommentsError:
    return FetchPrCommentsError(
        success=False,
        error_type=error_type,
        message=message,
        details=details,
    )


def validate_environment(ctx: SkillContext) -> FetchPrCommentsError | None:
    """Check repository, gh installation and gh authentication, in that order.

    Returns:
        The first failing check as an error, or None if all pass
    """
    ctx.feedback.verbose("Checking if current directory is a git repository...")
    if not ctx.git.is_inside_repository(ctx.cwd):
        return _error(
            "not_a_repository",
            "Not a git repository\nPlease run this command from within a git repository",
        )
    ctx.feedback.verbose("Git repository confirmed")

    ctx.feedback.verbose("Checking if gh CLI is installed...")
    if not ctx.github.is_installed():
        return _error(
            "gh_not_installed",
            "gh CLI is not installed\nInstall it from: https://cli.github.com/",
        )
    ctx.feedback.verbose("gh CLI found")

    ctx.feedback.verbose("Checking gh authentication status...")
    if not ctx.github.is_authenticated():
        return _error("gh_not_authenticated", "Not authenticated with gh CLI\nRun: gh auth login")
    ctx.feedback.verbose("gh authentication confirmed")

    return None


def fetch_review_comments(ctx: SkillContext, repo: RepoInfo, pr_number: int) -> list[ReviewComment]:
    """Fetch inline review comments, degrading to an empty list on failure."""
    ctx.feedback.verbose(f"Fetching inline review comments for PR #{pr_number}...")
    comments = ctx.github.get_review_comments(ctx.cwd, repo.owner, repo.name, pr_number)
    if comments is None:
        ctx.feedback.warning("Failed to fetch inline review comments")
        return []

    ctx.feedback.verbose(f"Fetched {len(comments)} inline review comments")
    return comments


def fetch_issue_comments(ctx: SkillContext, repo: RepoInfo, pr_number: int) -> list[IssueComment]:
    """Fetch general discussion comments, degrading to an empty list on failure."""
    ctx.feedback.verbose(f"Fetching general PR discussion comments for PR #{pr_number}...")
    comments = ctx.github.get_issue_comments(ctx.cwd, repo.owner, repo.name, pr_number)
    if comments is None:
        ctx.feedback.warning("Failed to fetch general PR comments")
        return []

    ctx.feedback.verbose(f"Fetched {len(comments)} general discussion comments")
    return comments


def execute_fetch_pr_comments(ctx: SkillContext) -> FetchPrCommentsSuccess | FetchPrCommentsError:
    """Execute the fetch workflow. Returns success or error result."""
    feedback = ctx.feedback

    feedback.verbose("Starting PR comment fetch workflow")
    feedback.verbose("=== Pre-flight validation ===")
    env_error = validate_environment(ctx)
    if env_error is not None:
        return env_error
    feedback.verbose("All pre-flight checks passed")

    feedback.verbose("=== Detecting PR ===")
    current_branch = ctx.git.get_current_branch(ctx.cwd)
    if current_branch is None:
        return _error(
            "no_current_branch",
            "Could not determine current branch (detached HEAD?)\nFailed to detect current branch",
        )
    feedback.verbose(f"Current branch: {current_branch}")

    feedback.verbose(f"Looking for open PR for branch: {current_branch}")
    pr = ctx.github.get_pr_for_current_branch(ctx.cwd)
    if pr is None:
        return _error(
            "no_pr_found",
            f"No open PR found for branch: {current_branch}\n"
            "\n"
            "Make sure:\n"
            "  1. You are on the correct branch\n"
            "  2. A PR has been opened for this branch\n"
            "  3. The PR is not already merged or closed",
            branch=current_branch,
        )
    feedback.info(f"Found PR #{pr.number}: {pr.title}")

    feedback.verbose("Fetching repository owner and name...")
    repo = ctx.github.get_repo_info(ctx.cwd)
    if repo is None:
        return _error(
            "fetch_failed",
            "Failed to get repository info\nFailed to fetch repository info",
        )
    feedback.verbose(f"Repository: {repo.owner}/{repo.name}")

    feedback.verbose("=== Fetching comments ===")
    review_comments = fetch_review_comments(ctx, repo, pr.number)
    issue_comments = fetch_issue_comments(ctx, repo, pr.number)

    return FetchPrCommentsSuccess(
        success=True,
        pr=pr,
        review_comments=review_comments,
        issue_comments=issue_comments,
    )


def run_fetch_pr_comments(ctx: SkillContext) -> int:
    """Run the workflow, report the outcome, and return the process exit code.

    stdout receives the JSON document on success and nothing otherwise.
    """
    result = execute_fetch_pr_comments(ctx)

    if isinstance(result, FetchPrCommentsError):
        for line in result.message.splitlines():
            ctx.feedback.error(line)
        return EXIT_CODES[result.error_type]

    ctx.feedback.verbose("=== Assembling output ===")
    response = build_pr_comments_response(
        result.pr, result.review_comments, result.issue_comments
    )
    ctx.feedback.info("Successfully fetched PR comments")
    emit_json(response.model_dump(mode="json"))
    return EXIT_SUCCESS


@click.command(
    name="fetch-pr-comments",
    cls=ExitCodeCommand,
    usage_exit_code=EXIT_INVALID_ARGS,
    context_settings=CONTEXT_SETTINGS,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output (to stderr)")
def fetch_pr_comments(verbose: bool) -> None:
    """Fetch PR review comments for the current branch and output structured JSON.

    Detects the open PR associated with the current git branch, then fetches
    both inline code review comments and general discussion comments.
    """
    configure_debug_logging()
    ctx = create_context(verbose=verbose)

    try:
        exit_code = run_fetch_pr_comments(ctx)
    except Exception as e:
        ctx.feedback.error(f"Failed to assemble JSON output: {e}")
        raise SystemExit(EXIT_CODES["fetch_failed"]) from e

    if exit_code != EXIT_SUCCESS:
        raise SystemExit(exit_code)
