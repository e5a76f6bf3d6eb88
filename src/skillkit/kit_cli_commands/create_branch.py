"""Create a feature branch following the <username>-<ticket>-<summary> convention.

This command handles the mechanical git operations for the start-ticket
workflow. All pre-flight checks run before any git state is changed:

Pre-flight:
1. Verify the current directory is a git repository
2. Verify there are no uncommitted changes
3. Resolve the GitHub username (cached in ~/.agent-cache/git-info.json)
4. Generate and validate the branch name
5. Verify the branch does not already exist locally (warn if it exists on origin)

Execution:
1. Detect the primary branch (origin/HEAD, then main/master, then first branch)
2. Switch to the primary branch
3. Pull the latest changes from origin (single attempt)
4. Create and check out the feature branch
5. Verify the feature branch is checked out

Usage:
    create-branch <ticket-identifier> <summary> [--verbose]
    skillkit create-branch issue-123 "fix user login"

Output:
    The created branch name on stdout. All diagnostics go to stderr.

Exit Codes:
    0: Success
    1: Uncommitted changes detected (also: generic failure)
    2: Branch already exists
    3: Pull failed (network/conflicts)
    4: Invalid branch name format
    5: Not a git repository
    6: Invalid arguments (including a ticket or summary with no letters or digits)

Error Types:
    - not_a_repository: Current directory is not inside a git repository
    - uncommitted_changes: Working tree has changes relative to HEAD
    - identity_unavailable: GitHub username could not be determined
    - invalid_name: Generated branch name violates the naming convention
    - branch_exists: A local branch with the generated name exists
    - primary_branch_unresolvable: No primary branch could be found
    - checkout_failed: Switching to the primary branch failed
    - pull_failed: Pulling the primary branch failed
    - create_failed: Creating the feature branch failed
    - verification_failed: HEAD is not on the new branch afterwards

Examples:
    $ create-branch issue-123 "fix user login"
    alice-issue-123-fix-user-login

    $ create-branch add-dark-mode "dark mode support"
    alice-add-dark-mode-dark-mode-support
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

import click

from skillkit.cli_command import CONTEXT_SETTINGS, ExitCodeCommand, raise_usage_error
from skillkit.context import SkillContext, create_context
from skillkit.feedback import UserFeedback
from skillkit.identity import IdentityUnavailable, resolve_identity
from skillkit.integrations.git.abc import Git
from skillkit.naming import format_component, generate_branch_name, validate_branch_name
from skillkit.output import machine_output
from skillkit.subprocess_utils import configure_debug_logging

REMOTE = "origin"
PRIMARY_BRANCH_CANDIDATES = ("main", "master")

ErrorType = Literal[
    "not_a_repository",
    "uncommitted_changes",
    "identity_unavailable",
    "invalid_name",
    "branch_exists",
    "primary_branch_unresolvable",
    "checkout_failed",
    "pull_failed",
    "create_failed",
    "verification_failed",
]

EXIT_SUCCESS = 0
EXIT_INVALID_ARGS = 6

EXIT_CODES: dict[ErrorType, int] = {
    "uncommitted_changes": 1,
    "branch_exists": 2,
    "pull_failed": 3,
    "invalid_name": 4,
    "not_a_repository": 5,
    "identity_unavailable": 1,
    "primary_branch_unresolvable": 1,
    "checkout_failed": 1,
    "create_failed": 1,
    "verification_failed": 1,
}


@dataclass
class CreateBranchSuccess:
    """Success result from creating a feature branch."""

    success: bool
    branch_name: str
    primary_branch: str
    message: str


@dataclass
class CreateBranchError:
    """Error result from creating a feature branch."""

    success: bool
    error_type: ErrorType
    message: str
    details: dict[str, str]


def _error(error_type: ErrorType, message: str, **details: str) -> CreateBranchError:
    return CreateBranchError(
        success=False,
        error_type=error_type,
        message=message,
        details=details,
    )


def detect_primary_branch(git: Git, cwd: Path, feedback: UserFeedback) -> str | None:
    """Detect the repository's primary branch.

    Order of preference:
    1. The branch origin/HEAD points to
    2. The first of PRIMARY_BRANCH_CANDIDATES that exists locally
    3. The first local branch git lists (with a warning)

    Returns:
        Branch name, or None if the repository has no branches at all
    """
    feedback.verbose("Detecting primary branch...")

    remote_default = git.get_remote_default_branch(cwd, REMOTE)
    if remote_default is not None:
        feedback.verbose(f"Primary branch detected from {REMOTE}/HEAD: {remote_default}")
        return remote_default

    feedback.verbose(f"{REMOTE}/HEAD not set, checking for common primary branches...")
    for candidate in PRIMARY_BRANCH_CANDIDATES:
        if git.local_branch_exists(cwd, candidate):
            feedback.verbose(f"Found primary branch: {candidate}")
            return candidate

    branches = git.list_local_branches(cwd)
    if branches:
        feedback.warning(f"Could not detect primary branch, using first available: {branches[0]}")
        return branches[0]

    return None


def execute_create_branch(
    ticket: str, summary: str, ctx: SkillContext
) -> CreateBranchSuccess | CreateBranchError:
    """Execute the create-branch workflow. Returns success or error result.

    No git state is modified unless every pre-flight check passes.
    """
    git = ctx.git
    cwd = ctx.cwd
    feedback = ctx.feedback

    feedback.verbose("Starting branch creation workflow")
    feedback.verbose(f"Ticket: {ticket}")
    feedback.verbose(f"Summary: {summary}")
    feedback.verbose("=== Pre-flight validation ===")

    # Check 1: Git repository
    feedback.verbose("Checking if current directory is a git repository...")
    if not git.is_inside_repository(cwd):
        return _error(
            "not_a_repository",
            "Not a git repository\nPlease run this command from within a git repository",
            cwd=str(cwd),
        )
    feedback.verbose("Git repository confirmed")

    # Check 2: Uncommitted changes
    feedback.verbose("Checking for uncommitted changes...")
    if git.has_uncommitted_changes(cwd):
        return _error(
            "uncommitted_changes",
            "Uncommitted changes detected in working directory\n"
            "Please commit or stash your changes before creating a new branch\n"
            "\n"
            "Options:\n"
            '  1. Commit changes:  git add . && git commit -m "Your message"\n'
            "  2. Stash changes:   git stash\n"
            "  3. Discard changes: git reset --hard (WARNING: destructive)",
        )
    feedback.verbose("Working directory is clean")

    # Check 3: GitHub username for branch prefix
    try:
        prefix = resolve_identity(ctx.identity_cache, ctx.github, feedback)
    except IdentityUnavailable as e:
        return _error(
            "identity_unavailable",
            f"{e}\nFailed to determine GitHub username for branch prefix",
        )
    feedback.verbose(f"Branch prefix: {prefix}")

    # Check 4: Generate and validate branch name
    feedback.verbose(f"Generating branch name from ticket='{ticket}' summary='{summary}'")
    branch_name = generate_branch_name(ticket, summary, prefix, on_warning=feedback.warning)
    feedback.verbose(f"Generated branch name: {branch_name}")

    invalid_reason = validate_branch_name(branch_name, prefix)
    if invalid_reason is not None:
        return _error("invalid_name", invalid_reason, branch_name=branch_name, prefix=prefix)
    feedback.verbose("Branch name is valid")

    # Check 5: Branch already exists
    feedback.verbose(f"Checking if branch already exists: {branch_name}")
    if git.local_branch_exists(cwd, branch_name):
        return _error(
            "branch_exists",
            f"Branch '{branch_name}' already exists locally\n"
            "\n"
            "Options:\n"
            f"  1. Switch to existing branch:  git checkout {branch_name}\n"
            f"  2. Delete and recreate:        git branch -D {branch_name}\n"
            "  3. Choose a different name",
            branch_name=branch_name,
        )

    if git.remote_branch_exists(cwd, REMOTE, branch_name):
        feedback.warning(f"Branch '{branch_name}' exists on remote but not locally")
        feedback.warning("You may want to check out the remote branch instead")

    feedback.verbose("All pre-flight checks passed")
    feedback.verbose("=== Executing git workflow ===")

    # Step 1: Detect primary branch
    primary_branch = detect_primary_branch(git, cwd, feedback)
    if primary_branch is None:
        return _error(
            "primary_branch_unresolvable",
            "Could not detect any primary branch\nFailed to detect primary branch",
        )

    # Step 2: Switch to primary branch
    feedback.verbose(f"Switching to primary branch: {primary_branch}")
    if not git.checkout_branch(cwd, primary_branch):
        return _error(
            "checkout_failed",
            f"Failed to switch to primary branch: {primary_branch}",
            primary_branch=primary_branch,
        )
    feedback.verbose(f"Switched to {primary_branch}")

    # Step 3: Pull latest changes
    feedback.verbose(f"Pulling latest changes from {REMOTE}/{primary_branch}...")
    pull = git.pull_branch(cwd, REMOTE, primary_branch)
    pull_output = (pull.stdout + pull.stderr).strip()
    if not pull.success:
        indented_output = "\n".join(f"  {line}" for line in pull_output.splitlines())
        return _error(
            "pull_failed",
            f"Failed to pull latest changes from {REMOTE}/{primary_branch}\n"
            "\n"
            "Git output:\n"
            f"{indented_output}\n"
            "\n"
            "Possible causes:\n"
            "  1. Network connectivity issues\n"
            "  2. Merge conflicts with local changes\n"
            "  3. Remote branch does not exist\n"
            "\n"
            "Try:\n"
            "  1. Check network connection\n"
            "  2. Run 'git pull' manually to see detailed error\n"
            f"  3. Ensure remote tracking is set up: git branch -u {REMOTE}/{primary_branch}",
            primary_branch=primary_branch,
            git_output=pull_output,
        )

    feedback.verbose("Successfully pulled latest changes")
    if "Already up to date" not in pull_output:
        feedback.info(f"Updated to latest changes from {REMOTE}/{primary_branch}")

    # Step 4: Create feature branch
    feedback.verbose(f"Creating and checking out new branch: {branch_name}")
    if not git.create_and_checkout_branch(cwd, branch_name):
        return _error(
            "create_failed",
            f"Failed to create branch: {branch_name}\nFailed to create feature branch",
            branch_name=branch_name,
        )

    # Step 5: Verify success
    feedback.verbose("Verifying branch creation...")
    current_branch = git.get_current_branch(cwd)
    if current_branch != branch_name:
        return _error(
            "verification_failed",
            f"Branch verification failed: expected '{branch_name}', got '{current_branch}'",
            branch_name=branch_name,
            current_branch=str(current_branch),
        )
    feedback.verbose("Branch verification successful")

    return CreateBranchSuccess(
        success=True,
        branch_name=branch_name,
        primary_branch=primary_branch,
        message=f"Successfully created and switched to branch: {branch_name}",
    )


def run_create_branch(ticket: str, summary: str, ctx: SkillContext) -> int:
    """Run the workflow, report the outcome, and return the process exit code.

    On success the branch name is the only thing written to stdout.
    """
    result = execute_create_branch(ticket, summary, ctx)

    if isinstance(result, CreateBranchError):
        for line in result.message.splitlines():
            ctx.feedback.error(line)
        return EXIT_CODES[result.error_type]

    ctx.feedback.info(result.message)
    machine_output(result.branch_name)
    return EXIT_SUCCESS


@click.command(
    name="create-branch",
    cls=ExitCodeCommand,
    usage_exit_code=EXIT_INVALID_ARGS,
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("ticket")
@click.argument("summary")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def create_branch(click_ctx: click.Context, ticket: str, summary: str, verbose: bool) -> None:
    """Create a feature branch named <username>-<ticket>-<summary>.

    TICKET: Ticket ID (e.g., issue-123) or descriptive slug

    SUMMARY: Brief 2-4 word summary (auto-formatted to kebab-case)
    """
    if not ticket or not summary:
        raise_usage_error(click_ctx, "Missing required arguments")

    for label, value in (("TICKET", ticket), ("SUMMARY", summary)):
        if not format_component(value):
            raise_usage_error(
                click_ctx, f"{label} must contain at least one letter or number: '{value}'"
            )

    configure_debug_logging()
    ctx = create_context(verbose=verbose)

    try:
        exit_code = run_create_branch(ticket, summary, ctx)
    except Exception as e:
        ctx.feedback.error(f"Unexpected error: {e}")
        raise SystemExit(1) from e

    if exit_code != EXIT_SUCCESS:
        raise SystemExit(exit_code)
