"""Branch naming utilities.

Pure functions that turn a ticket identifier and a free-form summary into a
branch name following the <username>-<ticket>-<summary> convention. No I/O
happens here; callers decide how to report warnings.
"""

import re
from collections.abc import Callable

MAX_BRANCH_LENGTH = 50

# Below this many characters of summary budget, the whole name is cut instead
MIN_SUMMARY_LENGTH = 5

_DISALLOWED_CHARS = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUNS = re.compile(r"-+")


def format_component(text: str) -> str:
    """Normalize a branch name component to kebab-case.

    - Lowercases input
    - Replaces spaces and underscores with hyphens
    - Removes characters outside `[a-z0-9-]`
    - Collapses consecutive `-`
    - Strips leading/trailing `-`

    The transformation is idempotent: formatting an already formatted
    component returns it unchanged.

    Args:
        text: Arbitrary user-supplied text

    Returns:
        Formatted component, possibly empty

    Examples:
        >>> format_component("Fix: Login!")
        'fix-login'
        >>> format_component("add_dark  mode")
        'add-dark-mode'
    """
    lowered = text.lower()
    hyphenated = lowered.replace(" ", "-").replace("_", "-")
    cleaned = _DISALLOWED_CHARS.sub("", hyphenated)
    collapsed = _HYPHEN_RUNS.sub("-", cleaned)
    return collapsed.strip("-")


def generate_branch_name(
    ticket: str,
    summary: str,
    prefix: str,
    *,
    on_warning: Callable[[str], None] | None = None,
) -> str:
    """Build `<prefix>-<ticket>-<summary>` capped at MAX_BRANCH_LENGTH characters.

    Ticket and summary are formatted independently with format_component.
    When the result is too long, the summary is shortened so the prefix and
    ticket stay intact. If fewer than MIN_SUMMARY_LENGTH characters would be
    left for the summary, the whole name is cut at MAX_BRANCH_LENGTH instead,
    which may cut into the ticket. A trailing hyphen left by either cut is
    removed.

    Args:
        ticket: Ticket identifier (e.g. "issue-123")
        summary: Short description of the work
        prefix: Branch prefix, normally the GitHub username
        on_warning: Called with a message when the whole name had to be cut

    Returns:
        Branch name of at most MAX_BRANCH_LENGTH characters

    Example:
        >>> generate_branch_name("issue-123", "fix user login", "alice")
        'alice-issue-123-fix-user-login'
    """
    formatted_ticket = format_component(ticket)
    formatted_summary = format_component(summary)

    branch_name = f"{prefix}-{formatted_ticket}-{formatted_summary}"
    if len(branch_name) <= MAX_BRANCH_LENGTH:
        return branch_name

    prefix_and_ticket = f"{prefix}-{formatted_ticket}-"
    remaining_length = MAX_BRANCH_LENGTH - len(prefix_and_ticket)

    if remaining_length < MIN_SUMMARY_LENGTH:
        if on_warning is not None:
            on_warning("Ticket ID is very long, truncating entire branch name")
        branch_name = branch_name[:MAX_BRANCH_LENGTH]
    else:
        branch_name = prefix_and_ticket + formatted_summary[:remaining_length]

    if branch_name.endswith("-"):
        branch_name = branch_name[:-1]

    return branch_name


def validate_branch_name(branch_name: str, prefix: str) -> str | None:
    """Check a generated branch name against the naming convention.

    Args:
        branch_name: Name to validate
        prefix: Prefix the name must start with (followed by "-")

    Returns:
        None if the name is valid, otherwise a human-readable reason
    """
    if not branch_name:
        return "Generated branch name is empty"

    if not branch_name.startswith(f"{prefix}-"):
        return f"Branch name does not start with required prefix: {prefix}"

    if _DISALLOWED_CHARS.search(branch_name):
        return (
            "Branch name contains invalid characters "
            "(only lowercase, numbers, and hyphens allowed)"
        )

    if len(branch_name) > MAX_BRANCH_LENGTH:
        return f"Branch name exceeds maximum length of {MAX_BRANCH_LENGTH} characters"

    return None
