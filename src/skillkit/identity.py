"""GitHub username resolution backed by the identity cache."""

from skillkit.feedback import UserFeedback
from skillkit.identity_cache import IdentityCache
from skillkit.integrations.github.abc import GitHub

USERNAME_KEY = "github_username"


class IdentityUnavailable(Exception):
    """Raised when no GitHub username can be determined."""


def resolve_identity(cache: IdentityCache, github: GitHub, feedback: UserFeedback) -> str:
    """Return the GitHub username used as the branch prefix.

    A non-empty cached username is returned as-is, without checking it
    against GitHub. Otherwise the authenticated user is looked up through
    gh and written back to the cache. Failing to write the cache only
    produces a warning.

    Args:
        cache: Identity cache store
        github: GitHub integration used for the live lookup
        feedback: Diagnostic output

    Returns:
        GitHub username

    Raises:
        IdentityUnavailable: If the lookup fails or returns an empty login
    """
    feedback.verbose(f"Reading cached git info from {cache.path()}")
    cached = cache.read().get(USERNAME_KEY)
    if isinstance(cached, str) and cached:
        feedback.verbose(f"Using cached GitHub username: {cached}")
        return cached

    feedback.verbose("Fetching GitHub username via gh CLI...")
    username = github.get_authenticated_username()
    if username is None:
        raise IdentityUnavailable(
            "Failed to fetch GitHub username via gh CLI\n"
            "Make sure gh is installed and authenticated: gh auth login"
        )

    feedback.verbose(f"Fetched GitHub username: {username}")

    try:
        cache.merge({USERNAME_KEY: username})
    except OSError as e:
        feedback.warning(f"Could not write identity cache {cache.path()}: {e}")

    return username
