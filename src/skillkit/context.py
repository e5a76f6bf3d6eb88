"""Application context with dependency injection.

The SkillContext dataclass holds every integration a skill command needs
(git, GitHub, identity cache, user feedback). It is created once at the CLI
entry point and passed into the pipeline functions.
"""

from dataclasses import dataclass
from pathlib import Path

from skillkit.feedback import StandardFeedback, UserFeedback, VerboseFeedback
from skillkit.identity_cache import FilesystemIdentityCache, IdentityCache
from skillkit.integrations.git.abc import Git
from skillkit.integrations.git.real import RealGit
from skillkit.integrations.github.abc import GitHub
from skillkit.integrations.github.real import RealGitHub


@dataclass(frozen=True)
class SkillContext:
    """Immutable context holding all dependencies for skill commands.

    Attributes:
        git: Git operations integration
        github: GitHub (gh CLI) integration
        identity_cache: Persistent store for the resolved GitHub username
        feedback: Diagnostic output sink (stderr in production)
        cwd: Directory the command operates in
    """

    git: Git
    github: GitHub
    identity_cache: IdentityCache
    feedback: UserFeedback
    cwd: Path

    @staticmethod
    def for_test(
        git: Git | None = None,
        github: GitHub | None = None,
        identity_cache: IdentityCache | None = None,
        feedback: UserFeedback | None = None,
        cwd: Path | None = None,
    ) -> "SkillContext":
        """Create test context with fakes for any unspecified dependency.

        Example:
            >>> from skillkit.integrations.git.fake import FakeGit
            >>> ctx = SkillContext.for_test(git=FakeGit(uncommitted_changes=True))
        """
        from skillkit.feedback import RecordingFeedback
        from skillkit.identity_cache import InMemoryIdentityCache
        from skillkit.integrations.git.fake import FakeGit
        from skillkit.integrations.github.fake import FakeGitHub

        resolved_cache: IdentityCache = (
            identity_cache if identity_cache is not None else InMemoryIdentityCache()
        )

        return SkillContext(
            git=git if git is not None else FakeGit(),
            github=github if github is not None else FakeGitHub(),
            identity_cache=resolved_cache,
            feedback=feedback if feedback is not None else RecordingFeedback(),
            cwd=cwd if cwd is not None else Path("/fake/repo"),
        )


def create_context(*, verbose: bool) -> SkillContext:
    """Create production context with real implementations.

    Args:
        verbose: If True, step-by-step trace messages are written to stderr

    Returns:
        SkillContext wired to git, gh, and ~/.agent-cache/git-info.json
    """
    feedback: UserFeedback = VerboseFeedback() if verbose else StandardFeedback()
    return SkillContext(
        git=RealGit(),
        github=RealGitHub(),
        identity_cache=FilesystemIdentityCache(),
        feedback=feedback,
        cwd=Path.cwd(),
    )
