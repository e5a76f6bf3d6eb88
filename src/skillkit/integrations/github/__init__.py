from skillkit.integrations.github.abc import GitHub
from skillkit.integrations.github.real import RealGitHub
from skillkit.integrations.github.types import IssueComment, PRMetadata, RepoInfo, ReviewComment

__all__ = [
    "GitHub",
    "IssueComment",
    "PRMetadata",
    "RealGitHub",
    "RepoInfo",
    "ReviewComment",
]
