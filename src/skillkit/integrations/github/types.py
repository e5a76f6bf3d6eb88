"""Type definitions for GitHub operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PRMetadata:
    """Open pull request resolved for the current branch."""

    number: int
    title: str
    url: str
    branch: str  # head ref name


@dataclass(frozen=True)
class RepoInfo:
    """Owner and name of the GitHub repository."""

    owner: str
    name: str


@dataclass(frozen=True)
class ReviewComment:
    """Inline review comment attached to a diff line.

    position is None when the commented line no longer exists in the current
    diff, in which case the comment is outdated.
    """

    id: int
    body: str
    author: str | None
    path: str | None
    line: int | None  # line, falling back to original_line
    position: int | None
    created_at: str
    updated_at: str
    in_reply_to_id: int | None

    @property
    def outdated(self) -> bool:
        return self.position is None


@dataclass(frozen=True)
class IssueComment:
    """General discussion comment on the pull request conversation."""

    id: int
    body: str
    author: str | None
    created_at: str
    updated_at: str
