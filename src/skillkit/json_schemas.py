"""Pydantic models for JSON output schemas.

These models define the document fetch-pr-comments writes to stdout. Field
order is the order keys appear in the output.
"""

from pydantic import BaseModel, ConfigDict

from skillkit.integrations.github.types import IssueComment, PRMetadata, ReviewComment


class PRInfoOutput(BaseModel):
    """Pull request the comments belong to.

    Attributes:
        number: PR number
        title: PR title
        url: PR web URL
        branch: Head branch name
    """

    model_config = ConfigDict(strict=True)

    number: int
    title: str
    url: str
    branch: str


class ReviewCommentOutput(BaseModel):
    """Inline review comment tied to a line of the diff."""

    model_config = ConfigDict(strict=True)

    id: int
    body: str
    author: str | None
    path: str | None
    line: int | None
    position: int | None
    created_at: str
    updated_at: str
    in_reply_to_id: int | None
    outdated: bool


class IssueCommentOutput(BaseModel):
    """General discussion comment. path and line are always null."""

    model_config = ConfigDict(strict=True)

    id: int
    body: str
    author: str | None
    path: None = None
    line: None = None
    created_at: str
    updated_at: str


class PRCommentsResponse(BaseModel):
    """JSON response schema for the `fetch-pr-comments` command."""

    model_config = ConfigDict(strict=True)

    pr: PRInfoOutput
    review_comments: list[ReviewCommentOutput]
    issue_comments: list[IssueCommentOutput]


def build_pr_comments_response(
    pr: PRMetadata,
    review_comments: list[ReviewComment],
    issue_comments: list[IssueComment],
) -> PRCommentsResponse:
    """Assemble the output document from resolved PR data."""
    return PRCommentsResponse(
        pr=PRInfoOutput(number=pr.number, title=pr.title, url=pr.url, branch=pr.branch),
        review_comments=[
            ReviewCommentOutput(
                id=comment.id,
                body=comment.body,
                author=comment.author,
                path=comment.path,
                line=comment.line,
                position=comment.position,
                created_at=comment.created_at,
                updated_at=comment.updated_at,
                in_reply_to_id=comment.in_reply_to_id,
                outdated=comment.outdated,
            )
            for comment in review_comments
        ],
        issue_comments=[
            IssueCommentOutput(
                id=comment.id,
                body=comment.body,
                author=comment.author,
                created_at=comment.created_at,
                updated_at=comment.updated_at,
            )
            for comment in issue_comments
        ],
    )
