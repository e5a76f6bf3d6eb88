"""Parsing of gh CLI JSON output into typed records.

All functions are pure and operate on the raw stdout of a gh command.
"""

import json
from typing import Any

from skillkit.integrations.github.types import IssueComment, PRMetadata, RepoInfo, ReviewComment


def parse_json_pages(text: str) -> list[Any]:
    """Decode the output of `gh api --paginate` into a flat list.

    With --paginate, gh prints one JSON array per page back to back
    (e.g. "[...][...]"), which is not a single valid JSON document.

    Args:
        text: Raw stdout from gh api

    Returns:
        Items of all pages concatenated in order

    Raises:
        json.JSONDecodeError: If the output is not a sequence of JSON values
    """
    decoder = json.JSONDecoder()
    items: list[Any] = []
    index = 0
    length = len(text)

    while True:
        while index < length and text[index].isspace():
            index += 1
        if index >= length:
            break

        value, index = decoder.raw_decode(text, index)
        if isinstance(value, list):
            items.extend(value)
        else:
            items.append(value)

    return items


def _author(comment: dict[str, Any]) -> str | None:
    # user is null for comments left by deleted accounts
    user = comment.get("user")
    if not isinstance(user, dict):
        return None
    return user.get("login")


def parse_review_comments(text: str) -> list[ReviewComment]:
    """Parse `repos/{owner}/{repo}/pulls/{n}/comments` output.

    The reported line prefers `line` and falls back to `original_line`,
    which is the only line information left once a comment is outdated.
    """
    comments: list[ReviewComment] = []
    for raw in parse_json_pages(text):
        line = raw.get("line")
        if line is None:
            line = raw.get("original_line")

        comments.append(
            ReviewComment(
                id=raw["id"],
                body=raw.get("body") or "",
                author=_author(raw),
                path=raw.get("path"),
                line=line,
                position=raw.get("position"),
                created_at=raw.get("created_at") or "",
                updated_at=raw.get("updated_at") or "",
                in_reply_to_id=raw.get("in_reply_to_id"),
            )
        )
    return comments


def parse_issue_comments(text: str) -> list[IssueComment]:
    """Parse `repos/{owner}/{repo}/issues/{n}/comments` output."""
    return [
        IssueComment(
            id=raw["id"],
            body=raw.get("body") or "",
            author=_author(raw),
            created_at=raw.get("created_at") or "",
            updated_at=raw.get("updated_at") or "",
        )
        for raw in parse_json_pages(text)
    ]


def parse_pr_metadata(text: str) -> PRMetadata | None:
    """Parse `gh pr view --json number,title,headRefName,url,state` output.

    gh pr view resolves the most recent PR for the branch in any state, so
    merged and closed PRs are filtered out here.

    Returns:
        PRMetadata, or None if a required field is missing or the PR is not open
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        return None

    # LBYL: Validate required keys before accessing
    required_keys = ("number", "title", "headRefName", "url", "state")
    if not all(key in data for key in required_keys):
        return None

    if data["state"] != "OPEN":
        return None

    return PRMetadata(
        number=data["number"],
        title=data["title"],
        url=data["url"],
        branch=data["headRefName"],
    )


def parse_repo_info(text: str) -> RepoInfo | None:
    """Parse `gh repo view --json owner,name` output."""
    data = json.loads(text)
    if not isinstance(data, dict):
        return None

    owner = data.get("owner")
    name = data.get("name")
    if not isinstance(owner, dict) or "login" not in owner or not name:
        return None

    return RepoInfo(owner=owner["login"], name=name)
