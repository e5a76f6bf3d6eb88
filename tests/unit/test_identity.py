"""Tests for GitHub username resolution."""

import pytest

from skillkit.feedback import RecordingFeedback
from skillkit.identity import USERNAME_KEY, IdentityUnavailable, resolve_identity
from skillkit.identity_cache import InMemoryIdentityCache
from skillkit.integrations.github.fake import FakeGitHub


def test_cached_username_is_used_without_lookup() -> None:
    cache = InMemoryIdentityCache({USERNAME_KEY: "alice"})
    github = FakeGitHub(username="someone-else")

    result = resolve_identity(cache, github, RecordingFeedback())

    assert result == "alice"
    assert github.username_lookups == 0
    assert cache.merge_calls == []


def test_lookup_result_is_written_to_cache() -> None:
    cache = InMemoryIdentityCache()
    github = FakeGitHub(username="alice")

    result = resolve_identity(cache, github, RecordingFeedback())

    assert result == "alice"
    assert github.username_lookups == 1
    assert cache.data == {USERNAME_KEY: "alice"}


def test_second_resolution_uses_cache() -> None:
    cache = InMemoryIdentityCache()
    github = FakeGitHub(username="alice")

    first = resolve_identity(cache, github, RecordingFeedback())
    second = resolve_identity(cache, github, RecordingFeedback())

    assert first == second == "alice"
    assert github.username_lookups == 1


def test_lookup_preserves_other_cache_keys() -> None:
    cache = InMemoryIdentityCache({"default_remote": "origin"})

    resolve_identity(cache, FakeGitHub(username="alice"), RecordingFeedback())

    assert cache.data == {"default_remote": "origin", USERNAME_KEY: "alice"}


@pytest.mark.parametrize("cached", ["", None, 42])
def test_unusable_cached_value_triggers_lookup(cached: object) -> None:
    cache = InMemoryIdentityCache({USERNAME_KEY: cached})
    github = FakeGitHub(username="alice")

    assert resolve_identity(cache, github, RecordingFeedback()) == "alice"
    assert github.username_lookups == 1


def test_failed_lookup_raises() -> None:
    cache = InMemoryIdentityCache()

    with pytest.raises(IdentityUnavailable, match="Failed to fetch GitHub username"):
        resolve_identity(cache, FakeGitHub(username=None), RecordingFeedback())

    assert cache.merge_calls == []


def test_empty_login_raises() -> None:
    with pytest.raises(IdentityUnavailable):
        resolve_identity(InMemoryIdentityCache(), FakeGitHub(username=""), RecordingFeedback())


def test_cache_write_failure_only_warns() -> None:
    cache = InMemoryIdentityCache(write_error=PermissionError("read-only file system"))
    feedback = RecordingFeedback()

    result = resolve_identity(cache, FakeGitHub(username="alice"), feedback)

    assert result == "alice"
    warnings = feedback.messages_at("warning")
    assert len(warnings) == 1
    assert "Could not write identity cache" in warnings[0]
    assert "read-only file system" in warnings[0]
