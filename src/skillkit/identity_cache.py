"""Identity cache storage.

The identity cache is a small JSON object persisted at
~/.agent-cache/git-info.json. It holds at least ``github_username`` and may
carry keys written by other tools, which are preserved on every write.

Provides an ABC so tests can substitute an in-memory store instead of
touching the home directory.
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

CACHE_FILE_ENV_VAR = "SKILLKIT_CACHE_FILE"


def default_cache_path() -> Path:
    """Get the identity cache location.

    Returns:
        Path from SKILLKIT_CACHE_FILE if set, otherwise ~/.agent-cache/git-info.json
    """
    override = os.environ.get(CACHE_FILE_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".agent-cache" / "git-info.json"


class IdentityCache(ABC):
    """Abstract key-value store for cached identity data."""

    @abstractmethod
    def read(self) -> dict[str, Any]:
        """Read the cached object.

        Returns:
            Cached key-value data. Empty dict if the cache is missing,
            unreadable, or does not contain a JSON object.
        """
        ...

    @abstractmethod
    def merge(self, updates: dict[str, Any]) -> None:
        """Merge keys into the cache, preserving keys not in updates.

        Args:
            updates: Keys to add or overwrite

        Raises:
            OSError: If the cache cannot be written
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the location of the cache (for messages and debugging)."""
        ...


class FilesystemIdentityCache(IdentityCache):
    """Production implementation backed by a JSON file."""

    def __init__(self, cache_path: Path | None = None) -> None:
        self._path = cache_path if cache_path is not None else default_cache_path()

    def read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            return {}

        if not isinstance(data, dict):
            return {}
        return data

    def merge(self, updates: dict[str, Any]) -> None:
        data = self.read()
        data.update(updates)

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def path(self) -> Path:
        return self._path


class InMemoryIdentityCache(IdentityCache):
    """Test implementation that keeps the cache in memory.

    Tracks reads and merges so tests can assert on cache traffic.
    """

    def __init__(
        self,
        data: dict[str, Any] | None = None,
        *,
        write_error: OSError | None = None,
    ) -> None:
        """Create an in-memory cache.

        Args:
            data: Initial cache contents (None = cache doesn't exist)
            write_error: Raised from merge() to simulate an unwritable cache
        """
        self._data: dict[str, Any] = dict(data) if data is not None else {}
        self._write_error = write_error
        self._merge_calls: list[dict[str, Any]] = []

    @property
    def data(self) -> dict[str, Any]:
        """Current cache contents."""
        return self._data

    @property
    def merge_calls(self) -> list[dict[str, Any]]:
        """Updates passed to merge(), in call order."""
        return self._merge_calls

    def read(self) -> dict[str, Any]:
        return dict(self._data)

    def merge(self, updates: dict[str, Any]) -> None:
        self._merge_calls.append(dict(updates))
        if self._write_error is not None:
            raise self._write_error
        self._data.update(updates)

    def path(self) -> Path:
        return Path("/fake/home/.agent-cache/git-info.json")
