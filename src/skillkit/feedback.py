"""User-facing diagnostic output with verbosity awareness."""

from abc import ABC, abstractmethod

import click

from skillkit.output import user_output


def _prefixed(label: str, color: str, message: str) -> str:
    return f"{click.style(label, fg=color)} {message}"


class UserFeedback(ABC):
    """Provides user-facing diagnostic output that's verbosity-aware.

    This abstraction eliminates the need to thread a 'verbose' boolean through
    every pipeline step. Steps call ctx.feedback methods, and the implementation
    chosen at the CLI entry point decides what reaches stderr.

    Usage:
        ctx.feedback.verbose("Checking for uncommitted changes...")
        ctx.feedback.info("Found PR #42: Fix login")
        ctx.feedback.warning("Failed to fetch inline review comments")
        ctx.feedback.error("Not a git repository")

    Mode behavior:
        Verbose mode (--verbose):
            - verbose() → stderr, "[VERBOSE]" in blue
            - info/warning/error → stderr

        Standard mode:
            - verbose() → suppressed
            - info/warning/error → stderr
    """

    @abstractmethod
    def verbose(self, message: str) -> None:
        """Show a step-by-step trace message (only in verbose mode)."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show non-fatal warning."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class StandardFeedback(UserFeedback):
    """Feedback for normal runs: verbose traces are dropped."""

    def verbose(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        user_output(_prefixed("[INFO]", "green", message))

    def warning(self, message: str) -> None:
        user_output(_prefixed("[WARNING]", "yellow", message))

    def error(self, message: str) -> None:
        user_output(_prefixed("[ERROR]", "red", message))


class VerboseFeedback(StandardFeedback):
    """Feedback for --verbose runs: every trace message is shown."""

    def verbose(self, message: str) -> None:
        user_output(_prefixed("[VERBOSE]", "blue", message))


class RecordingFeedback(UserFeedback):
    """In-memory feedback that records messages instead of printing them.

    Used by tests to assert on diagnostics without capturing stderr.
    """

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    @property
    def messages(self) -> list[tuple[str, str]]:
        """Recorded (level, message) pairs in emission order."""
        return self._messages

    def messages_at(self, level: str) -> list[str]:
        """Recorded messages for a single level ("verbose", "info", "warning", "error")."""
        return [message for recorded_level, message in self._messages if recorded_level == level]

    def verbose(self, message: str) -> None:
        self._messages.append(("verbose", message))

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))
