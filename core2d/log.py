"""Console logging and the engine's error record."""

from __future__ import annotations


class Core2DError(Exception):
    """Raised when an engine operation fails."""


class ErrorLog:
    """An ordered record of error messages pushed by the engine."""

    def __init__(self) -> None:
        self._messages: list[str] = []

    def push(self, message: str) -> None:
        """Record an error message."""
        self._messages.append(str(message))

    def latest(self) -> str:
        """Return the most recent message, or an empty string if none."""
        return self._messages[-1] if self._messages else ""

    def all(self) -> list[str]:
        """Return every recorded message, oldest first."""
        return list(self._messages)

    def clear(self) -> None:
        """Forget every recorded message."""
        self._messages.clear()

    def __len__(self) -> int:
        return len(self._messages)


_default_log = ErrorLog()


def log(message: str) -> None:
    """Print an informational message."""
    print(f"[LOG] {message}")


def err(message: str) -> None:
    """Print an error message."""
    print(f"[ERROR] {message}")


def push_error(message: str) -> None:
    """Record an error message in the engine-wide error log."""
    _default_log.push(message)


def get_core_error() -> str:
    """Return the latest engine-wide error, or an empty string."""
    return _default_log.latest()


def get_all_errors() -> list[str]:
    """Return every engine-wide error, oldest first."""
    return _default_log.all()