"""Domain exception hierarchy.

Each exception carries its own structured payload and maps to a specific
HTTP status code at the interface layer.  Inner layers raise these; the
outermost error-handler translates them.
"""

from __future__ import annotations


class RepoFilesError(Exception):
    """Base exception for the entire application."""


# ── Construction / configuration ────────────────────────────────────────────


class ConfigurationError(RepoFilesError):
    """Credentials or repository settings cannot form a usable client.

    Only raised while wiring the adapter at startup; never recoverable.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid configuration: {reason}")


# ── Caller input ────────────────────────────────────────────────────────────


class InvalidRequestError(RepoFilesError):
    """A file operation was rejected before reaching GitHub."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


# ── GitHub API errors ───────────────────────────────────────────────────────


class RemoteApiError(RepoFilesError):
    """GitHub answered with a non-success status not covered by a special case."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"GitHub API error {status_code}: {message}")


class ContentUnavailableError(RepoFilesError):
    """GitHub listed the file but did not deliver a usable inline payload."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read '{path}': {reason}")


class NotFoundError(RepoFilesError):
    """No content exists at the requested path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No content found at '{path}'")
