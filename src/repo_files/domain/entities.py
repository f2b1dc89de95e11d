"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Any

from repo_files.domain.exceptions import ContentUnavailableError, InvalidRequestError


@dataclass(frozen=True, slots=True)
class ContentItem:
    """A single entry from the GitHub contents API (file, dir, symlink…)."""

    name: str
    path: str
    sha: str
    type: str  # "file", "dir", "symlink" or "submodule"
    size: int = 0
    content: str | None = None  # base64, only for single-file fetches
    encoding: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> ContentItem:
        return cls(
            name=data.get("name", ""),
            path=data["path"],
            sha=data["sha"],
            type=data.get("type", "file"),
            size=data.get("size", 0) or 0,
            content=data.get("content"),
            encoding=data.get("encoding"),
        )

    def decoded_content(self) -> bytes | None:
        """Return the raw file bytes, or ``None`` when no payload was sent."""
        if self.content is None:
            return None
        if self.encoding == "none":
            # Files over 1 MB come back without an inline payload.
            raise ContentUnavailableError(
                self.path, "file is too large for the contents API"
            )
        if self.encoding not in (None, "base64"):
            raise ContentUnavailableError(
                self.path, f"unsupported content encoding '{self.encoding}'"
            )
        try:
            # GitHub wraps the payload at 60 columns.
            return base64.b64decode("".join(self.content.split()), validate=True)
        except binascii.Error as exc:
            raise ContentUnavailableError(self.path, "malformed base64 payload") from exc


def normalize_path(path: str, *, allow_root: bool = False) -> str:
    """Strip surrounding slashes and reject paths that escape the repository.

    ``allow_root`` lets reads address the repository root as ``""``.
    """
    cleaned = path.strip().strip("/")
    if not cleaned:
        if allow_root:
            return ""
        raise InvalidRequestError("path must not be empty.")
    segments = cleaned.split("/")
    if any(seg in ("", ".", "..") for seg in segments):
        raise InvalidRequestError(f"Invalid path: '{path}'.")
    return cleaned


@dataclass(frozen=True, slots=True)
class FileOperationRequest:
    """One create / update / delete call against a single file.

    ``expected_sha`` is GitHub's optimistic-concurrency token: required for
    update and delete, absent for create.
    """

    path: str
    message: str
    content: str | bytes | None = None
    expected_sha: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))
        if not self.message or not self.message.strip():
            raise InvalidRequestError("commit message must not be empty.")
        if self.expected_sha is not None and not self.expected_sha.strip():
            raise InvalidRequestError("sha must not be empty.")

    def encoded_content(self) -> str:
        """Return the content as base64 text, as the contents API expects."""
        if self.content is None:
            raise InvalidRequestError(f"No content supplied for {self.path}.")
        raw = self.content.encode("utf-8") if isinstance(self.content, str) else self.content
        return base64.b64encode(raw).decode("ascii")
