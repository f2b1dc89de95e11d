"""Port: repository file store — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_files.domain.entities import ContentItem


class RepositoryFileStore(Protocol):
    """Abstract contract for file-level operations on one bound repository."""

    async def list_contents(self, path: str) -> list[ContentItem]:
        """Return the entries at ``path`` (one item for a file)."""
        ...

    async def file_exists(self, path: str) -> bool:
        """Return whether anything exists at ``path``."""
        ...

    async def create_file(self, path: str, message: str, content: str | bytes) -> None:
        """Commit a new file; an already-present file counts as success."""
        ...

    async def update_file(
        self, path: str, message: str, content: str | bytes, expected_sha: str
    ) -> None:
        """Overwrite a file, conditioned on its current SHA."""
        ...

    async def delete_file(self, path: str, message: str, expected_sha: str) -> None:
        """Delete a file, conditioned on its current SHA."""
        ...

    async def get_content_hash(self, path: str) -> str:
        """Return the SHA of the first entry at ``path``."""
        ...

    async def read_file(self, path: str) -> bytes:
        """Return the decoded bytes of the file at ``path``."""
        ...
