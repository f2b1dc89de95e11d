"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx
from fastapi import Request

from repo_files.domain.ports.file_store import RepositoryFileStore
from repo_files.domain.value_objects import RepositoryReference
from repo_files.infrastructure.config import Settings
from repo_files.infrastructure.github_contents_adapter import RepositoryFileAdapter


def build_file_store(client: httpx.AsyncClient, settings: Settings) -> RepositoryFileAdapter:
    """Bind an adapter to the configured repository.

    Raises :class:`~repo_files.domain.exceptions.ConfigurationError` when the
    token or repository settings are unusable.
    """
    return RepositoryFileAdapter(
        client=client,
        token=settings.github_token.get_secret_value(),
        repository=RepositoryReference.from_string(settings.github_repository),
        branch=settings.github_branch,
        api_url=settings.github_api_url,
    )


def get_file_store(request: Request) -> RepositoryFileStore:
    """Return the adapter the lifespan stored on ``app.state``."""
    store: RepositoryFileStore | None = getattr(request.app.state, "file_store", None)
    assert store is not None, "application lifespan did not run"
    return store
