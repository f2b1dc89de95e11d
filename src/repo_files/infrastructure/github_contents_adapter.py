"""GitHub contents API adapter — implements the RepositoryFileStore port."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from repo_files.domain.entities import ContentItem, FileOperationRequest, normalize_path
from repo_files.domain.exceptions import (
    ConfigurationError,
    InvalidRequestError,
    NotFoundError,
    RemoteApiError,
)
from repo_files.domain.value_objects import RepositoryReference

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


class RepositoryFileAdapter:
    """Concrete ``RepositoryFileStore`` backed by the GitHub v3 contents API.

    Bound to one repository for its whole lifetime.  Holds no mutable state,
    so a single instance can be shared by concurrent tasks; the SHA
    precondition on update/delete is enforced by GitHub, not here.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str,
        repository: RepositoryReference,
        *,
        branch: str | None = None,
        api_url: str = _GITHUB_API,
    ) -> None:
        if not token or not token.isascii() or any(ch.isspace() for ch in token):
            raise ConfigurationError("GitHub token is empty or not a valid header value.")
        self._client = client
        self._repository = repository
        self._branch = branch or None
        self._base = f"{api_url.rstrip('/')}/repos/{repository.owner}/{repository.repo}/contents"
        self._headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "repo-files/1.0",
            "Authorization": f"Bearer {token}",
        }

    @property
    def repository(self) -> RepositoryReference:
        return self._repository

    # ── Reads ───────────────────────────────────────────────────────────

    async def list_contents(self, path: str) -> list[ContentItem]:
        """GET /repos/{owner}/{repo}/contents/{path} → [ContentItem]."""
        resp = await self._get_contents(normalize_path(path, allow_root=True))
        if not resp.is_success:
            raise self._remote_error(resp)

        data = resp.json()
        if isinstance(data, list):
            return [ContentItem.from_api(item) for item in data]
        return [ContentItem.from_api(data)]

    async def file_exists(self, path: str) -> bool:
        """Same request as :meth:`list_contents`, but a 404 means ``False``."""
        resp = await self._get_contents(normalize_path(path, allow_root=True))
        if resp.is_success:
            return True
        if resp.status_code == 404:
            return False
        raise self._remote_error(resp)

    async def get_content_hash(self, path: str) -> str:
        """Return the SHA of the first entry listed at ``path``.

        Raises :class:`NotFoundError` when nothing exists there (GitHub 404 or
        an empty listing); other remote failures propagate as ``RemoteApiError``.
        """
        items = await self._require_contents(path)
        return items[0].sha

    async def read_file(self, path: str) -> bytes:
        """Return the decoded content of the single file at ``path``."""
        items = await self._require_contents(path)
        payload = items[0].decoded_content() if len(items) == 1 else None
        if payload is None:
            raise InvalidRequestError(f"'{path}' is not a file.")
        return payload

    # ── Writes ──────────────────────────────────────────────────────────

    async def create_file(self, path: str, message: str, content: str | bytes) -> None:
        """PUT a new file.  A 422 (already exists) is treated as success."""
        request = FileOperationRequest(path=path, message=message, content=content)
        resp = await self._send("PUT", request, {"content": request.encoded_content()})
        if resp.is_success:
            return
        if resp.status_code == 422:
            # Someone else created it first; the file is present either way.
            logger.info("File %s already exists in %s", request.path, self._repository.full_name)
            return
        raise self._remote_error(resp)

    async def update_file(
        self, path: str, message: str, content: str | bytes, expected_sha: str
    ) -> None:
        """PUT new content, conditioned on ``expected_sha`` being current."""
        request = FileOperationRequest(
            path=path, message=message, content=content, expected_sha=expected_sha
        )
        resp = await self._send(
            "PUT",
            request,
            {"content": request.encoded_content(), "sha": request.expected_sha},
        )
        if not resp.is_success:
            raise self._remote_error(resp)

    async def delete_file(self, path: str, message: str, expected_sha: str) -> None:
        """DELETE a file, conditioned on ``expected_sha`` being current."""
        request = FileOperationRequest(path=path, message=message, expected_sha=expected_sha)
        resp = await self._send("DELETE", request, {"sha": request.expected_sha})
        if not resp.is_success:
            raise self._remote_error(resp)

    # ── HTTP plumbing ───────────────────────────────────────────────────

    async def _require_contents(self, path: str) -> list[ContentItem]:
        """:meth:`list_contents`, with "nothing at path" raised as NotFoundError."""
        try:
            items = await self.list_contents(path)
        except RemoteApiError as exc:
            if exc.status_code == 404:
                raise NotFoundError(path) from exc
            raise
        if not items:
            raise NotFoundError(path)
        return items

    def _url(self, path: str) -> str:
        if not path:
            return self._base
        return f"{self._base}/{quote(path, safe='/')}"

    async def _get_contents(self, path: str) -> httpx.Response:
        params = {"ref": self._branch} if self._branch else None
        logger.debug("GET contents %s@%s", path, self._branch or "default")
        return await self._client.get(self._url(path), headers=self._headers, params=params)

    async def _send(
        self, method: str, request: FileOperationRequest, fields: dict[str, Any]
    ) -> httpx.Response:
        body: dict[str, Any] = {"message": request.message, **fields}
        if self._branch:
            body["branch"] = self._branch
        logger.debug("%s contents %s", method, request.path)
        return await self._client.request(
            method, self._url(request.path), headers=self._headers, json=body
        )

    def _remote_error(self, resp: httpx.Response) -> RemoteApiError:
        """Translate a non-success response into a :class:`RemoteApiError`."""
        try:
            data = resp.json()
        except ValueError:
            data = None
        message = str(data.get("message") or "") if isinstance(data, dict) else ""
        if not message:
            message = resp.text.strip() or resp.reason_phrase or "no message"
        logger.warning(
            "GitHub returned HTTP %d for %s %s: %s",
            resp.status_code,
            resp.request.method,
            resp.request.url.path,
            message,
        )
        return RemoteApiError(resp.status_code, message)
