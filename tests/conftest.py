# Test Fixtures
from __future__ import annotations

import base64
import hashlib
import json

import httpx
import pytest
import pytest_asyncio

from repo_files.domain.value_objects import RepositoryReference
from repo_files.infrastructure.github_contents_adapter import RepositoryFileAdapter

OWNER = "octo"
REPO = "notes"
_CONTENTS = f"/repos/{OWNER}/{REPO}/contents"


def blob_sha(data: bytes) -> str:
    """Git blob id, the same value GitHub reports as ``sha``."""
    return hashlib.sha1(b"blob %d\0" % len(data) + data).hexdigest()


class FakeGitHub:
    """In-memory stand-in for the GitHub contents API.

    Enforces the SHA precondition on update/delete and answers 404 / 409 /
    422 the way GitHub does.  ``fail_with`` forces the next response for a
    given HTTP method.
    """

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.fail_with: dict[str, tuple[int, dict | str]] = {}
        self.requests: list[httpx.Request] = []

    def seed(self, path: str, data: bytes | str) -> str:
        raw = data.encode() if isinstance(data, str) else data
        self.files[path] = raw
        return blob_sha(raw)

    # ── httpx.MockTransport handler ─────────────────────────────────────

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        forced = self.fail_with.pop(request.method, None)
        if forced is not None:
            status, body = forced
            if isinstance(body, str):
                return httpx.Response(status, text=body)
            return httpx.Response(status, json=body)

        url_path = request.url.path
        assert url_path == _CONTENTS or url_path.startswith(_CONTENTS + "/"), url_path
        assert request.headers["Authorization"].startswith("Bearer ")
        path = url_path[len(_CONTENTS):].lstrip("/")

        if request.method == "GET":
            return self._get(path)
        body = json.loads(request.content)
        if request.method == "PUT":
            return self._put(path, body)
        if request.method == "DELETE":
            return self._delete(path, body)
        return httpx.Response(405, json={"message": "Method Not Allowed"})

    def _entry(self, path: str, with_content: bool) -> dict:
        data = self.files[path]
        entry = {
            "name": path.rsplit("/", 1)[-1],
            "path": path,
            "sha": blob_sha(data),
            "size": len(data),
            "type": "file",
        }
        if with_content:
            entry["content"] = base64.encodebytes(data).decode()
            entry["encoding"] = "base64"
        return entry

    def _get(self, path: str) -> httpx.Response:
        if path in self.files:
            return httpx.Response(200, json=self._entry(path, with_content=True))
        prefix = f"{path}/" if path else ""
        children = sorted(p for p in self.files if p.startswith(prefix))
        if not children:
            return httpx.Response(404, json={"message": "Not Found"})
        listing: dict[str, dict] = {}
        for child in children:
            head, _, rest = child[len(prefix):].partition("/")
            if not rest:
                listing[child] = self._entry(child, with_content=False)
            else:
                sub = prefix + head
                listing.setdefault(
                    sub,
                    {"name": head, "path": sub, "sha": blob_sha(sub.encode()), "size": 0, "type": "dir"},
                )
        return httpx.Response(200, json=list(listing.values()))

    def _put(self, path: str, body: dict) -> httpx.Response:
        data = base64.b64decode(body["content"])
        sha = body.get("sha")
        if sha is None:
            if path in self.files:
                return httpx.Response(
                    422, json={"message": "Invalid request.\n\n\"sha\" wasn't supplied."}
                )
            self.files[path] = data
            return httpx.Response(201, json={"content": self._entry(path, with_content=False)})
        if path not in self.files:
            return httpx.Response(422, json={"message": "Invalid request."})
        if sha != blob_sha(self.files[path]):
            return httpx.Response(409, json={"message": f"{path} does not match {sha}"})
        self.files[path] = data
        return httpx.Response(200, json={"content": self._entry(path, with_content=False)})

    def _delete(self, path: str, body: dict) -> httpx.Response:
        if path not in self.files:
            return httpx.Response(404, json={"message": "Not Found"})
        if body.get("sha") != blob_sha(self.files[path]):
            return httpx.Response(409, json={"message": f"{path} does not match {body.get('sha')}"})
        del self.files[path]
        return httpx.Response(200, json={"content": None})


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def repository() -> RepositoryReference:
    return RepositoryReference(owner=OWNER, repo=REPO)


@pytest_asyncio.fixture
async def adapter(fake_github, repository):
    transport = httpx.MockTransport(fake_github.handler)
    async with httpx.AsyncClient(transport=transport) as client:
        yield RepositoryFileAdapter(client=client, token="ghp_test_12345", repository=repository)
