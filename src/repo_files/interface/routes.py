"""API routes — thin controllers that delegate to the file store port."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from repo_files.domain.ports.file_store import RepositoryFileStore
from repo_files.interface.dependencies import get_file_store
from repo_files.interface.schemas import (
    ContentItemSchema,
    CreateFileRequest,
    DeleteFileRequest,
    ExistsResponse,
    ListContentsResponse,
    OkResponse,
    ShaResponse,
    UpdateFileRequest,
)

router = APIRouter()

_ERRORS = {
    404: {"description": "No content at path"},
    409: {"description": "Stale SHA or conflicting write"},
    422: {"description": "Invalid path or request body"},
    502: {"description": "GitHub API error"},
    504: {"description": "GitHub did not answer in time"},
}

# Lookups live under their own prefixes so no file name can shadow them.


@router.get("/exists/{path:path}", response_model=ExistsResponse, responses=_ERRORS)
async def file_exists(
    path: str, store: RepositoryFileStore = Depends(get_file_store)
) -> ExistsResponse:
    return ExistsResponse(path=path, exists=await store.file_exists(path))


@router.get("/sha/{path:path}", response_model=ShaResponse, responses=_ERRORS)
async def content_hash(
    path: str, store: RepositoryFileStore = Depends(get_file_store)
) -> ShaResponse:
    return ShaResponse(path=path, sha=await store.get_content_hash(path))


@router.get("/raw/{path:path}", responses=_ERRORS)
async def read_file(path: str, store: RepositoryFileStore = Depends(get_file_store)) -> Response:
    """Return the file body as ``application/octet-stream``."""
    return Response(content=await store.read_file(path), media_type="application/octet-stream")


@router.get("/files/{path:path}", response_model=ListContentsResponse, responses=_ERRORS)
async def list_contents(
    path: str, store: RepositoryFileStore = Depends(get_file_store)
) -> ListContentsResponse:
    items = await store.list_contents(path)
    return ListContentsResponse(
        items=[
            ContentItemSchema(name=i.name, path=i.path, sha=i.sha, type=i.type, size=i.size)
            for i in items
        ]
    )


@router.post("/files/{path:path}", response_model=OkResponse, status_code=201, responses=_ERRORS)
async def create_file(
    path: str,
    body: CreateFileRequest,
    store: RepositoryFileStore = Depends(get_file_store),
) -> OkResponse:
    """Create a file.  Succeeds as well when the file already exists."""
    await store.create_file(path, body.message, body.content)
    return OkResponse()


@router.put("/files/{path:path}", response_model=OkResponse, responses=_ERRORS)
async def update_file(
    path: str,
    body: UpdateFileRequest,
    store: RepositoryFileStore = Depends(get_file_store),
) -> OkResponse:
    await store.update_file(path, body.message, body.content, body.sha)
    return OkResponse()


@router.delete("/files/{path:path}", response_model=OkResponse, responses=_ERRORS)
async def delete_file(
    path: str,
    body: DeleteFileRequest,
    store: RepositoryFileStore = Depends(get_file_store),
) -> OkResponse:
    await store.delete_file(path, body.message, body.sha)
    return OkResponse()
