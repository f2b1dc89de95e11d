"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class _CommitBody(BaseModel):
    message: str

    @field_validator("message")
    @classmethod
    def _message_not_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "message must not be empty."
            raise ValueError(msg)
        return v


class CreateFileRequest(_CommitBody):
    """Request body for ``POST /files/{path}``."""

    content: str


class UpdateFileRequest(_CommitBody):
    """Request body for ``PUT /files/{path}``."""

    content: str
    sha: str


class DeleteFileRequest(_CommitBody):
    """Request body for ``DELETE /files/{path}``."""

    sha: str


class ContentItemSchema(BaseModel):
    name: str
    path: str
    sha: str
    type: str
    size: int


class ListContentsResponse(BaseModel):
    items: list[ContentItemSchema]


class ExistsResponse(BaseModel):
    path: str
    exists: bool


class ShaResponse(BaseModel):
    path: str
    sha: str


class OkResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
