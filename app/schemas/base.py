"""Response envelope shared by every track and session route."""
from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar('T')


def utc_now() -> datetime:
    return datetime.now(UTC)


class ResponseMeta(BaseModel):
    request_id: str | None = None
    timestamp: datetime = Field(default_factory=utc_now)
    warnings: list[str] = Field(default_factory=list)


class APIError(BaseModel):
    code: str
    message: str
    details: dict | None = None


class APIResponse(BaseModel, Generic[T]):
    """``data`` on success; ``errors`` on failure, mirroring the domain error handler."""
    data: T | None = None
    meta: ResponseMeta | None = None
    errors: list[APIError] = Field(default_factory=list)
