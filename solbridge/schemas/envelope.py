"""Response Envelope: uniform {"success", "data"} / {"success", "error"} wrappers.

Invariants:
    - success=True always carries data; success=False always carries error
    - Failure envelopes are produced by error handlers, never by routes
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope."""
    success: bool = True
    data: T

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data)


class ErrorResponse(BaseModel):
    """Failure envelope (documented in OpenAPI; handlers emit it as a dict)."""
    success: bool = False
    error: str
