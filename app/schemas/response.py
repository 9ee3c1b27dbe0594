from pydantic import BaseModel
from typing import Optional, Any


class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    success: bool = False
    error: str
    message: Optional[str] = None


class ServiceResult(BaseModel):
    """
    Result envelope returned by every service operation.

    A successful result carries ``data`` (except for deletions), a failed one
    carries ``error``. Build instances through ``ok()`` and ``fail()``.
    """
    success: bool
    message: str
    data: Optional[Any] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, message: str, data: Optional[Any] = None) -> "ServiceResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(cls, error: str, message: str) -> "ServiceResult":
        return cls(success=False, message=message, error=error)
