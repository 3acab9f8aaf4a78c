"""
HTTP-style exceptions raised by the service layer.

Services signal missing records and rejected input by raising these
instead of returning ``None``; the status code and ``detail`` travel
with the exception so whichever layer sits on top can turn them into a
response unchanged.
"""

from typing import Optional

from fastapi import HTTPException, status


class NotFoundException(HTTPException):
    """Raised when a requested record does not exist (HTTP 404)."""

    def __init__(self, detail: str = "Not found", headers: Optional[dict] = None) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail, headers=headers)


class BadRequestException(HTTPException):
    """Raised when input violates a business rule (HTTP 400)."""

    def __init__(self, detail: str = "Bad request", headers: Optional[dict] = None) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail, headers=headers)
