"""
Common response models and utilities.

Generic response wrappers and error schemas.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class MessageResponse(BaseModel, Generic[T]):
    """Generic success response: human-readable message plus payload."""

    message: str = Field(description="Outcome message")
    data: T


class ErrorResponse(BaseModel):
    """Error response schema."""

    message: str = Field(description="Error message")
    error_type: str = Field(description="Exception class name")
    details: dict | None = Field(default=None, description="Additional error context")
