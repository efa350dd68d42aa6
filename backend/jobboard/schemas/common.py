"""
Shared Pydantic Schemas

Response envelopes and pagination metadata used across endpoints.
"""

from typing import Optional, Generic, TypeVar, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaginationMeta(CamelModel):
    """Position of a page within a paged result set."""

    total: int = Field(..., ge=0, description="Total number of matching items")
    page: int = Field(..., description="Current page number (1-based)")
    limit: int = Field(..., description="Page size")
    total_pages: int = Field(..., description="Total number of pages")
    has_next: bool = Field(..., description="Whether there is a next page")
    has_previous: bool = Field(..., description="Whether there is a previous page")
    next_page: Optional[int] = Field(None, description="Next page number")
    previous_page: Optional[int] = Field(None, description="Previous page number")


class ApiResponse(CamelModel, Generic[DataT]):
    """Success envelope."""

    success: bool = True
    message: str
    data: Optional[DataT] = None


class PaginatedResponse(CamelModel, Generic[DataT]):
    """Success envelope for paged lists."""

    success: bool = True
    message: str
    data: List[DataT]
    pagination: PaginationMeta


class FieldError(BaseModel):
    """One failing validation rule attached to a field."""

    field: str
    message: str


class ErrorResponse(CamelModel):
    """Error envelope returned by the exception handlers."""

    success: bool = False
    message: str
    error_code: str
    details: Optional[dict] = None
    errors: Optional[List[FieldError]] = None
    timestamp: str
