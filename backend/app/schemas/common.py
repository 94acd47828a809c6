"""Staff Directory - Common schemas: pagination params and resource envelope."""
from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from app.config import get_settings

T = TypeVar("T")


class CamelModel(BaseModel):
    """Serializes with camelCase keys; accepts camelCase or snake_case input."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True, "from_attributes": True}


class PaginationParams(BaseModel):
    """Generic page/sort request for list endpoints. page is zero-based."""

    page: int = 0
    per_page: int = Field(default_factory=lambda: get_settings().DEFAULT_PAGE_SIZE)
    sort_by: str | None = None
    sort_type: str | None = None


class ResourcePage(CamelModel, Generic[T]):
    """Response envelope: a page of items plus pagination metadata."""

    data: list[T] = Field(default_factory=list)
    total_page: int = 0
    total: int = 0
    page: int = 0
    per_page: int = 0
