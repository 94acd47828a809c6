"""Staff Directory - Pagination adapter.

Translates generic page/sort parameters into a paging directive for the data
layer, and wraps a result page into a response envelope.
"""
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.common import PaginationParams, ResourcePage

logger = logging.getLogger(__name__)

T = TypeVar("T")

DESCENDING_SORT_TYPE = "dsc"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class NoSuchSortableFieldError(Exception):
    """Raised when sortBy names a field that is not sortable on the resource."""

    def __init__(self, sort_by: str, allowed: list[str] | None = None):
        self.sort_by = sort_by
        self.allowed = allowed or []
        self.message = f"Can not sort by '{sort_by}'"
        if self.allowed:
            self.message += f"; allowed: {', '.join(self.allowed)}"
        self.field_errors = {"sortBy": self.message}
        super().__init__(self.message)


@dataclass(frozen=True)
class PageRequest:
    """Paging directive: zero-based page, page size and a single sort column."""

    page: int
    size: int
    sort_by: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("page must be >= 0")
        if self.size < 1:
            raise ValueError("size must be >= 1")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """One page of query results plus the total across all pages."""

    items: list[T] = field(default_factory=list)
    total_elements: int = 0
    size: int = 1

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 1


def convert_to_page_request(
    pagination: PaginationParams,
    default_sort_by: str,
    sortable_fields: Mapping[str, str],
) -> PageRequest:
    """
    Build a PageRequest from request params.
    sortable_fields maps API field names to model attributes; sort_by must be one of its keys.
    Raises NoSuchSortableFieldError otherwise.
    """
    sort_key = default_sort_by
    if pagination.sort_by is not None:
        if pagination.sort_by not in sortable_fields:
            logger.warning("Rejected sortBy=%r", pagination.sort_by)
            raise NoSuchSortableFieldError(pagination.sort_by, sorted(sortable_fields))
        sort_key = pagination.sort_by

    direction = SortDirection.ASC
    if pagination.sort_type == DESCENDING_SORT_TYPE:
        direction = SortDirection.DESC

    return PageRequest(
        page=pagination.page,
        size=pagination.per_page,
        sort_by=sortable_fields.get(sort_key, sort_key),
        direction=direction,
    )


def build_pagination(
    pagination: PaginationParams,
    page: Page[Any],
    resource: ResourcePage[Any],
) -> ResourcePage[Any]:
    """Copy totals from the result page and page/per_page from the request. Returns resource."""
    resource.total_page = page.total_pages
    resource.total = page.total_elements
    resource.page = pagination.page
    resource.per_page = pagination.per_page
    return resource


async def paginate(db: AsyncSession, query: Select, page_request: PageRequest) -> Page:
    """Run count + ordered offset/limit queries for page_request. The query must select one entity."""
    model = query.column_descriptions[0]["entity"]
    count_q = select(func.count()).select_from(query.order_by(None).subquery())
    total = (await db.execute(count_q)).scalar_one()

    column = getattr(model, page_request.sort_by)
    order = column.desc() if page_request.direction == SortDirection.DESC else column.asc()
    q = query.order_by(order)
    if page_request.sort_by != "id":
        q = q.order_by(model.id.asc())  # stable ordering for ties
    q = q.offset(page_request.offset).limit(page_request.size)

    result = await db.execute(q)
    return Page(items=list(result.scalars().all()), total_elements=total, size=page_request.size)
