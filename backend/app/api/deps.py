"""Staff Directory - FastAPI dependencies (DB session, pagination params)."""
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.db.session import get_db
from app.schemas.common import PaginationParams

settings = get_settings()

DbSession = Annotated[AsyncSession, Depends(get_db)]

# Integer columns are 32-bit; offset = page * perPage must fit as well.
MAX_DB_INT = 2**31 - 1
MAX_PAGE = MAX_DB_INT // settings.MAX_PAGE_SIZE


def get_pagination_params(
    page: Annotated[int, Query(ge=0, le=MAX_PAGE, description="Zero-based page index.")] = 0,
    per_page: Annotated[
        int,
        Query(alias="perPage", ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page."),
    ] = settings.DEFAULT_PAGE_SIZE,
    sort_by: Annotated[str | None, Query(alias="sortBy", description="Field to sort by.")] = None,
    sort_type: Annotated[
        str | None,
        Query(alias="sortType", description="'dsc' for descending; anything else sorts ascending."),
    ] = None,
) -> PaginationParams:
    """Resolve page/perPage/sortBy/sortType query params for list endpoints."""
    return PaginationParams(page=page, per_page=per_page, sort_by=sort_by, sort_type=sort_type)


Pagination = Annotated[PaginationParams, Depends(get_pagination_params)]
