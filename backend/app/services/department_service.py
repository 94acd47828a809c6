"""Staff Directory - DepartmentService (CRUD + paginated staff listing)."""
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.department import Department, Staff
from app.schemas.common import PaginationParams
from app.schemas.department import (
    DEPARTMENT_DEFAULT_SORT,
    DEPARTMENT_SORT_FIELDS,
    STAFF_DEFAULT_SORT,
    STAFF_SORT_FIELDS,
)
from app.services.pagination import Page, convert_to_page_request, paginate

logger = logging.getLogger(__name__)


class DepartmentService:
    """CRUD for departments and listing of their staff."""

    @staticmethod
    async def get_by_id(db: AsyncSession, id: int) -> Department | None:
        result = await db.execute(select(Department).where(Department.id == id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_name(db: AsyncSession, name: str) -> Department | None:
        result = await db.execute(select(Department).where(Department.name == name))
        return result.scalar_one_or_none()

    @staticmethod
    async def list_departments(db: AsyncSession, pagination: PaginationParams) -> Page[Department]:
        page_request = convert_to_page_request(pagination, DEPARTMENT_DEFAULT_SORT, DEPARTMENT_SORT_FIELDS)
        return await paginate(db, select(Department), page_request)

    @staticmethod
    async def create_department(
        db: AsyncSession,
        name: str,
        description: str | None = None,
        location: str | None = None,
    ) -> Department:
        dept = Department(name=name, description=description, location=location)
        db.add(dept)
        await db.flush()
        await db.refresh(dept)
        logger.info("Department %s created (%s)", dept.id, dept.name)
        return dept

    @staticmethod
    async def update_department(
        db: AsyncSession,
        id: int,
        *,
        name: str,
        description: str | None = None,
        location: str | None = None,
    ) -> Department | None:
        dept = await DepartmentService.get_by_id(db, id)
        if not dept:
            return None
        dept.name = name
        dept.description = description
        dept.location = location
        await db.flush()
        await db.refresh(dept)
        logger.info("Department %s updated", dept.id)
        return dept

    @staticmethod
    async def delete_department(db: AsyncSession, id: int) -> Department | None:
        """Delete department and its staff. Returns the deleted row, or None if missing."""
        dept = await DepartmentService.get_by_id(db, id)
        if not dept:
            return None
        await db.execute(delete(Staff).where(Staff.department_id == id))
        await db.delete(dept)
        await db.flush()
        logger.info("Department %s deleted", id)
        return dept

    @staticmethod
    async def find_all_staff_by_department_id(
        db: AsyncSession,
        department_id: int,
        pagination: PaginationParams,
    ) -> Page[Staff] | None:
        """Page of staff for a department; None when the department does not exist."""
        page_request = convert_to_page_request(pagination, STAFF_DEFAULT_SORT, STAFF_SORT_FIELDS)
        if not await DepartmentService.get_by_id(db, department_id):
            return None
        q = select(Staff).where(Staff.department_id == department_id)
        return await paginate(db, q, page_request)
