"""Staff Directory - Department endpoints. POST /departments, GET, GET/{id}, PUT, DELETE, GET/{id}/staffs."""
from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from app.api.deps import MAX_DB_INT, DbSession, Pagination
from app.schemas.department import (
    DepartmentRequest,
    DepartmentResource,
    DepartmentResponse,
    StaffResource,
    StaffResponse,
)
from app.services.department_service import DepartmentService
from app.services.pagination import build_pagination

router = APIRouter()

DepartmentId = Annotated[int, Path(ge=0, le=MAX_DB_INT, description="Department ID")]


@router.post("", response_model=DepartmentResponse)
async def create_department(body: DepartmentRequest, db: DbSession):
    """Create department. Name must be unique."""
    existing = await DepartmentService.get_by_name(db, body.name)
    if existing:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Department name already exists")
    dept = await DepartmentService.create_department(
        db, body.name, body.description, body.location
    )
    return DepartmentResponse.model_validate(dept)


@router.get("", response_model=DepartmentResource)
async def list_departments(db: DbSession, pagination: Pagination):
    """List departments, paginated and sorted."""
    page = await DepartmentService.list_departments(db, pagination)
    resource = DepartmentResource(data=[DepartmentResponse.model_validate(d) for d in page.items])
    return build_pagination(pagination, page, resource)


@router.get("/{id}", response_model=DepartmentResponse)
async def get_department(id: DepartmentId, db: DbSession):
    """Get department by ID."""
    dept = await DepartmentService.get_by_id(db, id)
    if not dept:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department not found")
    return DepartmentResponse.model_validate(dept)


@router.put("/{id}", response_model=DepartmentResponse)
async def update_department(id: DepartmentId, body: DepartmentRequest, db: DbSession):
    """Replace department fields."""
    other = await DepartmentService.get_by_name(db, body.name)
    if other and other.id != id:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Department name already exists")
    dept = await DepartmentService.update_department(
        db,
        id,
        name=body.name,
        description=body.description,
        location=body.location,
    )
    if not dept:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department not found")
    return DepartmentResponse.model_validate(dept)


@router.delete("/{id}", response_model=DepartmentResponse)
async def delete_department(id: DepartmentId, db: DbSession):
    """Delete department (and its staff). Returns the deleted department."""
    dept = await DepartmentService.delete_department(db, id)
    if not dept:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department not found")
    return DepartmentResponse.model_validate(dept)


@router.get("/{id}/staffs", response_model=StaffResource)
async def list_department_staffs(id: DepartmentId, db: DbSession, pagination: Pagination):
    """
    List staff of a department.
    An unknown sortBy is answered with 400 {"sortBy": "..."} by the app exception handler.
    """
    page = await DepartmentService.find_all_staff_by_department_id(db, id, pagination)
    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Department not found")
    resource = StaffResource(data=[StaffResponse.model_validate(s) for s in page.items])
    return build_pagination(pagination, page, resource)
