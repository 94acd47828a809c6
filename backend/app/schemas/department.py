"""Staff Directory - Department and Staff schemas."""
from datetime import date, datetime

from pydantic import Field

from app.schemas.common import CamelModel, ResourcePage


class DepartmentRequest(CamelModel):
    """Create/update payload. PUT replaces all fields."""

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    location: str | None = Field(default=None, max_length=255)


class DepartmentResponse(CamelModel):
    id: int
    name: str
    description: str | None
    location: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class StaffResponse(CamelModel):
    id: int
    department_id: int
    first_name: str
    last_name: str
    email: str
    position: str | None
    hired_on: date | None


DepartmentResource = ResourcePage[DepartmentResponse]
StaffResource = ResourcePage[StaffResponse]

# Sortable keys per resource: API field name -> model attribute.
DEPARTMENT_SORT_FIELDS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "location": "location",
    "createdAt": "created_at",
}
DEPARTMENT_DEFAULT_SORT = "id"

STAFF_SORT_FIELDS: dict[str, str] = {
    "id": "id",
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "position": "position",
    "hiredOn": "hired_on",
}
STAFF_DEFAULT_SORT = "id"
