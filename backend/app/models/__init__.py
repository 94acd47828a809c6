"""Staff Directory - SQLAlchemy models."""
from app.models.department import Department, Staff

__all__ = [
    "Department", "Staff",
]
