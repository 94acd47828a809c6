"""Staff Directory - API v1 router aggregation. Mounted at the application root."""
from fastapi import APIRouter

from app.api.v1.endpoints import departments

api_router = APIRouter()

api_router.include_router(departments.router, prefix="/departments", tags=["departments"])
