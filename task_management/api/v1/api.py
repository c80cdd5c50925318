"""API v1 router aggregator."""

from fastapi import APIRouter

from task_management.api.v1.endpoints import validation

# Create the main API v1 router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(validation.router, prefix="/validation", tags=["validation"])
