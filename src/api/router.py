"""API router aggregation."""

from fastapi import APIRouter

from src.api.costs import router as costs_router
from src.api.health import router as health_router
from src.api.imports import router as imports_router
from src.api.risks import router as risks_router
from src.api.timeline import router as timeline_router

api_router = APIRouter()
api_router.include_router(health_router)
# Chart data endpoints
api_router.include_router(timeline_router)
api_router.include_router(risks_router)
# Cost roll-ups for the planning tabs
api_router.include_router(costs_router)
# Bulk import validation
api_router.include_router(imports_router)
