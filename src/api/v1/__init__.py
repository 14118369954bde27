"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.ai import router as ai_router
from api.v1.routes.calendar import router as calendar_router
from api.v1.routes.categories import router as categories_router
from api.v1.routes.entries import router as entries_router
from api.v1.routes.reports import router as reports_router

router = APIRouter()
router.include_router(entries_router)
router.include_router(categories_router)
router.include_router(calendar_router)
router.include_router(reports_router)
router.include_router(ai_router)
