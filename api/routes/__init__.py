from fastapi import APIRouter

from .health import router as health_router
from .trades import router as trades_router

router = APIRouter()
router.include_router(health_router)
router.include_router(trades_router)
