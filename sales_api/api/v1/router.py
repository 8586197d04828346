# sales_api/api/v1/router.py
from fastapi import APIRouter

from sales_api.config.settings import settings
from sales_api.modules.users import users_router
from sales_api.modules.sales import sales_router
from sales_api.modules.dashboard import dashboard_router


# Main API router, mounted under /api
api_router = APIRouter(prefix="/api")

# ==================== MODULES ====================

api_router.include_router(users_router)
api_router.include_router(sales_router)
api_router.include_router(dashboard_router)

# ==================== ROOT ENDPOINTS ====================

@api_router.get("/health")
async def health_check():
    """Liveness probe; reachable without a token"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version
    }
