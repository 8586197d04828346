# sales_api/modules/dashboard/__init__.py
"""
Dashboard module - aggregated sale metrics for administrators
"""

from .router import router as dashboard_router
from .service import DashboardService
from .repository import DashboardRepository

__all__ = [
    "dashboard_router",
    "DashboardService",
    "DashboardRepository"
]
