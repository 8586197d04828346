# sales_api/modules/dashboard/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import datetime

from sales_api.config.database import get_db
from sales_api.config.settings import settings
from sales_api.core.auth.dependencies import require_roles
from sales_api.shared.database.models import User
from sales_api.shared.responses import ResponseEnvelope
from .service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

@router.get("/metrics", response_model=ResponseEnvelope)
async def get_sales_metrics(
    start_date: Optional[datetime] = Query(None, description="Inclusive lower bound of sale_date"),
    end_date: Optional[datetime] = Query(None, description="Inclusive upper bound of sale_date"),
    current_user: User = Depends(require_roles([settings.admin_role])),
    db: Session = Depends(get_db)
):
    """
    Totals, average and per-representative breakdown of sales

    Both dates or neither; admin only.
    """
    service = DashboardService(db)
    return service.get_sales_metrics(start_date, end_date).to_response()
