# sales_api/modules/sales/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import datetime

from sales_api.config.database import get_db
from sales_api.core.auth.dependencies import get_current_user
from sales_api.shared.database.models import User
from sales_api.shared.responses import ResponseEnvelope
from .service import SalesService
from .schemas import SaleCreateRequest, SaleUpdateRequest, SaleFilters

router = APIRouter(prefix="/sales", tags=["Sales"])

# ==================== CREATE ====================

@router.post("", response_model=ResponseEnvelope, status_code=201)
async def create_sale(
    sale_data: SaleCreateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Register a new sale for a representative
    """
    service = SalesService(db)
    return service.create_sale(sale_data).to_response()

# ==================== READ ====================

@router.get("", response_model=ResponseEnvelope)
async def list_sales(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    All sales ordered by id; an empty store yields an empty list
    """
    service = SalesService(db)
    return service.get_all_sales().to_response()

@router.get("/filter", response_model=ResponseEnvelope)
async def filter_sales(
    start_date: Optional[datetime] = Query(None, description="Inclusive lower bound of sale_date (full timestamp; a bare date means 00:00 UTC)"),
    end_date: Optional[datetime] = Query(None, description="Inclusive upper bound of sale_date (full timestamp; a bare date means 00:00 UTC, so pass e.g. 2024-01-31T23:59:59Z to cover the whole day)"),
    representative_id: int = Query(0, description="Representative id; ignored when not positive"),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Sales by date range and/or representative

    **Combinations:**
    - start_date + end_date: sales in the range, for one representative if representative_id > 0
    - representative_id > 0 alone: all sales of that representative
    - anything else: 400 invalid input
    """
    service = SalesService(db)
    filters = SaleFilters(
        start_date=start_date,
        end_date=end_date,
        representative_id=representative_id
    )
    return service.get_sales_by_filters(filters).to_response()

@router.get("/{sale_id}", response_model=ResponseEnvelope)
async def get_sale(
    sale_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    service = SalesService(db)
    return service.get_sale(sale_id).to_response()

# ==================== UPDATE / DELETE ====================

@router.put("/{sale_id}", response_model=ResponseEnvelope)
async def update_sale(
    sale_id: int,
    sale_data: SaleUpdateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Change amount and representative of a sale; returns the stored record
    """
    service = SalesService(db)
    return service.update_sale(sale_id, sale_data).to_response()

@router.delete("/{sale_id}", response_model=ResponseEnvelope)
async def delete_sale(
    sale_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Remove a sale and return what was deleted
    """
    service = SalesService(db)
    return service.delete_sale(sale_id).to_response()
