# sales_api/modules/dashboard/service.py
import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from sales_api.modules.sales.schemas import as_utc
from sales_api.shared.responses import ServiceResult
from .repository import DashboardRepository
from .schemas import RepresentativeMetrics, SalesMetricsResponse

logger = logging.getLogger(__name__)

class DashboardService:
    """
    Sales metrics for the admin dashboard
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = DashboardRepository(db)

    def get_sales_metrics(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ) -> ServiceResult:
        if (start_date is None) != (end_date is None):
            return ServiceResult.invalid_input("Provide both start_date and end_date, or neither")

        start_date, end_date = as_utc(start_date), as_utc(end_date)
        if start_date is not None and start_date > end_date:
            return ServiceResult.invalid_input("start_date must not be after end_date")

        try:
            totals = self.repository.get_totals(start_date, end_date)
            breakdown = self.repository.get_totals_by_representative(start_date, end_date)
        except SQLAlchemyError:
            logger.exception(f"Failed to compute sales metrics ({start_date} - {end_date})")
            return ServiceResult.persistence_failure()

        average = Decimal("0")
        if totals["total_sales"]:
            average = (totals["total_amount"] / totals["total_sales"]).quantize(
                Decimal("0.01"), rounding=ROUND_HALF_UP
            )

        return ServiceResult.success(
            SalesMetricsResponse(
                start_date=start_date,
                end_date=end_date,
                total_sales=totals["total_sales"],
                total_amount=totals["total_amount"],
                average_amount=average,
                by_representative=[RepresentativeMetrics(**row) for row in breakdown],
            )
        )
