# sales_api/modules/dashboard/repository.py
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy import func, desc

from sales_api.shared.database.models import Sale

class DashboardRepository:
    """
    Aggregate queries over sale records
    """

    def __init__(self, db: Session):
        self.db = db

    def _apply_range(self, query, start_date: Optional[datetime], end_date: Optional[datetime]):
        if start_date is not None and end_date is not None:
            query = query.filter(Sale.sale_date >= start_date, Sale.sale_date <= end_date)
        return query

    def get_totals(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ) -> Dict[str, Any]:
        query = self.db.query(
            func.count(Sale.id),
            func.coalesce(func.sum(Sale.amount), 0)
        )
        count, total = self._apply_range(query, start_date, end_date).one()
        return {
            "total_sales": count or 0,
            "total_amount": Decimal(str(total or 0)),
        }

    def get_totals_by_representative(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ) -> List[Dict[str, Any]]:
        total_amount = func.sum(Sale.amount).label("total_amount")
        query = self.db.query(
            Sale.representative_id,
            func.count(Sale.id).label("sales_count"),
            total_amount
        )
        rows = self._apply_range(query, start_date, end_date).group_by(
            Sale.representative_id
        ).order_by(
            desc(total_amount), Sale.representative_id
        ).all()

        return [
            {
                "representative_id": row.representative_id,
                "sales_count": row.sales_count,
                "total_amount": Decimal(str(row.total_amount or 0)),
            }
            for row in rows
        ]
