# sales_api/modules/sales/repository.py
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from sales_api.shared.database.models import Sale

class SalesRepository:
    """
    Data access for sale records
    """

    def __init__(self, db: Session):
        self.db = db

    # ==================== CRUD ====================

    def create(self, sale_data: dict) -> Sale:
        try:
            sale = Sale(**sale_data)
            self.db.add(sale)
            self.db.commit()
            self.db.refresh(sale)
            return sale
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def get_by_id(self, sale_id: int) -> Optional[Sale]:
        return self.db.get(Sale, sale_id)

    def get_all(self) -> List[Sale]:
        return self.db.query(Sale).order_by(Sale.id).all()

    def update(self, sale: Sale, update_data: dict) -> Sale:
        try:
            for key, value in update_data.items():
                setattr(sale, key, value)
            self.db.commit()
            self.db.refresh(sale)
            return sale
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    def delete(self, sale: Sale) -> None:
        try:
            self.db.delete(sale)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise e

    # ==================== FILTERS ====================

    def filter_sales(
        self,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
        representative_id: Optional[int] = None
    ) -> List[Sale]:
        """
        Sales inside an inclusive date range and/or for one representative
        """
        query = self.db.query(Sale)

        if start_date is not None:
            query = query.filter(Sale.sale_date >= start_date)
        if end_date is not None:
            query = query.filter(Sale.sale_date <= end_date)
        if representative_id is not None:
            query = query.filter(Sale.representative_id == representative_id)

        return query.order_by(Sale.sale_date, Sale.id).all()
