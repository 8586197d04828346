# sales_api/modules/sales/service.py
import logging
from datetime import datetime, timezone
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from sales_api.shared.database.models import Sale
from sales_api.shared.responses import ResponseMessages, ServiceResult
from .repository import SalesRepository
from .schemas import SaleCreateRequest, SaleUpdateRequest, SaleFilters, SaleResponse

logger = logging.getLogger(__name__)

class SalesService:
    """
    Create, read, update, delete and filter sale records.

    Every operation returns a ``ServiceResult``; store failures are rolled
    back by the repository, logged here and reported as a persistence failure.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repository = SalesRepository(db)

    # ==================== MAPPING ====================

    @staticmethod
    def _to_response(sale: Sale) -> SaleResponse:
        return SaleResponse.model_validate(sale)

    def _to_response_list(self, sales: List[Sale]) -> List[SaleResponse]:
        return [self._to_response(sale) for sale in sales]

    # ==================== CRUD ====================

    def create_sale(self, sale_data: SaleCreateRequest) -> ServiceResult:
        try:
            sale = self.repository.create(sale_data.model_dump())
            logger.info(f"Sale {sale.id} created for representative {sale.representative_id}")
            return ServiceResult.created(self._to_response(sale), ResponseMessages.ADDED)
        except SQLAlchemyError:
            logger.exception(f"Failed to create sale for representative {sale_data.representative_id}")
            return ServiceResult.persistence_failure()

    def get_sale(self, sale_id: int) -> ServiceResult:
        try:
            sale = self.repository.get_by_id(sale_id)
            if sale is None:
                return ServiceResult.not_found(f"Sale {sale_id} not found")
            return ServiceResult.success(self._to_response(sale))
        except SQLAlchemyError:
            logger.exception(f"Failed to load sale {sale_id}")
            return ServiceResult.persistence_failure()

    def get_all_sales(self) -> ServiceResult:
        try:
            sales = self.repository.get_all()
            return ServiceResult.success(self._to_response_list(sales))
        except SQLAlchemyError:
            logger.exception("Failed to list sales")
            return ServiceResult.persistence_failure()

    def update_sale(self, sale_id: int, sale_data: SaleUpdateRequest) -> ServiceResult:
        """
        Overwrite amount and representative; the stored record is returned
        """
        try:
            sale = self.repository.get_by_id(sale_id)
            if sale is None:
                return ServiceResult.not_found(f"Sale {sale_id} not found")

            sale = self.repository.update(sale, {
                "amount": sale_data.amount,
                "representative_id": sale_data.representative_id,
                "updated_at": datetime.now(timezone.utc),
            })
            logger.info(f"Sale {sale_id} updated")
            return ServiceResult.success(self._to_response(sale), ResponseMessages.MODIFIED)
        except SQLAlchemyError:
            logger.exception(f"Failed to update sale {sale_id}")
            return ServiceResult.persistence_failure()

    def delete_sale(self, sale_id: int) -> ServiceResult:
        try:
            sale = self.repository.get_by_id(sale_id)
            if sale is None:
                return ServiceResult.not_found(f"Sale {sale_id} not found")

            # Project before deleting; the instance is detached afterwards
            deleted = self._to_response(sale)
            self.repository.delete(sale)
            logger.info(f"Sale {sale_id} deleted")
            return ServiceResult.success(deleted, ResponseMessages.DELETED)
        except SQLAlchemyError:
            logger.exception(f"Failed to delete sale {sale_id}")
            return ServiceResult.persistence_failure()

    # ==================== FILTERS ====================

    def get_sales_by_filters(self, filters: SaleFilters) -> ServiceResult:
        """
        - Both dates: inclusive range, narrowed by representative when positive
        - Representative only: all of that representative's sales
        - Anything else is invalid input
        """
        if filters.has_date_range:
            if filters.start_date > filters.end_date:
                return ServiceResult.invalid_input("start_date must not be after end_date")
            representative_id = filters.representative_id if filters.representative_id > 0 else None
            query_args = {
                "start_date": filters.start_date,
                "end_date": filters.end_date,
                "representative_id": representative_id,
            }
        elif filters.representative_id > 0:
            query_args = {"representative_id": filters.representative_id}
        else:
            return ServiceResult.invalid_input(
                "Provide both start_date and end_date, or a positive representative_id"
            )

        try:
            sales = self.repository.filter_sales(**query_args)
            return ServiceResult.success(self._to_response_list(sales))
        except SQLAlchemyError:
            logger.exception(f"Failed to filter sales with {query_args}")
            return ServiceResult.persistence_failure()
