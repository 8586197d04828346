# sales_api/modules/sales/__init__.py
"""
Sales module - sale records

- POST /sales: create a sale
- GET /sales: list all sales
- GET /sales/filter: sales by date range and/or representative
- GET /sales/{id}, PUT /sales/{id}, DELETE /sales/{id}

Architecture:
- router.py: FastAPI endpoints
- service.py: business logic, ServiceResult per operation
- repository.py: data access
- schemas.py: Pydantic request/response models
"""

from .router import router as sales_router
from .service import SalesService
from .repository import SalesRepository

__all__ = [
    "sales_router",
    "SalesService",
    "SalesRepository"
]
