from pydantic import BaseModel, field_serializer
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

class RepresentativeMetrics(BaseModel):
    representative_id: int
    sales_count: int
    total_amount: Decimal

    @field_serializer("total_amount")
    def serialize_total(self, value: Decimal) -> float:
        return float(value)

class SalesMetricsResponse(BaseModel):
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    total_sales: int
    total_amount: Decimal
    average_amount: Decimal
    by_representative: List[RepresentativeMetrics]

    @field_serializer("total_amount", "average_amount")
    def serialize_amounts(self, value: Decimal) -> float:
        return float(value)
