from pydantic import BaseModel, Field, ConfigDict, field_serializer, field_validator
from typing import Optional
from datetime import datetime, timezone
from decimal import Decimal

def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

# ==================== BASE CLASS FOR RESPONSES ====================

class SalesBaseModel(BaseModel):
    """
    Base class for response schemas, read straight from ORM objects.
    """
    model_config = ConfigDict(from_attributes=True)

# ==================== REQUEST SCHEMAS ====================

class SaleCreateRequest(BaseModel):
    amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2, description="Sale amount")
    sale_date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the sale happened (defaults to now)"
    )
    representative_id: int = Field(..., gt=0, description="Sales representative the sale belongs to")

    @field_validator("sale_date")
    @classmethod
    def normalize_sale_date(cls, v: datetime):
        return as_utc(v)

class SaleUpdateRequest(BaseModel):
    amount: Decimal = Field(..., gt=0, max_digits=15, decimal_places=2, description="New sale amount")
    representative_id: int = Field(..., gt=0, description="New sales representative")

class SaleFilters(BaseModel):
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    representative_id: int = 0

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, v: Optional[datetime]):
        return as_utc(v)

    @property
    def has_date_range(self) -> bool:
        return self.start_date is not None and self.end_date is not None

# ==================== RESPONSE SCHEMAS ====================

class SaleResponse(SalesBaseModel):
    id: int
    amount: Decimal
    sale_date: datetime
    representative_id: int
    created_at: datetime
    updated_at: datetime

    @field_serializer("amount")
    def serialize_amount(self, amount: Decimal) -> float:
        return float(amount)

    @field_serializer("sale_date", "created_at", "updated_at", when_used="json")
    def serialize_timestamps(self, value: datetime) -> str:
        # SQLite hands back naive values; they are stored as UTC
        return as_utc(value).isoformat()
