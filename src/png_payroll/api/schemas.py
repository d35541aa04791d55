"""Pydantic schemas for API request/response models."""

from datetime import time
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Tax calculation schemas
# ============================================================================


class TaxCalculationRequest(BaseModel):
    """Schema for a tax calculation request."""

    annual_income: Decimal
    tax_year: int | None = Field(default=None, ge=1900, le=2200)


class TaxCalculationResponse(BaseModel):
    """Schema for a tax calculation result."""

    model_config = ConfigDict(from_attributes=True)

    tax_year: int
    annual_income: Decimal
    tax_bracket: int
    annual_tax: Decimal
    monthly_tax: Decimal
    fortnightly_tax: Decimal
    net_annual: Decimal
    net_monthly: Decimal
    net_fortnightly: Decimal
    effective_rate: Decimal


# ============================================================================
# Tax table schemas
# ============================================================================


class TaxBracketResponse(BaseModel):
    """Schema for a tax bracket row."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tax_year: int
    bracket_number: int
    min_income: Decimal
    max_income: Decimal | None = None
    tax_rate: Decimal
    base_tax: Decimal
    is_active: bool
    example_income: Decimal | None = None
    example_tax: Decimal | None = None


class TaxTableResponse(BaseModel):
    """Schema for a tax year's bracket table."""

    tax_year: int
    brackets: list[TaxBracketResponse]
    active_count: int
    highest_rate: Decimal | None = None
    issues: list[str] = []


# ============================================================================
# Shift schemas
# ============================================================================


class ShiftResponse(BaseModel):
    """Schema for a shift with its computed working hours."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    shift_code: str
    shift_name: str
    start_time: time
    end_time: time
    break_duration_minutes: int
    is_active: bool
    days: list[str] = []
    working_hours: Decimal | None = None


class ShiftListResponse(BaseModel):
    """Schema for listing shifts."""

    items: list[ShiftResponse]
    total: int


class WorkingHoursRequest(BaseModel):
    """Schema for a working-hours preview."""

    start_time: str
    end_time: str
    break_duration_minutes: int = 0


class WorkingHoursResponse(BaseModel):
    """Schema for a working-hours preview result."""

    working_hours: Decimal


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error response."""

    detail: str
    code: str | None = None
    context: dict[str, Any] | None = None
