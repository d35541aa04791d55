"""Tax calculator and tax table endpoints."""

from dataclasses import asdict
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, Query, status

from png_payroll.api.dependencies import DbSession
from png_payroll.api.schemas import (
    ErrorResponse,
    TaxBracketResponse,
    TaxCalculationRequest,
    TaxCalculationResponse,
    TaxTableResponse,
)
from png_payroll.calculators import example_tax, validate_bracket_table
from png_payroll.models import TaxBracketRecord
from png_payroll.services import TaxCalculationService, TaxTableService

router = APIRouter(prefix="/tax", tags=["tax"])


def _bracket_response(record: TaxBracketRecord) -> TaxBracketResponse:
    example_income, example_amount = example_tax(record.to_bracket())
    response = TaxBracketResponse.model_validate(record)
    return response.model_copy(
        update={"example_income": example_income, "example_tax": example_amount}
    )


# ============================================================================
# Calculator
# ============================================================================


@router.post(
    "/calculate",
    response_model=TaxCalculationResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def calculate_tax(
    db: DbSession,
    payload: TaxCalculationRequest,
) -> TaxCalculationResponse:
    """Calculate annual, monthly and fortnightly tax for an annual income."""
    service = TaxCalculationService(db)
    tax_year = payload.tax_year
    if tax_year is None:
        tax_year = await service.tables.current_tax_year()

    result = await service.calculate(payload.annual_income, tax_year)
    return TaxCalculationResponse(tax_year=tax_year, **asdict(result))


# ============================================================================
# Tax tables
# ============================================================================


@router.get(
    "/brackets",
    response_model=TaxTableResponse,
)
async def list_tax_brackets(
    db: DbSession,
    tax_year: Annotated[int | None, Query(ge=1900, le=2200)] = None,
    active_only: bool = False,
) -> TaxTableResponse:
    """List a tax year's brackets with example tax and consistency issues."""
    service = TaxTableService(db)
    year = tax_year if tax_year is not None else await service.current_tax_year()
    records = await service.list_brackets(year, active_only=active_only)

    active = [r.to_bracket() for r in records if r.is_active]
    issues = validate_bracket_table(active) if records else []

    return TaxTableResponse(
        tax_year=year,
        brackets=[_bracket_response(r) for r in records],
        active_count=len(active),
        highest_rate=max((r.tax_rate for r in records), default=None),
        issues=issues,
    )


@router.post(
    "/brackets/{bracket_id}/toggle-active",
    response_model=TaxBracketResponse,
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}},
)
async def toggle_tax_bracket(
    db: DbSession,
    bracket_id: Annotated[UUID, Path()],
) -> TaxBracketResponse:
    """Activate or deactivate a tax bracket."""
    service = TaxTableService(db)
    record = await service.toggle_active(bracket_id)
    await db.commit()
    return _bracket_response(record)
