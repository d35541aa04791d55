"""Shift endpoints."""

import logging
from decimal import Decimal

from fastapi import APIRouter

from png_payroll.api.dependencies import DbSession
from png_payroll.api.schemas import (
    ErrorResponse,
    ShiftListResponse,
    ShiftResponse,
    WorkingHoursRequest,
    WorkingHoursResponse,
)
from png_payroll.calculators import InvalidInputError, calculate_working_hours, working_days
from png_payroll.models import Shift
from png_payroll.services import ShiftService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shifts", tags=["shifts"])


def _stored_working_hours(shift: Shift) -> Decimal | None:
    # A stored shift with an impossible break lists with unknown hours
    try:
        return calculate_working_hours(
            shift.start_time, shift.end_time, shift.break_duration_minutes
        )
    except InvalidInputError as exc:
        logger.warning("Shift %s has no valid working hours: %s", shift.shift_code, exc)
        return None


def _shift_response(shift: Shift) -> ShiftResponse:
    return ShiftResponse(
        id=shift.id,
        shift_code=shift.shift_code,
        shift_name=shift.shift_name,
        start_time=shift.start_time,
        end_time=shift.end_time,
        break_duration_minutes=shift.break_duration_minutes,
        is_active=shift.is_active,
        days=working_days(shift),
        working_hours=_stored_working_hours(shift),
    )


@router.get("", response_model=ShiftListResponse)
async def list_shifts(
    db: DbSession,
    active_only: bool = False,
) -> ShiftListResponse:
    """List shifts with their scheduled days and working hours."""
    shifts = await ShiftService(db).list_shifts(active_only=active_only)
    return ShiftListResponse(
        items=[_shift_response(s) for s in shifts],
        total=len(shifts),
    )


@router.post(
    "/working-hours",
    response_model=WorkingHoursResponse,
    responses={422: {"model": ErrorResponse}},
)
async def preview_working_hours(payload: WorkingHoursRequest) -> WorkingHoursResponse:
    """Working hours for a shift definition that has not been saved yet."""
    hours = calculate_working_hours(
        payload.start_time, payload.end_time, payload.break_duration_minutes
    )
    return WorkingHoursResponse(working_hours=hours)
