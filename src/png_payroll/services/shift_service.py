"""Shift service."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from png_payroll.calculators import PayrollError
from png_payroll.models import Shift


class ShiftNotFoundError(PayrollError):
    """Raised when a shift does not exist."""

    code = "SHIFT_NOT_FOUND"

    def __init__(self, shift_id: UUID):
        self.shift_id = shift_id
        super().__init__(f"Shift {shift_id} not found")


class ShiftService:
    """Read access to attendance shifts."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_shifts(self, active_only: bool = False) -> list[Shift]:
        query = select(Shift)
        if active_only:
            query = query.where(Shift.is_active.is_(True))
        result = await self.session.execute(query.order_by(Shift.shift_code))
        return list(result.scalars().all())

    async def get_shift(self, shift_id: UUID) -> Shift:
        shift = await self.session.get(Shift, shift_id)
        if shift is None:
            raise ShiftNotFoundError(shift_id)
        return shift
