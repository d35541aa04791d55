"""Attendance shift models."""

from __future__ import annotations

from datetime import time
from uuid import UUID, uuid4

from sqlalchemy import Boolean, CheckConstraint, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from png_payroll.models.base import Base, TimestampMixin


class Shift(Base, TimestampMixin):
    """Work shift definition with its scheduled weekdays."""

    __tablename__ = "shifts"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    shift_code: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    shift_name: Mapped[str] = mapped_column(String, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    break_duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    monday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    tuesday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    wednesday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    thursday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    friday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    saturday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    sunday: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __mapper_args__ = {"eager_defaults": True}

    __table_args__ = (
        CheckConstraint("break_duration_minutes >= 0", name="shifts_break_check"),
    )
