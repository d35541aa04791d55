"""Tax table and tax configuration models."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import Boolean, CheckConstraint, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from png_payroll.calculators.types import TaxBracket
from png_payroll.models.base import Base, TimestampMixin


class TaxBracketRecord(Base, TimestampMixin):
    """Graduated tax bracket row for one tax year."""

    __tablename__ = "png_tax_brackets"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    tax_year: Mapped[int] = mapped_column(Integer, nullable=False)
    bracket_number: Mapped[int] = mapped_column(Integer, nullable=False)
    min_income: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    max_income: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    tax_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)
    base_tax: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __mapper_args__ = {"eager_defaults": True}

    __table_args__ = (
        UniqueConstraint("tax_year", "bracket_number", name="png_tax_brackets_year_number_unique"),
        CheckConstraint("bracket_number > 0", name="png_tax_brackets_number_check"),
        CheckConstraint("min_income >= 0", name="png_tax_brackets_min_income_check"),
        CheckConstraint("tax_rate >= 0 AND tax_rate <= 100", name="png_tax_brackets_rate_check"),
    )

    def to_bracket(self) -> TaxBracket:
        """Convert to the calculation engine's bracket type."""
        return TaxBracket(
            bracket_number=self.bracket_number,
            min_income=Decimal(self.min_income),
            max_income=Decimal(self.max_income) if self.max_income is not None else None,
            tax_rate=Decimal(self.tax_rate),
            base_tax=Decimal(self.base_tax),
        )


class TaxConfiguration(Base):
    """Key/value tax settings (current tax year, rounding method, ...)."""

    __tablename__ = "tax_configuration"

    config_key: Mapped[str] = mapped_column(String, primary_key=True)
    config_value: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    data_type: Mapped[str] = mapped_column(String, nullable=False, default="text")

    __table_args__ = (
        CheckConstraint(
            "data_type IN ('number', 'text', 'boolean')",
            name="tax_configuration_data_type_check",
        ),
    )
