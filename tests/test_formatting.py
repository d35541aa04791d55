"""Tests for Kina and percent formatting."""

from decimal import Decimal

import pytest

from png_payroll.formatting import format_kina, format_percent

D = Decimal


@pytest.mark.parametrize(
    "amount,places,expected",
    [
        (D("50000"), 2, "K50,000.00"),
        (D("11499.9965"), 2, "K11,500.00"),
        (D("958.3333333"), 2, "K958.33"),
        (D("-12.5"), 2, "-K12.50"),
        (1234.567, 0, "K1,235"),
        (0, 2, "K0.00"),
    ],
)
def test_format_kina(amount, places, expected):
    assert format_kina(amount, places) == expected


@pytest.mark.parametrize(
    "rate,expected",
    [
        (D("23"), "23.00%"),
        (D("22.995"), "23.00%"),
        (D("0"), "0.00%"),
        (42, "42.00%"),
    ],
)
def test_format_percent(rate, expected):
    assert format_percent(rate) == expected
