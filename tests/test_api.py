"""API endpoint tests against an in-memory database."""

from __future__ import annotations

from datetime import time
from decimal import Decimal

import pytest

from png_payroll.models import Shift

D = Decimal

pytestmark = pytest.mark.asyncio


class TestTaxCalculateEndpoint:
    async def test_calculate_current_year(self, client, seeded_session):
        response = await client.post("/api/v1/tax/calculate", json={"annual_income": "50000"})

        assert response.status_code == 200
        body = response.json()
        assert body["tax_year"] == 2025
        assert body["tax_bracket"] == 4
        assert D(body["annual_tax"]) == D("11499.9965")
        assert D(body["net_annual"]) + D(body["annual_tax"]) == D("50000")

    async def test_negative_income(self, client, seeded_session):
        response = await client.post("/api/v1/tax/calculate", json={"annual_income": "-5"})

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_INPUT"

    async def test_non_numeric_income(self, client, seeded_session):
        response = await client.post("/api/v1/tax/calculate", json={"annual_income": "abc"})

        assert response.status_code == 422

    async def test_year_without_table(self, client, seeded_session):
        response = await client.post(
            "/api/v1/tax/calculate", json={"annual_income": "50000", "tax_year": 2024}
        )

        assert response.status_code == 404
        assert response.json()["code"] == "NO_BRACKETS"

    async def test_empty_database(self, client):
        response = await client.post("/api/v1/tax/calculate", json={"annual_income": "50000"})

        assert response.status_code == 404
        assert response.json()["code"] == "NO_BRACKETS"


class TestTaxBracketsEndpoint:
    async def test_list_brackets(self, client, seeded_session):
        response = await client.get("/api/v1/tax/brackets")

        assert response.status_code == 200
        body = response.json()
        assert body["tax_year"] == 2025
        assert [b["bracket_number"] for b in body["brackets"]] == [1, 2, 3, 4, 5, 6]
        assert body["active_count"] == 6
        assert D(body["highest_rate"]) == D("42")
        assert body["issues"] == []
        assert D(body["brackets"][5]["example_income"]) == D("300000.01")
        assert D(body["brackets"][5]["example_tax"]) == D("111500")

    async def test_unknown_year_is_empty(self, client, seeded_session):
        response = await client.get("/api/v1/tax/brackets", params={"tax_year": 2019})

        body = response.json()
        assert body["brackets"] == []
        assert body["highest_rate"] is None
        assert body["issues"] == []

    async def test_toggle_top_bracket(self, client, seeded_session):
        brackets = (await client.get("/api/v1/tax/brackets")).json()["brackets"]
        top_id = brackets[5]["id"]

        response = await client.post(f"/api/v1/tax/brackets/{top_id}/toggle-active")
        assert response.status_code == 200
        assert response.json()["is_active"] is False

        body = (await client.get("/api/v1/tax/brackets")).json()
        assert body["active_count"] == 5
        assert "No bracket without an upper limit" in body["issues"]

        active = (await client.get("/api/v1/tax/brackets", params={"active_only": True})).json()
        assert len(active["brackets"]) == 5

    async def test_toggle_unknown_bracket(self, client, seeded_session):
        response = await client.post(
            "/api/v1/tax/brackets/00000000-0000-0000-0000-000000000000/toggle-active"
        )

        assert response.status_code == 404
        assert response.json()["code"] == "BRACKET_NOT_FOUND"


class TestShiftEndpoints:
    async def test_list_shifts(self, client, session):
        session.add(
            Shift(
                shift_code="DAY",
                shift_name="Day Shift",
                start_time=time(8, 0),
                end_time=time(16, 30),
                break_duration_minutes=30,
            )
        )
        await session.commit()

        response = await client.get("/api/v1/shifts")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 1
        shift = body["items"][0]
        assert shift["shift_code"] == "DAY"
        assert D(str(shift["working_hours"])) == D("8.0")
        assert shift["days"] == ["Mon", "Tue", "Wed", "Thu", "Fri"]

    async def test_list_survives_shift_with_impossible_break(self, client, session):
        """A stored shift whose break outlasts it lists with unknown hours."""
        session.add_all(
            [
                Shift(
                    shift_code="DAY",
                    shift_name="Day Shift",
                    start_time=time(8, 0),
                    end_time=time(16, 0),
                    break_duration_minutes=30,
                ),
                Shift(
                    shift_code="SHORT",
                    shift_name="Short Shift",
                    start_time=time(8, 0),
                    end_time=time(9, 0),
                    break_duration_minutes=90,
                ),
            ]
        )
        await session.commit()

        response = await client.get("/api/v1/shifts")

        assert response.status_code == 200
        hours = {s["shift_code"]: s["working_hours"] for s in response.json()["items"]}
        assert D(str(hours["DAY"])) == D("7.5")
        assert hours["SHORT"] is None

    async def test_working_hours_preview(self, client):
        response = await client.post(
            "/api/v1/shifts/working-hours",
            json={"start_time": "22:00", "end_time": "06:00", "break_duration_minutes": 60},
        )

        assert response.status_code == 200
        assert D(str(response.json()["working_hours"])) == D("7.0")

    async def test_working_hours_break_longer_than_shift(self, client):
        response = await client.post(
            "/api/v1/shifts/working-hours",
            json={"start_time": "08:00", "end_time": "09:00", "break_duration_minutes": 90},
        )

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_INPUT"


class TestHealthEndpoints:
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"] == "healthy"

    async def test_ready_and_live(self, client):
        assert (await client.get("/ready")).json() == {"status": "ready"}
        assert (await client.get("/live")).json() == {"status": "alive"}
