"""Cash-box and report endpoints."""

from datetime import timedelta
from io import BytesIO

from httpx import AsyncClient
from openpyxl import load_workbook

from app.shared.utils.datetime import utc_now


async def test_today_is_null_before_opening(client: AsyncClient, auth_headers) -> None:
    response = await client.get("/api/v1/cash-box/today", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() is None


async def test_cash_box_day(client: AsyncClient, profile_headers) -> None:
    opened = await client.post(
        "/api/v1/cash-box/open", json={"opening_balance": 100000}, headers=profile_headers
    )
    assert opened.status_code == 201, opened.text
    assert opened.json()["opened_by"]["email"] == "owner@example.com"

    again = await client.post(
        "/api/v1/cash-box/open", json={"opening_balance": 1}, headers=profile_headers
    )
    assert again.status_code == 409
    assert again.json()["error"] == "CASH_BOX_STATE"

    material = (
        await client.post(
            "/api/v1/materials", json={"name": "Chatarra", "price": 1000}, headers=profile_headers
        )
    ).json()
    await client.post(
        "/api/v1/purchases",
        json={
            "date": utc_now().isoformat(),
            "payment_method": "efectivo",
            "items": [{"material_id": material["id"], "weight": 10}],
        },
        headers=profile_headers,
    )
    await client.post(
        "/api/v1/cash-box/incomes", json={"amount": 5000}, headers=profile_headers
    )
    await client.post(
        "/api/v1/cash-box/expenses",
        json={"amount": 2000, "category": "peajes"},
        headers=profile_headers,
    )

    today = (await client.get("/api/v1/cash-box/today", headers=profile_headers)).json()
    assert today["cash_purchases_total"] == 10000
    assert today["expected_balance"] == 93000

    closed = await client.post(
        "/api/v1/cash-box/close", json={"actual_balance": 93500}, headers=profile_headers
    )
    assert closed.status_code == 200
    assert closed.json()["status"] == "Cerrada"
    assert closed.json()["difference"] == 500

    day = utc_now().date()
    history = await client.get(
        "/api/v1/cash-box/history",
        params={"start": (day - timedelta(days=7)).isoformat(), "end": day.isoformat()},
        headers=profile_headers,
    )
    assert [b["id"] for b in history.json()] == [day.isoformat()]


async def test_expense_with_unknown_category_returns_422(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.post(
        "/api/v1/cash-box/expenses",
        json={"amount": 10, "category": "comida"},
        headers=auth_headers,
    )
    assert response.status_code == 422


async def test_tonnage_report(client: AsyncClient, profile_headers) -> None:
    material = (
        await client.post(
            "/api/v1/materials", json={"name": "Vidrio", "price": 200}, headers=profile_headers
        )
    ).json()
    await client.post(
        "/api/v1/purchases",
        json={
            "date": utc_now().isoformat(),
            "payment_method": "nequi",
            "items": [{"material_id": material["id"], "weight": 75}],
        },
        headers=profile_headers,
    )

    response = await client.get(
        "/api/v1/reports/tonnage", params={"period": "week"}, headers=profile_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["period"] == "week"
    assert data["total_kg"] == 75
    assert data["materials"][0]["material_name"] == "Vidrio"


async def test_mass_balance_requires_dates(client: AsyncClient, auth_headers) -> None:
    response = await client.get("/api/v1/reports/mass-balance", headers=auth_headers)
    assert response.status_code == 422


async def test_mass_balance_inverted_range_returns_400(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.get(
        "/api/v1/reports/mass-balance",
        params={"start": "2025-03-31", "end": "2025-03-01"},
        headers=auth_headers,
    )
    assert response.status_code == 400


async def test_inventory_report_totals_stock(client: AsyncClient, profile_headers) -> None:
    material = (
        await client.post(
            "/api/v1/materials", json={"name": "Cartón", "price": 500}, headers=profile_headers
        )
    ).json()
    await client.post(
        "/api/v1/purchases",
        json={
            "date": utc_now().isoformat(),
            "payment_method": "efectivo",
            "items": [{"material_id": material["id"], "weight": 42.5}],
        },
        headers=profile_headers,
    )

    response = await client.get("/api/v1/reports/inventory", headers=profile_headers)

    assert response.status_code == 200
    assert response.json()["total_kg"] == 42.5
    assert response.json()["materials"][0]["name"] == "Cartón"


async def test_certificate_for_unknown_source_returns_404(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.get(
        "/api/v1/reports/certificate",
        params={"source_id": "missing", "year": 2025, "month": 3},
        headers=auth_headers,
    )
    assert response.status_code == 404


async def test_certificate_month_out_of_range_returns_422(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.get(
        "/api/v1/reports/certificate",
        params={"source_id": "any", "year": 2025, "month": 0},
        headers=auth_headers,
    )
    assert response.status_code == 422


async def test_export_downloads_xlsx(client: AsyncClient, auth_headers) -> None:
    await client.post(
        "/api/v1/materials", json={"name": "PET", "price": 900}, headers=auth_headers
    )

    response = await client.get("/api/v1/reports/export/materiales", headers=auth_headers)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert 'filename="materiales.xlsx"' in response.headers["content-disposition"]
    rows = list(load_workbook(BytesIO(response.content))["Datos"].values)
    assert rows[1][0] == "PET"


async def test_export_unknown_dataset_returns_422(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.get("/api/v1/reports/export/nomina", headers=auth_headers)
    assert response.status_code == 422
