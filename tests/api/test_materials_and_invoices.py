"""Material, inventory and invoice endpoints over the in-memory Firestore."""

from httpx import AsyncClient

from tests.conftest import register_and_login


async def _material(client: AsyncClient, headers, name: str = "Cartón", price: float = 500):
    response = await client.post(
        "/api/v1/materials",
        json={"name": name, "price": price, "code": "101"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def _purchase(material_id: str, weight: float) -> dict:
    return {
        "date": "2025-03-10T10:00:00Z",
        "payment_method": "efectivo",
        "items": [{"material_id": material_id, "weight": weight}],
        "supplier_name": "Proveedor ocasional",
    }


async def test_company_profile_missing_returns_404(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.get("/api/v1/company-profile", headers=auth_headers)
    assert response.status_code == 404


async def test_company_profile_round_trip(client: AsyncClient, profile_headers) -> None:
    response = await client.get("/api/v1/company-profile", headers=profile_headers)
    assert response.status_code == 200
    assert response.json()["company_name"] == "Reciclajes Andes"


async def test_material_starts_with_zero_stock(client: AsyncClient, auth_headers) -> None:
    material = await _material(client, auth_headers)
    assert material["stock"] == 0

    update = await client.patch(
        f"/api/v1/materials/{material['id']}", json={"price": 650}, headers=auth_headers
    )
    assert update.status_code == 200
    assert update.json()["price"] == 650
    assert update.json()["name"] == "Cartón"


async def test_unknown_material_returns_404(client: AsyncClient, auth_headers) -> None:
    response = await client.get("/api/v1/materials/nope", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_purchase_requires_company_profile(
    client: AsyncClient, auth_headers
) -> None:
    material = await _material(client, auth_headers)
    response = await client.post(
        "/api/v1/purchases", json=_purchase(material["id"], 10), headers=auth_headers
    )
    assert response.status_code == 409
    assert response.json()["error"] == "PROFILE_REQUIRED"


async def test_purchase_then_sale_moves_inventory(
    client: AsyncClient, profile_headers
) -> None:
    material = await _material(client, profile_headers)
    purchase = await client.post(
        "/api/v1/purchases", json=_purchase(material["id"], 40), headers=profile_headers
    )
    assert purchase.status_code == 201, purchase.text
    assert purchase.json()["invoice_number"] == 1
    assert purchase.json()["total"] == 20000

    sale = await client.post(
        "/api/v1/sales",
        json={
            "date": "2025-03-11T10:00:00Z",
            "payment_method": "cheque",
            "items": [{"material_id": material["id"], "weight": 15, "unit_price": 800}],
        },
        headers=profile_headers,
    )
    assert sale.status_code == 201, sale.text
    assert sale.json()["total"] == 12000

    inventory = await client.get("/api/v1/inventory", headers=profile_headers)
    assert inventory.json()[0]["stock"] == 25

    purchases = await client.get("/api/v1/purchases", headers=profile_headers)
    assert [p["invoice_number"] for p in purchases.json()] == [1]


async def test_sale_over_stock_returns_409(client: AsyncClient, profile_headers) -> None:
    material = await _material(client, profile_headers)
    response = await client.post(
        "/api/v1/sales",
        json={
            "date": "2025-03-11T10:00:00Z",
            "payment_method": "efectivo",
            "items": [{"material_id": material["id"], "weight": 1}],
        },
        headers=profile_headers,
    )
    assert response.status_code == 409
    assert response.json()["error"] == "INSUFFICIENT_STOCK"


async def test_purchase_with_empty_items_returns_422(
    client: AsyncClient, profile_headers
) -> None:
    body = _purchase("m1", 1)
    body["items"] = []
    response = await client.post("/api/v1/purchases", json=body, headers=profile_headers)
    assert response.status_code == 422


async def test_tenants_do_not_see_each_other(client: AsyncClient, auth_headers) -> None:
    material = await _material(client, auth_headers)
    other = await register_and_login(client, "other@example.com")

    listing = await client.get("/api/v1/materials", headers=other)
    single = await client.get(f"/api/v1/materials/{material['id']}", headers=other)

    assert listing.json() == []
    assert single.status_code == 404
