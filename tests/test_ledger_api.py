"""Sales, default sales, invoices and expenses endpoint tests."""

from decimal import Decimal

from sqlalchemy import func, select

from app.models import Expense


def _setup(client, api_user, email: str = "owner@example.com", name: str = "Bistro"):
    _, headers = api_user(email)
    restaurant_id = client.post("/api/v1/restaurants", json={"name": name}, headers=headers).json()["restaurant"]["id"]
    detail = client.get(f"/api/v1/restaurants/{restaurant_id}", headers=headers).json()["restaurant"]
    return headers, restaurant_id, detail


def _category_id(detail, name: str) -> int:
    return next(row["id"] for row in detail["categories"] if row["name"] == name)


def _create_invoice(client, headers, restaurant_id, number: str, date: str, total: str = "100.00") -> int:
    response = client.post(
        "/api/v1/invoices",
        json={"restaurantId": restaurant_id, "date": date, "invoice": number, "vendor": "Supply Co", "total": total},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["invoice"]["id"]


def test_sales_are_recorded_and_queried_by_date(client, api_user) -> None:
    headers, restaurant_id, detail = _setup(client, api_user)
    allocation_id = detail["mealPeriodCategories"][0]["id"]

    created = client.post(
        "/api/v1/sales",
        json={
            "restaurantId": restaurant_id,
            "mealPeriodCatId": allocation_id,
            "date": "2024-05-03",
            "expectedSales": 1200,
            "actualSales": 1100.5,
        },
        headers=headers,
    )
    assert created.status_code == 201
    sale_id = created.json()["sale"]["id"]

    duplicate = client.post(
        "/api/v1/sales",
        json={"restaurantId": restaurant_id, "mealPeriodCatId": allocation_id, "date": "2024-05-03"},
        headers=headers,
    )
    assert duplicate.status_code == 400

    on_date = client.get(f"/api/v1/sales/restaurants/{restaurant_id}/date/2024-05-03", headers=headers)
    assert [row["id"] for row in on_date.json()["sales"]] == [sale_id]
    other_date = client.get(f"/api/v1/sales/restaurants/{restaurant_id}/date/2024-05-04", headers=headers)
    assert other_date.json()["sales"] == []

    updated = client.patch(f"/api/v1/sales/{sale_id}", json={"actualSales": 1300}, headers=headers)
    assert Decimal(updated.json()["sale"]["actualSales"]) == Decimal("1300")
    assert Decimal(updated.json()["sale"]["expectedSales"]) == Decimal("1200")


def test_sale_for_foreign_allocation_is_rejected(client, api_user) -> None:
    headers, restaurant_id, _ = _setup(client, api_user)
    other_id = client.post("/api/v1/restaurants", json={"name": "Other"}, headers=headers).json()["restaurant"]["id"]
    other = client.get(f"/api/v1/restaurants/{other_id}", headers=headers).json()["restaurant"]

    response = client.post(
        "/api/v1/sales",
        json={
            "restaurantId": restaurant_id,
            "mealPeriodCatId": other["mealPeriodCategories"][0]["id"],
            "date": "2024-05-03",
        },
        headers=headers,
    )

    assert response.status_code == 400


def test_default_sales_member_creates_admin_updates(client, api_user) -> None:
    headers, restaurant_id, detail = _setup(client, api_user)
    staff_id, staff_headers = api_user("staff@example.com")
    client.post(f"/api/v1/restaurants/{restaurant_id}/users/{staff_id}", headers=headers)
    lunch_id = next(row["id"] for row in detail["mealPeriods"] if row["name"] == "Lunch")

    created = client.post(
        "/api/v1/defaultsales",
        json={"restaurantId": restaurant_id, "mealPeriodId": lunch_id, "dayId": 1, "total": 2500},
        headers=staff_headers,
    )
    assert created.status_code == 201
    default_sale_id = created.json()["defaultSale"]["id"]

    duplicate = client.post(
        "/api/v1/defaultsales",
        json={"restaurantId": restaurant_id, "mealPeriodId": lunch_id, "dayId": 1, "total": 100},
        headers=staff_headers,
    )
    assert duplicate.status_code == 400

    denied = client.patch(f"/api/v1/defaultsales/{default_sale_id}", json={"total": 1}, headers=staff_headers)
    assert denied.status_code == 401

    allowed = client.patch(f"/api/v1/defaultsales/{default_sale_id}", json={"total": 3000}, headers=headers)
    assert allowed.status_code == 200
    assert Decimal(allowed.json()["defaultSale"]["total"]) == Decimal("3000")


def test_default_sale_day_must_be_a_weekday(client, api_user) -> None:
    headers, restaurant_id, detail = _setup(client, api_user)
    lunch_id = next(row["id"] for row in detail["mealPeriods"] if row["name"] == "Lunch")

    response = client.post(
        "/api/v1/defaultsales",
        json={"restaurantId": restaurant_id, "mealPeriodId": lunch_id, "dayId": 9, "total": 10},
        headers=headers,
    )

    assert response.status_code == 400


def test_invoices_in_inclusive_date_range(client, api_user) -> None:
    headers, restaurant_id, _ = _setup(client, api_user)
    march = _create_invoice(client, headers, restaurant_id, "A-1", "2024-03-01")
    april = _create_invoice(client, headers, restaurant_id, "A-2", "2024-04-30")
    _create_invoice(client, headers, restaurant_id, "A-3", "2024-05-01")

    response = client.get(
        f"/api/v1/invoices/restaurants/{restaurant_id}/startdate/2024-03-01/enddate/2024-04-30",
        headers=headers,
    )

    assert response.status_code == 200
    assert [row["id"] for row in response.json()["invoices"]] == [march, april]

    reversed_range = client.get(
        f"/api/v1/invoices/restaurants/{restaurant_id}/startdate/2024-05-01/enddate/2024-03-01",
        headers=headers,
    )
    assert reversed_range.status_code == 400


def test_duplicate_invoice_number_per_vendor_is_rejected(client, api_user) -> None:
    headers, restaurant_id, _ = _setup(client, api_user)
    _create_invoice(client, headers, restaurant_id, "A-1", "2024-03-01")

    response = client.post(
        "/api/v1/invoices",
        json={"restaurantId": restaurant_id, "date": "2024-03-02", "invoice": "A-1", "vendor": "Supply Co", "total": 5},
        headers=headers,
    )

    assert response.status_code == 400


def test_expense_lifecycle_and_update_recheck(client, api_user, session_local) -> None:
    headers, restaurant_id, detail = _setup(client, api_user)
    other_id = client.post("/api/v1/restaurants", json={"name": "Other"}, headers=headers).json()["restaurant"]["id"]
    other = client.get(f"/api/v1/restaurants/{other_id}", headers=headers).json()["restaurant"]
    invoice_id = _create_invoice(client, headers, restaurant_id, "E-1", "2024-06-10", total="250.00")

    created = client.post(
        "/api/v1/expenses",
        json={
            "restaurantId": restaurant_id,
            "categoryId": _category_id(detail, "Food"),
            "invoiceId": invoice_id,
            "amount": 250,
        },
        headers=headers,
    )
    assert created.status_code == 201
    expense_id = created.json()["expense"]["id"]

    expense = client.get(f"/api/v1/expenses/{expense_id}", headers=headers).json()["expense"]
    assert expense["invoice"]["invoice"] == "E-1"

    moved = client.patch(
        f"/api/v1/expenses/{expense_id}",
        json={"categoryId": _category_id(detail, "Wine")},
        headers=headers,
    )
    assert moved.status_code == 200

    smuggled = client.patch(
        f"/api/v1/expenses/{expense_id}",
        json={"categoryId": _category_id(other, "Wine")},
        headers=headers,
    )
    assert smuggled.status_code == 400
    unchanged = client.get(f"/api/v1/expenses/{expense_id}", headers=headers).json()["expense"]
    assert unchanged["categoryId"] == _category_id(detail, "Wine")

    in_range = client.get(
        f"/api/v1/expenses/restaurants/{restaurant_id}/startdate/2024-06-01/enddate/2024-06-30",
        headers=headers,
    )
    assert [row["id"] for row in in_range.json()["expenses"]] == [expense_id]

    invoice = client.get(f"/api/v1/invoices/{invoice_id}", headers=headers).json()["invoice"]
    assert invoice["restaurantName"] == "Bistro"
    assert [row["id"] for row in invoice["expenses"]] == [expense_id]

    deleted = client.delete(f"/api/v1/invoices/{invoice_id}", headers=headers)
    assert deleted.status_code == 200
    with session_local() as db:
        assert db.scalar(select(func.count()).select_from(Expense)) == 0


def test_expense_with_foreign_category_is_rejected(client, api_user) -> None:
    headers, restaurant_id, _ = _setup(client, api_user)
    other_id = client.post("/api/v1/restaurants", json={"name": "Other"}, headers=headers).json()["restaurant"]["id"]
    other = client.get(f"/api/v1/restaurants/{other_id}", headers=headers).json()["restaurant"]
    invoice_id = _create_invoice(client, headers, restaurant_id, "E-2", "2024-06-10")

    response = client.post(
        "/api/v1/expenses",
        json={
            "restaurantId": restaurant_id,
            "categoryId": _category_id(other, "Food"),
            "invoiceId": invoice_id,
            "amount": 10,
        },
        headers=headers,
    )

    assert response.status_code == 400


def test_outsider_cannot_touch_ledger(client, api_user) -> None:
    headers, restaurant_id, _ = _setup(client, api_user)
    _, outsider_headers = api_user("outsider@example.com")
    invoice_id = _create_invoice(client, headers, restaurant_id, "X-1", "2024-01-01")

    assert client.get(f"/api/v1/invoices/{invoice_id}", headers=outsider_headers).status_code == 401
    assert client.delete(f"/api/v1/invoices/{invoice_id}", headers=outsider_headers).status_code == 401
    assert client.get(f"/api/v1/invoices/restaurants/{restaurant_id}", headers=outsider_headers).status_code == 401


def test_money_beyond_column_precision_is_bad_request(client, api_user, session_local) -> None:
    headers, restaurant_id, detail = _setup(client, api_user)

    invoice = client.post(
        "/api/v1/invoices",
        json={"restaurantId": restaurant_id, "date": "2024-03-01", "invoice": "BIG", "vendor": "Supply Co", "total": "123456789.00"},
        headers=headers,
    )
    assert invoice.status_code == 400
    assert invoice.json()["error"]["status"] == 400

    invoice_id = _create_invoice(client, headers, restaurant_id, "A-1", "2024-03-01")
    expense = client.post(
        "/api/v1/expenses",
        json={
            "restaurantId": restaurant_id,
            "categoryId": _category_id(detail, "Food"),
            "invoiceId": invoice_id,
            "amount": "10.005",
        },
        headers=headers,
    )
    assert expense.status_code == 400
    with session_local() as db:
        assert db.scalar(select(func.count()).select_from(Expense)) == 0
