"""Category group and category endpoint tests."""

from decimal import Decimal

from sqlalchemy import func, select

from app.models import Category, CategoryGroup


def _restaurant_with_taxonomy(client, headers, name: str = "Bistro") -> tuple[int, dict[str, dict]]:
    restaurant_id = client.post("/api/v1/restaurants", json={"name": name}, headers=headers).json()["restaurant"]["id"]
    categories = client.get(f"/api/v1/categories/restaurants/{restaurant_id}", headers=headers).json()["categories"]
    return restaurant_id, {category["name"]: category for category in categories}


def test_admin_creates_group_and_category(client, api_user) -> None:
    _, headers = api_user("owner@example.com")
    restaurant_id, _ = _restaurant_with_taxonomy(client, headers)

    group = client.post(
        "/api/v1/catgroups",
        json={"restaurantId": restaurant_id, "name": "Catering"},
        headers=headers,
    )
    assert group.status_code == 201
    group_id = group.json()["catGroup"]["id"]

    category = client.post(
        "/api/v1/categories",
        json={"restaurantId": restaurant_id, "name": "Events", "catGroupId": group_id, "cogsPercent": 0.4},
        headers=headers,
    )
    assert category.status_code == 201
    category_id = category.json()["category"]["id"]

    detail = client.get(f"/api/v1/categories/{category_id}", headers=headers).json()["category"]
    assert detail["restaurantName"] == "Bistro"
    assert detail["catGroupName"] == "Catering"
    assert Decimal(detail["cogsPercent"]) == Decimal("0.4")

    group_detail = client.get(f"/api/v1/catgroups/{group_id}", headers=headers).json()["catGroup"]
    assert [row["name"] for row in group_detail["categories"]] == ["Events"]


def test_group_from_another_restaurant_is_rejected(client, api_user, session_local) -> None:
    _, headers = api_user("owner@example.com")
    first_id, _ = _restaurant_with_taxonomy(client, headers, "First")
    _, second_categories = _restaurant_with_taxonomy(client, headers, "Second")
    foreign_group_id = second_categories["Food"]["catGroupId"]

    response = client.post(
        "/api/v1/categories",
        json={"restaurantId": first_id, "name": "Smuggled", "catGroupId": foreign_group_id},
        headers=headers,
    )

    assert response.status_code == 400
    with session_local() as db:
        assert db.scalar(select(func.count()).select_from(Category).where(Category.name == "Smuggled")) == 0


def test_duplicate_category_name_is_rejected(client, api_user) -> None:
    _, headers = api_user("owner@example.com")
    restaurant_id, _ = _restaurant_with_taxonomy(client, headers)

    response = client.post(
        "/api/v1/categories",
        json={"restaurantId": restaurant_id, "name": "Food", "cogsPercent": 0.3},
        headers=headers,
    )

    assert response.status_code == 400


def test_cogs_percent_must_be_a_fraction(client, api_user) -> None:
    _, headers = api_user("owner@example.com")
    restaurant_id, _ = _restaurant_with_taxonomy(client, headers)

    response = client.post(
        "/api/v1/categories",
        json={"restaurantId": restaurant_id, "name": "Odd", "cogsPercent": 1.5},
        headers=headers,
    )

    assert response.status_code == 400


def test_member_cannot_create_categories(client, api_user) -> None:
    _, owner_headers = api_user("owner@example.com")
    staff_id, staff_headers = api_user("staff@example.com")
    restaurant_id, _ = _restaurant_with_taxonomy(client, owner_headers)
    client.post(f"/api/v1/restaurants/{restaurant_id}/users/{staff_id}", headers=owner_headers)

    response = client.post(
        "/api/v1/categories",
        json={"restaurantId": restaurant_id, "name": "Snacks"},
        headers=staff_headers,
    )

    assert response.status_code == 401
    listing = client.get(f"/api/v1/categories/restaurants/{restaurant_id}", headers=staff_headers)
    assert listing.status_code == 200


def test_change_and_detach_category_group(client, api_user) -> None:
    _, headers = api_user("owner@example.com")
    _, categories = _restaurant_with_taxonomy(client, headers)
    beer = categories["Beer"]
    food_group_id = categories["Food"]["catGroupId"]

    moved = client.patch(f"/api/v1/categories/{beer['id']}/group/{food_group_id}", headers=headers)
    assert moved.status_code == 200
    assert moved.json()["category"]["catGroupId"] == food_group_id

    detached = client.patch(f"/api/v1/categories/{beer['id']}/group/0", headers=headers)
    assert detached.status_code == 200
    assert detached.json()["category"]["catGroupId"] is None


def test_category_update_rechecks_group(client, api_user) -> None:
    _, headers = api_user("owner@example.com")
    _, categories = _restaurant_with_taxonomy(client, headers, "First")
    _, other_categories = _restaurant_with_taxonomy(client, headers, "Second")

    response = client.patch(
        f"/api/v1/categories/{categories['Wine']['id']}",
        json={"catGroupId": other_categories["Wine"]["catGroupId"]},
        headers=headers,
    )

    assert response.status_code == 400


def test_deleting_group_detaches_its_categories(client, api_user) -> None:
    _, headers = api_user("owner@example.com")
    _, categories = _restaurant_with_taxonomy(client, headers)
    retail = categories["Retail"]

    response = client.delete(f"/api/v1/catgroups/{retail['catGroupId']}", headers=headers)

    assert response.status_code == 200
    after = client.get(f"/api/v1/categories/{retail['id']}", headers=headers).json()["category"]
    assert after["catGroupId"] is None
    assert after["catGroupName"] is None


def test_deleting_category_removes_its_allocations(client, api_user) -> None:
    _, headers = api_user("owner@example.com")
    restaurant_id, categories = _restaurant_with_taxonomy(client, headers)

    response = client.delete(f"/api/v1/categories/{categories['Beer']['id']}", headers=headers)

    assert response.status_code == 200
    detail = client.get(f"/api/v1/restaurants/{restaurant_id}", headers=headers).json()["restaurant"]
    assert len(detail["mealPeriodCategories"]) == 12


def test_duplicate_cat_group_name_is_rejected(client, api_user, session_local) -> None:
    _, headers = api_user("owner@example.com")
    restaurant_id, categories = _restaurant_with_taxonomy(client, headers)

    created = client.post("/api/v1/catgroups", json={"restaurantId": restaurant_id, "name": "Retail"}, headers=headers)
    assert created.status_code == 400
    assert created.json()["error"]["message"] == f"Restaurant {restaurant_id} already has a category group named Retail."

    renamed = client.patch(
        f"/api/v1/catgroups/{categories['Food']['catGroupId']}",
        json={"name": "Retail"},
        headers=headers,
    )
    assert renamed.status_code == 400

    with session_local() as db:
        count = db.scalar(
            select(func.count()).select_from(CategoryGroup).where(CategoryGroup.restaurant_id == restaurant_id)
        )
        assert count == 3
