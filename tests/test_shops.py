"""Shop and service API tests."""

import pytest

from naai.models.shop import Shop


def test_create_shop(client, barber_headers, shop_payload):
    """Test creating a shop with nested services."""
    response = client.post("/api/shops", headers=barber_headers, json=shop_payload)
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Shop created successfully"

    shop = data["shop"]
    assert shop["name"] == "Fade Factory"
    assert shop["zipCode"] == "62701"
    assert shop["barberId"] == barber_headers.user_id
    assert shop["isActive"] is True
    assert shop["rating"] == 0
    assert shop["barber"] == {
        "id": barber_headers.user_id,
        "name": "Test Barber",
        "email": barber_headers.email,
    }
    assert [service["name"] for service in shop["services"]] == ["Haircut", "Beard trim"]
    assert shop["services"][1]["description"] == "Shape and line-up"
    assert all(service["shopId"] == shop["id"] for service in shop["services"])


def test_create_shop_accepts_snake_case(client, barber_headers):
    response = client.post(
        "/api/shops",
        headers=barber_headers,
        json={"name": "Snake", "address": "1 Road", "city": "Austin", "zip_code": "73301"},
    )
    assert response.status_code == 201
    assert response.json()["shop"]["zipCode"] == "73301"
    assert response.json()["shop"]["services"] == []


def test_create_shop_requires_token(client, shop_payload):
    response = client.post("/api/shops", json=shop_payload)
    assert response.status_code == 401
    assert response.json() == {"error": "Access token required"}


def test_customer_cannot_create_shop(client, auth_headers, shop_payload):
    """A customer is rejected whatever the payload."""
    response = client.post("/api/shops", headers=auth_headers, json=shop_payload)
    assert response.status_code == 403
    assert response.json() == {"error": "Only barbers can create shops"}


def test_barber_cannot_create_second_shop(client, barber_headers, shop, shop_payload):
    response = client.post("/api/shops", headers=barber_headers, json=shop_payload)
    assert response.status_code == 400
    assert response.json() == {"error": "You already have a shop. Use update endpoint."}


def test_create_shop_validation(client, barber_headers):
    response = client.post(
        "/api/shops",
        headers=barber_headers,
        json={
            "name": "",
            "city": "Springfield",
            "services": [{"name": "Cut", "price": -1, "duration": 0}],
        },
    )
    assert response.status_code == 400
    paths = {error["path"] for error in response.json()["errors"]}
    assert paths == {"name", "address", "services.0.price", "services.0.duration"}


def test_invalid_nested_service_writes_nothing(client, db, barber_headers, shop_payload):
    """An invalid nested service means nothing is written at all."""
    shop_payload["services"].append({"name": "Broken", "price": 10})
    response = client.post("/api/shops", headers=barber_headers, json=shop_payload)
    assert response.status_code == 400
    assert db.query(Shop).count() == 0


def test_get_shop(client, shop):
    response = client.get(f"/api/shops/{shop['id']}")
    assert response.status_code == 200
    data = response.json()["shop"]
    assert data["id"] == shop["id"]
    assert len(data["services"]) == 2
    assert data["barber"]["name"] == "Test Barber"


def test_get_shop_not_found(client):
    response = client.get("/api/shops/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Shop not found"}


def test_get_shop_bad_id(client):
    response = client.get("/api/shops/abc")
    assert response.status_code == 400
    assert response.json()["errors"][0]["location"] == "path"


def test_update_shop(client, barber_headers, shop):
    response = client.put(
        f"/api/shops/{shop['id']}",
        headers=barber_headers,
        json={"name": "Fade Factory II", "imageUrl": "https://img.example.com/1.png"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Shop updated successfully"
    assert data["shop"]["name"] == "Fade Factory II"
    assert data["shop"]["imageUrl"] == "https://img.example.com/1.png"
    # Fields not sent are left alone
    assert data["shop"]["city"] == "Springfield"
    assert len(data["shop"]["services"]) == 2


def test_update_shop_rejects_null_required_field(client, barber_headers, shop):
    response = client.put(f"/api/shops/{shop['id']}", headers=barber_headers, json={"city": None})
    assert response.status_code == 400


def test_update_shop_not_owner(client, other_barber_headers, shop):
    response = client.put(
        f"/api/shops/{shop['id']}", headers=other_barber_headers, json={"name": "Mine now"}
    )
    assert response.status_code == 403
    assert response.json() == {"error": "You can only update your own shop"}


def test_update_shop_customer_not_owner(client, auth_headers, shop):
    response = client.put(f"/api/shops/{shop['id']}", headers=auth_headers, json={"name": "x"})
    assert response.status_code == 403


def test_update_missing_shop(client, barber_headers):
    response = client.put("/api/shops/999", headers=barber_headers, json={"name": "Ghost"})
    assert response.status_code == 404


def test_update_shop_invalid_token(client, shop):
    response = client.put(
        f"/api/shops/{shop['id']}",
        headers={"Authorization": "Bearer garbage"},
        json={"name": "x"},
    )
    assert response.status_code == 403
    assert response.json() == {"error": "Invalid or expired token"}


def test_add_service(client, barber_headers, shop):
    response = client.post(
        f"/api/shops/{shop['id']}/services",
        headers=barber_headers,
        json={"name": "Hot towel shave", "description": "Straight razor", "price": 30, "duration": 45},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Service added successfully"
    assert data["service"]["shopId"] == shop["id"]
    assert data["service"]["price"] == 30

    shop_response = client.get(f"/api/shops/{shop['id']}")
    assert len(shop_response.json()["shop"]["services"]) == 3


def test_add_service_not_owner(client, other_barber_headers, shop):
    response = client.post(
        f"/api/shops/{shop['id']}/services",
        headers=other_barber_headers,
        json={"name": "Sneaky", "price": 1, "duration": 5},
    )
    assert response.status_code == 403
    assert response.json() == {"error": "You can only add services to your own shop"}


def test_add_service_missing_shop(client, barber_headers):
    response = client.post(
        "/api/shops/999/services",
        headers=barber_headers,
        json={"name": "Cut", "price": 1, "duration": 5},
    )
    assert response.status_code == 404


def test_barber_shop_before_and_after_create(client, barber_headers, shop_payload):
    response = client.get("/api/barber/shop", headers=barber_headers)
    assert response.status_code == 200
    assert response.json() == {"shop": None}

    client.post("/api/shops", headers=barber_headers, json=shop_payload)

    response = client.get("/api/barber/shop", headers=barber_headers)
    assert response.status_code == 200
    assert response.json()["shop"]["name"] == "Fade Factory"


def test_barber_shop_customer_forbidden(client, auth_headers):
    response = client.get("/api/barber/shop", headers=auth_headers)
    assert response.status_code == 403
    assert response.json() == {"error": "Only barbers can access this endpoint"}


class TestListShops:
    """Tests for browsing shops."""

    @pytest.fixture
    def shops(self, client, db, make_account):
        """Three active shops in different cities plus one inactive."""
        specs = [
            ("north@example.com", "North Cuts", "Springfield", "1 Elm St", 4.5, True),
            ("south@example.com", "South Fades", "springdale", "2 Oak Ave", 4.9, True),
            ("east@example.com", "East Shaves", "Boston", "3 Spring Rd", 3.0, True),
            ("closed@example.com", "Closed Shop", "Springfield", "4 Pine St", 5.0, False),
        ]
        for email, name, city, address, rating, active in specs:
            headers = make_account(email, role="barber")
            response = client.post(
                "/api/shops",
                headers=headers,
                json={"name": name, "address": address, "city": city, "description": "Cuts"},
            )
            shop = db.get(Shop, response.json()["shop"]["id"])
            shop.rating = rating
            shop.is_active = active
        db.commit()

    def names(self, response):
        assert response.status_code == 200
        return [shop["name"] for shop in response.json()["shops"]]

    def test_lists_active_shops_by_rating(self, client, shops):
        response = client.get("/api/shops")
        assert self.names(response) == ["South Fades", "North Cuts", "East Shaves"]

    def test_city_filter_is_case_insensitive_substring(self, client, shops):
        response = client.get("/api/shops", params={"city": "spring"})
        assert self.names(response) == ["South Fades", "North Cuts"]

    def test_search_matches_name_description_or_address(self, client, shops):
        assert self.names(client.get("/api/shops", params={"search": "fades"})) == ["South Fades"]
        assert self.names(client.get("/api/shops", params={"search": "spring rd"})) == [
            "East Shaves"
        ]
        assert len(self.names(client.get("/api/shops", params={"search": "cuts"}))) == 3

    def test_city_and_search_combine(self, client, shops):
        response = client.get("/api/shops", params={"city": "spring", "search": "oak"})
        assert self.names(response) == ["South Fades"]

    def test_wildcards_are_literal(self, client, shops):
        assert self.names(client.get("/api/shops", params={"search": "%"})) == []

    def test_listing_includes_service_summary_and_owner(self, client, barber_headers, shop):
        listed = client.get("/api/shops").json()["shops"][0]
        assert listed["barber"]["id"] == barber_headers.user_id
        assert set(listed["services"][0]) == {"id", "name", "price", "duration"}

    def test_inactive_shop_still_fetchable_by_id(self, client, db, shops):
        closed = db.query(Shop).filter(Shop.name == "Closed Shop").one()
        response = client.get(f"/api/shops/{closed.id}")
        assert response.status_code == 200
        assert response.json()["shop"]["isActive"] is False

    def test_owner_can_deactivate(self, client, barber_headers, shop):
        client.put(f"/api/shops/{shop['id']}", headers=barber_headers, json={"isActive": False})
        assert client.get("/api/shops").json()["shops"] == []
