from unittest.mock import patch

from storeadmin.db.models.stores import Status
from storeadmin.db.queries import DataAccessError

from conftest import add_store, session_headers

NEW_STORE = {"name": "Shop A", "address": "1 Main St", "phone": "555-0100", "email": "a@shop.test"}


class TestListStores:

    def test_public_and_active_only(self, client, db):
        add_store(db, "Open")
        add_store(db, "Closed", status=Status.INACTIVE)

        response = client.get("/api/stores")

        assert response.status_code == 200
        body = response.json()
        assert [s["name"] for s in body] == ["Open"]
        assert body[0]["status"] == "active"
        assert "createdAt" in body[0]

    def test_failure_is_500(self, client):
        with patch("storeadmin.api.routes.stores.list_active_stores", side_effect=DataAccessError("down")):
            response = client.get("/api/stores")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch stores"}


class TestCreateStore:

    def test_creates_active_store(self, client):
        response = client.post("/api/stores", json=NEW_STORE, headers=session_headers())

        assert response.status_code == 200
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["status"] == "active"
        for field, value in NEW_STORE.items():
            assert body[field] == value

        listed = client.get("/api/stores").json()
        assert body["id"] in [s["id"] for s in listed]

    def test_status_in_body_is_ignored(self, client):
        payload = dict(NEW_STORE, status="archived")
        response = client.post("/api/stores", json=payload, headers=session_headers())
        assert response.json()["status"] == "active"

    def test_session_cookie_is_accepted(self, client):
        headers = session_headers()
        token = headers["Authorization"].split(" ", 1)[1]
        response = client.post("/api/stores", json=NEW_STORE, headers={"Cookie": f"session_token={token}"})
        assert response.status_code == 200

    def test_unauthenticated_is_401(self, client):
        response = client.post("/api/stores", json=NEW_STORE)

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_invalid_token_is_401(self, client):
        response = client.post("/api/stores", json=NEW_STORE, headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    def test_missing_field_is_422(self, client):
        payload = {k: v for k, v in NEW_STORE.items() if k != "phone"}
        response = client.post("/api/stores", json=payload, headers=session_headers())
        assert response.status_code == 422

    def test_failure_is_500(self, client):
        with patch("storeadmin.api.routes.stores.create_store", side_effect=DataAccessError("down")):
            response = client.post("/api/stores", json=NEW_STORE, headers=session_headers())

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create store"}
