import uuid
from unittest.mock import patch

from storeadmin.db.models.users import Users
from storeadmin.schemas.users import UserResponse

from conftest import add_store, add_user, session_headers


class TestAssignStore:

    def test_assigns_signed_in_user(self, client, db):
        store = add_store(db)
        user = add_user(db)

        response = client.put(
            "/api/user/store",
            json={"storeId": store.id},
            headers=session_headers(user_id=str(user.id), email=user.email),
        )

        assert response.status_code == 200
        assert response.json() == {"success": True}
        db.expire_all()
        saved = UserResponse.model_validate(db.get(Users, user.id))
        assert saved.store_id == store.id
        assert saved.model_dump(by_alias=True, mode="json")["storeId"] == store.id

    def test_unknown_user_is_500(self, client, db):
        store = add_store(db)

        response = client.put(
            "/api/user/store",
            json={"storeId": store.id},
            headers=session_headers(user_id=str(uuid.uuid4())),
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to update store"}

    def test_session_without_user_id_is_401(self, client, db):
        store = add_store(db)

        response = client.put("/api/user/store", json={"storeId": store.id}, headers=session_headers())

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_unauthenticated_is_401(self, client):
        response = client.put("/api/user/store", json={"storeId": 1})
        assert response.status_code == 401

    def test_update_failure_is_500(self, client):
        with patch("storeadmin.api.routes.user_store.update_user_store", return_value=False):
            response = client.put(
                "/api/user/store",
                json={"storeId": 1},
                headers=session_headers(user_id=str(uuid.uuid4())),
            )
        assert response.status_code == 500


class TestSessionEndpoint:

    def test_returns_session_user(self, client):
        user_id = str(uuid.uuid4())
        response = client.get("/api/auth/session", headers=session_headers(user_id=user_id, email="me@shop.test"))

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == user_id
        assert body["email"] == "me@shop.test"
        assert body["name"] == "Test User"

    def test_null_without_session(self, client):
        response = client.get("/api/auth/session")
        assert response.status_code == 200
        assert response.json() is None
