"""Tests for the HTTP endpoints."""

from unittest.mock import AsyncMock, patch

from bono.core.exceptions import StorageError

REGISTRATION = {
    "firstName": "Pedro",
    "lastName": "Martínez",
    "cedula": "223-4567890-1",
    "email": "pedro.martinez@example.com",
    "phone": "829-765-4321",
    "password": "Regalo2024",
    "confirmPassword": "Regalo2024",
    "termsAccepted": True,
}


def _login(client, username, password):
    return client.post("/auth/login", json={"username": username, "password": password})


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, test_client):
        response = test_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["storage"] == "memory"


class TestRegisterEndpoint:
    """Tests for POST /register."""

    def test_successful_registration(self, test_client):
        response = test_client.post("/register", json=REGISTRATION)

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["user"]["username"] == "pedro.martinez"
        assert "password" not in data["user"]
        assert data["application"]["status"] == "pending"
        assert data["application"]["amount"] == 5000
        assert data["application"]["documents"] == {
            "cedula": False,
            "bankStatement": False,
        }

    def test_validation_errors_are_batched(self, test_client):
        payload = {**REGISTRATION, "phone": "555-000-0000", "termsAccepted": False}
        response = test_client.post("/register", json=payload)

        assert response.status_code == 422
        data = response.json()
        assert data["success"] is False
        assert {e["field"] for e in data["errors"]} == {"phone", "terms"}

    def test_duplicate_registration(self, test_client):
        assert test_client.post("/register", json=REGISTRATION).status_code == 201
        response = test_client.post("/register", json=REGISTRATION)

        assert response.status_code == 422
        fields = {e["field"] for e in response.json()["errors"]}
        assert fields == {"email", "cedula"}

    def test_null_fields_reported_as_field_errors(self, test_client):
        response = test_client.post(
            "/register", json={"firstName": None, "termsAccepted": True}
        )

        assert response.status_code == 422
        data = response.json()
        assert "detail" not in data
        fields = {e["field"] for e in data["errors"]}
        assert "firstName" in fields
        assert "terms" not in fields

    def test_all_null_form(self, test_client):
        payload = {key: None for key in REGISTRATION}
        response = test_client.post("/register", json=payload)

        assert response.status_code == 422
        assert {e["field"] for e in response.json()["errors"]} == {
            "firstName",
            "lastName",
            "cedula",
            "email",
            "phone",
            "password",
            "confirmPassword",
            "terms",
        }

    def test_storage_failure_returns_503(self, test_client):
        backend = test_client.app.state.backend
        with patch.object(
            backend, "set_many", AsyncMock(side_effect=StorageError("x", "down"))
        ):
            response = test_client.post("/register", json=REGISTRATION)
        assert response.status_code == 503


class TestAuthEndpoints:
    """Tests for login, logout and session lookup."""

    def test_login_sets_session_cookie(self, test_client):
        response = _login(test_client, "adrian", "admin123")

        assert response.status_code == 200
        assert response.json()["role"] == "admin"
        assert "bono_session" in response.cookies

    def test_login_bad_password(self, test_client):
        response = _login(test_client, "adrian", "wrong")
        assert response.status_code == 401

    def test_me_requires_session(self, test_client):
        assert test_client.get("/auth/me").status_code == 401

    def test_me_and_logout(self, test_client):
        _login(test_client, "adrian", "admin123")
        assert test_client.get("/auth/me").json()["username"] == "adrian"

        assert test_client.post("/auth/logout").status_code == 200
        test_client.cookies.clear()
        assert test_client.get("/auth/me").status_code == 401


class TestDashboardEndpoint:
    """Tests for GET /dashboard."""

    def test_requires_login(self, test_client):
        assert test_client.get("/dashboard").status_code == 401

    def test_applicant_dashboard(self, test_client):
        test_client.post("/register", json=REGISTRATION)
        _login(test_client, "pedro.martinez", "Regalo2024")

        response = test_client.get("/dashboard")

        assert response.status_code == 200
        data = response.json()
        assert data["roleLabel"] == "Solicitante"
        assert data["latestApplication"]["statusText"] == "Pendiente"
        assert data["indicators"]["deposit"]["text"] == "Pendiente"
        assert data["counts"] is None


class TestAdminEndpoints:
    """Tests for the admin review list and actions."""

    def test_non_admin_forbidden(self, test_client):
        test_client.post("/register", json=REGISTRATION)
        _login(test_client, "pedro.martinez", "Regalo2024")

        assert test_client.get("/admin/applications").status_code == 403

    def test_list_and_approve(self, test_client):
        created = test_client.post("/register", json=REGISTRATION).json()
        app_id = created["application"]["id"]
        _login(test_client, "adrian", "admin123")

        listing = test_client.get("/admin/applications").json()
        assert listing["counts"] == {"total": 1, "pending": 1, "approved": 0}
        assert listing["applications"][0]["applicantName"] == "Pedro Martínez"
        assert listing["applications"][0]["actionable"] is True

        response = test_client.post(f"/admin/applications/{app_id}/approve")
        assert response.status_code == 200
        assert response.json()["statusText"] == "Aprobada"
        assert response.json()["actionable"] is False

        counts = test_client.get("/admin/applications").json()["counts"]
        assert counts == {"total": 1, "pending": 0, "approved": 1}

    def test_reject(self, test_client):
        created = test_client.post("/register", json=REGISTRATION).json()
        _login(test_client, "adrian", "admin123")

        response = test_client.post(
            f"/admin/applications/{created['application']['id']}/reject"
        )

        assert response.status_code == 200
        assert response.json()["status"] == "rejected"

    def test_unknown_application_404(self, test_client):
        _login(test_client, "adrian", "admin123")
        response = test_client.post("/admin/applications/missing/approve")
        assert response.status_code == 404
