"""API tests for Environment, Plan and Developer endpoints.

Tests cover:
- Create (201 + Location), get, list (paged and full), idempotent delete
- URL and email validation (400)
- Developer email uniqueness (409) and credential redaction
"""

import pytest

BASE = "/api/v1"

ENVIRONMENT = {
    "name": "production",
    "inbound_url": "https://api.example.com",
    "outbound_url": "http://orders.internal:8080",
}
DEVELOPER = {"name": "Ada", "email": "Ada@Example.com", "password": "correct-horse"}


@pytest.mark.api
class TestEnvironmentEndpoints:
    def test_lifecycle(self, client, admin_headers):
        created = client.post(
            f"{BASE}/environments", json=ENVIRONMENT, headers=admin_headers
        )
        environment_id = created.json()["id"]
        url = f"{BASE}/environments/{environment_id}"

        fetched = client.get(url, headers=admin_headers)
        listed = client.get(f"{BASE}/environments", headers=admin_headers)
        first_delete = client.delete(url, headers=admin_headers)
        second_delete = client.delete(url, headers=admin_headers)

        assert created.status_code == 201
        assert created.headers["Location"] == url
        assert fetched.json()["outbound_url"] == ENVIRONMENT["outbound_url"]
        assert [e["id"] for e in listed.json()] == [environment_id]
        assert first_delete.status_code == 204
        assert second_delete.status_code == 204
        assert client.get(url, headers=admin_headers).status_code == 404

    @pytest.mark.parametrize("field", ["inbound_url", "outbound_url"])
    def test_invalid_url_is_400(self, client, admin_headers, field):
        response = client.post(
            f"{BASE}/environments",
            json={**ENVIRONMENT, field: "ftp://files.example.com"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == field

    def test_deleted_environment_stays_referenced(self, client, admin_headers):
        environment_id = client.post(
            f"{BASE}/environments", json=ENVIRONMENT, headers=admin_headers
        ).json()["id"]
        api = client.post(
            f"{BASE}/apis",
            json={
                "name": "Orders",
                "version": "v1",
                "base_path": "/orders",
                "environment_ids": [environment_id],
            },
            headers=admin_headers,
        ).json()

        client.delete(f"{BASE}/environments/{environment_id}", headers=admin_headers)
        fetched = client.get(f"{BASE}/apis/{api['id']}", headers=admin_headers)

        assert fetched.status_code == 200
        assert fetched.json()["environment_ids"] == [environment_id]


@pytest.mark.api
class TestPlanEndpoints:
    def test_create_and_page(self, client, admin_headers):
        ids = [
            client.post(
                f"{BASE}/plans",
                json={"name": name, "is_default": name == "free"},
                headers=admin_headers,
            ).json()["id"]
            for name in ["free", "gold", "platinum"]
        ]

        page = client.get(
            f"{BASE}/plans", params={"page": 1, "limit": 2}, headers=admin_headers
        )
        first = client.get(f"{BASE}/plans/{ids[0]}", headers=admin_headers)

        assert [p["id"] for p in page.json()["items"]] == ids[2:]
        assert page.json()["has_next"] is False
        assert first.json()["is_default"] is True

    def test_missing_plan_is_404(self, client, admin_headers):
        response = client.get(f"{BASE}/plans/ghost", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Plan not found"

    def test_blank_name_is_400(self, client, admin_headers):
        response = client.post(
            f"{BASE}/plans", json={"name": "  "}, headers=admin_headers
        )

        assert response.status_code == 400


@pytest.mark.api
class TestDeveloperEndpoints:
    def test_create_never_returns_credentials(self, client, admin_headers):
        response = client.post(
            f"{BASE}/developers", json=DEVELOPER, headers=admin_headers
        )

        body = response.json()
        assert response.status_code == 201
        assert body["email"] == "ada@example.com"
        assert body["status"] == "active"
        assert "password" not in body
        assert "password_hash" not in body
        assert "correct-horse" not in response.text

    def test_duplicate_email_is_409(self, client, admin_headers):
        client.post(f"{BASE}/developers", json=DEVELOPER, headers=admin_headers)

        response = client.post(
            f"{BASE}/developers",
            json={**DEVELOPER, "email": "ADA@example.COM"},
            headers=admin_headers,
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "A developer with this email already exists"

    @pytest.mark.parametrize(
        ("override", "field"),
        [({"email": "not-an-email"}, "email"), ({"password": "short"}, "password")],
    )
    def test_invalid_fields_are_400(self, client, admin_headers, override, field):
        response = client.post(
            f"{BASE}/developers", json={**DEVELOPER, **override}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == field

    def test_get_list_delete(self, client, admin_headers):
        developer_id = client.post(
            f"{BASE}/developers", json=DEVELOPER, headers=admin_headers
        ).json()["id"]
        url = f"{BASE}/developers/{developer_id}"

        fetched = client.get(url, headers=admin_headers)
        listed = client.get(f"{BASE}/developers", headers=admin_headers)
        deleted = client.delete(url, headers=admin_headers)
        again = client.delete(url, headers=admin_headers)

        assert fetched.json()["name"] == "Ada"
        assert [d["id"] for d in listed.json()] == [developer_id]
        assert deleted.status_code == 204
        assert again.status_code == 204
        assert client.get(url, headers=admin_headers).status_code == 404
