"""API tests for Api and Resource endpoints.

Tests the complete HTTP request/response cycle for:
- /api/v1/apis (register, list, get, replace, delete with cascade)
- /api/v1/apis/{api_id}/resources (attach, list, get, replace, delete)

Architecture:
- Uses FastAPI TestClient with the real app, wired to a per-test SQLite file
"""

import pytest

BASE = "/api/v1"

API_PAYLOAD = {
    "name": "Orders",
    "version": "v1",
    "base_path": "/orders",
    "description": "Order management",
}


def create_environment(client, headers, name: str = "prod") -> str:
    response = client.post(
        f"{BASE}/environments",
        json={
            "name": name,
            "inbound_url": "https://api.example.com",
            "outbound_url": "http://orders.internal:8080",
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


def create_plan(client, headers, name: str = "gold") -> str:
    response = client.post(f"{BASE}/plans", json={"name": name}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]


# =============================================================================
# Apis
# =============================================================================


@pytest.mark.api
class TestApiEndpoints:
    def test_register_and_get(self, client, operator_headers):
        created = client.post(
            f"{BASE}/apis", json=API_PAYLOAD, headers=operator_headers
        )

        body = created.json()
        fetched = client.get(f"{BASE}/apis/{body['id']}", headers=operator_headers)

        assert created.status_code == 201
        assert created.headers["Location"] == f"{BASE}/apis/{body['id']}"
        assert body["cors"] is True
        assert body["status"] == "active"
        assert body["environment_ids"] == []
        assert fetched.json() == body

    def test_register_with_references(self, client, admin_headers):
        environment_id = create_environment(client, admin_headers)
        plan_id = create_plan(client, admin_headers)

        response = client.post(
            f"{BASE}/apis",
            json={
                **API_PAYLOAD,
                "environment_ids": [environment_id],
                "plan_ids": [plan_id],
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["environment_ids"] == [environment_id]
        assert response.json()["plan_ids"] == [plan_id]

    @pytest.mark.parametrize(
        ("references", "detail"),
        [
            ({"environment_ids": ["ghost"]}, "Environment not found"),
            ({"plan_ids": ["ghost"]}, "Plan not found"),
        ],
    )
    def test_unknown_reference_is_404(self, client, admin_headers, references, detail):
        response = client.post(
            f"{BASE}/apis", json={**API_PAYLOAD, **references}, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == detail

    @pytest.mark.parametrize(
        ("override", "field"),
        [
            ({"name": ""}, "name"),
            ({"base_path": "orders"}, "base_path"),
            ({"version": "v" * 21}, "version"),
        ],
    )
    def test_invalid_fields_are_400(self, client, admin_headers, override, field):
        response = client.post(
            f"{BASE}/apis", json={**API_PAYLOAD, **override}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == field

    def test_shared_base_path_allowed(self, client, admin_headers):
        first = client.post(f"{BASE}/apis", json=API_PAYLOAD, headers=admin_headers)
        second = client.post(f"{BASE}/apis", json=API_PAYLOAD, headers=admin_headers)

        assert first.status_code == 201
        assert second.status_code == 201
        assert first.json()["id"] != second.json()["id"]

    def test_replace_keeps_id_and_created_at(self, client, admin_headers):
        created = client.post(
            f"{BASE}/apis", json=API_PAYLOAD, headers=admin_headers
        ).json()

        response = client.put(
            f"{BASE}/apis/{created['id']}",
            json={"name": "Orders v2", "version": "v2", "base_path": "/v2/orders"},
            headers=admin_headers,
        )

        body = response.json()
        assert response.status_code == 200
        assert body["id"] == created["id"]
        assert body["created_at"] == created["created_at"]
        assert body["name"] == "Orders v2"
        assert body["description"] is None

    def test_replace_missing_is_404(self, client, admin_headers):
        response = client.put(
            f"{BASE}/apis/ghost", json=API_PAYLOAD, headers=admin_headers
        )

        assert response.status_code == 404

    def test_list_full_and_paged(self, client, admin_headers):
        ids = [
            client.post(
                f"{BASE}/apis",
                json={**API_PAYLOAD, "name": f"Api {n}"},
                headers=admin_headers,
            ).json()["id"]
            for n in range(5)
        ]

        full = client.get(f"{BASE}/apis", headers=admin_headers)
        paged = client.get(
            f"{BASE}/apis", params={"page": 1, "limit": 2}, headers=admin_headers
        )

        assert [a["id"] for a in full.json()] == ids
        assert [a["id"] for a in paged.json()["items"]] == ids[2:4]
        assert paged.json()["total"] == 5
        assert paged.json()["pages"] == 3

    def test_delete_cascades(self, client, admin_headers):
        api_id = client.post(
            f"{BASE}/apis", json=API_PAYLOAD, headers=admin_headers
        ).json()["id"]
        resource_id = client.post(
            f"{BASE}/apis/{api_id}/resources",
            json={"name": "orders"},
            headers=admin_headers,
        ).json()["id"]
        operation_id = client.post(
            f"{BASE}/apis/{api_id}/resources/{resource_id}/operations",
            json={"method": "GET", "path": "/orders"},
            headers=admin_headers,
        ).json()["id"]

        first = client.delete(f"{BASE}/apis/{api_id}", headers=admin_headers)
        second = client.delete(f"{BASE}/apis/{api_id}", headers=admin_headers)
        api_lookup = client.get(f"{BASE}/apis/{api_id}", headers=admin_headers)
        operation_lookup = client.get(
            f"{BASE}/apis/{api_id}/resources/{resource_id}/operations/{operation_id}",
            headers=admin_headers,
        )

        assert first.status_code == 204
        assert second.status_code == 204
        assert api_lookup.status_code == 404
        assert operation_lookup.status_code == 404


# =============================================================================
# Resources
# =============================================================================


@pytest.mark.api
class TestResourceEndpoints:
    @pytest.fixture
    def api_id(self, client, admin_headers) -> str:
        return client.post(
            f"{BASE}/apis", json=API_PAYLOAD, headers=admin_headers
        ).json()["id"]

    def test_lifecycle(self, client, admin_headers, api_id):
        url = f"{BASE}/apis/{api_id}/resources"

        created = client.post(
            url,
            json={"name": "orders", "description": "All orders"},
            headers=admin_headers,
        )
        resource = created.json()
        replaced = client.put(
            f"{url}/{resource['id']}", json={"name": "purchases"}, headers=admin_headers
        )
        deleted = client.delete(f"{url}/{resource['id']}", headers=admin_headers)
        again = client.delete(f"{url}/{resource['id']}", headers=admin_headers)

        assert created.status_code == 201
        assert created.headers["Location"] == f"{url}/{resource['id']}"
        assert resource["api_id"] == api_id
        assert replaced.json()["name"] == "purchases"
        assert replaced.json()["description"] is None
        assert deleted.status_code == 204
        assert again.status_code == 204
        assert client.get(url, headers=admin_headers).json() == []

    def test_create_under_missing_api(self, client, admin_headers):
        response = client.post(
            f"{BASE}/apis/ghost/resources", json={"name": ""}, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Api not found"

    def test_resource_of_other_api_is_404(self, client, admin_headers, api_id):
        other_api = client.post(
            f"{BASE}/apis", json=API_PAYLOAD, headers=admin_headers
        ).json()["id"]
        resource_id = client.post(
            f"{BASE}/apis/{api_id}/resources",
            json={"name": "orders"},
            headers=admin_headers,
        ).json()["id"]

        response = client.get(
            f"{BASE}/apis/{other_api}/resources/{resource_id}", headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Resource not found"

    def test_paged_listing(self, client, admin_headers, api_id):
        for n in range(3):
            client.post(
                f"{BASE}/apis/{api_id}/resources",
                json={"name": f"r{n}"},
                headers=admin_headers,
            )

        response = client.get(
            f"{BASE}/apis/{api_id}/resources",
            params={"page": 0, "limit": 2},
            headers=admin_headers,
        )

        body = response.json()
        assert [r["name"] for r in body["items"]] == ["r0", "r1"]
        assert body["has_next"] is True
        assert body["has_previous"] is False
