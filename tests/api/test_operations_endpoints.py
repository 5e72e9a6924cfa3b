"""API tests for Operation endpoints.

Tests the complete HTTP request/response cycle for Operations nested under
an Api's Resource:
- POST   /api/v1/apis/{a}/resources/{r}/operations (201 + Location)
- GET    /api/v1/apis/{a}/resources/{r}/operations (paged or full)
- GET    /api/v1/apis/{a}/resources/{r}/operations/{o}
- PUT    /api/v1/apis/{a}/resources/{r}/operations/{o}
- DELETE /api/v1/apis/{a}/resources/{r}/operations/{o} (idempotent 204)
- GET    /api/v1/apis/{a}/operations

Architecture:
- Uses FastAPI TestClient with the real app, wired to a per-test SQLite file
- Tests validation, chain resolution and RFC 7807 error responses
"""

import math

import pytest

BASE = "/api/v1"


# =============================================================================
# Test Helpers
# =============================================================================


def create_api(client, headers, base_path: str = "/orders") -> dict:
    response = client.post(
        f"{BASE}/apis",
        json={"name": "Orders", "version": "v1", "base_path": base_path},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_resource(client, headers, api_id: str, name: str = "orders") -> dict:
    response = client.post(
        f"{BASE}/apis/{api_id}/resources", json={"name": name}, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


def operations_url(api_id: str, resource_id: str) -> str:
    return f"{BASE}/apis/{api_id}/resources/{resource_id}/operations"


@pytest.fixture
def chain(client, admin_headers) -> tuple[str, str]:
    """An Api with one Resource; returns (api_id, resource_id)."""
    api = create_api(client, admin_headers)
    resource = create_resource(client, admin_headers, api["id"])
    return api["id"], resource["id"]


# =============================================================================
# Create / Get / Update / Delete
# =============================================================================


@pytest.mark.api
class TestOperationLifecycle:
    def test_create_returns_201_with_location(self, client, admin_headers, chain):
        api_id, resource_id = chain

        response = client.post(
            operations_url(api_id, resource_id),
            json={"method": "get", "path": "/orders/{id}", "description": "Fetch"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["method"] == "GET"
        assert body["path"] == "/orders/{id}"
        assert body["api_id"] == api_id
        assert body["resource_id"] == resource_id
        assert response.headers["Location"] == (
            f"{operations_url(api_id, resource_id)}/{body['id']}"
        )

    def test_create_list_delete_list(self, client, admin_headers, chain):
        api_id, resource_id = chain
        url = operations_url(api_id, resource_id)

        created = client.post(
            url, json={"method": "GET", "path": "/x"}, headers=admin_headers
        ).json()
        after_create = client.get(url, headers=admin_headers).json()
        client.delete(f"{url}/{created['id']}", headers=admin_headers)
        after_delete = client.get(url, headers=admin_headers).json()

        assert after_create == [created]
        assert after_delete == []

    def test_get_update_delete(self, client, admin_headers, chain):
        api_id, resource_id = chain
        created = client.post(
            operations_url(api_id, resource_id),
            json={"method": "GET", "path": "/orders"},
            headers=admin_headers,
        ).json()
        url = f"{operations_url(api_id, resource_id)}/{created['id']}"

        fetched = client.get(url, headers=admin_headers)
        updated = client.put(
            url,
            json={"method": "POST", "path": "/orders", "description": "Place"},
            headers=admin_headers,
        )
        first_delete = client.delete(url, headers=admin_headers)
        second_delete = client.delete(url, headers=admin_headers)
        after = client.get(url, headers=admin_headers)

        assert fetched.status_code == 200
        assert fetched.json() == created
        assert updated.status_code == 200
        assert updated.json()["method"] == "POST"
        assert updated.json()["description"] == "Place"
        assert updated.json()["created_at"] == created["created_at"]
        assert first_delete.status_code == 204
        assert first_delete.content == b""
        assert second_delete.status_code == 204
        assert after.status_code == 404

    def test_operation_under_wrong_resource_is_not_found(
        self, client, admin_headers, chain
    ):
        api_id, resource_id = chain
        other = create_resource(client, admin_headers, api_id, name="other")
        created = client.post(
            operations_url(api_id, resource_id),
            json={"method": "GET", "path": "/orders"},
            headers=admin_headers,
        ).json()

        response = client.get(
            f"{operations_url(api_id, other['id'])}/{created['id']}",
            headers=admin_headers,
        )
        delete = client.delete(
            f"{operations_url(api_id, other['id'])}/{created['id']}",
            headers=admin_headers,
        )
        still_there = client.get(
            f"{operations_url(api_id, resource_id)}/{created['id']}",
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Operation not found"
        assert delete.status_code == 204
        assert still_there.status_code == 200

    def test_missing_api_reported_first(self, client, admin_headers, chain):
        _, resource_id = chain

        response = client.post(
            operations_url("missing-api", resource_id),
            json={"method": "BOGUS", "path": "no-slash"},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Api not found"

    def test_resource_of_other_api_is_not_found(self, client, admin_headers, chain):
        _, resource_id = chain
        other_api = create_api(client, admin_headers, base_path="/billing")

        response = client.get(
            operations_url(other_api["id"], resource_id), headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Resource not found"


# =============================================================================
# Validation and conflicts
# =============================================================================


@pytest.mark.api
class TestOperationValidation:
    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"method": "FETCH", "path": "/orders"}, "method"),
            ({"method": "GET", "path": "orders"}, "path"),
            ({"method": "GET", "path": "/**/orders"}, "path"),
            ({"method": "GET", "path": "/has space"}, "path"),
        ],
    )
    def test_invalid_payload_is_400(self, client, admin_headers, chain, payload, field):
        api_id, resource_id = chain

        response = client.post(
            operations_url(api_id, resource_id), json=payload, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == field

    def test_missing_body_field_is_400(self, client, admin_headers, chain):
        api_id, resource_id = chain

        response = client.post(
            operations_url(api_id, resource_id),
            json={"method": "GET"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        body = response.json()
        assert body["type"].endswith("/errors/validation-failed")
        assert body["errors"][0]["field"] == "path"

    def test_non_integer_query_names_the_parameter(self, client, viewer_headers, chain):
        api_id, resource_id = chain

        response = client.get(
            operations_url(api_id, resource_id),
            params={"page": "x", "limit": 5},
            headers=viewer_headers,
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["page"]

    def test_duplicate_route_is_409(self, client, admin_headers, chain):
        api_id, resource_id = chain
        payload = {"method": "GET", "path": "/orders"}

        first = client.post(
            operations_url(api_id, resource_id), json=payload, headers=admin_headers
        )
        second = client.post(
            operations_url(api_id, resource_id), json=payload, headers=admin_headers
        )
        listing = client.get(operations_url(api_id, resource_id), headers=admin_headers)

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json()["status"] == 409
        assert len(listing.json()) == 1


# =============================================================================
# Listing
# =============================================================================


@pytest.mark.api
class TestOperationListing:
    TOTAL = 7
    LIMIT = 3

    @pytest.fixture
    def populated(self, client, admin_headers, chain) -> tuple[str, str, list[str]]:
        api_id, resource_id = chain
        ids = [
            client.post(
                operations_url(api_id, resource_id),
                json={"method": "GET", "path": f"/orders/{n}"},
                headers=admin_headers,
            ).json()["id"]
            for n in range(self.TOTAL)
        ]
        return api_id, resource_id, ids

    def test_full_listing_is_plain_array(self, client, viewer_headers, populated):
        api_id, resource_id, ids = populated

        response = client.get(
            operations_url(api_id, resource_id), headers=viewer_headers
        )

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == ids

    @pytest.mark.parametrize("page", [0, 1, 2, 3])
    def test_page_sizes(self, client, viewer_headers, populated, page):
        api_id, resource_id, ids = populated

        response = client.get(
            operations_url(api_id, resource_id),
            params={"page": page, "limit": self.LIMIT},
            headers=viewer_headers,
        )

        body = response.json()
        expected = min(self.LIMIT, max(0, self.TOTAL - page * self.LIMIT))
        assert response.status_code == 200
        assert len(body["items"]) == expected
        assert [i["id"] for i in body["items"]] == ids[
            page * self.LIMIT : page * self.LIMIT + expected
        ]
        assert body["total"] == self.TOTAL
        assert body["pages"] == math.ceil(self.TOTAL / self.LIMIT)
        assert body["page"] == page
        assert body["has_previous"] is (page > 0)
        assert body["has_next"] is (page < 2)

    def test_empty_resource_listing(self, client, viewer_headers, chain):
        api_id, resource_id = chain

        full = client.get(operations_url(api_id, resource_id), headers=viewer_headers)
        paged = client.get(
            operations_url(api_id, resource_id),
            params={"page": 0, "limit": 5},
            headers=viewer_headers,
        )

        assert full.json() == []
        assert paged.json()["items"] == []
        assert paged.json()["pages"] == 0

    @pytest.mark.parametrize(
        "params",
        [{"page": -1, "limit": 5}, {"page": 0, "limit": 0}, {"page": "x"}],
    )
    def test_invalid_pagination_is_400(self, client, viewer_headers, chain, params):
        api_id, resource_id = chain

        response = client.get(
            operations_url(api_id, resource_id), params=params, headers=viewer_headers
        )

        assert response.status_code == 400

    def test_page_far_past_end_is_empty(self, client, viewer_headers, populated):
        api_id, resource_id, _ = populated

        response = client.get(
            operations_url(api_id, resource_id),
            params={"page": 10**18, "limit": 100},
            headers=viewer_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["items"] == []
        assert body["total"] == self.TOTAL
        assert body["page"] == 10**18
        assert body["has_next"] is False

    def test_huge_limit_returns_everything(self, client, viewer_headers, populated):
        api_id, resource_id, ids = populated

        response = client.get(
            operations_url(api_id, resource_id),
            params={"page": 0, "limit": 10**19},
            headers=viewer_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert [item["id"] for item in body["items"]] == ids
        assert body["pages"] == 1

    def test_chain_checked_before_pagination(self, client, viewer_headers, chain):
        _, resource_id = chain

        response = client.get(
            operations_url("missing-api", resource_id),
            params={"page": -1, "limit": 0},
            headers=viewer_headers,
        )

        assert response.status_code == 404

    def test_list_by_api(self, client, admin_headers, populated):
        api_id, _, ids = populated
        other = create_resource(client, admin_headers, api_id, name="refunds")
        extra = client.post(
            operations_url(api_id, other["id"]),
            json={"method": "POST", "path": "/refunds"},
            headers=admin_headers,
        ).json()

        response = client.get(f"{BASE}/apis/{api_id}/operations", headers=admin_headers)

        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [*ids, extra["id"]]

    def test_list_by_missing_api(self, client, admin_headers):
        response = client.get(f"{BASE}/apis/ghost/operations", headers=admin_headers)

        assert response.status_code == 404
