# ==============================================================================
# MASTER DATA ENDPOINT TESTS
# ==============================================================================
# End-to-end tests for the /masters routes: auth, envelope, status codes
# ==============================================================================

import pytest
from httpx import AsyncClient

API = "/api/v1/masters"


class TestMasterAuth:
    """Every master route requires a bearer token."""

    @pytest.mark.asyncio
    async def test_list_requires_token(self, client: AsyncClient):
        response = await client.get(f"{API}/amenities")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token_rejected(self, client: AsyncClient):
        response = await client.get(
            f"{API}/cities",
            headers={"Authorization": "Bearer not-a-token"},
        )
        assert response.status_code == 401


class TestAmenityEndpoints:
    """CRUD round through the amenity routes."""

    @pytest.mark.asyncio
    async def test_create_get_update_delete(self, auth_client, amenity_data: dict):
        client, user_id = auth_client

        response = await client.post(f"{API}/amenities", json=amenity_data)
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        record = body["data"]
        assert record["name"] == "Swimming Pool"
        assert record["code"] == "POOL"
        assert record["tags"] == ["water", "outdoor"]
        assert record["created_by"] == user_id

        response = await client.get(f"{API}/amenities/{record['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["id"] == record["id"]

        response = await client.patch(
            f"{API}/amenities/{record['id']}",
            json={"description": "Olympic size", "importance_level": 5},
        )
        assert response.status_code == 200
        updated = response.json()["data"]
        assert updated["description"] == "Olympic size"
        assert updated["importance_level"] == 5
        assert updated["popularity_score"] == 90

        response = await client.delete(f"{API}/amenities/{record['id']}")
        assert response.status_code == 200
        assert response.json()["data"]["id"] == record["id"]

        response = await client.get(f"{API}/amenities/{record['id']}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_duplicate_name_conflict_envelope(self, auth_client, amenity_data: dict):
        client, _ = auth_client
        await client.post(f"{API}/amenities", json=amenity_data)

        response = await client.post(
            f"{API}/amenities",
            json={**amenity_data, "name": "Swimming Pool ", "code": None},
        )

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "ALREADY_EXISTS"

    @pytest.mark.asyncio
    async def test_unknown_and_malformed_ids(self, auth_client):
        client, _ = auth_client

        response = await client.get(f"{API}/amenities/64b7f0c2a1b2c3d4e5f60718")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

        response = await client.patch(f"{API}/amenities/not-an-id", json={"icon": "x"})
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_body(self, auth_client):
        client, _ = auth_client

        response = await client.post(f"{API}/amenities", json={"name": "Gym"})

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert any("category" in err["loc"] for err in body["error"]["details"]["errors"])

    @pytest.mark.asyncio
    async def test_list_paging_and_filters(self, auth_client):
        client, _ = auth_client
        for i in range(12):
            await client.post(f"{API}/amenities", json={
                "name": f"Amenity {i:02d}", "category": "basic", "sort_order": i,
                "status": "archived" if i == 11 else "active",
            })

        response = await client.get(f"{API}/amenities", params={"page": 2, "limit": 5})
        assert response.status_code == 200
        page = response.json()["data"]
        assert [item["sort_order"] for item in page["items"]] == [5, 6, 7, 8, 9]
        assert page["pagination"] == {"page": 2, "limit": 5, "total": 11, "total_pages": 3}

        response = await client.get(f"{API}/amenities", params={"status": "archived"})
        assert [item["name"] for item in response.json()["data"]["items"]] == ["Amenity 11"]

        response = await client.get(f"{API}/amenities", params={"search": "amenity 0"})
        assert response.json()["data"]["pagination"]["total"] == 10

    @pytest.mark.asyncio
    async def test_unsupported_sort_is_bad_request(self, auth_client):
        client, _ = auth_client

        response = await client.get(f"{API}/amenities", params={"sort_by": "password"})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    @pytest.mark.asyncio
    async def test_fixed_routes_before_record_id(self, auth_client, amenity_data: dict):
        client, _ = auth_client
        await client.post(f"{API}/amenities", json=amenity_data)

        response = await client.get(f"{API}/amenities/popular", params={"limit": 5})
        assert response.status_code == 200
        assert [r["name"] for r in response.json()["data"]] == ["Swimming Pool"]

        response = await client.get(f"{API}/amenities/tags", params={"tags": ["water"]})
        assert len(response.json()["data"]) == 1

        response = await client.get(f"{API}/amenities/category/recreational")
        assert len(response.json()["data"]) == 1

        response = await client.get(f"{API}/amenities/availability/luxury")
        assert len(response.json()["data"]) == 1

        response = await client.get(f"{API}/amenities/statistics")
        assert response.status_code == 200
        assert response.json()["data"]["total"] == 1

    @pytest.mark.asyncio
    async def test_delete_in_use_is_refused(self, auth_client, adapter, amenity_data: dict):
        client, _ = auth_client
        record = (await client.post(f"{API}/amenities", json=amenity_data)).json()["data"]
        await adapter.create("projects", {"name": "Sea View", "amenities": [record["id"]]})

        response = await client.delete(f"{API}/amenities/{record['id']}")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "RESOURCE_IN_USE"


class TestCityLocationEndpoints:
    """Parent/child rules over HTTP."""

    @pytest.mark.asyncio
    async def test_location_lifecycle(self, auth_client, city_data: dict):
        client, _ = auth_client
        city = (await client.post(f"{API}/cities", json=city_data)).json()["data"]

        response = await client.post(f"{API}/locations", json={
            "name": "Bandra", "city_id": city["id"], "pincode": "400050",
        })
        assert response.status_code == 201
        location = response.json()["data"]
        assert location["city_id"] == city["id"]
        assert location["parent_type"] == "city"

        response = await client.get(f"{API}/locations/city/{city['id']}")
        assert [loc["name"] for loc in response.json()["data"]] == ["Bandra"]

        response = await client.get(f"{API}/locations", params={"city_id": city["id"]})
        assert response.json()["data"]["pagination"]["total"] == 1

        response = await client.delete(f"{API}/cities/{city['id']}")
        assert response.status_code == 400

        response = await client.delete(f"{API}/locations/{location['id']}")
        assert response.status_code == 200
        response = await client.delete(f"{API}/cities/{city['id']}")
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_location_without_valid_city(self, auth_client):
        client, _ = auth_client

        response = await client.post(f"{API}/locations", json={"name": "Bandra"})
        assert response.status_code == 400

        response = await client.post(f"{API}/locations", json={
            "name": "Bandra", "city_id": "64b7f0c2a1b2c3d4e5f60718",
        })
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_move_location_with_city_alias(self, auth_client, city_data: dict):
        client, _ = auth_client
        mumbai = (await client.post(f"{API}/cities", json=city_data)).json()["data"]
        pune = (await client.post(f"{API}/cities", json={"name": "Pune"})).json()["data"]
        location = (await client.post(f"{API}/locations", json={
            "name": "Aundh", "city_id": mumbai["id"],
        })).json()["data"]

        response = await client.patch(
            f"{API}/locations/{location['id']}", json={"city_id": pune["id"]},
        )

        assert response.status_code == 200
        assert response.json()["data"]["city_id"] == pune["id"]

    @pytest.mark.asyncio
    async def test_city_lookups(self, auth_client, city_data: dict):
        client, _ = auth_client
        await client.post(f"{API}/cities", json=city_data)

        response = await client.get(f"{API}/cities/state/maharashtra")
        assert [c["name"] for c in response.json()["data"]] == ["Mumbai"]

        response = await client.get(f"{API}/cities/popular")
        assert [c["name"] for c in response.json()["data"]] == ["Mumbai"]

        response = await client.get(f"{API}/cities/statistics")
        assert response.json()["data"]["by_state"] == {"Maharashtra": 1}


class TestRoomAndPropertyTypeEndpoints:
    """Smoke tests for the remaining kinds."""

    @pytest.mark.asyncio
    async def test_bedrooms(self, auth_client):
        client, _ = auth_client
        for value in (3, 1, 2):
            response = await client.post(f"{API}/bedrooms", json={
                "name": f"{value} BHK", "numeric_value": value, "room_type": f"{value}bhk",
            })
            assert response.status_code == 201

        response = await client.get(f"{API}/bedrooms", params={"min_value": 2})
        assert [r["numeric_value"] for r in response.json()["data"]["items"]] == [2, 3]

        response = await client.get(f"{API}/bedrooms", params={"min_value": 3, "max_value": 1})
        assert response.status_code == 422

        response = await client.get(f"{API}/bedrooms/type/1bhk")
        assert [r["name"] for r in response.json()["data"]] == ["1 Bhk"]

        response = await client.get(f"{API}/bedrooms/value/3")
        assert [r["name"] for r in response.json()["data"]] == ["3 Bhk"]

        response = await client.get(f"{API}/washrooms")
        assert response.json()["data"]["pagination"]["total"] == 0

    @pytest.mark.asyncio
    async def test_property_types(self, auth_client):
        client, _ = auth_client
        await client.post(f"{API}/property-types", json={
            "name": "Apartment", "category": "residential",
        })
        await client.post(f"{API}/property-types", json={
            "name": "Shop", "category": "commercial",
        })

        response = await client.get(f"{API}/property-types/residential")
        assert [r["name"] for r in response.json()["data"]] == ["Apartment"]

        response = await client.get(f"{API}/property-types", params={"category": "commercial"})
        assert [r["name"] for r in response.json()["data"]["items"]] == ["Shop"]

        response = await client.get(f"{API}/property-types/statistics")
        assert response.json()["data"]["by_category"] == {"residential": 1, "commercial": 1}
