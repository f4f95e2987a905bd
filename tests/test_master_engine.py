# ==============================================================================
# MASTER ENGINE TESTS
# ==============================================================================
# Tests for the generic engine: uniqueness, lookups, paging, archiving,
# merge updates and parent/child rules
# ==============================================================================

import asyncio

import pytest

from realty_admin.core.exceptions import (
    AlreadyExistsError,
    BadRequestError,
    NotFoundError,
    ResourceInUseError,
)
from realty_admin.schemas.query import MasterQuery
from realty_admin.services.master_engine import MasterDataEngine
from realty_admin.services.masters import (
    AMENITY_PROFILE,
    CITY_PROFILE,
    LOCATION_PROFILE,
)


def amenity(name: str, **extra) -> dict:
    return {"name": name, "category": extra.pop("category", "basic"), **extra}


@pytest.fixture
def engine(adapter) -> MasterDataEngine:
    return MasterDataEngine(adapter, AMENITY_PROFILE)


class TestCreate:
    """Tests for record creation and name normalization."""

    @pytest.mark.asyncio
    async def test_create_normalizes_and_stamps(self, engine: MasterDataEngine):
        """Name is title-cased, code upper-cased, audit fields set."""
        record = await engine.create(
            amenity("  swimming   pool ", code=" sp ", tags=["Water"]),
            actor_id="admin-1",
        )

        assert record.id
        assert record.name == "Swimming Pool"
        assert record.code == "SP"
        assert record.tags == ["water"]
        assert record.master_type == "amenity"
        assert record.status == "active"
        assert record.created_by == "admin-1"
        assert record.updated_by == "admin-1"
        assert record.created_at is not None
        assert record.created_at == record.updated_at

    @pytest.mark.asyncio
    async def test_distinct_creates_listed_once(self, engine: MasterDataEngine):
        """Each created record appears exactly once and total grows by one."""
        created = []
        for i, name in enumerate(["Gym", "Clubhouse", "Garden"], start=1):
            created.append(await engine.create(amenity(name)))
            page = await engine.find_all()
            assert page.pagination.total == i

        page = await engine.find_all()
        ids = [item.id for item in page.items]
        assert sorted(ids) == sorted(record.id for record in created)
        assert len(set(ids)) == len(ids)

    @pytest.mark.asyncio
    async def test_duplicate_name_conflicts(self, engine: MasterDataEngine):
        """'pool' then 'Pool ' normalize to the same name."""
        await engine.create(amenity("pool"))

        with pytest.raises(AlreadyExistsError) as exc_info:
            await engine.create(amenity("Pool "))

        assert exc_info.value.status_code == 409
        assert exc_info.value.details["field"] == "name"

    @pytest.mark.asyncio
    async def test_duplicate_code_conflicts(self, engine: MasterDataEngine):
        await engine.create(amenity("Gym", code="GYM"))

        with pytest.raises(AlreadyExistsError):
            await engine.create(amenity("Fitness Centre", code="gym"))

    @pytest.mark.asyncio
    async def test_same_name_allowed_across_types(self, adapter, engine: MasterDataEngine):
        """Uniqueness is scoped to the master type."""
        await engine.create(amenity("Central"))
        cities = MasterDataEngine(adapter, CITY_PROFILE)

        city = await cities.create({"name": "Central"})

        assert city.master_type == "city"

    @pytest.mark.asyncio
    async def test_invalid_payload_is_bad_request(self, engine: MasterDataEngine):
        with pytest.raises(BadRequestError) as exc_info:
            await engine.create({"name": "Gym", "category": "not-a-category"})

        assert exc_info.value.status_code == 400
        assert exc_info.value.details["errors"]

    @pytest.mark.asyncio
    async def test_defaults_stored_as_plain_values(self, adapter, engine: MasterDataEngine):
        """Defaulted enum fields reach storage and statistics as strings."""
        gym = await engine.create(amenity("Gym"))

        stored = await adapter.get_by_id("masters", gym.id)
        assert stored["status"] == "active"
        assert type(stored["status"]) is str

        stats = await engine.get_statistics()
        assert stats.active == 1
        assert stats.by_status == {"active": 1}

    @pytest.mark.asyncio
    async def test_parent_not_allowed_for_top_level_kind(self, engine: MasterDataEngine):
        with pytest.raises(BadRequestError):
            await engine.create(amenity("Gym", parent_id="64b7f0c2a1b2c3d4e5f60718"))


class TestFind:
    """Tests for lookups, paging and filtering."""

    @pytest.mark.asyncio
    async def test_find_by_id_unknown_and_malformed(self, engine: MasterDataEngine):
        with pytest.raises(NotFoundError):
            await engine.find_by_id("64b7f0c2a1b2c3d4e5f60718")

        with pytest.raises(NotFoundError):
            await engine.find_by_id("not-an-id")

    @pytest.mark.asyncio
    async def test_find_by_id_of_other_type_is_not_found(self, adapter, engine: MasterDataEngine):
        city = await MasterDataEngine(adapter, CITY_PROFILE).create({"name": "Pune"})

        with pytest.raises(NotFoundError):
            await engine.find_by_id(city.id)

    @pytest.mark.asyncio
    async def test_pagination(self, engine: MasterDataEngine):
        """15 records, page 2 of 10 -> 5 items."""
        for i in range(15):
            await engine.create(amenity(f"Amenity {i:02d}", sort_order=i))

        page = await engine.find_all(MasterQuery(page=2, limit=10))

        assert len(page.items) == 5
        assert page.pagination.total == 15
        assert page.pagination.total_pages == 2
        assert [item.sort_order for item in page.items] == [10, 11, 12, 13, 14]

    @pytest.mark.asyncio
    async def test_find_all_without_criteria_for_filtered_kind(self, adapter):
        """Kinds with their own filters accept no criteria or plain MasterQuery."""
        cities = MasterDataEngine(adapter, CITY_PROFILE)
        await cities.create({"name": "Pune", "state": "Maharashtra"})
        await cities.create({"name": "Goa", "state": "Goa"})

        page = await cities.find_all()
        assert [item.name for item in page.items] == ["Goa", "Pune"]

        page = await cities.find_all(MasterQuery(search="pun", limit=5))
        assert [item.name for item in page.items] == ["Pune"]
        assert page.pagination.limit == 5

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_and_literal(self, engine: MasterDataEngine):
        await engine.create(amenity("Swimming Pool"))
        await engine.create(amenity("Gym (24x7)"))

        page = await engine.find_all(MasterQuery(search="POOL"))
        assert [item.name for item in page.items] == ["Swimming Pool"]

        page = await engine.find_all(MasterQuery(search="(24x7)"))
        assert [item.name for item in page.items] == ["Gym (24X7)"]

    @pytest.mark.asyncio
    async def test_sort_descending_by_name(self, engine: MasterDataEngine):
        for name in ["Beta", "Alpha", "Gamma"]:
            await engine.create(amenity(name))

        page = await engine.find_all(MasterQuery(sort_by="name", sort_order="desc"))

        assert [item.name for item in page.items] == ["Gamma", "Beta", "Alpha"]

    @pytest.mark.asyncio
    async def test_unsupported_sort_field(self, engine: MasterDataEngine):
        with pytest.raises(BadRequestError):
            await engine.find_all(MasterQuery(sort_by="$where"))


class TestArchived:
    """Archived records are hidden unless requested."""

    @pytest.mark.asyncio
    async def test_archived_excluded_by_default(self, engine: MasterDataEngine):
        await engine.create(amenity("Gym"))
        archived = await engine.create(amenity("Old Pool", status="archived"))

        page = await engine.find_all()
        assert [item.name for item in page.items] == ["Gym"]

        page = await engine.find_all(MasterQuery(status=["archived"]))
        assert [item.id for item in page.items] == [archived.id]

        page = await engine.find_all(MasterQuery(status="active,archived"))
        assert page.pagination.total == 2

        # Direct lookup still resolves archived records
        assert (await engine.find_by_id(archived.id)).status == "archived"

    @pytest.mark.asyncio
    async def test_statistics_report_archived_separately(self, engine: MasterDataEngine):
        await engine.create(amenity("Gym", is_popular=True))
        await engine.create(amenity("Spa", status="inactive"))
        await engine.create(amenity("Old Pool", status="archived", is_popular=True))

        stats = await engine.get_statistics()

        assert stats.total == 2
        assert stats.active == 1
        assert stats.inactive == 1
        assert stats.archived == 1
        assert stats.popular == 1
        assert stats.by_category == {"basic": 2}


class TestUpdate:
    """Tests for merge updates."""

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, engine: MasterDataEngine):
        await engine.create(amenity("Gym"))

        with pytest.raises(NotFoundError):
            await engine.update("64b7f0c2a1b2c3d4e5f60718", {"description": "x"})

        page = await engine.find_all()
        assert page.items[0].description is None

    @pytest.mark.asyncio
    async def test_update_merges_and_advances_timestamp(self, engine: MasterDataEngine):
        created = await engine.create(
            amenity("Gym", description="Indoor", importance_level=2),
            actor_id="admin-1",
        )
        found = await engine.find_by_id(created.id)
        await asyncio.sleep(0.01)

        updated = await engine.update(
            created.id,
            {"description": "Indoor gym", "created_by": "intruder"},
            actor_id="admin-2",
        )
        refound = await engine.find_by_id(created.id)

        assert refound.description == "Indoor gym"
        assert refound.importance_level == 2
        assert refound.name == "Gym"
        assert refound.created_at == found.created_at
        assert refound.updated_at > found.updated_at
        assert refound.created_by == "admin-1"
        assert refound.updated_by == "admin-2"
        assert updated.id == created.id

    @pytest.mark.asyncio
    async def test_update_revalidates_merged_record(self, engine: MasterDataEngine):
        created = await engine.create(amenity("Gym"))

        with pytest.raises(BadRequestError):
            await engine.update(created.id, {"importance_level": 9})

    @pytest.mark.asyncio
    async def test_rename_to_existing_name_conflicts(self, engine: MasterDataEngine):
        await engine.create(amenity("Gym"))
        spa = await engine.create(amenity("Spa"))

        with pytest.raises(AlreadyExistsError):
            await engine.update(spa.id, {"name": "gym"})

        # Keeping its own name is not a conflict
        renamed = await engine.update(spa.id, {"name": "spa"})
        assert renamed.name == "Spa"


class TestParentChild:
    """Tests for parent validation and guarded removal."""

    @pytest.mark.asyncio
    async def test_remove_parent_with_children(self, adapter):
        cities = MasterDataEngine(adapter, CITY_PROFILE)
        locations = MasterDataEngine(adapter, LOCATION_PROFILE)
        city = await cities.create({"name": "Mumbai"})
        location = await locations.create({"name": "Bandra", "parent_id": city.id})

        with pytest.raises(BadRequestError):
            await cities.remove(city.id)

        await locations.remove(location.id)
        removed = await cities.remove(city.id)

        assert removed.id == city.id
        with pytest.raises(NotFoundError):
            await cities.find_by_id(city.id)

    @pytest.mark.asyncio
    async def test_child_requires_valid_parent(self, adapter):
        locations = MasterDataEngine(adapter, LOCATION_PROFILE)
        amenity_record = await MasterDataEngine(adapter, AMENITY_PROFILE).create(amenity("Gym"))

        with pytest.raises(BadRequestError):
            await locations.create({"name": "Bandra"})
        with pytest.raises(BadRequestError):
            await locations.create({"name": "Bandra", "parent_id": "64b7f0c2a1b2c3d4e5f60718"})
        with pytest.raises(BadRequestError):
            await locations.create({"name": "Bandra", "parent_id": amenity_record.id})

    @pytest.mark.asyncio
    async def test_archived_parent_rejected(self, adapter):
        cities = MasterDataEngine(adapter, CITY_PROFILE)
        city = await cities.create({"name": "Old Town", "status": "archived"})

        with pytest.raises(BadRequestError):
            await MasterDataEngine(adapter, LOCATION_PROFILE).create(
                {"name": "Market", "parent_id": city.id}
            )

    @pytest.mark.asyncio
    async def test_remove_blocked_by_usage(self, adapter, engine: MasterDataEngine):
        gym = await engine.create(amenity("Gym"))
        await adapter.create("projects", {"name": "Sea View", "amenities": [gym.id]})

        with pytest.raises(ResourceInUseError) as exc_info:
            await engine.remove(gym.id)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details["count"] == 1
        assert (await engine.find_by_id(gym.id)).id == gym.id


class TestStorageFailures:
    """Errors raised below the engine's own checks."""

    @pytest.mark.asyncio
    async def test_unique_index_rejects_duplicate_name(self, engine: MasterDataEngine, monkeypatch):
        """The (master_type, name) index holds even when the pre-check is skipped."""
        await engine.create(amenity("Gym"))

        async def skip_check(payload, exclude_id=None):
            return None

        monkeypatch.setattr(engine, "_ensure_unique", skip_check)

        with pytest.raises(AlreadyExistsError) as exc_info:
            await engine.create(amenity("gym"))

        assert exc_info.value.status_code == 409
        assert (await engine.find_all()).pagination.total == 1

    @pytest.mark.asyncio
    async def test_adapter_failure_becomes_bad_request(self, adapter, engine: MasterDataEngine, monkeypatch):
        await engine.create(amenity("Gym"))

        async def broken_aggregate(collection, pipeline):
            raise RuntimeError("connection reset")

        monkeypatch.setattr(adapter, "aggregate", broken_aggregate)

        with pytest.raises(BadRequestError) as exc_info:
            await engine.get_statistics()

        assert exc_info.value.error_code == "BAD_REQUEST"
        assert "connection reset" in exc_info.value.details["error"]
