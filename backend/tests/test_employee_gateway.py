"""
Employee Directory Backend - Employee Gateway Tests
===================================================

What:  Tests for EmployeeGateway against a real SQLite store (aiosqlite).
How:   Each test gets a fresh database file with the employee table created.

What we test:
    ✅ Insert/get round trip and store-assigned ids
    ✅ Ascending id ordering of list_all
    ✅ Full-replacement update (omitted fields become NULL)
    ✅ Delete affected counts and post-delete absence
    ✅ Fail-soft reads vs strict reads vs always-loud writes
"""

import pytest

from app.exceptions import DatabaseError
from app.schemas.employee import EmployeeCreate, EmployeeResponse


def ada() -> EmployeeCreate:
    return EmployeeCreate(first_name="Ada", last_name="Lovelace", email="ada@x.com")


class TestGatewayInsertAndGet:
    """Round trip between insert and get_by_id."""

    @pytest.mark.asyncio
    async def test_insert_returns_assigned_id_and_fields(self, gateway):
        created = await gateway.insert(ada())

        assert created == EmployeeResponse(
            id=1, first_name="Ada", last_name="Lovelace", email="ada@x.com"
        )

    @pytest.mark.asyncio
    async def test_insert_then_get_round_trip(self, gateway):
        created = await gateway.insert(ada())

        fetched = await gateway.get_by_id(created.id)

        assert fetched == created

    @pytest.mark.asyncio
    async def test_insert_with_no_fields_stores_nulls(self, gateway):
        created = await gateway.insert(EmployeeCreate())

        fetched = await gateway.get_by_id(created.id)
        assert fetched.first_name is None
        assert fetched.last_name is None
        assert fetched.email is None

    @pytest.mark.asyncio
    async def test_empty_string_is_not_null(self, gateway):
        created = await gateway.insert(EmployeeCreate(first_name="", email=None))

        fetched = await gateway.get_by_id(created.id)
        assert fetched.first_name == ""
        assert fetched.email is None

    @pytest.mark.asyncio
    async def test_ids_are_distinct(self, gateway):
        first = await gateway.insert(ada())
        second = await gateway.insert(ada())

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, gateway):
        assert await gateway.get_by_id(999999) is None


class TestGatewayList:
    """list_all ordering and contents."""

    @pytest.mark.asyncio
    async def test_empty_store(self, gateway):
        assert await gateway.list_all() == []

    @pytest.mark.asyncio
    async def test_ascending_by_id(self, gateway):
        for name in ("Charles", "Ada", "Grace", "Alan"):
            await gateway.insert(EmployeeCreate(first_name=name))

        ids = [emp.id for emp in await gateway.list_all()]

        assert ids == sorted(ids)
        assert len(set(ids)) == 4

    @pytest.mark.asyncio
    async def test_ascending_after_deletes(self, gateway):
        created = [await gateway.insert(EmployeeCreate(first_name=str(i))) for i in range(5)]
        await gateway.delete_by_id(created[1].id)
        await gateway.delete_by_id(created[3].id)

        listed = await gateway.list_all()

        assert [emp.id for emp in listed] == [created[0].id, created[2].id, created[4].id]


class TestGatewayUpdate:
    """Full-replacement semantics of update_by_id."""

    @pytest.mark.asyncio
    async def test_update_replaces_every_field(self, gateway):
        created = await gateway.insert(ada())

        updated = await gateway.update_by_id(
            created.id,
            EmployeeCreate(first_name="A", last_name=None, email="x@y"),
        )

        expected = EmployeeResponse(id=created.id, first_name="A", last_name=None, email="x@y")
        assert updated == expected
        assert await gateway.get_by_id(created.id) == expected

    @pytest.mark.asyncio
    async def test_omitted_field_is_overwritten_with_null(self, gateway):
        created = await gateway.insert(ada())

        updated = await gateway.update_by_id(created.id, EmployeeCreate(first_name="Ada"))

        assert updated.last_name is None
        assert updated.email is None

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, gateway):
        assert await gateway.update_by_id(999999, ada()) is None

    @pytest.mark.asyncio
    async def test_update_leaves_other_rows_alone(self, gateway):
        first = await gateway.insert(ada())
        second = await gateway.insert(EmployeeCreate(first_name="Grace"))

        await gateway.update_by_id(first.id, EmployeeCreate(first_name="Changed"))

        assert await gateway.get_by_id(second.id) == second


class TestGatewayDelete:
    """Affected counts and absence after delete."""

    @pytest.mark.asyncio
    async def test_delete_then_get_and_delete_again(self, gateway):
        created = await gateway.insert(ada())

        assert await gateway.delete_by_id(created.id) == 1
        assert await gateway.get_by_id(created.id) is None
        assert await gateway.delete_by_id(created.id) == 0

    @pytest.mark.asyncio
    async def test_delete_missing_affects_nothing(self, gateway):
        assert await gateway.delete_by_id(999999) == 0


class TestGatewayErrorPolicy:
    """Fail-soft reads, strict reads, and writes that always surface errors."""

    @pytest.mark.asyncio
    async def test_list_degrades_to_empty(self, broken_gateway):
        assert await broken_gateway.list_all() == []

    @pytest.mark.asyncio
    async def test_get_degrades_to_none(self, broken_gateway):
        assert await broken_gateway.get_by_id(1) is None

    @pytest.mark.asyncio
    async def test_strict_reads_raise(self, broken_gateway):
        broken_gateway.fail_soft_reads = False

        with pytest.raises(DatabaseError):
            await broken_gateway.list_all()
        with pytest.raises(DatabaseError):
            await broken_gateway.get_by_id(1)

    @pytest.mark.asyncio
    async def test_insert_raises(self, broken_gateway):
        with pytest.raises(DatabaseError) as exc_info:
            await broken_gateway.insert(ada())
        assert exc_info.value.context["error_type"] == "OperationalError"

    @pytest.mark.asyncio
    async def test_update_raises_instead_of_not_found(self, broken_gateway):
        with pytest.raises(DatabaseError) as exc_info:
            await broken_gateway.update_by_id(1, ada())
        assert exc_info.value.context["employee_id"] == 1

    @pytest.mark.asyncio
    async def test_delete_raises_instead_of_zero(self, broken_gateway):
        with pytest.raises(DatabaseError):
            await broken_gateway.delete_by_id(1)

    @pytest.mark.asyncio
    async def test_strict_gateway_reads_normally_when_store_is_healthy(self, strict_gateway):
        created = await strict_gateway.insert(ada())

        assert await strict_gateway.list_all() == [created]
        assert await strict_gateway.get_by_id(999999) is None


class TestGatewayPing:

    @pytest.mark.asyncio
    async def test_ping_healthy(self, gateway):
        assert await gateway.ping() is True

    @pytest.mark.asyncio
    async def test_ping_unreachable(self, tmp_path):
        from app.config import Settings
        from app.database import create_engine_from_settings
        from app.services.employee_gateway import EmployeeGateway

        config = Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'x.db'}")
        engine = create_engine_from_settings(config)
        try:
            assert await EmployeeGateway(engine).ping() is False
        finally:
            await engine.dispose()
