import asyncio

import pytest

from shared.db import SessionLocal, drop_models, init_models
from shared.errors import Conflict
from shared.kv_store import KeyValueStore, KvEntry


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def fresh_db():
    async def _reset():
        await drop_models()
        await init_models()

    run(_reset())


async def _with_store(fn):
    async with SessionLocal() as db:
        return await fn(KeyValueStore(db))


def test_set_get_and_delete(fresh_db):
    async def scenario(store):
        assert await store.get("missing") is None
        await store.set("greeting", {"text": "hallo"})
        assert await store.get("greeting") == {"text": "hallo"}
        await store.delete("greeting")
        return await store.get("greeting")

    assert run(_with_store(scenario)) is None


def test_every_write_bumps_revision(fresh_db):
    async def scenario(store):
        revisions = [await store.set("k", [1]), await store.set("k", [1, 2]), await store.set("k", [], expected_revision=2)]
        return revisions, await store.get_with_revision("k")

    revisions, current = run(_with_store(scenario))
    assert revisions == [1, 2, 3]
    assert current == ([], 3)


def test_compare_and_swap_rejects_stale_revision(fresh_db):
    async def scenario(store):
        await store.set("k", "first")
        await store.set("k", "second")
        with pytest.raises(Conflict):
            await store.set("k", "stale", expected_revision=1)
        return await store.get("k")

    assert run(_with_store(scenario)) == "second"


def test_insert_only_when_expected_revision_is_zero(fresh_db):
    async def scenario(store):
        await store.set("k", "first", expected_revision=0)
        with pytest.raises(Conflict):
            await store.set("k", "again", expected_revision=0)
        return await store.get("k")

    assert run(_with_store(scenario)) == "first"


def test_prefix_match_is_literal(fresh_db):
    async def scenario(store):
        await store.set("user_profile_a", {"n": "a"})
        await store.set("user_profile_b", {"n": "b"})
        # '_' must not act as a wildcard
        await store.set("userXprofileXc", {"n": "c"})
        await store.set("result_1_x", {"n": "r"})
        return await store.get_by_prefix("user_profile_")

    assert run(_with_store(scenario)) == [{"n": "a"}, {"n": "b"}]


def test_upsert_overwrites_key_created_concurrently(fresh_db, monkeypatch):
    async def scenario():
        async with SessionLocal() as other:
            await KeyValueStore(other).set("k", "first")

        async with SessionLocal() as db:
            store = KeyValueStore(db)

            # the lookup ran before the other writer committed
            async def stale_get(*args, **kwargs):
                return None

            monkeypatch.setattr(db, "get", stale_get)
            revision = await store.set("k", "second")
            return revision, await store.get_with_revision("k")

    revision, current = run(scenario())
    assert revision == 2
    assert current == ("second", 2)


def test_writes_stamp_updated_at(fresh_db):
    async def scenario(store):
        await store.set("k", "first")
        await store.set("k", "second", expected_revision=1)
        return await store.db.get(KvEntry, "k", populate_existing=True)

    row = run(_with_store(scenario))
    assert row.updated_at is not None
    assert row.revision == 2
