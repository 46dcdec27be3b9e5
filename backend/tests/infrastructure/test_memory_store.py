"""In-Memory Store — CRUD semantics, copy isolation, id uniqueness, thread safety.

Invariants:
    - Absence returned as None, never raised
    - Records are deep copies both ways; nested lists and dicts never shared
    - Same-millisecond creates get distinct ids
    - Concurrent creates from many threads lose no records
"""

import threading

import pytest

import media_api.infrastructure.memory_store as store_module
from media_api.core.errors import StoreNotInitializedError
from media_api.infrastructure.memory_store import InMemoryMediaStore


def _frozen_clock(ms: int = 1_700_000_000_000):
    return lambda: ms


def test_create_returns_record_with_id_and_fields():
    store = InMemoryMediaStore(clock=_frozen_clock(123))
    record = store.create({"title": "t", "type": "image", "url": "u"})
    assert record == {"id": "123", "title": "t", "type": "image", "url": "u"}


def test_find_by_id_returns_equal_record():
    store = InMemoryMediaStore()
    created = store.create({"title": "t"})
    assert store.find_by_id(created["id"]) == created


def test_find_missing_returns_none():
    assert InMemoryMediaStore().find_by_id("nope") is None


def test_same_millisecond_creates_get_distinct_ids():
    store = InMemoryMediaStore(clock=_frozen_clock(1000))
    ids = [store.create({})["id"] for _ in range(3)]
    assert ids == ["1000", "1001", "1002"]


def test_freed_id_can_be_reused():
    store = InMemoryMediaStore(clock=_frozen_clock(1000))
    first = store.create({})
    store.delete(first["id"])
    assert store.create({})["id"] == "1000"


def test_update_merges_and_returns_record():
    store = InMemoryMediaStore()
    created = store.create({"title": "old", "type": "video"})
    updated = store.update(created["id"], {"title": "new"})
    assert updated == {**created, "title": "new"}
    assert store.find_by_id(created["id"]) == updated


def test_update_missing_returns_none_and_changes_nothing():
    store = InMemoryMediaStore()
    store.create({"title": "a"})
    snapshot = store.list_all()
    assert store.update("missing", {"title": "x"}) is None
    assert store.list_all() == snapshot


def test_update_keeps_position_in_list():
    store = InMemoryMediaStore()
    a, b, c = (store.create({"n": i}) for i in range(3))
    store.update(b["id"], {"n": 99})
    assert [r["id"] for r in store.list_all()] == [a["id"], b["id"], c["id"]]


def test_delete_returns_removed_record():
    store = InMemoryMediaStore()
    created = store.create({"title": "t"})
    assert store.delete(created["id"]) == created
    assert store.find_by_id(created["id"]) is None


def test_delete_missing_returns_none():
    store = InMemoryMediaStore()
    store.create({})
    assert store.delete("missing") is None
    assert store.count() == 1


def test_list_all_after_creates_and_deletes():
    store = InMemoryMediaStore()
    created = [store.create({"n": i}) for i in range(6)]
    for record in created[::2]:
        store.delete(record["id"])
    assert store.list_all() == created[1::2]


def test_returned_records_are_copies():
    store = InMemoryMediaStore()
    created = store.create({"title": "t"})
    created["title"] = "mutated"
    store.list_all()[0]["title"] = "mutated"
    store.find_by_id(created["id"])["title"] = "mutated"
    assert store.find_by_id(created["id"])["title"] == "t"


def test_clear_empties_store():
    store = InMemoryMediaStore()
    store.create({})
    store.clear()
    assert store.count() == 0
    assert store.list_all() == []


def test_concurrent_creates_are_all_kept_with_unique_ids():
    store = InMemoryMediaStore(clock=_frozen_clock(5000))
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        for _ in range(25):
            store.create({})

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [r["id"] for r in store.list_all()]
    assert len(ids) == 200
    assert len(set(ids)) == 200


def test_get_store_before_init_raises():
    store_module.close_store()
    with pytest.raises(StoreNotInitializedError):
        store_module.get_store()


def test_init_store_sets_singleton():
    store = store_module.init_store()
    try:
        assert store_module.get_store() is store
    finally:
        store_module.close_store()
    assert store_module.media_store is None


def test_nested_fields_are_not_shared_with_callers():
    store = InMemoryMediaStore()
    fields = {"tags": ["a"], "meta": {"w": 1}}
    created = store.create(fields)

    fields["tags"].append("from-input")
    created["meta"]["w"] = 99
    store.list_all()[0]["tags"].append("from-list")
    store.find_by_id(created["id"])["meta"]["h"] = 2

    assert store.find_by_id(created["id"]) == {
        "id": created["id"], "tags": ["a"], "meta": {"w": 1},
    }


def test_update_does_not_alias_nested_input():
    store = InMemoryMediaStore()
    created = store.create({})
    patch = {"meta": {"w": 1}}
    updated = store.update(created["id"], patch)

    patch["meta"]["w"] = 2
    updated["meta"]["w"] = 3

    assert store.find_by_id(created["id"])["meta"] == {"w": 1}
