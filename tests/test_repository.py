import itertools

import pytest

from catalog_editor.models import ChangeKind, Entry
from catalog_editor.repository import CatalogStore


def names(entries):
    return [e.name for e in entries]


def test_seed_keeps_order_and_assigns_ids(store):
    entries = store.entries()
    assert names(entries) == ["A", "B", "C"]
    assert len({e.entry_id for e in entries}) == 3
    assert store.count == len(store) == 3


def test_seed_accepts_entries_and_collapses_duplicate_names():
    store = CatalogStore([Entry("A", 1.0), ("A", 2.0), ("B", 3.0)])
    assert store.entries() == [Entry("A", 2.0), Entry("B", 3.0)]


def test_create_appends_new_name(store, changes):
    result = store.create(Entry("D", 1.0))
    assert names(result) == ["A", "B", "C", "D"]
    assert [c.kind for c in changes] == [ChangeKind.ADDED]
    assert changes[0].index == 3


def test_create_with_existing_name_upserts_in_place(store, changes):
    original_id = store.get("B").entry_id
    result = store.create(Entry("B", 70.0))
    assert result == [Entry("A", 5.0), Entry("B", 70.0), Entry("C", 9.0)]
    assert result[1].entry_id == original_id
    assert [c.kind for c in changes] == [ChangeKind.UPDATED]


def test_create_trims_name(store):
    store.create(Entry("  B  ", 1.0))
    assert names(store.entries()) == ["A", "B", "C"]


def test_update_keeps_position(store):
    result = store.update("B", Entry("B", 8.0))
    assert result[1] == Entry("B", 8.0)


def test_rename_keeps_position_and_id(store, changes):
    original_id = store.get("B").entry_id
    result = store.update("B", Entry("Bee", 7.0))
    assert names(result) == ["A", "Bee", "C"]
    assert result[1].entry_id == original_id
    assert "B" not in store
    assert [c.kind for c in changes] == [ChangeKind.UPDATED]


def test_rename_onto_existing_name_keeps_names_unique(store, changes):
    c_id = store.get("C").entry_id
    result = store.update("C", Entry("A", 1.0))
    assert result == [Entry("B", 7.0), Entry("A", 1.0)]
    assert result[1].entry_id == c_id
    assert [(c.kind, c.index) for c in changes] == [(ChangeKind.REMOVED, 0), (ChangeKind.UPDATED, 1)]


def test_update_of_missing_entry_falls_back_to_create(store, changes):
    result = store.update("Gone", Entry("New", 2.0))
    assert names(result) == ["A", "B", "C", "New"]
    assert [c.kind for c in changes] == [ChangeKind.ADDED]


def test_delete_removes_entry(store, changes):
    result = store.delete("A")
    assert result == [Entry("B", 7.0), Entry("C", 9.0)]
    assert [(c.kind, c.entry.name, c.index) for c in changes] == [(ChangeKind.REMOVED, "A", 0)]


def test_delete_unknown_is_noop(store, changes):
    before = store.entries()
    assert store.delete("Nope") == before
    assert changes == []


def test_save_dispatches_on_original_name(store):
    store.save(Entry("D", 1.0))
    store.save(Entry("A2", 5.0), "A")
    assert names(store.entries()) == ["A2", "B", "C", "D"]


def test_snapshots_are_copies(store):
    snapshot = store.entries()
    snapshot[0].price = 999.0
    snapshot.pop()
    assert store.entries()[0].price == 5.0
    assert store.count == 3

    got = store.get("A")
    got.name = "Z"
    assert "A" in store


def test_stored_entry_is_not_callers_object(store):
    entry = Entry("D", 1.0)
    store.create(entry)
    entry.price = 50.0
    assert store.get("D").price == 1.0
    assert entry.entry_id is None


def test_listener_failure_does_not_abort_mutation(store, changes):
    def broken(change):
        raise RuntimeError("renderer exploded")

    store.unsubscribe(changes.append)
    store.subscribe(broken)
    store.subscribe(changes.append)
    store.delete("A")
    assert "A" not in store
    assert len(changes) == 1


def test_unsubscribe_stops_events(store):
    seen = []
    store.subscribe(seen.append)
    store.unsubscribe(seen.append)
    store.delete("A")
    assert seen == []


@pytest.mark.parametrize(
    "ops",
    list(itertools.product(
        [("create", "A"), ("create", "D"), ("update", "B", "A"), ("update", "C", "D"), ("update", "X", "B")],
        repeat=3,
    )),
)
def test_names_stay_unique_for_any_create_update_sequence(ops):
    store = CatalogStore([("A", 5.0), ("B", 7.0), ("C", 9.0)])
    for op in ops:
        if op[0] == "create":
            store.create(Entry(op[1], 1.0))
        else:
            store.update(op[1], Entry(op[2], 1.0))
    result = names(store.entries())
    assert len(result) == len(set(result))
