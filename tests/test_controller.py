from fractions import Fraction

import pytest

from catalog_editor.controller import CatalogController
from catalog_editor.models import Entry
from catalog_editor.repository import CatalogStore
from catalog_editor.session import SessionMode


def test_create_with_existing_name_upserts():
    store = CatalogStore([("Shirt", 10.0)])
    controller = CatalogController(store)
    controller.open_for_create()
    controller.change_field("name", "Shirt")
    controller.change_field("price", 20)
    errors = controller.save()
    assert errors.ok
    assert controller.entries == [Entry("Shirt", 20.0)]
    assert controller.session.mode is SessionMode.CLOSED


def test_invalid_price_keeps_dialog_open():
    store = CatalogStore([("Shirt", 10.0)])
    controller = CatalogController(store)
    controller.open_for_edit(Entry("Shirt", 10.0))
    controller.change_field("price", 0)
    errors = controller.save()
    assert errors.price_invalid
    assert not errors.name_invalid
    assert controller.session.field_errors.price_invalid
    assert controller.entries == [Entry("Shirt", 10.0)]
    assert controller.session.mode is SessionMode.EDITING
    assert controller.session.original_name == "Shirt"


def test_delete_row():
    store = CatalogStore([("A", 5.0), ("B", 7.0)])
    controller = CatalogController(store)
    controller.delete_row("A")
    assert controller.entries == [Entry("B", 7.0)]
    assert controller.count == 1


def test_create_appends_and_trims(controller):
    controller.open_for_create()
    controller.change_field("name", "  D  ")
    controller.change_field("price", "3.5")
    assert controller.save().ok
    assert controller.entries[-1] == Entry("D", 3.5)


def test_untouched_new_form_fails_both_fields(controller):
    before = controller.entries
    controller.open_for_create()
    errors = controller.save()
    assert errors.name_invalid and errors.price_invalid
    assert controller.entries == before
    assert controller.session.mode is SessionMode.CREATING


@pytest.mark.parametrize("raw_price", ["", "abc", "-2", "0", "inf", "nan"])
def test_bad_price_text_never_commits(controller, raw_price):
    before = controller.entries
    controller.open_for_create()
    controller.change_field("name", "D")
    controller.change_field("price", raw_price)
    assert controller.save().price_invalid
    assert controller.entries == before


def test_fix_errors_then_save(controller):
    controller.open_for_create()
    controller.change_field("name", " ")
    assert not controller.save().ok
    controller.change_field("name", "D")
    controller.change_field("price", "4")
    assert controller.save().ok
    assert controller.session.field_errors.ok
    assert controller.session.draft is None


def test_rename_keeps_position(controller):
    controller.open_for_edit(controller.store.get("B"))
    controller.change_field("name", "Bee")
    assert controller.save().ok
    assert [e.name for e in controller.entries] == ["A", "Bee", "C"]


def test_cancel_never_touches_store(controller, changes):
    before = controller.entries
    controller.open_for_edit(controller.store.get("A"))
    controller.change_field("price", "100")
    controller.cancel()
    assert controller.session.mode is SessionMode.CLOSED
    assert controller.entries == before
    assert changes == []


def test_cancel_while_closed_is_harmless(controller):
    controller.cancel()
    assert controller.session.mode is SessionMode.CLOSED


def test_save_while_closed_is_noop(controller, changes):
    assert controller.save().ok
    assert changes == []


def test_delete_unknown_row_is_noop(controller, changes):
    before = controller.entries
    controller.delete_row("Nope")
    assert controller.entries == before
    assert changes == []


def test_deleting_row_being_edited_closes_session(controller):
    controller.open_for_edit(controller.store.get("B"))
    controller.delete_row("B")
    assert controller.session.mode is SessionMode.CLOSED
    assert "B" not in controller.store


def test_deleting_other_row_keeps_session(controller):
    controller.open_for_edit(controller.store.get("B"))
    controller.delete_row("A")
    assert controller.session.mode is SessionMode.EDITING


def test_stale_edit_target_is_saved_as_new(store):
    # The row disappears behind the controller's back (e.g. another view deleted it).
    controller = CatalogController(store)
    controller.open_for_edit(store.get("A"))
    store.delete("A")
    controller.change_field("price", "6")
    assert controller.save().ok
    assert controller.entries == [Entry("B", 7.0), Entry("C", 9.0), Entry("A", 6.0)]


def test_store_mutated_once_per_save(controller, changes):
    controller.open_for_edit(controller.store.get("A"))
    controller.change_field("name", "AA")
    controller.change_field("price", "1")
    assert changes == []
    controller.save()
    assert len(changes) == 1


def test_on_any_change_fires_for_state_changes(store):
    calls = []
    controller = CatalogController(store, on_any_change=lambda: calls.append(1))
    controller.open_for_create()
    controller.change_field("name", "D")
    controller.change_field("price", "2")
    controller.save()
    controller.cancel()  # already closed: nothing to report
    assert len(calls) == 4


def test_dialog_title_follows_mode(controller):
    controller.open_for_create()
    assert controller.dialog_title == "Add Item"
    controller.open_for_edit(controller.store.get("A"))
    assert controller.dialog_title == "Edit Item"


def test_huge_int_price_is_a_validation_failure(controller):
    before = controller.entries
    controller.open_for_create()
    controller.change_field("name", "D")
    controller.change_field("price", 10 ** 400)
    assert controller.save().price_invalid
    assert controller.entries == before
    assert controller.session.mode is SessionMode.CREATING


def test_fraction_price_commits(controller):
    controller.open_for_create()
    controller.change_field("name", "D")
    controller.change_field("price", Fraction(1, 2))
    assert controller.save().ok
    assert controller.entries[-1] == Entry("D", 0.5)
