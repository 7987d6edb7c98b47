"""Tests for the dialog/selection coordinator."""

import pytest

from menu_admin.highlights.dialogs import DialogCoordinator, DialogIntent, DialogName


def test_all_dialogs_start_closed():
    coordinator = DialogCoordinator()
    assert coordinator.dialogs == {
        "config": False,
        "addProduct": False,
        "editDiscount": False,
        "preview": False,
        "delete": False,
        "copyDay": False,
    }
    assert all(value is None for value in coordinator.selected_data.values())


def test_open_stores_selection():
    coordinator = DialogCoordinator()
    coordinator.open_dialog("addProduct", {"dayId": 2})

    assert coordinator.is_open(DialogName.ADD_PRODUCT)
    assert coordinator.selected_data["dayId"] == 2


def test_close_clears_selection_slice():
    coordinator = DialogCoordinator()
    coordinator.open_dialog("copyDay", {"copyFromDay": 0, "copyToDay": 3})
    coordinator.open_dialog("config", {"config": {"title": "x"}})

    coordinator.close_dialog("copyDay")

    assert not coordinator.is_open("copyDay")
    assert coordinator.selected_data["copyFromDay"] is None
    assert coordinator.selected_data["copyToDay"] is None
    assert coordinator.selected_data["config"] == {"title": "x"}


def test_reopen_without_data_shows_no_stale_selection():
    coordinator = DialogCoordinator()
    coordinator.open_dialog("delete", {"deleteId": "abc", "dayId": 1})
    coordinator.close_dialog("delete")
    coordinator.open_dialog("delete")

    assert coordinator.selected_data["deleteId"] is None
    assert coordinator.selected_data["dayId"] is None


def test_preview_clears_keys_it_wrote():
    coordinator = DialogCoordinator()
    coordinator.open_dialog("preview", {"dayId": 4})
    coordinator.close_dialog("preview")
    assert coordinator.selected_data["dayId"] is None


def test_dialogs_are_independent():
    coordinator = DialogCoordinator()
    coordinator.open_dialog("preview")
    coordinator.open_dialog("config")
    assert coordinator.is_open("preview") and coordinator.is_open("config")


def test_close_all_dialogs():
    coordinator = DialogCoordinator()
    coordinator.open_dialog("editDiscount", {"scheduleItem": object(), "dayId": 1})
    coordinator.open_dialog("preview")

    coordinator.close_all_dialogs()

    assert not any(coordinator.dialogs.values())
    assert all(value is None for value in coordinator.selected_data.values())


def test_dispatch_intents():
    coordinator = DialogCoordinator()
    coordinator.dispatch(DialogIntent(kind="copyDay", payload={"copyFromDay": 1, "copyToDay": 2}))
    assert coordinator.is_open("copyDay")

    coordinator.dispatch(DialogIntent(kind=DialogName.COPY_DAY, action="close"))
    assert not coordinator.is_open("copyDay")
    assert coordinator.selected_data["copyFromDay"] is None


def test_unknown_dialog_or_key_raises():
    coordinator = DialogCoordinator()
    with pytest.raises(ValueError, match="Unknown dialog"):
        coordinator.open_dialog("settings")
    with pytest.raises(ValueError, match="Unknown selection keys"):
        coordinator.open_dialog("config", {"banner": 1})
    assert not coordinator.is_open("config")
