"""Tests for session snapshot save/restore."""

import json
from decimal import Decimal

import pytest

from menu_admin.highlights.config_store import HighlightsConfigStore
from menu_admin.highlights.errors import SnapshotError
from menu_admin.highlights.persistence import (
    apply_snapshot,
    build_snapshot,
    dump_snapshot,
    load_snapshot,
    read_snapshot,
    save_snapshot,
)
from menu_admin.highlights.schedule import WeeklyScheduleStore


def test_snapshot_json_mirrors_entities(seeded_store):
    text = dump_snapshot(build_snapshot(HighlightsConfigStore(), seeded_store))
    data = json.loads(text)

    assert set(data) == {"config", "weeklySchedule"}
    assert list(data["weeklySchedule"]) == ["0", "1", "2", "3", "4", "5", "6"]
    item = data["weeklySchedule"]["0"][0]
    assert item["productId"] == 101
    assert item["discount"] == {"type": "percentage", "value": 15}
    assert Decimal(str(item["finalPrice"])) == Decimal("30.52")
    assert "T" in item["addedAt"]
    assert data["config"]["title"] == "Especiais do Dia"
    assert "updatedAt" in data["config"]


def test_round_trip_restores_state(tmp_path, seeded_store):
    config_store = HighlightsConfigStore()
    config_store.update_config({"title": "Ofertas", "active": False})
    path = save_snapshot(build_snapshot(config_store, seeded_store), tmp_path / "session" / "snapshot.json")

    restored_config = HighlightsConfigStore()
    restored_schedule = WeeklyScheduleStore()
    apply_snapshot(read_snapshot(path), restored_config, restored_schedule)

    assert restored_config.config == config_store.config
    assert restored_schedule.schedule == seeded_store.schedule
    assert restored_schedule.statistics == seeded_store.statistics


def test_missing_days_are_filled_on_load():
    snapshot = load_snapshot(
        {
            "config": {"title": "Especiais"},
            "weeklySchedule": {
                "2": [
                    {
                        "id": 1,
                        "productId": 202,
                        "product": {"id": 202, "name": "Refrigerante", "price": 5.9},
                        "discount": {"type": "fixed", "value": 1},
                        "finalPrice": 123,
                        "active": True,
                        "addedAt": "2026-10-18T12:00:00Z",
                    }
                ]
            },
        }
    )

    assert len(snapshot.weekly_schedule.days) == 7
    item = snapshot.weekly_schedule[2][0]
    # finalPrice is always derived, whatever the file says
    assert item.final_price == Decimal("4.90")


def test_missing_file_returns_none(tmp_path):
    assert read_snapshot(tmp_path / "absent.json") is None


@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        '{"weeklySchedule": {}}',
        '{"config": {"title": "x"}, "weeklySchedule": {"9": []}}',
        '{"config": {"title": "Especiais"}, "weeklySchedule": {"0": 5}}',
        '{"config": {"title": "Especiais"}, "weeklySchedule": {"0": null}}',
        '{"config": {"title": "Especiais"}, "weeklySchedule": {"days": 5}}',
        '{"config": {"title": "Especiais"}, "weeklySchedule": [[], "sopa"]}',
        '{"config": {"title": "x"}}',
        '{"config": {"title": "Especiais", "description": "' + "d" * 201 + '"}}',
    ],
)
def test_invalid_snapshot_raises(payload):
    with pytest.raises(SnapshotError):
        load_snapshot(payload)


def test_duplicate_product_in_saved_day_is_rejected():
    item = {"productId": 1, "product": {"id": 1, "name": "Pastel", "price": 8}}
    with pytest.raises(SnapshotError):
        load_snapshot({"config": {"title": "Especiais"}, "weeklySchedule": {"0": [item, {**item, "id": "b"}]}})


def test_restored_config_can_be_toggled():
    snapshot = load_snapshot({"config": {"title": "Especiais", "active": True}})
    store = HighlightsConfigStore(snapshot.config)

    result = store.toggle_active()

    assert result.success
    assert store.is_active is False
