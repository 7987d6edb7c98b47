"""Tests for derived schedule statistics."""

from decimal import Decimal

from menu_admin.highlights.discount import Discount
from menu_admin.highlights.statistics import compute_statistics
from menu_admin.highlights.types import WeeklySchedule


def test_empty_schedule_statistics():
    stats = compute_statistics(WeeklySchedule())

    assert stats.total_products == 0
    assert stats.active_products == 0
    assert stats.days_with_products == 0
    assert stats.total_savings == Decimal("0")
    assert stats.average_discount == Decimal("0")
    assert stats.most_productive_day is None


def test_seeded_statistics(seeded_store):
    stats = seeded_store.statistics

    assert stats.total_products == 2
    assert stats.active_products == 2
    assert stats.total_savings == Decimal("10.38")
    # (15% + 5.00 / 28.90) / 2
    assert stats.average_discount == Decimal("16.15")


def test_most_productive_day_breaks_ties_by_lowest_id(seeded_store):
    most = seeded_store.statistics.most_productive_day
    assert most.day_id == 0
    assert most.day_name == "Domingo"
    assert most.product_count == 1


def test_most_productive_day_counts_active_items(seeded_store, sample_products):
    seeded_store.add_product_to_day(3, sample_products[2])
    seeded_store.add_product_to_day(3, sample_products[3])
    for item in seeded_store.get_day_items(3):
        seeded_store.toggle_product_status(3, item.id)

    assert seeded_store.statistics.most_productive_day.day_id == 0

    seeded_store.toggle_product_status(3, seeded_store.get_day_items(3)[0].id)
    seeded_store.toggle_product_status(3, seeded_store.get_day_items(3)[1].id)
    most = seeded_store.statistics.most_productive_day
    assert most.day_id == 3
    assert most.day_name == "Quarta-feira"
    assert most.product_count == 2


def test_inactive_items_do_not_count_as_savings(seeded_store):
    item = seeded_store.get_day_items(1)[0]
    seeded_store.toggle_product_status(1, item.id)

    stats = seeded_store.statistics
    assert stats.total_products == 2
    assert stats.active_products == 1
    assert stats.days_with_products == 2
    assert stats.total_savings == Decimal("5.38")
    assert stats.average_discount == Decimal("15.00")


def test_statistics_follow_discount_changes(seeded_store):
    item = seeded_store.get_day_items(0)[0]
    seeded_store.update_product_discount(0, item.id, Discount(type="percentage", value=0))

    assert seeded_store.statistics.total_savings == Decimal("5.00")
