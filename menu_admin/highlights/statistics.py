"""Schedule statistics - derived on every read from the current schedule."""

from decimal import Decimal

from menu_admin.highlights.discount import discount_percentage
from menu_admin.highlights.money import ZERO, round_money
from menu_admin.highlights.types import MostProductiveDay, ScheduleStatistics, WeeklySchedule
from menu_admin.highlights.weekdays import get_weekday


def get_most_productive_day(schedule: WeeklySchedule) -> MostProductiveDay | None:
    """Day with the most active items; ties go to the lowest day id.

    Returns None when no day has an active item.
    """
    best_day: int | None = None
    best_count = 0
    for day_id, items in schedule.iter_days():
        count = sum(1 for item in items if item.active)
        if count > best_count:
            best_day, best_count = day_id, count

    if best_day is None:
        return None
    return MostProductiveDay(
        day_id=best_day,
        day_name=get_weekday(best_day).name,
        product_count=best_count,
    )


def compute_statistics(schedule: WeeklySchedule) -> ScheduleStatistics:
    """Aggregate a weekly schedule.

    Savings and average discount only count active items. Fixed discounts are
    normalised to a percentage of their product's base price.
    """
    all_items = schedule.all_items()
    active_items = [item for item in all_items if item.active]

    total_savings: Decimal = sum((item.savings for item in active_items), ZERO)

    if active_items:
        percentages = [discount_percentage(item.product.price, item.discount) for item in active_items]
        average_discount = round_money(sum(percentages, ZERO) / len(percentages))
    else:
        average_discount = round_money(ZERO)

    return ScheduleStatistics(
        total_products=len(all_items),
        active_products=len(active_items),
        days_with_products=sum(1 for _, items in schedule.iter_days() if items),
        total_savings=round_money(total_savings),
        average_discount=average_discount,
        most_productive_day=get_most_productive_day(schedule),
    )
