"""Weekday catalogue - single source of truth for the scheduling axis.

Days are numbered Sunday=0 ... Saturday=6. The set is fixed: days are never
created or destroyed, and every schedule carries all seven of them.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict


class WeekDay(BaseModel):
    """A fixed weekday slot.

    Attributes:
        id: Day id, 0 (Sunday) to 6 (Saturday)
        name: Display name (pt-BR)
        short: Abbreviation used on compact day cards
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    short: str


WEEKDAYS: tuple[WeekDay, ...] = (
    WeekDay(id=0, name="Domingo", short="Dom"),
    WeekDay(id=1, name="Segunda-feira", short="Seg"),
    WeekDay(id=2, name="Terça-feira", short="Ter"),
    WeekDay(id=3, name="Quarta-feira", short="Qua"),
    WeekDay(id=4, name="Quinta-feira", short="Qui"),
    WeekDay(id=5, name="Sexta-feira", short="Sex"),
    WeekDay(id=6, name="Sábado", short="Sáb"),
)

DAY_IDS: tuple[int, ...] = tuple(day.id for day in WEEKDAYS)


def is_valid_day_id(day_id: object) -> bool:
    """Check whether a value is one of the seven day ids (bools excluded)."""
    return isinstance(day_id, int) and not isinstance(day_id, bool) and day_id in DAY_IDS


def get_weekday(day_id: int) -> WeekDay:
    """Look up a weekday by id.

    Raises:
        ValueError: If day_id is outside 0-6
    """
    if not is_valid_day_id(day_id):
        raise ValueError(f"Invalid day id: {day_id}. Must be an integer in 0-6")
    return WEEKDAYS[day_id]


def weekday_for_date(value: date) -> int:
    """Map a calendar date onto the Sunday=0 axis.

    Python's date.weekday() is Monday=0, so it is shifted by one.
    """
    return (value.weekday() + 1) % 7
