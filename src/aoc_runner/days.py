from __future__ import annotations

from datetime import date

FIRST_DAY = 1
LAST_DAY = 25


def resolve_day(day: int | None, today: date | None = None) -> int:
    if day is not None:
        return day
    return (today or date.today()).day


def resolve_year(year: int | None, today: date | None = None) -> int:
    if year is not None:
        return year
    return (today or date.today()).year


def is_puzzle_day(day: int) -> bool:
    return FIRST_DAY <= day <= LAST_DAY
