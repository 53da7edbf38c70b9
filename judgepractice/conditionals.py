"""Exercises built around branching."""

from __future__ import annotations

from collections.abc import Iterable


def compare(a: int, b: int) -> str:
    if a > b:
        return ">"
    if a < b:
        return "<"
    return "=="


def quadrant(x: int, y: int) -> int:
    """Quadrant of a point; points on an axis fall through to 3."""
    if x > 0 and y > 0:
        return 1
    if x > 0 and y < 0:
        return 4
    if x < 0 and y > 0:
        return 2
    return 3


def dice_prize(a: int, b: int, c: int) -> int:
    """Prize money for a throw of three dice."""
    if a == b == c:
        return 10000 + a * 1000
    if a == b or a == c:
        return 1000 + a * 100
    if b == c:
        return 1000 + b * 100
    return 100 * max(a, b, c)


def oven_clock(hour: int, minute: int, cook: int) -> tuple[int, int]:
    """Time at which cooking started at hour:minute finishes after cook minutes."""
    total = minute + cook
    if total >= 60:
        extra, total = divmod(total, 60)
        hour += extra
    if hour >= 24:
        hour -= 24
    return hour, total


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def alarm_clock(hour: int, minute: int) -> tuple[int, int]:
    """The time 45 minutes before hour:minute."""
    minute -= 45
    if minute < 0:
        hour -= 1
        minute += 60
    if hour < 0:
        hour += 24
    return hour, minute


def grade(score: int) -> str:
    if 90 <= score <= 100:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "F"


def receipt_matches(total: int, items: Iterable[tuple[int, int]]) -> bool:
    """Whether the price times count of every item adds up to total."""
    return sum(price * count for price, count in items) == total


def room_number(height: int, width: int, guest: int) -> str:
    """Room given to the guest-th arrival when rooms fill nearest-first, bottom-up."""
    if height <= 0:
        raise ValueError("height must be positive")
    room, floor = divmod(guest, height)
    room += 1
    if floor == 0:
        floor = height
        room -= 1
    return f"{floor}{room:02d}"