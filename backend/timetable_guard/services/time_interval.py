from __future__ import annotations

from typing import Literal

from timetable_guard.schemas.timetable import TimeSlot

WEEKDAYS_FROM_MONDAY = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
WEEKDAYS_FROM_SUNDAY = WEEKDAYS_FROM_MONDAY[-1:] + WEEKDAYS_FROM_MONDAY[:-1]


def overlaps(a: TimeSlot, b: TimeSlot) -> bool:
    return a.overlaps(b)


def minutes_to_time(value: int) -> str:
    hours = value // 60
    minutes = value % 60
    return f"{hours:02d}:{minutes:02d}"


def weekday_name(weekday: int, week_starts_on: Literal["monday", "sunday"] = "monday") -> str:
    names = WEEKDAYS_FROM_SUNDAY if week_starts_on == "sunday" else WEEKDAYS_FROM_MONDAY
    return names[weekday]


def describe_interval(interval: TimeSlot, week_starts_on: Literal["monday", "sunday"] = "monday") -> str:
    day = weekday_name(interval.weekday, week_starts_on)
    return f"{day} {minutes_to_time(interval.start_minute)}-{minutes_to_time(interval.end_minute)}"
