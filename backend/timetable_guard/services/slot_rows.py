"""
Adapter for rows returned by the timetable store.

The store joins the class, course and trainer tables onto each slot row, e.g.::

    {
        "id": "...", "class_id": "...", "course_id": "...", "trainer_id": "...",
        "room_number": "B-12", "day_of_week": 1,
        "start_time": "08:00:00", "end_time": "09:00:00",
        "academic_year": "2025/2026", "active": True,
        "classes": {"class_name": "Form 1A", "class_code": "F1A"},
        "courses": {"name": "Mathematics", "code": "MTH"},
        "trainers": {"full_name": "Jane Doe"},
    }
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from timetable_guard.schemas.timetable import LessonSlot, TimeSlot


def _joined(row: Mapping[str, Any], relation: str, *fields: str) -> str | None:
    joined = row.get(relation)
    if not isinstance(joined, Mapping):
        return None
    for name in fields:
        value = joined.get(name)
        if value:
            return str(value)
    return None


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def lesson_slot_from_row(row: Mapping[str, Any]) -> LessonSlot:
    room_id = row.get("room_id") or row.get("room_number")
    return LessonSlot(
        id=str(row["id"]),
        class_id=str(row["class_id"]),
        course_id=str(row["course_id"]),
        trainer_id=_optional_text(row.get("trainer_id")),
        room_id=_optional_text(room_id),
        interval=TimeSlot.from_clock(int(row["day_of_week"]), str(row["start_time"]), str(row["end_time"])),
        academic_year=str(row["academic_year"]),
        active=bool(row.get("active", True)),
        course_name=_joined(row, "courses", "name", "code"),
        class_name=_joined(row, "classes", "class_name", "class_code"),
        trainer_name=_joined(row, "trainers", "full_name"),
        room_name=_optional_text(row.get("room_number")),
    )


def lesson_slots_from_rows(rows: Iterable[Mapping[str, Any]]) -> list[LessonSlot]:
    return [lesson_slot_from_row(row) for row in rows]
