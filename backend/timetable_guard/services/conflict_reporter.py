"""
Turns raw overlap records into the report shown next to the timetable grid.

One entry is produced per unordered slot pair, however many resources the
pair shares. Severity, icon and title come from fixed tables; display names
are echoed from the slot records and never looked up.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Literal

from timetable_guard.schemas.conflict import ConflictDimension, ConflictSeverity, FormattedConflict
from timetable_guard.schemas.timetable import LessonSlot
from timetable_guard.services.conflict_detector import RawConflict
from timetable_guard.services.slot_index import DIMENSION_ORDER
from timetable_guard.services.time_interval import describe_interval

# A person or a space cannot be in two places at once, and neither can a class group.
SEVERITY_BY_DIMENSION: dict[ConflictDimension, ConflictSeverity] = {
    "trainer": "error",
    "room": "error",
    "class": "error",
}
SEVERITY_RANK: dict[ConflictSeverity, int] = {"error": 0, "warning": 1}

SINGLE_DIMENSION_DISPLAY: dict[ConflictDimension, tuple[str, str]] = {
    "trainer": ("👨‍🏫", "Trainer Double-Booked"),
    "room": ("🏫", "Room Double-Booked"),
    "class": ("👥", "Class Double-Booked"),
}
MULTI_DIMENSION_DISPLAY = ("❌", "Multiple Resource Conflict")
WARNING_DISPLAY = ("⚠️", "Scheduling Conflict")


def _severity_for(dimensions: Iterable[ConflictDimension]) -> ConflictSeverity:
    severities = [SEVERITY_BY_DIMENSION.get(dimension, "warning") for dimension in dimensions]
    return min(severities, key=SEVERITY_RANK.__getitem__, default="warning")


def _icon_and_title(severity: ConflictSeverity, dimensions: list[ConflictDimension]) -> tuple[str, str]:
    if severity == "warning":
        return WARNING_DISPLAY
    if len(dimensions) == 1:
        return SINGLE_DIMENSION_DISPLAY[dimensions[0]]
    return MULTI_DIMENSION_DISPLAY


def _echo_name(*names: str | None) -> str | None:
    distinct: list[str] = []
    for name in names:
        if name and name not in distinct:
            distinct.append(name)
    return " / ".join(distinct) or None


def _resource_label(dimension: ConflictDimension, first: LessonSlot, second: LessonSlot) -> str:
    # Both slots share the resource, so either one may carry its display name.
    if dimension == "trainer":
        return f"trainer {first.trainer_name or second.trainer_name or first.trainer_id}"
    if dimension == "room":
        return f"room {first.room_name or second.room_name or first.room_id}"
    return f"class {first.class_name or second.class_name or first.class_id}"


def _lesson_label(slot: LessonSlot, week_starts_on: Literal["monday", "sunday"]) -> str:
    course = slot.course_name or slot.course_id
    group = slot.class_name or slot.class_id
    return f"{course} ({group}) {describe_interval(slot.interval, week_starts_on)}"


def _describe(
    first: LessonSlot,
    second: LessonSlot,
    dimensions: list[ConflictDimension],
    week_starts_on: Literal["monday", "sunday"],
) -> str:
    labels = [_resource_label(dimension, first, second) for dimension in dimensions]
    if len(labels) == 1:
        subject = f"{labels[0]} is"
    else:
        subject = f"{', '.join(labels[:-1])} and {labels[-1]} are"
    subject = subject[0].upper() + subject[1:]
    return (
        f"{subject} double-booked: {_lesson_label(first, week_starts_on)} "
        f"overlaps {_lesson_label(second, week_starts_on)}."
    )


def format_conflicts(
    raw_conflicts: Iterable[RawConflict],
    slots_by_id: Mapping[str, LessonSlot],
    *,
    week_starts_on: Literal["monday", "sunday"] = "monday",
) -> list[FormattedConflict]:
    merged: dict[frozenset[str], tuple[str, str, set[ConflictDimension]]] = {}
    for raw in raw_conflicts:
        entry = merged.get(raw.pair)
        if entry is None:
            merged[raw.pair] = (raw.first_id, raw.second_id, {raw.dimension})
        else:
            entry[2].add(raw.dimension)

    formatted: list[FormattedConflict] = []
    for first_id, second_id, dimension_set in merged.values():
        first = slots_by_id[first_id]
        second = slots_by_id[second_id]
        dimensions = [dimension for dimension in DIMENSION_ORDER if dimension in dimension_set]
        severity = _severity_for(dimensions)
        icon, title = _icon_and_title(severity, dimensions)
        formatted.append(
            FormattedConflict(
                severity=severity,
                icon=icon,
                title=title,
                description=_describe(first, second, dimensions, week_starts_on),
                course_name=_echo_name(first.course_name, second.course_name),
                class_name=_echo_name(first.class_name, second.class_name),
                trainer_name=_echo_name(first.trainer_name, second.trainer_name),
                dimensions=dimensions,
                slot_ids=[first_id, second_id],
            )
        )

    # sorted() is stable: detection order is kept within each severity.
    return sorted(formatted, key=lambda conflict: SEVERITY_RANK[conflict.severity])


def summarize_conflicts(conflicts: Iterable[FormattedConflict]) -> dict[str, int]:
    counts: Counter[str] = Counter()
    for conflict in conflicts:
        counts.update(conflict.dimensions)
    return {dimension: counts[dimension] for dimension in DIMENSION_ORDER if counts[dimension]}
