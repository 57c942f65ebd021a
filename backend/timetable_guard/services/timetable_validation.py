from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Literal

from timetable_guard.schemas.conflict import TimetableValidationReport
from timetable_guard.schemas.timetable import LessonSlot
from timetable_guard.services.conflict_detector import detect_conflicts
from timetable_guard.services.conflict_reporter import format_conflicts, summarize_conflicts
from timetable_guard.services.slot_index import build_slot_index

logger = logging.getLogger(__name__)


def validate_timetable(
    slots: Iterable[LessonSlot],
    *,
    week_starts_on: Literal["monday", "sunday"] = "monday",
) -> TimetableValidationReport:
    """
    Check a proposed timetable for trainer, room and class double-bookings.

    The input is never mutated and no state survives the call, so the same
    input in the same order always yields the same report.
    """
    # A repeated id keeps its first occurrence; later copies are never indexed.
    slots_by_id: dict[str, LessonSlot] = {}
    for slot in slots:
        if slot.active:
            slots_by_id.setdefault(slot.id, slot)
    active = list(slots_by_id.values())

    raw_conflicts = detect_conflicts(build_slot_index(active))
    conflicts = format_conflicts(raw_conflicts, slots_by_id, week_starts_on=week_starts_on)
    logger.debug(
        "Validated %d active slot(s): %d raw overlap(s), %d conflict(s)",
        len(active),
        len(raw_conflicts),
        len(conflicts),
    )
    return TimetableValidationReport(
        conflicts=conflicts,
        has_blocking_conflicts=any(conflict.severity == "error" for conflict in conflicts),
        summary=summarize_conflicts(conflicts),
    )


def merge_candidate(existing: Sequence[LessonSlot], candidate: LessonSlot) -> list[LessonSlot]:
    """Replace the slot being edited (same id) or append a new one."""
    merged: list[LessonSlot] = []
    replaced = False
    for slot in existing:
        if slot.id == candidate.id:
            if not replaced:
                merged.append(candidate)
                replaced = True
            continue
        merged.append(slot)
    if not replaced:
        merged.append(candidate)
    return merged


def validate_candidate_slot(
    existing: Sequence[LessonSlot],
    candidate: LessonSlot,
    *,
    week_starts_on: Literal["monday", "sunday"] = "monday",
) -> TimetableValidationReport:
    """Validate a new or edited slot and keep only the conflicts it takes part in."""
    report = validate_timetable(merge_candidate(existing, candidate), week_starts_on=week_starts_on)
    conflicts = [conflict for conflict in report.conflicts if candidate.id in conflict.slot_ids]
    return TimetableValidationReport(
        conflicts=conflicts,
        has_blocking_conflicts=any(conflict.severity == "error" for conflict in conflicts),
        summary=summarize_conflicts(conflicts),
    )
