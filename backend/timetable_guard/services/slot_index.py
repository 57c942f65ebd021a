from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from timetable_guard.schemas.conflict import ConflictDimension
from timetable_guard.schemas.timetable import LessonSlot

# (academic_year, weekday, resource_key)
BucketKey = tuple[str, int, str]

DIMENSION_ORDER: tuple[ConflictDimension, ...] = ("trainer", "room", "class")

_RESOURCE_KEYS: dict[ConflictDimension, Callable[[LessonSlot], str | None]] = {
    "trainer": lambda slot: slot.trainer_id,
    "room": lambda slot: slot.room_id,
    "class": lambda slot: slot.class_id,
}


@dataclass
class SlotIndex:
    by_trainer: dict[BucketKey, list[LessonSlot]] = field(default_factory=dict)
    by_room: dict[BucketKey, list[LessonSlot]] = field(default_factory=dict)
    by_class: dict[BucketKey, list[LessonSlot]] = field(default_factory=dict)

    def buckets(self, dimension: ConflictDimension) -> dict[BucketKey, list[LessonSlot]]:
        if dimension == "trainer":
            return self.by_trainer
        if dimension == "room":
            return self.by_room
        return self.by_class


def build_slot_index(slots: Iterable[LessonSlot]) -> SlotIndex:
    """
    Group active slots by (academic year, weekday, resource) for each dimension.

    A slot without a trainer or room is left out of that dimension. A slot id
    that repeats in the input keeps only its first occurrence, so a slot can
    never be compared with itself.
    """
    index = SlotIndex()
    seen_ids: set[str] = set()

    for slot in slots:
        if not slot.active or slot.id in seen_ids:
            continue
        seen_ids.add(slot.id)
        for dimension in DIMENSION_ORDER:
            resource_key = _RESOURCE_KEYS[dimension](slot)
            if resource_key is None:
                continue
            key: BucketKey = (slot.academic_year, slot.interval.weekday, resource_key)
            index.buckets(dimension).setdefault(key, []).append(slot)

    return index
