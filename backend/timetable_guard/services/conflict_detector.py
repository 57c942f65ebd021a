from __future__ import annotations

from dataclasses import dataclass

from timetable_guard.schemas.conflict import ConflictDimension
from timetable_guard.services.slot_index import DIMENSION_ORDER, SlotIndex


@dataclass(frozen=True)
class RawConflict:
    first_id: str
    second_id: str
    dimension: ConflictDimension

    @property
    def pair(self) -> frozenset[str]:
        return frozenset((self.first_id, self.second_id))


def detect_conflicts(index: SlotIndex) -> list[RawConflict]:
    conflicts: list[RawConflict] = []

    # O(k^2) per bucket is fine: one resource rarely has more than a handful
    # of lessons on the same weekday.
    for dimension in DIMENSION_ORDER:
        for bucket in index.buckets(dimension).values():
            n = len(bucket)
            for i in range(n):
                s1 = bucket[i]
                for j in range(i + 1, n):
                    s2 = bucket[j]
                    if s1.id == s2.id:
                        continue
                    if s1.interval.overlaps(s2.interval):
                        conflicts.append(RawConflict(first_id=s1.id, second_id=s2.id, dimension=dimension))

    return conflicts
