from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from timetable_guard.core.config import Settings, get_settings
from timetable_guard.core.exceptions import TimetablePayloadError
from timetable_guard.schemas.conflict import TimetableValidationReport
from timetable_guard.schemas.timetable import TimetableValidationRequest
from timetable_guard.services.timetable_validation import validate_candidate_slot, validate_timetable

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/validate", response_model=TimetableValidationReport, response_model_by_alias=True)
def validate(
    payload: TimetableValidationRequest,
    settings: Settings = Depends(get_settings),
) -> TimetableValidationReport:
    total = len(payload.slots) + (1 if payload.candidate is not None else 0)
    if total > settings.max_slots_per_request:
        raise TimetablePayloadError(
            f"Too many slots in one request ({total}). Maximum allowed is {settings.max_slots_per_request}.",
            details={"slots": total, "max_slots_per_request": settings.max_slots_per_request},
        )

    # Conversion raises InvalidIntervalError for malformed clock strings.
    slots = [item.to_lesson_slot() for item in payload.slots]
    if payload.candidate is not None:
        candidate = payload.candidate.to_lesson_slot()
        report = validate_candidate_slot(slots, candidate, week_starts_on=settings.week_starts_on)
    else:
        report = validate_timetable(slots, week_starts_on=settings.week_starts_on)

    if report.has_blocking_conflicts:
        logger.info(
            "Timetable validation found %d blocking conflict(s) across %d slot(s)",
            sum(1 for conflict in report.conflicts if conflict.severity == "error"),
            total,
        )
    return report
