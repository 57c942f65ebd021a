from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator, model_validator

from timetable_guard.core.exceptions import InvalidIntervalError

MINUTES_PER_DAY = 24 * 60
DAYS_PER_WEEK = 7

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?$")


def parse_time_to_minutes(value: str) -> int:
    """Convert ``HH:MM`` or ``HH:MM:SS`` (as returned by the store) to minutes since midnight."""
    match = TIME_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise InvalidIntervalError(
            "Time must be in HH:MM 24-hour format",
            details={"value": value},
        )
    hours, minutes, seconds = match.groups()
    if seconds not in (None, "00"):
        raise InvalidIntervalError(
            "Time must fall on a whole minute",
            details={"value": value},
        )
    return int(hours) * 60 + int(minutes)


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


class TimeSlot(BaseModel):
    """
    Half-open time-of-day interval ``[start_minute, end_minute)`` on one weekday.

    Whether weekday 0 is Monday or Sunday is up to the caller; it only has to
    be consistent across one validation call.
    """

    weekday: int
    start_minute: int
    end_minute: int

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "TimeSlot":
        details = {"weekday": self.weekday, "start_minute": self.start_minute, "end_minute": self.end_minute}
        if not 0 <= self.weekday < DAYS_PER_WEEK:
            raise InvalidIntervalError("Weekday must be between 0 and 6", details=details)
        if not 0 <= self.start_minute < MINUTES_PER_DAY or not 0 <= self.end_minute < MINUTES_PER_DAY:
            raise InvalidIntervalError("Time bounds must fall within one day [0, 1440)", details=details)
        if self.start_minute >= self.end_minute:
            raise InvalidIntervalError("End time must be after start time", details=details)
        return self

    @classmethod
    def from_clock(cls, weekday: int, start: str, end: str) -> "TimeSlot":
        return cls(
            weekday=weekday,
            start_minute=parse_time_to_minutes(start),
            end_minute=parse_time_to_minutes(end),
        )

    def overlaps(self, other: "TimeSlot") -> bool:
        # Touching endpoints (one ends at 10:00, the other starts at 10:00) do not overlap.
        return (
            self.weekday == other.weekday
            and self.start_minute < other.end_minute
            and other.start_minute < self.end_minute
        )


class LessonSlot(BaseModel):
    """One scheduled occurrence of a class-course pairing, as read from the store."""

    id: str = Field(min_length=1)
    class_id: str = Field(min_length=1)
    course_id: str = Field(min_length=1)
    trainer_id: str | None = None
    room_id: str | None = None
    interval: TimeSlot
    academic_year: str = Field(min_length=1)
    active: bool = True

    course_name: str | None = None
    class_name: str | None = None
    trainer_name: str | None = None
    room_name: str | None = None

    model_config = {"frozen": True}

    @field_validator("trainer_id", "room_id", "course_name", "class_name", "trainer_name", "room_name")
    @classmethod
    def normalize_optional_text(cls, value: str | None) -> str | None:
        return _blank_to_none(value)


class LessonSlotPayload(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    class_id: str = Field(alias="classId", min_length=1, max_length=64)
    course_id: str = Field(alias="courseId", min_length=1, max_length=64)
    trainer_id: str | None = Field(default=None, alias="trainerId", max_length=64)
    room_id: str | None = Field(default=None, alias="roomId", max_length=100)
    day_of_week: int = Field(alias="dayOfWeek", ge=0, le=6)
    start_time: str = Field(alias="startTime", max_length=8)
    end_time: str = Field(alias="endTime", max_length=8)
    academic_year: str = Field(alias="academicYear", min_length=1, max_length=20)
    active: bool = True

    course_name: str | None = Field(default=None, alias="courseName", max_length=200)
    class_name: str | None = Field(default=None, alias="className", max_length=200)
    trainer_name: str | None = Field(default=None, alias="trainerName", max_length=200)
    room_name: str | None = Field(default=None, alias="roomName", max_length=100)

    model_config = {"populate_by_name": True}

    def to_lesson_slot(self) -> LessonSlot:
        # Malformed clock strings fail here with InvalidIntervalError.
        return LessonSlot(
            id=self.id,
            class_id=self.class_id,
            course_id=self.course_id,
            trainer_id=self.trainer_id,
            room_id=self.room_id,
            interval=TimeSlot.from_clock(self.day_of_week, self.start_time, self.end_time),
            academic_year=self.academic_year,
            active=self.active,
            course_name=self.course_name,
            class_name=self.class_name,
            trainer_name=self.trainer_name,
            room_name=self.room_name,
        )


class TimetableValidationRequest(BaseModel):
    slots: list[LessonSlotPayload] = Field(default_factory=list)
    candidate: LessonSlotPayload | None = None
