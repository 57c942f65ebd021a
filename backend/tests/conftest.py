import pytest
from fastapi.testclient import TestClient #fake http client that calls the FastAPI routes without running a server

from timetable_guard.main import app
from timetable_guard.schemas.timetable import LessonSlot, TimeSlot


def make_slot(
    slot_id,
    *,
    weekday=0,
    start="08:00",
    end="09:00",
    class_id="class-a",
    course_id="course-1",
    trainer_id="trainer-1",
    room_id="room-1",
    academic_year="2025/2026",
    active=True,
    **names,
):
    return LessonSlot(
        id=slot_id,
        class_id=class_id,
        course_id=course_id,
        trainer_id=trainer_id,
        room_id=room_id,
        interval=TimeSlot.from_clock(weekday, start, end),
        academic_year=academic_year,
        active=active,
        **names,
    )


@pytest.fixture()
def slot_factory():
    return make_slot


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
