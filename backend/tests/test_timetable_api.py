from timetable_guard.core.config import Settings, get_settings
from timetable_guard.main import app
from timetable_guard.schemas.timetable import LessonSlotPayload


def slot_payload(slot_id, **overrides):
    payload = {
        "id": slot_id,
        "classId": "class-1",
        "courseId": "course-1",
        "trainerId": "trainer-1",
        "roomId": "room-1",
        "dayOfWeek": 0,
        "startTime": "08:00",
        "endTime": "09:00",
        "academicYear": "2025/2026",
    }
    payload.update(overrides)
    return payload


def test_validate_reports_blocking_conflict_in_camel_case(client):
    response = client.post(
        "/api/timetable/validate",
        json={
            "slots": [
                slot_payload("s1", courseName="Mathematics", className="Form 1A", trainerName="Jane Doe"),
                slot_payload("s2", classId="class-2", roomId="room-2", startTime="08:30", endTime="09:30",
                             courseName="Physics", className="Form 1B", trainerName="Jane Doe"),
            ]
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["hasBlockingConflicts"] is True
    assert body["summary"] == {"trainer": 1}
    assert len(body["conflicts"]) == 1
    conflict = body["conflicts"][0]
    assert conflict["severity"] == "error"
    assert conflict["title"] == "Trainer Double-Booked"
    assert conflict["courseName"] == "Mathematics / Physics"
    assert conflict["trainerName"] == "Jane Doe"
    assert conflict["slotIds"] == ["s1", "s2"]


def test_validate_clean_timetable(client):
    response = client.post(
        "/api/timetable/validate",
        json={"slots": [slot_payload("s1"), slot_payload("s2", startTime="09:00:00", endTime="10:00:00")]},
    )

    assert response.status_code == 200
    assert response.json() == {"conflicts": [], "hasBlockingConflicts": False, "summary": {}}


def test_validate_candidate_only_returns_its_conflicts(client):
    response = client.post(
        "/api/timetable/validate",
        json={
            "slots": [
                slot_payload("s1"),
                slot_payload("s2", classId="class-2", roomId="room-2"),
                slot_payload("s3", classId="class-3", trainerId="trainer-3", roomId="room-3", dayOfWeek=4),
            ],
            "candidate": slot_payload("s3", classId="class-3", trainerId="trainer-3", roomId="room-1"),
        },
    )

    assert response.status_code == 200
    conflicts = response.json()["conflicts"]
    assert [c["slotIds"] for c in conflicts] == [["s1", "s3"]]
    assert conflicts[0]["title"] == "Room Double-Booked"


def test_validate_rejects_inverted_interval(client):
    response = client.post(
        "/api/timetable/validate",
        json={"slots": [slot_payload("s1", startTime="10:00", endTime="09:00")]},
    )

    assert response.status_code == 422
    assert response.json()["message"] == "End time must be after start time"


def test_validate_rejects_unknown_weekday(client):
    response = client.post(
        "/api/timetable/validate",
        json={"slots": [slot_payload("s1", dayOfWeek=7)]},
    )

    assert response.status_code == 422


def test_validate_enforces_slot_limit(client):
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None, max_slots_per_request=1)

    response = client.post(
        "/api/timetable/validate",
        json={"slots": [slot_payload("s1"), slot_payload("s2")]},
    )

    assert response.status_code == 400
    assert response.json()["details"] == {"slots": 2, "max_slots_per_request": 1}


def test_slot_payload_accepts_field_names_and_aliases():
    by_alias = LessonSlotPayload.model_validate(slot_payload("s1"))
    by_name = LessonSlotPayload(
        id="s1", class_id="class-1", course_id="course-1", day_of_week=0,
        start_time="08:00", end_time="09:00", academic_year="2025/2026",
    )

    assert by_alias.to_lesson_slot().interval == by_name.to_lesson_slot().interval
    assert "from_attributes" not in LessonSlotPayload.model_config
