# /tests/test_attendance_service.py

from datetime import date

import pytest

from schoolhub.core.errors import AccessDenied, ResourceNotFound
from schoolhub.models.attendance_model import AttendanceEntry, AttendanceSave, AttendanceStatus
from schoolhub.models.profile_model import Profile
from schoolhub.services import attendance_service
from schoolhub.services.access_resolver import AccessResolver

DAY = date(2025, 3, 10)


@pytest.fixture
def scope_of(db_service):
    resolver = AccessResolver(db_service)

    def _scope(user_id):
        return resolver.resolve_scope(Profile.from_row(user_id, db_service.get_profile_by_id(user_id)))
    return _scope


def test_sheet_lists_the_roster_before_anything_is_taken(db_service, scope_of):
    sheet = attendance_service.get_sheet("C1", DAY, scope_of("T1"), db_service)

    assert [row.student_id for row in sheet.rows] == ["ST1"]
    assert sheet.rows[0].display_name == "Ana Lopez"
    assert sheet.rows[0].status is None
    assert sheet.can_edit is True
    assert sheet.totals.P == sheet.totals.A == sheet.totals.R == 0


def test_saving_twice_replaces_the_previous_status(db_service, scope_of):
    scope = scope_of("T1")
    first = AttendanceSave(classroom_id="C1", date=DAY, entries=[AttendanceEntry(student_id="ST1", status="A")])
    second = AttendanceSave(
        classroom_id="C1", date=DAY,
        entries=[AttendanceEntry(student_id="ST1", status="R", note="  llego 8:15 ")],
    )

    attendance_service.save_sheet(first, scope, db_service)
    sheet = attendance_service.save_sheet(second, scope, db_service)

    records = db_service.get_attendance_for_classroom_date("C1", DAY)
    assert len(records) == 1
    assert records[0].status == "R"
    assert records[0].taken_by == "T1"
    assert sheet.rows[0].status is AttendanceStatus.LATE
    assert sheet.rows[0].note == "llego 8:15"
    assert sheet.totals.R == 1


def test_entries_without_status_are_skipped(db_service, scope_of):
    payload = AttendanceSave(classroom_id="C1", date=DAY, entries=[AttendanceEntry(student_id="ST1")])

    attendance_service.save_sheet(payload, scope_of("T1"), db_service)

    assert db_service.get_attendance_for_classroom_date("C1", DAY) == []


def test_student_not_enrolled_in_classroom_is_rejected(db_service, scope_of):
    payload = AttendanceSave(
        classroom_id="C1", date=DAY,
        entries=[AttendanceEntry(student_id="ST1", status="P"), AttendanceEntry(student_id="ST2", status="P")],
    )

    with pytest.raises(ValueError):
        attendance_service.save_sheet(payload, scope_of("D1"), db_service)
    # Nothing from the rejected batch is written.
    assert db_service.get_attendance_for_classroom_date("C1", DAY) == []


def test_guardian_can_read_but_not_write(db_service, scope_of):
    scope = scope_of("G1")
    assert attendance_service.get_sheet("C1", DAY, scope, db_service).can_edit is False

    payload = AttendanceSave(classroom_id="C1", date=DAY, entries=[AttendanceEntry(student_id="ST1", status="P")])
    with pytest.raises(AccessDenied):
        attendance_service.save_sheet(payload, scope, db_service)


def test_classroom_outside_scope_is_not_found(db_service, scope_of):
    with pytest.raises(ResourceNotFound):
        attendance_service.get_sheet("C2", DAY, scope_of("T1"), db_service)
    with pytest.raises(ResourceNotFound):
        attendance_service.get_sheet("C3", DAY, scope_of("D1"), db_service)


def test_guardian_sheet_hides_classmates(db_service, scope_of):
    db_service.upsert_student({"id": "ST9", "first_name": "Elena", "last_name": "Vega", "school_id": "S1"})
    db_service.add_enrollment({"student_id": "ST9", "classroom_id": "C1", "school_id": "S1"})
    payload = AttendanceSave(
        classroom_id="C1", date=DAY,
        entries=[AttendanceEntry(student_id="ST9", status="A", note="private medical note")],
    )
    attendance_service.save_sheet(payload, scope_of("T1"), db_service)

    guardian_sheet = attendance_service.get_sheet("C1", DAY, scope_of("G1"), db_service)
    teacher_sheet = attendance_service.get_sheet("C1", DAY, scope_of("T1"), db_service)

    assert [row.student_id for row in guardian_sheet.rows] == ["ST1"]
    assert guardian_sheet.totals.A == 0
    assert sorted(row.student_id for row in teacher_sheet.rows) == ["ST1", "ST9"]
