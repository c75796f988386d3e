# /tests/test_access_resolver.py

import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from schoolhub.models.profile_model import Profile, Role
from schoolhub.services.access_resolver import AccessResolver, ThreadVisibility

# --- Test Data Fixtures ---

@pytest.fixture
def mock_db_service():
    """Provides a mock of the DatabaseService with an empty school by default."""
    db = MagicMock()
    db.get_classrooms_by_school.return_value = []
    db.get_students_by_school.return_value = []
    db.get_teacher_classroom_ids.return_value = []
    db.get_guardian_student_ids.return_value = []
    db.get_enrollments_by_student_ids.return_value = []
    db.get_enrollments_by_classroom_ids.return_value = []
    return db


@pytest.fixture
def resolver(mock_db_service):
    return AccessResolver(mock_db_service)


def classroom(id, school_id="S1"):
    return SimpleNamespace(id=id, name=id, school_id=school_id)


def enrollment(student_id, classroom_id, school_id="S1"):
    return SimpleNamespace(student_id=student_id, classroom_id=classroom_id, school_id=school_id)

# --- resolve_classrooms ---

def test_director_sees_every_classroom_of_the_school(resolver, mock_db_service):
    mock_db_service.get_classrooms_by_school.return_value = [classroom("C1"), classroom("C2")]

    assert resolver.resolve_classrooms("director", "D1", "S1") == {"C1", "C2"}
    # Director access is school-wide, not user-specific.
    assert resolver.resolve_classrooms("director", "someone-else", "S1") == {"C1", "C2"}
    mock_db_service.get_classrooms_by_school.assert_called_with("S1")


def test_director_without_school_sees_nothing(resolver, mock_db_service):
    assert resolver.resolve_classrooms(Role.DIRECTOR, "D1", None) == set()
    mock_db_service.get_classrooms_by_school.assert_not_called()


def test_teacher_sees_only_assigned_classrooms(resolver, mock_db_service):
    mock_db_service.get_teacher_classroom_ids.return_value = ["C1"]

    assert resolver.resolve_classrooms("teacher", "T1", "S1") == {"C1"}
    mock_db_service.get_teacher_classroom_ids.assert_called_once_with("T1")


def test_teacher_with_no_assignments_gets_empty_set(resolver):
    assert resolver.resolve_classrooms("maestra", "T2", "S1") == set()


def test_guardian_classrooms_follow_ward_enrollments(resolver, mock_db_service):
    mock_db_service.get_guardian_student_ids.return_value = ["ST1"]
    mock_db_service.get_enrollments_by_student_ids.return_value = [enrollment("ST1", "C1")]

    # The school id argument does not matter for guardians.
    assert resolver.resolve_classrooms("padre", "G1", "S1") == {"C1"}
    assert resolver.resolve_classrooms("padre", "G1", None) == {"C1"}
    assert "C1" in resolver.resolve_classrooms("guardian", "G1", "S-other")


def test_guardian_without_wards_does_not_query_enrollments(resolver, mock_db_service):
    assert resolver.resolve_classrooms("tutor", "G3", "S1") == set()
    mock_db_service.get_enrollments_by_student_ids.assert_not_called()


@pytest.mark.parametrize("role", [None, "", "janitor", "admin"])
def test_unknown_role_gets_nothing(resolver, mock_db_service, role):
    assert resolver.resolve_classrooms(role, "U1", "S1") == set()
    assert resolver.resolve_students(role, "U1", "S1") == set()
    mock_db_service.get_classrooms_by_school.assert_not_called()

# --- resolve_students ---

def test_director_sees_every_student_of_the_school(resolver, mock_db_service):
    mock_db_service.get_students_by_school.return_value = [SimpleNamespace(id="ST1"), SimpleNamespace(id="ST2")]
    assert resolver.resolve_students("director", "D1", "S1", classroom_ids=[]) == {"ST1", "ST2"}


def test_teacher_students_come_from_the_given_classroom_scope(resolver, mock_db_service):
    mock_db_service.get_enrollments_by_classroom_ids.return_value = [
        enrollment("ST1", "C1"), enrollment("ST4", "C1"),
    ]

    assert resolver.resolve_students("teacher", "T1", "S1", classroom_ids={"C1"}) == {"ST1", "ST4"}
    # The classroom scope was supplied, so it is not resolved again.
    mock_db_service.get_teacher_classroom_ids.assert_not_called()


def test_teacher_students_resolve_classrooms_first_when_not_given(resolver, mock_db_service):
    mock_db_service.get_teacher_classroom_ids.return_value = ["C1"]
    mock_db_service.get_enrollments_by_classroom_ids.return_value = [enrollment("ST1", "C1")]

    assert resolver.resolve_students("teacher", "T1", "S1") == {"ST1"}
    mock_db_service.get_enrollments_by_classroom_ids.assert_called_once_with(["C1"])


def test_guardian_students_are_the_linked_wards(resolver, mock_db_service):
    mock_db_service.get_guardian_student_ids.return_value = ["ST1"]
    assert resolver.resolve_students("madre", "G1", None) == {"ST1"}


def test_resolving_twice_gives_identical_results(resolver, mock_db_service):
    mock_db_service.get_teacher_classroom_ids.return_value = ["C1", "C2"]
    mock_db_service.get_enrollments_by_classroom_ids.return_value = [enrollment("ST1", "C1")]

    first = (resolver.resolve_classrooms("teacher", "T1", "S1"), resolver.resolve_students("teacher", "T1", "S1"))
    second = (resolver.resolve_classrooms("teacher", "T1", "S1"), resolver.resolve_students("teacher", "T1", "S1"))
    assert first == second


def test_backend_errors_propagate_unchanged(resolver, mock_db_service):
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    mock_db_service.get_classrooms_by_school.side_effect = error

    with pytest.raises(OperationalError) as excinfo:
        resolver.resolve_classrooms("director", "D1", "S1")
    assert excinfo.value is error

# --- resolve_thread_visibility ---

def test_general_thread_is_readable_and_postable_by_unassigned_teacher(resolver):
    visibility = resolver.resolve_thread_visibility("teacher", "T2", "S1", "S1", None)
    assert visibility == ThreadVisibility(can_read=True, can_post=True)


def test_general_thread_of_another_school_is_hidden(resolver):
    assert resolver.resolve_thread_visibility("director", "D1", "S1", "S2", None) == ThreadVisibility()
    assert resolver.resolve_thread_visibility("teacher", "T1", None, "S1", None) == ThreadVisibility()


def test_guardian_reads_but_cannot_post_general_thread(resolver, mock_db_service):
    mock_db_service.get_guardian_student_ids.return_value = ["ST1"]
    mock_db_service.get_enrollments_by_student_ids.return_value = [enrollment("ST1", "C1")]

    visibility = resolver.resolve_thread_visibility("parent", "G1", "S1", "S1", None)

    assert visibility == ThreadVisibility(can_read=True, can_post=False)
    mock_db_service.get_enrollments_by_student_ids.assert_called_once_with(["ST1"], school_id="S1")


def test_guardian_without_enrolled_ward_cannot_read_general_thread(resolver, mock_db_service):
    mock_db_service.get_guardian_student_ids.return_value = ["ST9"]
    mock_db_service.get_enrollments_by_student_ids.return_value = []

    assert resolver.resolve_thread_visibility("parent", "G1", "S1", "S1", None).can_read is False


def test_classroom_thread_requires_classroom_in_scope(resolver, mock_db_service):
    mock_db_service.get_teacher_classroom_ids.return_value = ["C1"]

    assert resolver.resolve_thread_visibility("teacher", "T1", "S1", "S1", "C1") == ThreadVisibility(True, True)
    assert resolver.resolve_thread_visibility("teacher", "T1", "S1", "S1", "C2") == ThreadVisibility(False, False)


def test_classroom_thread_uses_precomputed_scope(resolver, mock_db_service):
    visibility = resolver.resolve_thread_visibility("director", "D1", "S1", "S1", "C7", classroom_ids={"C7"})
    assert visibility.can_post is True
    mock_db_service.get_classrooms_by_school.assert_not_called()


def test_guardian_posts_only_where_a_ward_is_enrolled(resolver, mock_db_service):
    mock_db_service.get_guardian_student_ids.return_value = ["ST1"]
    mock_db_service.get_enrollments_by_student_ids.return_value = [enrollment("ST1", "C1")]

    assert resolver.resolve_thread_visibility("padre", "G1", "S1", "S1", "C1") == ThreadVisibility(True, True)
    assert resolver.resolve_thread_visibility("padre", "G1", "S1", "S1", "C2") == ThreadVisibility(False, False)


def test_unknown_role_cannot_see_any_thread(resolver):
    assert resolver.resolve_thread_visibility(None, "U1", "S1", "S1", None) == ThreadVisibility()
    assert resolver.resolve_thread_visibility("janitor", "U1", "S1", "S1", "C1") == ThreadVisibility()

# --- resolve_scope ---

def test_resolve_scope_bundles_classrooms_and_students(resolver, mock_db_service):
    mock_db_service.get_teacher_classroom_ids.return_value = ["C1"]
    mock_db_service.get_enrollments_by_classroom_ids.return_value = [enrollment("ST1", "C1")]
    profile = Profile(id="T1", role=Role.TEACHER, raw_role="maestra", school_id="S1")

    scope = resolver.resolve_scope(profile)

    assert scope.classroom_ids == frozenset({"C1"})
    assert scope.student_ids == frozenset({"ST1"})
    assert scope.is_staff is True
    assert scope.can_access_classroom("C1") and not scope.can_access_classroom("C2")
    assert not scope.can_access_student(None)
    # Teacher assignments are fetched once for the whole scope.
    mock_db_service.get_teacher_classroom_ids.assert_called_once_with("T1")
