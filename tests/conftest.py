# /tests/conftest.py

"""
Shared fixtures: an in-memory SQLite database seeded with two schools, and a
FastAPI TestClient wired to it.

Seed layout (school S1 unless noted):
    classrooms   C1, C2                  C3 (S2)
    students     ST1 in C1, ST2 in C2     ST3 in C3 (S2)
    director     D1
    teachers     T1 ('teacher') -> C1, T2 ('maestra') -> nothing,  T3 (S2) -> C3
    guardians    G1 ('padre') -> ST1,     G2 ('parent', S2) -> ST3,  G3 ('madre') -> nobody
"""

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from schoolhub.db.base import Base
from schoolhub.db.database import get_db
from schoolhub.db.models.school_models import (
    School, UserProfile, Classroom, Student, Enrollment, TeacherClassroom, Guardian,
)
from schoolhub.db.models.message_models import MessageThread, Message
from schoolhub.main import app
from schoolhub.services.database_service import DatabaseService


@pytest.fixture
def db_session():
    """A fresh in-memory database per test. StaticPool keeps one connection so
    the TestClient's worker threads see the same data."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def seeded_session(db_session):
    db_session.add_all([
        School(id="S1", name="Escuela Uno"),
        School(id="S2", name="Escuela Dos"),
    ])
    db_session.add_all([
        UserProfile(id="D1", role="director", display_name="Directora", school_id="S1"),
        UserProfile(id="T1", role="teacher", display_name="Teacher One", school_id="S1"),
        UserProfile(id="T2", role="maestra", display_name="Maestra Dos", school_id="S1"),
        UserProfile(id="T3", role="teacher", display_name="Teacher Three", school_id="S2"),
        UserProfile(id="G1", role="padre", display_name="Padre Uno", school_id="S1"),
        UserProfile(id="G2", role="parent", display_name="Parent Two", school_id="S2"),
        UserProfile(id="G3", role="madre", display_name="Madre Tres", school_id="S1"),
    ])
    db_session.add_all([
        Classroom(id="C1", name="Primero A", school_id="S1"),
        Classroom(id="C2", name="segundo B", school_id="S1"),
        Classroom(id="C3", name="Tercero C", school_id="S2"),
    ])
    db_session.add_all([
        Student(id="ST1", first_name="Ana", last_name="Lopez", school_id="S1", date_of_birth=date(2017, 5, 1)),
        Student(id="ST2", first_name="Bruno", last_name="Diaz", school_id="S1"),
        Student(id="ST3", first_name="Carla", last_name="Ruiz", school_id="S2"),
    ])
    db_session.add_all([
        Enrollment(id="E1", student_id="ST1", classroom_id="C1", school_id="S1"),
        Enrollment(id="E2", student_id="ST2", classroom_id="C2", school_id="S1"),
        Enrollment(id="E3", student_id="ST3", classroom_id="C3", school_id="S2"),
        TeacherClassroom(id="TC1", teacher_id="T1", classroom_id="C1"),
        TeacherClassroom(id="TC3", teacher_id="T3", classroom_id="C3"),
        Guardian(id="GL1", user_id="G1", student_id="ST1", relationship="padre"),
        Guardian(id="GL2", user_id="G2", student_id="ST3", relationship=None),
    ])
    db_session.add_all([
        MessageThread(id="MT1", school_id="S1", classroom_id=None, title="Bienvenida",
                      created_by="D1", created_at=datetime(2025, 3, 1, 8, 0)),
        MessageThread(id="MT2", school_id="S1", classroom_id="C1", title="Tarea de C1",
                      created_by="T1", created_at=datetime(2025, 3, 2, 8, 0)),
        MessageThread(id="MT3", school_id="S1", classroom_id="C2", title="Excursion C2",
                      created_by="D1", created_at=datetime(2025, 3, 3, 8, 0)),
        MessageThread(id="MT4", school_id="S2", classroom_id=None, title="Otra escuela",
                      created_by="T3", created_at=datetime(2025, 3, 4, 8, 0)),
    ])
    db_session.add_all([
        Message(id="M1", thread_id="MT1", sender_id="D1", body="Bienvenidos al ciclo escolar",
                created_at=datetime(2025, 3, 1, 8, 0)),
        Message(id="M2", thread_id="MT2", sender_id="T1", body="Traer cuaderno nuevo",
                created_at=datetime(2025, 3, 2, 8, 0)),
        Message(id="M3", thread_id="MT3", sender_id="D1", body="Salida al museo el viernes",
                created_at=datetime(2025, 3, 3, 8, 0)),
        Message(id="M4", thread_id="MT4", sender_id="T3", body="Aviso de la escuela dos",
                created_at=datetime(2025, 3, 4, 8, 0)),
    ])
    db_session.commit()
    return db_session


@pytest.fixture
def db_service(seeded_session):
    return DatabaseService(db_session=seeded_session)


@pytest.fixture
def client(seeded_session):
    def override_get_db():
        yield seeded_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def as_user():
    """Builds the gateway header for a given user id."""
    return lambda user_id: {"X-User-Id": user_id}

