from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.core.security import create_user_token, get_password_hash
from app.db import Base, Course, CourseClass, Enrollment, User
from app.main import app


@pytest.fixture
def db():
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
        engine.dispose()


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user):
        token = create_user_token(user)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(role="student", full_name=None):
        counter["n"] += 1
        user = User(
            email=f"{role}{counter['n']}@toeic.local",
            hashed_password=get_password_hash("secret123"),
            role=role,
            full_name=full_name or f"{role.title()} {counter['n']}",
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_course(db):
    def _make(title="TOEIC 550+", level="beginner"):
        course = Course(title=title, level=level, type="live-meet", status="active")
        db.add(course)
        db.commit()
        db.refresh(course)
        return course

    return _make


@pytest.fixture
def make_class(db):
    counter = {"n": 0}

    def _make(
        course,
        instructor,
        days,
        start_date,
        duration_weeks=None,
        end_date=None,
        status="ongoing",
        class_code=None,
        max_students=20,
    ):
        counter["n"] += 1
        course_class = CourseClass(
            course_id=course.id,
            class_code=class_code or f"B{counter['n']:03d}",
            instructor_id=instructor.id,
            schedule_days=list(days),
            start_time="19:00",
            end_time="20:30",
            start_date=start_date,
            end_date=end_date,
            duration_weeks=duration_weeks,
            max_students=max_students,
            current_students=0,
            status=status,
        )
        db.add(course_class)
        db.commit()
        db.refresh(course_class)
        return course_class

    return _make


@pytest.fixture
def make_enrollment(db):
    def _make(student, course_class, makeup_changes_count=2, status="enrolled"):
        enrollment = Enrollment(
            student_id=student.id,
            class_id=course_class.id,
            course_id=course_class.course_id,
            status=status,
            makeup_changes_count=makeup_changes_count,
            sessions_attended=0,
            total_sessions=4,
        )
        db.add(enrollment)
        db.commit()
        db.refresh(enrollment)
        return enrollment

    return _make


@pytest.fixture
def jan_2025():
    """Понедельник 2025-01-06: класс Mon/Wed на две недели."""
    return date(2025, 1, 6)
