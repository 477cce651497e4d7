from datetime import date

import pytest

from app.core import schedule_service
from app.core.exceptions import ClassNotFoundError, NotEnrolledError
from app.db import AttendanceEntry, AttendanceRecord


MON_WED = ["Monday", "Wednesday"]


def add_record(db, course_class, session_date, marks, status="finalized"):
    record = AttendanceRecord(
        class_id=course_class.id,
        session_date=session_date,
        instructor_id=course_class.instructor_id,
        status=status,
    )
    for student_id, is_present in marks.items():
        record.entries.append(
            AttendanceEntry(student_id=student_id, is_present=is_present, marked_by=course_class.instructor_id)
        )
    db.add(record)
    db.commit()
    return record


@pytest.fixture
def enrolled_class(make_user, make_course, make_class, make_enrollment, jan_2025):
    instructor = make_user("instructor", full_name="Nguyen Van A")
    student = make_user("student")
    course = make_course()
    course_class = make_class(course, instructor, MON_WED, jan_2025, duration_weeks=2)
    make_enrollment(student, course_class)
    return course_class, student


def test_schedule_marks_present_absent_and_pending(db, enrolled_class):
    course_class, student = enrolled_class
    add_record(db, course_class, date(2025, 1, 6), {student.id: True})
    add_record(db, course_class, date(2025, 1, 8), {student.id: False})
    # черновик не учитывается
    add_record(db, course_class, date(2025, 1, 13), {student.id: False}, status="draft")

    result = schedule_service.get_schedule_for_student(db, course_class.id, student.id, today=date(2025, 1, 14))

    views = [(s.session_number, s.date, s.attendance, s.makeup_eligible) for s in result.sessions]
    assert views == [
        (1, date(2025, 1, 6), "present", False),
        (2, date(2025, 1, 8), "absent", True),
        (3, date(2025, 1, 13), "pending", False),
        (4, date(2025, 1, 15), "pending", False),
    ]
    assert result.sessions[1].day_label == "Wednesday"


def test_absence_today_is_not_makeup_eligible_yet(db, enrolled_class):
    course_class, student = enrolled_class
    add_record(db, course_class, date(2025, 1, 8), {student.id: False})

    result = schedule_service.get_schedule_for_student(db, course_class.id, student.id, today=date(2025, 1, 8))

    assert result.sessions[1].attendance == "absent"
    assert result.sessions[1].makeup_eligible is False


def test_record_without_student_entry_stays_pending(db, enrolled_class, make_user):
    course_class, student = enrolled_class
    other = make_user("student")
    add_record(db, course_class, date(2025, 1, 6), {other.id: True})

    result = schedule_service.get_schedule_for_student(db, course_class.id, student.id, today=date(2025, 2, 1))

    assert result.sessions[0].attendance == "pending"


def test_class_summary(db, enrolled_class):
    course_class, student = enrolled_class

    summary = schedule_service.get_schedule_for_student(db, course_class.id, student.id).class_summary

    assert summary.class_code == course_class.class_code
    assert summary.course_title == "TOEIC 550+"
    assert summary.instructor_name == "Nguyen Van A"
    assert summary.end_date == date(2025, 1, 19)
    assert summary.total_sessions == 4
    assert summary.days == MON_WED


def test_schedule_requires_active_enrollment(db, make_user, make_course, make_class, make_enrollment, jan_2025):
    instructor = make_user("instructor")
    student = make_user("student")
    course_class = make_class(make_course(), instructor, MON_WED, jan_2025, duration_weeks=2)

    with pytest.raises(NotEnrolledError):
        schedule_service.get_schedule_for_student(db, course_class.id, student.id)

    make_enrollment(student, course_class, status="dropped")
    with pytest.raises(NotEnrolledError):
        schedule_service.get_schedule_for_student(db, course_class.id, student.id)


def test_schedule_for_unknown_class(db, make_user):
    student = make_user("student")
    with pytest.raises(ClassNotFoundError):
        schedule_service.get_schedule_for_student(db, 999, student.id)


def test_schedule_does_not_write(db, enrolled_class):
    course_class, student = enrolled_class
    schedule_service.get_schedule_for_student(db, course_class.id, student.id)
    assert db.query(AttendanceRecord).count() == 0


def test_my_schedule_orders_classes_and_filters_period(
    db, make_user, make_course, make_class, make_enrollment
):
    instructor = make_user("instructor")
    student = make_user("student")
    course = make_course()
    march = make_class(course, instructor, ["Tuesday"], date(2025, 3, 4), duration_weeks=4)
    january = make_class(course, instructor, MON_WED, date(2025, 1, 6), duration_weeks=2)
    dropped = make_class(course, instructor, ["Friday"], date(2025, 3, 7), duration_weeks=2)
    make_enrollment(student, march)
    make_enrollment(student, january)
    make_enrollment(student, dropped, status="dropped")

    everything = schedule_service.get_my_schedule(db, student.id, today=date(2025, 3, 10))
    assert [s.class_summary.class_id for s in everything] == [january.id, march.id]

    this_month = schedule_service.get_my_schedule(db, student.id, period="month", today=date(2025, 3, 10))
    assert [s.class_summary.class_id for s in this_month] == [march.id]

    # неделя начинается с воскресенья 2025-03-09
    this_week = schedule_service.get_my_schedule(db, student.id, period="week", today=date(2025, 3, 10))
    assert this_week == []


def test_unknown_period():
    with pytest.raises(ValueError):
        schedule_service.period_start("year", date(2025, 1, 1))
