# app/core/schedule_service.py
import logging
from datetime import date, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core import session_calendar
from app.core.exceptions import NotEnrolledError
from app.crud.attendance import get_class_attendance_by_date
from app.crud.course_class import get_class_or_404
from app.crud.enrollment import get_enrollment, get_student_enrollments
from app.db.models.course_class import CourseClass
from app.schemas.class_schedule import ClassSchedule
from app.schemas.queries import EnrollmentQuery
from app.schemas.schedule import ClassSummary, SessionView, StudentSchedule

logger = logging.getLogger(__name__)


def build_class_summary(course_class: CourseClass, schedule: ClassSchedule) -> ClassSummary:
    return ClassSummary(
        class_id=course_class.id,
        class_code=course_class.class_code,
        course_id=course_class.course_id,
        course_title=course_class.course.title if course_class.course else None,
        instructor_id=course_class.instructor_id,
        instructor_name=course_class.instructor.full_name if course_class.instructor else None,
        days=[d for d in session_calendar.WEEKDAYS if d in schedule.days],
        start_time=schedule.start_time,
        end_time=schedule.end_time,
        start_date=schedule.start_date,
        end_date=session_calendar.effective_end_date(schedule),
        total_sessions=session_calendar.count_sessions(schedule),
        status=course_class.status,
        meet_link=schedule.meet_link,
    )


def build_student_schedule(
    db: Session, course_class: CourseClass, student_id: int, today: Optional[date] = None
) -> StudentSchedule:
    today = today or date.today()
    schedule = ClassSchedule.from_class(course_class)
    records = get_class_attendance_by_date(db, course_class.id)

    sessions = []
    for number, session_date in enumerate(session_calendar.sorted_session_dates(schedule), start=1):
        record = records.get(session_date)
        # Черновики не считаются: преподаватель ещё не сохранил занятие
        entry = record.entry_for(student_id) if record and record.status == "finalized" else None

        if entry is None:
            view = SessionView(
                session_number=number,
                date=session_date,
                day_label=session_calendar.day_label(session_date),
                attendance="pending",
            )
        else:
            view = SessionView(
                session_number=number,
                date=session_date,
                day_label=session_calendar.day_label(session_date),
                attendance="present" if entry.is_present else "absent",
                makeup_eligible=not entry.is_present and session_date < today,
                note=entry.note or None,
            )
        sessions.append(view)

    return StudentSchedule(class_summary=build_class_summary(course_class, schedule), sessions=sessions)


def get_schedule_for_student(
    db: Session, class_id: int, student_id: int, today: Optional[date] = None
) -> StudentSchedule:
    course_class = get_class_or_404(db, class_id)
    enrollment = get_enrollment(db, EnrollmentQuery(student_id=student_id, class_id=class_id))
    if not enrollment:
        raise NotEnrolledError(f"Студент {student_id} не записан в класс {course_class.class_code}")
    return build_student_schedule(db, course_class, student_id, today)


def period_start(period: str, today: date) -> Optional[date]:
    if period == "all":
        return None
    if period == "week":
        return session_calendar.week_start(today)
    if period == "month":
        return today.replace(day=1)
    raise ValueError(f"Unknown period: {period!r}")


def get_my_schedule(
    db: Session, student_id: int, period: str = "all", today: Optional[date] = None
) -> List[StudentSchedule]:
    """Расписание по всем классам, где студент сейчас учится."""
    today = today or date.today()
    since = period_start(period, today)

    classes = [e.course_class for e in get_student_enrollments(db, student_id)]
    if since is not None:
        classes = [c for c in classes if c.start_date >= since]
    classes.sort(key=lambda c: (c.start_date, c.class_code))

    logger.debug(f"[Schedule] student_id={student_id}, period={period}: {len(classes)} классов")
    return [build_student_schedule(db, c, student_id, today) for c in classes]
