# app/crud/course_class.py
import logging
from typing import List

from sqlalchemy.orm import Session

from app.core import session_calendar
from app.core.exceptions import ClassNotFoundError, CourseNotFoundError
from app.crud.course import get_course
from app.db.models.course_class import CourseClass
from app.schemas.class_schedule import ClassCreate, ClassSchedule
from app.schemas.queries import ClassQuery

logger = logging.getLogger(__name__)

LEVEL_PREFIX = {
    "beginner": "B",
    "intermediate": "I",
    "advanced": "A",
}


def get_class(db: Session, class_id: int):
    return db.query(CourseClass).filter(CourseClass.id == class_id).first()


def get_class_or_404(db: Session, class_id: int) -> CourseClass:
    course_class = get_class(db, class_id)
    if not course_class:
        raise ClassNotFoundError(f"Класс {class_id} не найден")
    return course_class


def find_classes(db: Session, query: ClassQuery) -> List[CourseClass]:
    q = db.query(CourseClass).filter(
        CourseClass.course_id == query.course_id,
        CourseClass.status.in_(query.statuses),
    )
    if query.exclude_class_id is not None:
        q = q.filter(CourseClass.id != query.exclude_class_id)
    if query.starts_on_or_after is not None:
        q = q.filter(CourseClass.start_date >= query.starts_on_or_after)
    return q.order_by(CourseClass.start_date, CourseClass.class_code).all()


def next_class_code(db: Session, level: str) -> str:
    prefix = LEVEL_PREFIX[level]
    codes = db.query(CourseClass.class_code).filter(CourseClass.class_code.like(f"{prefix}%")).all()

    last_number = 0
    for (code,) in codes:
        suffix = code[len(prefix):]
        if suffix.isdigit():
            last_number = max(last_number, int(suffix))

    # B001, I001, A001 ...
    return f"{prefix}{last_number + 1:03d}"


def create_class(db: Session, class_in: ClassCreate) -> CourseClass:
    course = get_course(db, class_in.course_id)
    if not course:
        raise CourseNotFoundError(f"Курс {class_in.course_id} не найден")

    # Битое расписание не должно попасть в БД
    session_calendar.validate_schedule(class_in.schedule)

    schedule = class_in.schedule
    db_class = CourseClass(
        course_id=course.id,
        class_code=next_class_code(db, course.level),
        instructor_id=class_in.instructor_id,
        schedule_days=[d for d in session_calendar.WEEKDAYS if d in schedule.days],
        start_time=schedule.start_time,
        end_time=schedule.end_time,
        start_date=schedule.start_date,
        end_date=schedule.end_date,
        duration_weeks=schedule.duration_weeks,
        meet_link=schedule.meet_link,
        max_students=class_in.max_students,
        current_students=0,
        status=class_in.status,
    )
    db.add(db_class)
    db.commit()
    db.refresh(db_class)
    logger.info(f"[Classes] Создан класс {db_class.class_code} (course_id={course.id})")
    return db_class


def update_class_status(db: Session, class_id: int, status: str) -> CourseClass:
    course_class = get_class_or_404(db, class_id)
    previous = course_class.status
    course_class.status = status
    db.commit()
    db.refresh(course_class)
    logger.info(f"[Classes] {course_class.class_code}: статус {previous} -> {status}")
    return course_class


def class_to_dict(course_class: CourseClass) -> dict:
    schedule = ClassSchedule.from_class(course_class)
    return {
        "id": course_class.id,
        "course_id": course_class.course_id,
        "class_code": course_class.class_code,
        "instructor_id": course_class.instructor_id,
        "schedule": schedule,
        "effective_end_date": session_calendar.effective_end_date(schedule),
        "total_sessions": session_calendar.count_sessions(schedule),
        "max_students": course_class.max_students,
        "current_students": course_class.current_students,
        "status": course_class.status,
    }
