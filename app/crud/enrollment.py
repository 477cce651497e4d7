# app/crud/enrollment.py
import logging
from typing import Iterable, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core import session_calendar
from app.core.config import settings
from app.core.exceptions import AlreadyEnrolledError, ClassFullError, ClassNotActiveError
from app.crud.course_class import get_class_or_404
from app.db.models.enrollment import Enrollment
from app.schemas.class_schedule import ClassSchedule
from app.schemas.queries import ACTIVE_CLASS_STATUSES, EnrollmentQuery

logger = logging.getLogger(__name__)


def get_enrollment(db: Session, query: EnrollmentQuery):
    return db.query(Enrollment).filter(
        Enrollment.student_id == query.student_id,
        Enrollment.class_id == query.class_id,
        Enrollment.status == query.status,
    ).first()


def get_student_enrollments(db: Session, student_id: int, status: str = "enrolled") -> List[Enrollment]:
    return db.query(Enrollment).filter(
        Enrollment.student_id == student_id,
        Enrollment.status == status,
    ).all()


def get_class_enrollments(
    db: Session, class_id: int, statuses: Iterable[str] = ("enrolled", "completed")
) -> List[Enrollment]:
    return db.query(Enrollment).filter(
        Enrollment.class_id == class_id,
        Enrollment.status.in_(tuple(statuses)),
    ).order_by(Enrollment.id).all()


def create_enrollment(db: Session, student_id: int, class_id: int) -> Enrollment:
    course_class = get_class_or_404(db, class_id)
    if course_class.status not in ACTIVE_CLASS_STATUSES:
        raise ClassNotActiveError(f"Класс {course_class.class_code} не принимает студентов")
    if course_class.current_students >= course_class.max_students:
        raise ClassFullError(f"Класс {course_class.class_code} заполнен")

    existing = db.query(Enrollment).filter(
        Enrollment.student_id == student_id,
        Enrollment.class_id == class_id,
    ).first()
    if existing:
        raise AlreadyEnrolledError("Студент уже записан в этот класс")

    schedule = ClassSchedule.from_class(course_class)
    enrollment = Enrollment(
        student_id=student_id,
        class_id=course_class.id,
        course_id=course_class.course_id,
        status="enrolled",
        makeup_changes_count=settings.DEFAULT_MAKEUP_CHANGES,
        sessions_attended=0,
        total_sessions=session_calendar.count_sessions(schedule),
    )
    db.add(enrollment)
    course_class.current_students += 1
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise AlreadyEnrolledError("Студент уже записан в этот класс")
    db.refresh(enrollment)
    logger.info(f"[Enrollments] student_id={student_id} записан в {course_class.class_code}")
    return enrollment
