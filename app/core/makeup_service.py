# app/core/makeup_service.py
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core import session_calendar
from app.core.exceptions import (
    ClassNotActiveError,
    MakeupQuotaExceededError,
    MakeupRequestNotFoundError,
    MakeupSlotUnavailableError,
    NotEnrolledError,
    SessionNumberOutOfRangeError,
)
from app.crud import makeup_request as crud_makeup
from app.crud.attendance import get_attendance
from app.crud.course_class import find_classes, get_class_or_404
from app.crud.enrollment import get_enrollment
from app.db.models.course_class import CourseClass
from app.db.models.enrollment import Enrollment
from app.db.models.makeup_request import MakeupRequest
from app.schemas.class_schedule import ClassSchedule
from app.schemas.makeup import MakeupRegister, MakeupSlot, MakeupSlotsResult
from app.schemas.queries import (
    ACTIVE_CLASS_STATUSES,
    AttendanceQuery,
    ClassQuery,
    EnrollmentQuery,
    MakeupRequestCountQuery,
)

logger = logging.getLogger(__name__)


def remaining_changes(db: Session, enrollment: Enrollment, original_class_id: int, session_number: int) -> int:
    used = crud_makeup.count_makeup_requests(
        db,
        MakeupRequestCountQuery(
            student_id=enrollment.student_id,
            original_class_id=original_class_id,
            original_session_number=session_number,
        ),
    )
    return max(0, enrollment.makeup_changes_count - used)


def resolve_candidate_slot(candidate: CourseClass, session_number: int, today: date) -> Optional[MakeupSlot]:
    """
    Занятие с тем же номером в другом классе или None,
    если такого нет или оно уже не в будущем.
    """
    schedule = ClassSchedule.from_class(candidate)
    if session_calendar.is_finished(schedule, today):
        return None
    try:
        slot_date = session_calendar.session_number_to_date(schedule, session_number)
    except SessionNumberOutOfRangeError:
        return None
    if slot_date <= today:
        return None

    return MakeupSlot(
        class_id=candidate.id,
        class_code=candidate.class_code,
        session_number=session_number,
        date=slot_date,
        day_label=session_calendar.day_label(slot_date),
        start_time=schedule.start_time,
        end_time=schedule.end_time,
        time=schedule.time_window,
        instructor_id=candidate.instructor_id,
        instructor_name=candidate.instructor.full_name if candidate.instructor else None,
    )


def find_available_makeup_slots(
    db: Session,
    student_id: int,
    original_class_id: int,
    session_number: int,
    today: Optional[date] = None,
) -> MakeupSlotsResult:
    today = today or date.today()

    original = get_class_or_404(db, original_class_id)
    if original.status not in ACTIVE_CLASS_STATUSES:
        raise ClassNotActiveError(f"Класс {original.class_code} неактивен ({original.status})")

    enrollment = get_enrollment(db, EnrollmentQuery(student_id=student_id, class_id=original_class_id))
    if not enrollment:
        raise NotEnrolledError(f"Студент {student_id} не записан в класс {original.class_code}")

    # Отрабатывать можно только занятие, которое есть в своём классе
    session_calendar.session_number_to_date(ClassSchedule.from_class(original), session_number)

    remaining = remaining_changes(db, enrollment, original_class_id, session_number)
    if remaining == 0:
        logger.info(f"[Makeup] student_id={student_id}: лимит переносов исчерпан, поиск не выполняется")
        return MakeupSlotsResult(slots=[], remaining_changes=0)

    candidates = find_classes(db, ClassQuery(course_id=original.course_id, exclude_class_id=original.id))

    slots: List[MakeupSlot] = []
    for candidate in candidates:
        try:
            slot = resolve_candidate_slot(candidate, session_number, today)
        except Exception as e:
            logger.warning(f"[Makeup] Пропускаем класс {candidate.class_code} (id={candidate.id}): {e}")
            continue
        if slot is not None:
            slots.append(slot)

    # Ближайшие первыми; при равной дате по коду класса
    slots.sort(key=lambda s: (s.date, s.class_code, s.class_id))
    logger.info(
        f"[Makeup] student_id={student_id}, класс {original.class_code}, занятие №{session_number}: "
        f"{len(slots)} вариантов, осталось переносов {remaining}"
    )
    return MakeupSlotsResult(slots=slots, remaining_changes=remaining)


def register_makeup_class(
    db: Session, student_id: int, payload: MakeupRegister, today: Optional[date] = None
) -> MakeupRequest:
    # Лимит читается без блокировки: два параллельных запроса могут оба пройти
    result = find_available_makeup_slots(
        db, student_id, payload.original_class_id, payload.original_session_number, today
    )
    if result.remaining_changes == 0:
        raise MakeupQuotaExceededError("Лимит переносов для этого занятия исчерпан")

    slot = next(
        (
            s for s in result.slots
            if s.class_id == payload.makeup_class_id
            and s.session_number == payload.makeup_session_number
            and s.date == payload.makeup_date
        ),
        None,
    )
    if slot is None:
        raise MakeupSlotUnavailableError("Выбранное занятие недоступно для отработки")

    original = get_class_or_404(db, payload.original_class_id)
    original_date = session_calendar.session_number_to_date(
        ClassSchedule.from_class(original), payload.original_session_number
    )
    attendance = get_attendance(db, AttendanceQuery(class_id=original.id, session_date=original_date))

    request = crud_makeup.create_makeup_request(
        db,
        student_id=student_id,
        original_class_id=original.id,
        original_session_number=payload.original_session_number,
        original_date=original_date,
        original_attendance_id=attendance.id if attendance else None,
        makeup_class_id=slot.class_id,
        makeup_session_number=slot.session_number,
        makeup_date=slot.date,
        makeup_time=slot.time,
    )
    logger.info(
        f"[Makeup] student_id={student_id} отрабатывает занятие №{payload.original_session_number} "
        f"в {slot.class_code} {slot.date.isoformat()}"
    )
    return request


def get_makeup_requests_by_student(db: Session, student_id: int, today: Optional[date] = None) -> List[MakeupRequest]:
    today = today or date.today()
    completed = crud_makeup.complete_past_requests(db, student_id, today)
    if completed:
        logger.info(f"[Makeup] student_id={student_id}: {completed} отработок отмечены как completed")
    return crud_makeup.get_student_requests(db, student_id)


def cancel_makeup_request(db: Session, student_id: int, request_id: int) -> None:
    if not crud_makeup.delete_student_request(db, student_id, request_id):
        raise MakeupRequestNotFoundError(f"Заявка на отработку {request_id} не найдена")
