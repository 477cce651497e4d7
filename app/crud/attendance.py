# app/crud/attendance.py
import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from app.core import session_calendar
from app.crud.course_class import get_class_or_404
from app.crud.enrollment import get_class_enrollments
from app.db.models.attendance import AttendanceRecord, AttendanceEntry
from app.db.models.enrollment import Enrollment
from app.db.models.user import User
from app.schemas.class_schedule import ClassSchedule
from app.schemas.queries import AttendanceCountQuery, AttendanceQuery

logger = logging.getLogger(__name__)


def get_attendance(db: Session, query: AttendanceQuery) -> Optional[AttendanceRecord]:
    return db.query(AttendanceRecord).filter(
        AttendanceRecord.class_id == query.class_id,
        AttendanceRecord.session_date == query.session_date,
    ).first()


def count_attendance(db: Session, query: AttendanceCountQuery) -> int:
    q = db.query(AttendanceRecord).filter(AttendanceRecord.class_id == query.class_id)
    if query.status is not None:
        q = q.filter(AttendanceRecord.status == query.status)
    if query.present_student_id is not None:
        q = q.filter(
            AttendanceRecord.entries.any(
                (AttendanceEntry.student_id == query.present_student_id)
                & (AttendanceEntry.is_present.is_(True))
            )
        )
    return q.count()


def list_student_attendance(db: Session, class_id: int, student_id: int) -> List[AttendanceEntry]:
    """Отметки студента по завершённым занятиям класса, по возрастанию даты."""
    return (
        db.query(AttendanceEntry)
        .join(AttendanceRecord, AttendanceRecord.id == AttendanceEntry.record_id)
        .filter(
            AttendanceRecord.class_id == class_id,
            AttendanceRecord.status == "finalized",
            AttendanceEntry.student_id == student_id,
        )
        .order_by(AttendanceRecord.session_date)
        .all()
    )


def get_class_attendance_by_date(db: Session, class_id: int) -> Dict[date, AttendanceRecord]:
    records = db.query(AttendanceRecord).filter(AttendanceRecord.class_id == class_id).all()
    return {r.session_date: r for r in records}


def get_class_students(db: Session, class_id: int) -> List[dict]:
    get_class_or_404(db, class_id)

    rows = (
        db.query(Enrollment, User)
        .join(User, User.id == Enrollment.student_id)
        .filter(
            Enrollment.class_id == class_id,
            Enrollment.status.in_(("enrolled", "completed")),
        )
        .order_by(User.full_name)
        .all()
    )
    return [
        {
            "student_id": user.id,
            "full_name": user.full_name,
            "email": user.email,
            "sessions_attended": enrollment.sessions_attended,
            "total_sessions": enrollment.total_sessions,
        }
        for enrollment, user in rows
    ]


def get_or_create_draft(db: Session, class_id: int, session_date: date, instructor_id: int) -> AttendanceRecord:
    course_class = get_class_or_404(db, class_id)
    session_number = session_calendar.ensure_session_date(ClassSchedule.from_class(course_class), session_date)

    record = get_attendance(db, AttendanceQuery(class_id=class_id, session_date=session_date))
    if record:
        return record

    logger.info(f"[Attendance] Нет записи на {session_date}, создаём черновик (занятие №{session_number})")
    record = AttendanceRecord(
        class_id=class_id,
        session_date=session_date,
        session_number=session_number,
        instructor_id=instructor_id,
        status="draft",
    )
    # Все записанные студенты по умолчанию отсутствуют
    for enrollment in get_class_enrollments(db, class_id):
        record.entries.append(
            AttendanceEntry(
                student_id=enrollment.student_id,
                is_present=False,
                note="",
                marked_by=instructor_id,
            )
        )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def save_attendance(db: Session, class_id: int, session_date: date, instructor_id: int, entries) -> AttendanceRecord:
    course_class = get_class_or_404(db, class_id)
    session_number = session_calendar.ensure_session_date(ClassSchedule.from_class(course_class), session_date)

    record = get_attendance(db, AttendanceQuery(class_id=class_id, session_date=session_date))
    if not record:
        record = AttendanceRecord(
            class_id=class_id,
            session_date=session_date,
            instructor_id=instructor_id,
        )
        db.add(record)

    record.session_number = session_number
    now = datetime.utcnow()
    record.entries = [
        AttendanceEntry(
            student_id=e.student_id,
            is_present=e.is_present,
            note=e.note or "",
            marked_at=now,
            marked_by=instructor_id,
        )
        for e in entries
    ]
    record.status = "finalized"
    db.commit()
    db.refresh(record)
    logger.info(
        f"[Attendance] Сохранено занятие №{session_number} класса {course_class.class_code} ({session_date})"
    )

    sync_enrollment_progress(db, class_id)
    return record


def get_attendance_history(
    db: Session, class_id: int, from_date: Optional[date] = None, to_date: Optional[date] = None
) -> List[AttendanceRecord]:
    q = db.query(AttendanceRecord).filter(
        AttendanceRecord.class_id == class_id,
        AttendanceRecord.status == "finalized",
    )
    if from_date:
        q = q.filter(AttendanceRecord.session_date >= from_date)
    if to_date:
        q = q.filter(AttendanceRecord.session_date <= to_date)
    return q.order_by(AttendanceRecord.session_date.desc()).all()


def sync_attendance_from_records(db: Session, enrollment: Enrollment) -> int:
    """Пересчитывает sessions_attended по завершённым записям посещаемости."""
    attended = count_attendance(
        db,
        AttendanceCountQuery(
            class_id=enrollment.class_id,
            status="finalized",
            present_student_id=enrollment.student_id,
        ),
    )
    enrollment.sessions_attended = attended
    enrollment.last_synced_at = datetime.utcnow()
    db.commit()
    return attended


def sync_enrollment_progress(db: Session, class_id: int) -> dict:
    enrollments = get_class_enrollments(db, class_id)
    synced = 0
    for enrollment in enrollments:
        try:
            sync_attendance_from_records(db, enrollment)
            synced += 1
        except Exception:
            db.rollback()
            logger.exception(f"[Attendance] Не удалось синхронизировать student_id={enrollment.student_id}")

    logger.info(f"[Attendance] Синхронизировано {synced}/{len(enrollments)} записей на курс")
    return {"total": len(enrollments), "synced": synced, "failed": len(enrollments) - synced}


def get_class_attendance_overview(db: Session, class_id: int) -> dict:
    """
    Сводка по классу: число завершённых занятий и статистика каждого
    студента, у которого есть отметки. Сортировка по проценту посещений.
    """
    get_class_or_404(db, class_id)
    total_sessions = count_attendance(db, AttendanceCountQuery(class_id=class_id))

    students = (
        db.query(User)
        .join(AttendanceEntry, AttendanceEntry.student_id == User.id)
        .join(AttendanceRecord, AttendanceRecord.id == AttendanceEntry.record_id)
        .filter(
            AttendanceRecord.class_id == class_id,
            AttendanceRecord.status == "finalized",
        )
        .distinct()
        .all()
    )

    stats = []
    for student in students:
        entries = list_student_attendance(db, class_id, student.id)
        attended = sum(1 for e in entries if e.is_present)
        stats.append({
            "student_id": student.id,
            "full_name": student.full_name,
            "email": student.email,
            "attended_sessions": attended,
            "total_sessions": len(entries),
            "attendance_rate": attended / len(entries) * 100 if entries else 0.0,
        })

    stats.sort(key=lambda s: (-s["attendance_rate"], s["full_name"]))
    return {"total_sessions": total_sessions, "students": stats}
