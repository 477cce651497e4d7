from datetime import date, datetime
from typing import List

from sqlalchemy.orm import Session

from app.db.models.makeup_request import MakeupRequest
from app.schemas.queries import MakeupRequestCountQuery


def count_makeup_requests(db: Session, query: MakeupRequestCountQuery) -> int:
    return db.query(MakeupRequest).filter(
        MakeupRequest.student_id == query.student_id,
        MakeupRequest.original_class_id == query.original_class_id,
        MakeupRequest.original_session_number == query.original_session_number,
        MakeupRequest.status.in_(query.statuses),
    ).count()


def create_makeup_request(db: Session, **fields) -> MakeupRequest:
    request = MakeupRequest(status="scheduled", **fields)
    db.add(request)
    db.commit()
    db.refresh(request)
    return request


def get_student_requests(db: Session, student_id: int) -> List[MakeupRequest]:
    return (
        db.query(MakeupRequest)
        .filter(MakeupRequest.student_id == student_id)
        .order_by(MakeupRequest.registered_at.desc(), MakeupRequest.id.desc())
        .all()
    )


def complete_past_requests(db: Session, student_id: int, today: date) -> int:
    """Переводит в completed все scheduled-отработки с датой раньше today."""
    past = db.query(MakeupRequest).filter(
        MakeupRequest.student_id == student_id,
        MakeupRequest.status == "scheduled",
        MakeupRequest.makeup_date < today,
    ).all()
    for request in past:
        request.status = "completed"
        request.confirmed_at = datetime.utcnow()
    if past:
        db.commit()
    return len(past)


def delete_student_request(db: Session, student_id: int, request_id: int) -> bool:
    deleted = db.query(MakeupRequest).filter(
        MakeupRequest.id == request_id,
        MakeupRequest.student_id == student_id,
    ).delete()
    db.commit()
    return bool(deleted)
