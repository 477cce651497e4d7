# app/api/makeup_requests.py
from typing import List

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.api.deps import get_db, require_student
from app.core import makeup_service
from app.db.models.user import User
from app.schemas.makeup import MakeupRegister, MakeupRequestOut, MakeupSlotsResult

router = APIRouter()


@router.get(
    "/available-makeup-classes/{original_class_id}/{session_number}",
    response_model=MakeupSlotsResult,
)
def available_makeup_classes(
    original_class_id: int,
    session_number: int = Path(..., ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    return makeup_service.find_available_makeup_slots(db, current_user.id, original_class_id, session_number)


@router.post("/", response_model=MakeupRequestOut)
def register_makeup_class(
    payload: MakeupRegister,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    return makeup_service.register_makeup_class(db, current_user.id, payload)


@router.get("/", response_model=List[MakeupRequestOut])
def get_makeup_requests(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    return makeup_service.get_makeup_requests_by_student(db, current_user.id)


@router.delete("/{makeup_request_id}")
def cancel_makeup_request(
    makeup_request_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    makeup_service.cancel_makeup_request(db, current_user.id, makeup_request_id)
    return {"message": "Заявка на отработку отменена"}
