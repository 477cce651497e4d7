# app/api/enrollments.py
from typing import List, Literal

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, require_student
from app.core import schedule_service
from app.crud import enrollment as crud_enrollment
from app.db.models.user import User
from app.schemas.enrollment import EnrollmentCreate, EnrollmentOut
from app.schemas.schedule import StudentSchedule

router = APIRouter()


@router.post("/", response_model=EnrollmentOut)
def enroll(
    enrollment_in: EnrollmentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    return crud_enrollment.create_enrollment(db, current_user.id, enrollment_in.class_id)


@router.get("/my-schedule", response_model=List[StudentSchedule])
def get_my_schedule(
    period: Literal["all", "week", "month"] = "all",
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    return schedule_service.get_my_schedule(db, current_user.id, period)


@router.get("/classes/{class_id}/schedule", response_model=StudentSchedule)
def get_class_schedule(
    class_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    return schedule_service.get_schedule_for_student(db, class_id, current_user.id)
