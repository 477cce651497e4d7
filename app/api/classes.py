# app/api/classes.py
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_user, require_admin
from app.core import session_calendar
from app.crud import course_class as crud_class
from app.schemas.class_schedule import ClassCreate, ClassOut, ClassSchedule, ClassStatusUpdate, SessionOut, SessionNumberOut
from app.schemas.queries import ClassQuery

router = APIRouter()


@router.post("/", response_model=ClassOut)
def create_class(
    class_in: ClassCreate,
    db: Session = Depends(get_db),
    current_user=Depends(require_admin),
):
    course_class = crud_class.create_class(db, class_in)
    return crud_class.class_to_dict(course_class)


@router.get("/course/{course_id}/upcoming", response_model=List[ClassOut])
def get_upcoming_classes_by_course(
    course_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    classes = crud_class.find_classes(db, ClassQuery(course_id=course_id, starts_on_or_after=date.today()))
    return [crud_class.class_to_dict(c) for c in classes]


@router.get("/{class_id}", response_model=ClassOut)
def get_class_detail(
    class_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return crud_class.class_to_dict(crud_class.get_class_or_404(db, class_id))


# Смена статуса класса (открыт набор, идёт, завершён, отменён)
@router.patch("/{class_id}", response_model=ClassOut)
def update_class_status(
    class_id: int,
    status_in: ClassStatusUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(require_admin),
):
    course_class = crud_class.update_class_status(db, class_id, status_in.status)
    return crud_class.class_to_dict(course_class)


# Полный календарь занятий с номерами
@router.get("/{class_id}/sessions", response_model=List[SessionOut])
def get_class_sessions(
    class_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    schedule = ClassSchedule.from_class(crud_class.get_class_or_404(db, class_id))
    return [
        SessionOut(session_number=n, date=d, day_label=session_calendar.day_label(d))
        for n, d in enumerate(session_calendar.sorted_session_dates(schedule), start=1)
    ]


@router.get("/{class_id}/session-number", response_model=SessionNumberOut)
def get_session_number(
    class_id: int,
    session_date: date = Query(..., alias="date", description="Дата занятия, YYYY-MM-DD"),
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    schedule = ClassSchedule.from_class(crud_class.get_class_or_404(db, class_id))
    number = session_calendar.date_to_session_number(schedule, session_date)
    return SessionNumberOut(class_id=class_id, date=session_date, session_number=number)
