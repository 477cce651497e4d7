# app/api/attendance.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_db, require_class_instructor
from app.crud import attendance as crud_attendance
from app.db.models.user import User
from app.schemas.attendance import (
    AttendanceOverviewOut,
    AttendanceRecordOut,
    AttendanceSave,
    ClassStudentOut,
)

router = APIRouter()


# Список студентов класса
@router.get("/class/{class_id}/students", response_model=List[ClassStudentOut])
def get_class_students(
    class_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_class_instructor),
):
    return crud_attendance.get_class_students(db, class_id)


@router.get("/class/{class_id}/history", response_model=List[AttendanceRecordOut])
def get_attendance_history(
    class_id: int,
    from_date: Optional[date] = Query(None, alias="fromDate"),
    to_date: Optional[date] = Query(None, alias="toDate"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_class_instructor),
):
    return crud_attendance.get_attendance_history(db, class_id, from_date, to_date)


# Сводка посещаемости по студентам
@router.get("/class/{class_id}/overview", response_model=AttendanceOverviewOut)
def get_attendance_overview(
    class_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_class_instructor),
):
    return crud_attendance.get_class_attendance_overview(db, class_id)


# Посещаемость на дату (если записи нет, создаётся черновик)
@router.get("/class/{class_id}", response_model=AttendanceRecordOut)
def get_attendance_by_date(
    class_id: int,
    session_date: date = Query(..., alias="date"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_class_instructor),
):
    return crud_attendance.get_or_create_draft(db, class_id, session_date, current_user.id)


# Сохранить и завершить отметку
@router.post("/class/{class_id}", response_model=AttendanceRecordOut)
def save_attendance(
    class_id: int,
    payload: AttendanceSave,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_class_instructor),
):
    return crud_attendance.save_attendance(db, class_id, payload.date, current_user.id, payload.students)
