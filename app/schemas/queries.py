# app/schemas/queries.py
"""
Типизированные параметры выборок для CRUD-слоя.

Каждая функция хранилища принимает ровно одну из этих структур
вместо словаря фильтров.
"""
from pydantic import BaseModel
from datetime import date
from typing import Optional, Tuple


ACTIVE_CLASS_STATUSES = ("scheduled", "ongoing")
COUNTED_MAKEUP_STATUSES = ("scheduled", "completed")


class ClassQuery(BaseModel):
    course_id: int
    statuses: Tuple[str, ...] = ACTIVE_CLASS_STATUSES
    exclude_class_id: Optional[int] = None
    starts_on_or_after: Optional[date] = None


class EnrollmentQuery(BaseModel):
    student_id: int
    class_id: int
    status: str = "enrolled"


class AttendanceQuery(BaseModel):
    class_id: int
    session_date: date


class AttendanceCountQuery(BaseModel):
    class_id: int
    status: Optional[str] = "finalized"
    present_student_id: Optional[int] = None


class MakeupRequestCountQuery(BaseModel):
    student_id: int
    original_class_id: int
    original_session_number: int
    statuses: Tuple[str, ...] = COUNTED_MAKEUP_STATUSES
