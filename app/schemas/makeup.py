# app/schemas/makeup.py
from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import List, Optional


class MakeupSlot(BaseModel):
    class_id: int
    class_code: str
    session_number: int
    date: date
    day_label: str
    start_time: str
    end_time: str
    time: str  # "19:00 - 20:30"
    instructor_id: int
    instructor_name: Optional[str] = None


class MakeupSlotsResult(BaseModel):
    slots: List[MakeupSlot]
    remaining_changes: int


class MakeupRegister(BaseModel):
    original_class_id: int
    original_session_number: int = Field(..., ge=1)
    makeup_class_id: int
    makeup_session_number: int = Field(..., ge=1)
    makeup_date: date


class MakeupRequestOut(BaseModel):
    id: int
    student_id: int
    original_class_id: int
    original_session_number: int
    original_date: date
    original_attendance_id: Optional[int] = None
    makeup_class_id: int
    makeup_session_number: int
    makeup_date: date
    makeup_time: str
    status: str
    registered_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None

    class Config:
        from_attributes = True
