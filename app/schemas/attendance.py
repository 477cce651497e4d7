from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import List, Optional


class AttendanceEntryIn(BaseModel):
    student_id: int
    is_present: bool
    note: Optional[str] = Field(default=None, max_length=200)


class AttendanceSave(BaseModel):
    date: date
    students: List[AttendanceEntryIn]


class AttendanceEntryOut(BaseModel):
    student_id: int
    is_present: bool
    note: Optional[str] = None
    marked_at: Optional[datetime] = None
    marked_by: int

    class Config:
        from_attributes = True


class AttendanceRecordOut(BaseModel):
    id: int
    class_id: int
    session_date: date
    session_number: Optional[int] = None
    instructor_id: int
    status: str
    entries: List[AttendanceEntryOut]

    class Config:
        from_attributes = True


class ClassStudentOut(BaseModel):
    student_id: int
    full_name: str
    email: str
    sessions_attended: int
    total_sessions: int


class StudentAttendanceStats(BaseModel):
    student_id: int
    full_name: str
    email: str
    attended_sessions: int
    total_sessions: int
    attendance_rate: float  # проценты, 0..100


class AttendanceOverviewOut(BaseModel):
    total_sessions: int
    students: List[StudentAttendanceStats]
