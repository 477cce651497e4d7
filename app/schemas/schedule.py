# app/schemas/schedule.py
from pydantic import BaseModel
from datetime import date
from typing import List, Literal, Optional


class SessionView(BaseModel):
    session_number: int
    date: date
    day_label: str
    attendance: Literal["present", "absent", "pending"]
    makeup_eligible: bool = False
    note: Optional[str] = None


class ClassSummary(BaseModel):
    class_id: int
    class_code: str
    course_id: int
    course_title: Optional[str] = None
    instructor_id: int
    instructor_name: Optional[str] = None
    days: List[str]
    start_time: str
    end_time: str
    start_date: date
    end_date: date
    total_sessions: int
    status: str
    meet_link: Optional[str] = None


class StudentSchedule(BaseModel):
    class_summary: ClassSummary
    sessions: List[SessionView]
