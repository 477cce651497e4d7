# app/schemas/class_schedule.py
from pydantic import BaseModel, Field
from datetime import date
from typing import List, Literal, Optional


class ClassSchedule(BaseModel):
    # Метки дней проверяет session_calendar, чтобы битые данные из БД
    # давали InvalidScheduleError, а не ошибку pydantic
    days: List[str]
    start_time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    end_time: str = Field(..., pattern=r"^\d{2}:\d{2}$")
    start_date: date
    end_date: Optional[date] = None
    duration_weeks: Optional[int] = None
    meet_link: Optional[str] = None

    @classmethod
    def from_class(cls, course_class) -> "ClassSchedule":
        return cls.model_construct(
            days=list(course_class.schedule_days or []),
            start_time=course_class.start_time,
            end_time=course_class.end_time,
            start_date=course_class.start_date,
            end_date=course_class.end_date,
            duration_weeks=course_class.duration_weeks,
            meet_link=course_class.meet_link,
        )

    @property
    def time_window(self) -> str:
        return f"{self.start_time} - {self.end_time}"


class ClassCreate(BaseModel):
    course_id: int
    instructor_id: int
    schedule: ClassSchedule
    max_students: int = Field(..., ge=1)
    status: Literal["scheduled", "ongoing", "completed", "cancelled"] = "scheduled"


class ClassStatusUpdate(BaseModel):
    status: Literal["scheduled", "ongoing", "completed", "cancelled"]


class ClassOut(BaseModel):
    id: int
    course_id: int
    class_code: str
    instructor_id: int
    schedule: ClassSchedule
    effective_end_date: date
    total_sessions: int
    max_students: int
    current_students: int
    status: str


class SessionOut(BaseModel):
    session_number: int
    date: date
    day_label: str


class SessionNumberOut(BaseModel):
    class_id: int
    date: date
    session_number: int
