from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class EnrollmentCreate(BaseModel):
    class_id: int


class EnrollmentOut(BaseModel):
    id: int
    student_id: int
    class_id: int
    course_id: int
    status: str
    makeup_changes_count: int
    sessions_attended: int
    total_sessions: int
    last_synced_at: Optional[datetime] = None

    class Config:
        from_attributes = True
