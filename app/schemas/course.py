from pydantic import BaseModel
from typing import Literal, Optional


class CourseCreate(BaseModel):
    title: str
    description: Optional[str] = None
    level: Literal["beginner", "intermediate", "advanced"]
    type: Literal["pre-recorded", "live-meet"] = "live-meet"
    status: Literal["active", "inactive", "draft"] = "active"


class CourseOut(CourseCreate):
    id: int

    class Config:
        from_attributes = True
