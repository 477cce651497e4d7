# app/db/models/course.py
from sqlalchemy import Column, Integer, String, Text, Enum, DateTime
from sqlalchemy.sql import func
from app.db.base import Base


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text)
    level = Column(Enum("beginner", "intermediate", "advanced", name="course_level"), nullable=False)
    type = Column(Enum("pre-recorded", "live-meet", name="course_type"), nullable=False, default="live-meet")
    status = Column(Enum("active", "inactive", "draft", name="course_status"), nullable=False, default="draft")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
