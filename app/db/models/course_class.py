# app/db/models/course_class.py
from sqlalchemy import Column, Integer, String, Date, ForeignKey, Enum, JSON, DateTime, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base


class CourseClass(Base):
    """Учебная группа курса с еженедельным расписанием."""

    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)
    class_code = Column(String, unique=True, index=True, nullable=False)  # B001, I001, A001
    instructor_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    # Расписание хранится прямо в строке класса
    schedule_days = Column(JSON, nullable=False)  # ["Monday", "Wednesday"]
    start_time = Column(String, nullable=False)  # "19:00"
    end_time = Column(String, nullable=False)  # "20:30"
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    duration_weeks = Column(Integer, nullable=True)
    meet_link = Column(String, nullable=True)

    max_students = Column(Integer, nullable=False)
    current_students = Column(Integer, nullable=False, default=0)

    status = Column(
        Enum("scheduled", "ongoing", "completed", "cancelled", name="class_status"),
        nullable=False,
        default="scheduled",
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    course = relationship("Course")
    instructor = relationship("User")

    __table_args__ = (Index("ix_classes_course_status", "course_id", "status"),)
