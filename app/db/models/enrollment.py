# app/db/models/enrollment.py
from sqlalchemy import Column, Integer, ForeignKey, Enum, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base


class Enrollment(Base):
    __tablename__ = "enrollments"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False)  # для быстрых выборок
    status = Column(
        Enum("enrolled", "completed", "dropped", "pending", name="enrollment_status"),
        nullable=False,
        default="pending",
    )

    # Лимит переносов на одно занятие; не уменьшается, остаток считает makeup_service
    makeup_changes_count = Column(Integer, nullable=False, default=0)

    sessions_attended = Column(Integer, nullable=False, default=0)
    total_sessions = Column(Integer, nullable=False, default=0)
    last_synced_at = Column(DateTime, nullable=True)
    enrolled_at = Column(DateTime(timezone=True), server_default=func.now())

    student = relationship("User")
    course_class = relationship("CourseClass")

    __table_args__ = (UniqueConstraint("student_id", "class_id", name="uq_enrollment_student_class"),)
