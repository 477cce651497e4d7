# app/db/models/makeup_request.py
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Enum, Index
from app.db.base import Base
from datetime import datetime


class MakeupRequest(Base):
    __tablename__ = "makeup_requests"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Пропущенное занятие
    original_class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)
    original_session_number = Column(Integer, nullable=False)
    original_date = Column(Date, nullable=False)
    original_attendance_id = Column(Integer, ForeignKey("attendance_records.id"), nullable=True)

    # Выбранное занятие для отработки
    makeup_class_id = Column(Integer, ForeignKey("classes.id"), nullable=False)
    makeup_session_number = Column(Integer, nullable=False)
    makeup_date = Column(Date, nullable=False)
    makeup_time = Column(String, nullable=False)  # "18:00 - 20:00"

    status = Column(Enum("scheduled", "completed", name="makeup_status"), nullable=False, default="scheduled")
    registered_at = Column(DateTime, default=datetime.utcnow)
    confirmed_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("ix_makeup_original_session", "original_class_id", "original_session_number"),
    )
