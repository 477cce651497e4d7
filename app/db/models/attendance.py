# app/db/models/attendance.py
from sqlalchemy import Column, Integer, String, Boolean, Date, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from app.db.base import Base
from datetime import datetime


class AttendanceRecord(Base):
    """Одна запись посещаемости на класс и дату занятия."""

    __tablename__ = "attendance_records"

    id = Column(Integer, primary_key=True, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    session_date = Column(Date, nullable=False)  # например, 2025-01-08
    session_number = Column(Integer, nullable=True)
    instructor_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    # draft: идёт отметка; finalized: преподаватель сохранил
    status = Column(Enum("draft", "finalized", name="attendance_status"), nullable=False, default="draft")
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    entries = relationship(
        "AttendanceEntry",
        back_populates="record",
        cascade="all, delete-orphan",
        order_by="AttendanceEntry.id",
    )

    __table_args__ = (UniqueConstraint("class_id", "session_date", name="uq_attendance_class_date"),)

    def entry_for(self, student_id: int):
        for entry in self.entries:
            if entry.student_id == student_id:
                return entry
        return None


class AttendanceEntry(Base):
    __tablename__ = "attendance_entries"

    id = Column(Integer, primary_key=True, index=True)
    record_id = Column(Integer, ForeignKey("attendance_records.id"), nullable=False)
    student_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    is_present = Column(Boolean, nullable=False, default=False)
    note = Column(String(200), nullable=True)
    marked_at = Column(DateTime, default=datetime.utcnow)
    marked_by = Column(Integer, ForeignKey("users.id"), nullable=False)

    record = relationship("AttendanceRecord", back_populates="entries")
