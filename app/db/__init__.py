# app/db/__init__.py
# Этот файл гарантирует, что все модели импортированы при первом импорте app.db

from app.db.models import (
    Base,
    User,
    Course,
    CourseClass,
    Enrollment,
    AttendanceRecord,
    AttendanceEntry,
    MakeupRequest,
)

# Экспортируем Base и модели наружу
__all__ = [
    "Base",
    "User",
    "Course",
    "CourseClass",
    "Enrollment",
    "AttendanceRecord",
    "AttendanceEntry",
    "MakeupRequest",
]
