from app.db.base import Base
from app.db.models.user import User
from app.db.models.course import Course
from app.db.models.course_class import CourseClass
from app.db.models.enrollment import Enrollment
from app.db.models.attendance import AttendanceRecord, AttendanceEntry
from app.db.models.makeup_request import MakeupRequest

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
