from app.db.base import Base
from app.db.models.teacher import Teacher
from app.db.models.student import Student
from app.db.models.attendance import Attendance, AttendanceStatus

__all__ = ["Base", "Teacher", "Student", "Attendance", "AttendanceStatus"]
