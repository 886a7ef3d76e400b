# app/db/__init__.py
# Importing app.db registers every model on Base.metadata

from app.db.base import Base
from app.db.models.teacher import Teacher
from app.db.models.student import Student
from app.db.models.attendance import Attendance

__all__ = ["Base", "Teacher", "Student", "Attendance"]
