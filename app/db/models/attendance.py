# app/db/models/attendance.py
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base import Base


class AttendanceStatus(str, enum.Enum):
    PRESENT = "Present"
    ABSENT = "Absent"


class Attendance(Base):
    __tablename__ = "attendance"
    # one record per student per day
    __table_args__ = (
        UniqueConstraint("student_id", "date", name="uq_attendance_student_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    # Kept as "YYYY-MM-DD" text so month reports can prefix-match "YYYY-MM"
    date = Column(String(10), nullable=False, index=True)
    status = Column(
        Enum(AttendanceStatus, values_callable=lambda e: [m.value for m in e], name="attendance_status"),
        nullable=False,
    )
    class_name = Column(String, nullable=False)
    section = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    student = relationship("Student", back_populates="attendance_records")
