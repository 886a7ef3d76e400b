# app/services/reports.py
import csv
import io
from dataclasses import dataclass, field
from typing import Iterable

from app.db.models.attendance import AttendanceStatus

CSV_HEADERS = ["Date", "Roll Number", "Name", "Class", "Section", "Status"]


def attendance_percentage(present: int, total: int) -> float:
    if total <= 0:
        return 0
    return round(present / total * 100, 2)


@dataclass
class Tally:
    present: int = 0
    absent: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent

    @property
    def percentage(self) -> float:
        return attendance_percentage(self.present, self.total)

    def add(self, status) -> None:
        if status == AttendanceStatus.PRESENT:
            self.present += 1
        elif status == AttendanceStatus.ABSENT:
            self.absent += 1

    def as_dict(self) -> dict:
        return {
            "present": self.present,
            "absent": self.absent,
            "total": self.total,
            "percentage": self.percentage,
        }


@dataclass
class SectionGroup:
    section: str
    tally: Tally = field(default_factory=Tally)


@dataclass
class ClassGroup:
    class_name: str
    tally: Tally = field(default_factory=Tally)
    sections: dict = field(default_factory=dict)


def _student_class_section(record) -> tuple[str, str]:
    # the student's current placement; the record's own copy if the join is empty
    student = getattr(record, "student", None)
    if student is not None:
        return student.class_name, student.section
    return record.class_name, record.section


def summarize(records: Iterable) -> dict:
    """Group attendance records by class, then section, with counts and percentages."""
    overall = Tally()
    classes: dict[str, ClassGroup] = {}

    for record in records:
        class_name, section = _student_class_section(record)
        group = classes.setdefault(class_name, ClassGroup(class_name))
        sub = group.sections.setdefault(section, SectionGroup(section))
        overall.add(record.status)
        group.tally.add(record.status)
        sub.tally.add(record.status)

    return {
        "overall": overall.as_dict(),
        "classes": [
            {
                "className": group.class_name,
                **group.tally.as_dict(),
                "sections": [
                    {"section": sub.section, **sub.tally.as_dict()}
                    for sub in sorted(group.sections.values(), key=lambda s: s.section)
                ],
            }
            for group in sorted(classes.values(), key=lambda g: g.class_name)
        ],
    }


def student_summary(statuses: Iterable) -> dict:
    tally = Tally()
    for status in statuses:
        tally.add(status)
    return {
        "totalDays": tally.total,
        "presentDays": tally.present,
        "absentDays": tally.absent,
        "percentage": tally.percentage,
    }


def to_csv(records: Iterable) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_HEADERS)
    for record in records:
        student = record.student
        writer.writerow([
            record.date,
            student.roll_number,
            student.name,
            student.class_name,
            student.section,
            AttendanceStatus(record.status).value,
        ])
    return buffer.getvalue()
