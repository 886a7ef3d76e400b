# app/api/students.py
from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.api.deps import get_db, get_current_teacher
from app.crud import student as crud_student
from app.schemas.student import (
    RollNumberPreview,
    StudentCreate,
    StudentGroup,
    StudentMessage,
    StudentOut,
    StudentUpdate,
)

# Every roster route needs a logged-in teacher
router = APIRouter(dependencies=[Depends(get_current_teacher)])


@router.get("", response_model=List[StudentGroup])
def get_students_grouped(db: Session = Depends(get_db)):
    """All students, grouped by class then section."""
    groups: dict[tuple[str, str], StudentGroup] = {}
    for student in crud_student.get_all_students(db):
        key = (student.class_name, student.section)
        if key not in groups:
            groups[key] = StudentGroup(class_name=student.class_name, section=student.section, students=[])
        groups[key].students.append(StudentOut.model_validate(student))
    return [groups[key] for key in sorted(groups)]


@router.get("/batches", response_model=List[str])
def get_batches(db: Session = Depends(get_db)):
    return crud_student.get_batches(db)


@router.get("/sections/{batch}", response_model=List[str])
def get_sections(batch: str, db: Session = Depends(get_db)):
    return crud_student.get_sections(db, batch)


@router.get("/next-roll/{batch}/{section}", response_model=RollNumberPreview)
def preview_roll_number(batch: str, section: str, db: Session = Depends(get_db)):
    return RollNumberPreview(roll_number=crud_student.generate_roll_number(db, batch, section))


@router.get("/{batch}/{section}", response_model=List[StudentOut])
def get_students_by_class_section(
    batch: str = Path(..., description="Class label, e.g. 23"),
    section: str = Path(..., description="Section label, e.g. A"),
    db: Session = Depends(get_db),
):
    return crud_student.get_students_by_class_section(db, batch, section)


@router.post("", response_model=StudentMessage, status_code=status.HTTP_201_CREATED)
def create_student(student_in: StudentCreate, db: Session = Depends(get_db)):
    student = crud_student.create_student(
        db,
        name=student_in.name,
        class_name=student_in.class_name,
        section=student_in.section,
    )
    return StudentMessage(message="Student added successfully", student=StudentOut.model_validate(student))


@router.put("/{student_id}", response_model=StudentMessage)
def update_student(student_id: int, student_in: StudentUpdate, db: Session = Depends(get_db)):
    student = crud_student.update_student(db, student_id, student_in.model_dump(exclude_unset=True))
    return StudentMessage(message="Student updated successfully", student=StudentOut.model_validate(student))


@router.delete("/{student_id}")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    crud_student.delete_student(db, student_id)
    return {"message": "Student deleted successfully"}
