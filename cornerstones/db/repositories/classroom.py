from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session

from cornerstones.db.repositories.base import Repository
from cornerstones.models.lms import ClassMembership, Classroom


@dataclass
class ClassroomRepository(Repository[Session]):
    """Repository for class CRUD operations."""

    def get(self, class_id: int) -> Optional[Classroom]:
        return self.db.query(Classroom).filter(Classroom.id == class_id).first()

    def get_by_join_code(self, join_code: str) -> Optional[Classroom]:
        return (
            self.db.query(Classroom)
            .filter(Classroom.join_code == join_code.strip().upper())
            .first()
        )

    def join_code_exists(self, join_code: str) -> bool:
        return self.get_by_join_code(join_code) is not None

    def create(self, *, teacher_id: int, name: str, description: Optional[str], join_code: str) -> Classroom:
        classroom = Classroom(
            teacher_id=teacher_id,
            name=name,
            description=description,
            join_code=join_code,
        )
        self.db.add(classroom)
        self.db.flush()
        self.db.refresh(classroom)
        return classroom

    def list_for_teacher(self, teacher_id: int) -> List[Classroom]:
        return (
            self.db.query(Classroom)
            .filter(Classroom.teacher_id == teacher_id)
            .order_by(Classroom.id.desc())
            .all()
        )

    def list_for_student(self, student_id: int) -> List[Classroom]:
        return (
            self.db.query(Classroom)
            .join(ClassMembership, ClassMembership.class_id == Classroom.id)
            .filter(ClassMembership.student_id == student_id)
            .order_by(Classroom.id.desc())
            .all()
        )


@dataclass
class MembershipRepository(Repository[Session]):
    """Repository for class membership operations."""

    def get(self, class_id: int, student_id: int) -> Optional[ClassMembership]:
        return (
            self.db.query(ClassMembership)
            .filter(
                ClassMembership.class_id == class_id,
                ClassMembership.student_id == student_id,
            )
            .first()
        )

    def add(self, class_id: int, student_id: int) -> ClassMembership:
        membership = ClassMembership(class_id=class_id, student_id=student_id)
        self.db.add(membership)
        self.db.flush()
        self.db.refresh(membership)
        return membership

    def class_ids_for_student(self, student_id: int) -> List[int]:
        rows = (
            self.db.query(ClassMembership.class_id)
            .filter(ClassMembership.student_id == student_id)
            .all()
        )
        return [row[0] for row in rows]
