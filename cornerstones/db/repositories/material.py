from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

from sqlalchemy.orm import Session, selectinload

from cornerstones.db.repositories.base import Repository
from cornerstones.models.lms import (
    ClassMaterial,
    Material,
    MaterialCompletion,
    MaterialTransformation,
)


@dataclass
class MaterialRepository(Repository[Session]):
    """Repository for teacher materials and their per-style variants."""

    def get(self, material_id: int) -> Optional[Material]:
        return (
            self.db.query(Material)
            .options(selectinload(Material.transformations))
            .filter(Material.id == material_id)
            .first()
        )

    def create(
        self,
        *,
        teacher_id: int,
        title: str,
        subject: Optional[str],
        content_type: str,
        original_content: str,
        variants: Mapping[str, str],
    ) -> Material:
        material = Material(
            teacher_id=teacher_id,
            title=title,
            subject=subject,
            content_type=content_type,
            original_content=original_content,
        )
        material.transformations = [
            MaterialTransformation(learning_style=style, content=content)
            for style, content in variants.items()
        ]
        self.db.add(material)
        self.db.flush()
        self.db.refresh(material)
        return material

    def list_for_teacher(self, teacher_id: int) -> List[Material]:
        return (
            self.db.query(Material)
            .options(selectinload(Material.transformations))
            .filter(Material.teacher_id == teacher_id)
            .order_by(Material.id.desc())
            .all()
        )


@dataclass
class ClassMaterialRepository(Repository[Session]):
    """Repository for material assignments to classes."""

    def get(self, class_material_id: int) -> Optional[ClassMaterial]:
        return self.db.query(ClassMaterial).filter(ClassMaterial.id == class_material_id).first()

    def find(self, class_id: int, material_id: int) -> Optional[ClassMaterial]:
        return (
            self.db.query(ClassMaterial)
            .filter(ClassMaterial.class_id == class_id, ClassMaterial.material_id == material_id)
            .first()
        )

    def assign(self, *, class_id: int, material_id: int, due_date=None, is_visible: bool = True) -> ClassMaterial:
        assignment = ClassMaterial(
            class_id=class_id,
            material_id=material_id,
            due_date=due_date,
            is_visible=is_visible,
        )
        self.db.add(assignment)
        self.db.flush()
        self.db.refresh(assignment)
        return assignment

    def list_visible_for_classes(self, class_ids: Sequence[int]) -> List[ClassMaterial]:
        if not class_ids:
            return []
        return (
            self.db.query(ClassMaterial)
            .options(
                selectinload(ClassMaterial.material).selectinload(Material.transformations),
                selectinload(ClassMaterial.classroom),
            )
            .filter(ClassMaterial.class_id.in_(list(class_ids)), ClassMaterial.is_visible.is_(True))
            .order_by(ClassMaterial.assigned_at.desc(), ClassMaterial.id.desc())
            .all()
        )


@dataclass
class CompletionRepository(Repository[Session]):
    """Repository for per-student material completion records."""

    def get(self, class_material_id: int, student_id: int) -> Optional[MaterialCompletion]:
        return (
            self.db.query(MaterialCompletion)
            .filter(
                MaterialCompletion.class_material_id == class_material_id,
                MaterialCompletion.student_id == student_id,
            )
            .first()
        )

    def for_student(self, student_id: int, class_material_ids: Sequence[int]) -> dict[int, MaterialCompletion]:
        if not class_material_ids:
            return {}
        rows = (
            self.db.query(MaterialCompletion)
            .filter(
                MaterialCompletion.student_id == student_id,
                MaterialCompletion.class_material_id.in_(list(class_material_ids)),
            )
            .all()
        )
        return {row.class_material_id: row for row in rows}

    def create(self, class_material_id: int, student_id: int) -> MaterialCompletion:
        completion = MaterialCompletion(
            class_material_id=class_material_id,
            student_id=student_id,
            progress_percentage=0,
            time_spent_seconds=0,
        )
        self.db.add(completion)
        return completion
