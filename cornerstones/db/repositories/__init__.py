from cornerstones.db.repositories.classroom import ClassroomRepository, MembershipRepository
from cornerstones.db.repositories.material import (
    ClassMaterialRepository,
    CompletionRepository,
    MaterialRepository,
)
from cornerstones.db.repositories.profile import ProfileRepository

__all__ = [
    "ProfileRepository",
    "ClassroomRepository",
    "MembershipRepository",
    "MaterialRepository",
    "ClassMaterialRepository",
    "CompletionRepository",
]
