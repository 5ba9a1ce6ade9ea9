from __future__ import annotations

from .classroom import ClassMembership, Classroom
from .material import ClassMaterial, Material, MaterialCompletion, MaterialTransformation
from .profile import Profile

__all__ = [
    "Profile",
    "Classroom",
    "ClassMembership",
    "Material",
    "MaterialTransformation",
    "ClassMaterial",
    "MaterialCompletion",
]
