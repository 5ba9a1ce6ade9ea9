from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session

from cornerstones.db.repositories.base import Repository
from cornerstones.models.lms import ClassMembership, Profile


@dataclass
class ProfileRepository(Repository[Session]):
    """Repository abstraction for profile persistence and lookups."""

    def get(self, profile_id: int) -> Optional[Profile]:
        return self.db.query(Profile).filter(Profile.id == profile_id).first()

    def get_by_email(self, email: str) -> Optional[Profile]:
        return self.db.query(Profile).filter(Profile.email == email.lower()).first()

    def create(
        self,
        *,
        full_name: str,
        email: str,
        role: str,
        password_hash: str | None = None,
    ) -> Profile:
        profile = Profile(
            full_name=full_name,
            email=email.lower(),
            role=role,
            password_hash=password_hash,
        )
        self.db.add(profile)
        self.db.flush()
        return profile

    def list_class_students(self, class_id: int) -> List[Profile]:
        return (
            self.db.query(Profile)
            .join(ClassMembership, ClassMembership.student_id == Profile.id)
            .filter(ClassMembership.class_id == class_id)
            .order_by(Profile.full_name.asc(), Profile.id.asc())
            .all()
        )
