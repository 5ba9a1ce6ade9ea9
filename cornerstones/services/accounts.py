from __future__ import annotations

from sqlalchemy.orm import Session

from cornerstones.core.errors import AuthenticationError, ConflictError
from cornerstones.core.logging import get_logger
from cornerstones.db.database import RepositoryProvider
from cornerstones.i18n.messages import AuthMessages
from cornerstones.models.lms import Profile
from cornerstones.schemas.auth import ProfileCreate
from cornerstones.services.security import create_access_token, hash_password, verify_password

logger = get_logger("cornerstones.services.accounts", component="service")


def register_profile(db: Session, payload: ProfileCreate) -> Profile:
    repos = RepositoryProvider(db)
    if repos.profiles.get_by_email(payload.email):
        raise ConflictError(AuthMessages.EMAIL_ALREADY_REGISTERED)
    profile = repos.profiles.create(
        full_name=payload.full_name,
        email=payload.email,
        role=payload.role.value,
        password_hash=hash_password(payload.password),
    )
    try:
        db.commit()
    except Exception:
        db.rollback()
        logger.exception(
            "register_commit_failed",
            extra={"structured_data": {"role": payload.role.value}},
        )
        raise
    db.refresh(profile)
    logger.info(
        "profile_registered",
        extra={"structured_data": {"profile_id": profile.id, "role": profile.role}},
    )
    return profile


def issue_token(db: Session, email: str, password: str) -> str:
    profile = RepositoryProvider(db).profiles.get_by_email(email)
    if profile is None or not profile.password_hash or not verify_password(password, profile.password_hash):
        raise AuthenticationError(AuthMessages.INVALID_CREDENTIALS)
    return create_access_token(str(profile.id), profile.role)
