from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Header
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from cornerstones.core.config import settings
from cornerstones.core.errors import AuthenticationError, PermissionDeniedError
from cornerstones.db.database import RepositoryProvider, get_db
from cornerstones.i18n.messages import AuthMessages, AuthorizationMessages
from cornerstones.models.lms import Profile

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)


def create_access_token(subject: str, role: str, expires_minutes: Optional[int] = None) -> str:
    """Create an HS256 access token carrying ``sub``, ``role`` and the standard claims."""
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=expires_minutes or settings.access_token_expire_minutes)
    to_encode = {
        "sub": subject,
        "role": role,
        "exp": expire,
        "nbf": now,
        "iss": settings.jwt_issuer,
        "aud": settings.jwt_audience,
    }
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict:
    """Decode and validate an access token.

    Raises:
        AuthenticationError: when the signature, expiry, issuer or audience
            check fails, or the ``sub`` claim is missing.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            options={"leeway": 5},
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )
    except JWTError as exc:
        raise AuthenticationError(AuthMessages.INVALID_JWT_TOKEN.format(detail=exc)) from exc
    if "sub" not in payload:
        raise AuthenticationError(AuthMessages.TOKEN_MISSING_SUB)
    return payload


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Authenticated caller plus repositories bound to this request's session.

    Built once per request at the HTTP edge and passed explicitly into every
    service call.
    """

    profile: Profile
    repos: RepositoryProvider

    @property
    def db(self) -> Session:
        return self.repos.db

    def require_teacher(self) -> Profile:
        if not self.profile.is_teacher:
            raise PermissionDeniedError(AuthorizationMessages.TEACHER_REQUIRED)
        return self.profile

    def require_student(self) -> Profile:
        if self.profile.is_teacher:
            raise PermissionDeniedError(AuthorizationMessages.STUDENT_REQUIRED)
        return self.profile


def _bearer_token(authorization: str | None) -> str:
    if not authorization:
        raise AuthenticationError(AuthMessages.MISSING_AUTH_HEADER)
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError(AuthMessages.INVALID_AUTH_HEADER)
    return parts[1]


def get_request_context(
    authorization: str | None = Header(default=None),
    db: Session = Depends(get_db),
) -> RequestContext:
    """FastAPI dependency resolving the bearer token into a ``RequestContext``."""
    payload = decode_access_token(_bearer_token(authorization))
    try:
        profile_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise AuthenticationError(AuthMessages.INVALID_TOKEN_PAYLOAD) from exc

    repos = RepositoryProvider(db)
    profile = repos.profiles.get(profile_id)
    if profile is None:
        raise AuthenticationError(AuthMessages.USER_NOT_FOUND)
    return RequestContext(profile=profile, repos=repos)
