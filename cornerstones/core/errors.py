from __future__ import annotations

"""Domain-specific exception hierarchy for the Cornerstones service."""

from typing import Any

__all__ = [
    "DomainError",
    "ValidationError",
    "InvalidAssessmentData",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ProfileNotFoundError",
    "ClassNotFoundError",
    "MaterialNotFoundError",
    "AssessmentNotTakenError",
    "ConflictError",
    "UpstreamServiceError",
    "ConfigurationError",
]


class DomainError(Exception):
    """Base class for recoverable domain-level errors."""

    status_code: int = 400
    error_code: str = "domain_error"
    default_message: str = "Domain error"

    def __init__(
        self,
        message: str | None = None,
        *,
        detail: Any | None = None,
        status_code: int | None = None,
    ) -> None:
        final_message = message or self.default_message
        super().__init__(final_message)
        self.message = final_message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class ValidationError(DomainError, ValueError):
    """Raised when user-provided data fails validation."""

    error_code = "validation_error"
    default_message = "Invalid data"
    status_code = 400


class InvalidAssessmentData(ValidationError):
    """Raised when a questionnaire submission does not match the questionnaire."""

    error_code = "invalid_assessment_data"
    default_message = "Invalid assessment submission"


class AuthenticationError(DomainError):
    """Raised when the bearer token is missing, malformed or expired."""

    error_code = "authentication_failed"
    status_code = 401
    default_message = "Authentication required"


class PermissionDeniedError(DomainError):
    """Raised when caller lacks the required role or ownership."""

    error_code = "permission_denied"
    status_code = 403
    default_message = "Access denied"


class NotFoundError(DomainError):
    """Base class for missing domain resources."""

    error_code = "not_found"
    status_code = 404
    default_message = "Resource not found"


class ProfileNotFoundError(NotFoundError):
    error_code = "profile_not_found"
    default_message = "Profile not found"


class ClassNotFoundError(NotFoundError):
    error_code = "class_not_found"
    default_message = "Class not found"


class MaterialNotFoundError(NotFoundError):
    error_code = "material_not_found"
    default_message = "Material not found"


class AssessmentNotTakenError(NotFoundError):
    """Raised when a profile has no persisted VARK vector yet."""

    error_code = "assessment_not_taken"
    default_message = "VARK assessment has not been completed"


class ConflictError(DomainError):
    """Base class for domain conflicts."""

    error_code = "conflict"
    status_code = 409
    default_message = "State conflict"


class UpstreamServiceError(DomainError):
    """Raised when an external collaborator fails or times out."""

    error_code = "upstream_error"
    status_code = 502
    default_message = "Upstream service failed"


class ConfigurationError(DomainError):
    """Raised when server-side configuration is invalid or incomplete."""

    error_code = "configuration_error"
    status_code = 503
    default_message = "Service is not configured"
