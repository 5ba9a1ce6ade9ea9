"""User-facing message constants used across routers and services."""


class AuthMessages:
    """Registration, login and token messages."""

    EMAIL_ALREADY_REGISTERED: str = "Email is already registered"
    INVALID_CREDENTIALS: str = "Invalid email or password"
    MISSING_AUTH_HEADER: str = "Missing Authorization header"
    INVALID_AUTH_HEADER: str = "Invalid Authorization header format. Expected: Bearer <token>"
    INVALID_TOKEN_PAYLOAD: str = "Invalid token payload"
    TOKEN_MISSING_SUB: str = "Token missing 'sub' claim"
    INVALID_JWT_TOKEN: str = "Invalid JWT token: {detail}"
    USER_NOT_FOUND: str = "User not found"


class AuthorizationMessages:
    TEACHER_REQUIRED: str = "Only teachers may perform this action"
    STUDENT_REQUIRED: str = "Only students may perform this action"
    NOT_CLASS_OWNER: str = "You do not teach this class"
    NOT_MATERIAL_OWNER: str = "You do not own this material"
    NOT_CLASS_MEMBER: str = "You are not enrolled in this class"


class AssessmentMessages:
    INVALID_SUBMISSION: str = "Assessment submission does not match the questionnaire"
    NOT_TAKEN: str = "VARK assessment has not been completed"


class ClassMessages:
    NOT_FOUND: str = "Class not found"
    INVALID_JOIN_CODE: str = "No class matches this join code"
    ALREADY_MEMBER: str = "You have already joined this class"


class MaterialMessages:
    NOT_FOUND: str = "Material not found"
    ASSIGNMENT_NOT_FOUND: str = "Assigned material not found"
    ALREADY_ASSIGNED: str = "Material is already assigned to this class"
    DUPLICATE_VARIANT: str = "Each learning style may have only one content variant"


class TransformMessages:
    NOT_CONFIGURED: str = "Content transformation service is not configured"
    UPSTREAM_FAILED: str = "Content transformation service failed"
    UPSTREAM_TIMEOUT: str = "Content transformation service timed out"
    MALFORMED_RESPONSE: str = "Content transformation service returned an unexpected payload"


__all__ = [
    "AuthMessages",
    "AuthorizationMessages",
    "AssessmentMessages",
    "ClassMessages",
    "MaterialMessages",
    "TransformMessages",
]
