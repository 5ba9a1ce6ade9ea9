"""User-facing message catalogues."""

from cornerstones.i18n.messages import (
    AssessmentMessages,
    AuthMessages,
    AuthorizationMessages,
    ClassMessages,
    MaterialMessages,
    TransformMessages,
)

__all__ = [
    "AuthMessages",
    "AuthorizationMessages",
    "AssessmentMessages",
    "ClassMessages",
    "MaterialMessages",
    "TransformMessages",
]
