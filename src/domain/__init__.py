"""
Domain layer - Pure signup logic with zero framework imports.

This package contains the core logic of the client-side signup workflow:
the password policy, the form state and the submission pipeline. It
defines its own port interfaces for the gateways and session sinks,
keeping the pipeline independent of HTTP and storage details.
"""

from .exceptions import (
    GatewayError,
    InvalidSignupInput,
    RegistrationRejected,
    SignupError,
    UploadFailed,
)
from .form import FormFieldState, ProfileImage, RegistrationForm
from .password_policy import PASSWORD_RULES, PasswordRule, RuleEvaluation, evaluate
from .ports import (
    EmailValidator,
    ImageUploadGateway,
    Navigator,
    RegistrationGateway,
    RegistrationPayload,
    RegistrationResponse,
    Session,
    SubmissionState,
    SubmitOutcome,
    SubmitResult,
    TokenStorage,
    UserContextSink,
)
from .signup import SignupController

__all__ = [
    "PASSWORD_RULES",
    "EmailValidator",
    "FormFieldState",
    "GatewayError",
    "ImageUploadGateway",
    "InvalidSignupInput",
    "Navigator",
    "PasswordRule",
    "ProfileImage",
    "RegistrationForm",
    "RegistrationGateway",
    "RegistrationPayload",
    "RegistrationRejected",
    "RegistrationResponse",
    "RuleEvaluation",
    "Session",
    "SignupController",
    "SignupError",
    "SubmissionState",
    "SubmitOutcome",
    "SubmitResult",
    "TokenStorage",
    "UploadFailed",
    "UserContextSink",
    "evaluate",
]
