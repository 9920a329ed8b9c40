"""
Domain exceptions - Semantic error types for the signup workflow.

This module defines domain-specific exceptions that communicate
input rule violations and gateway failures without leaking
transport details.
"""

NAME_REQUIRED_MESSAGE = "Please enter your name"
INVALID_EMAIL_MESSAGE = "Please enter a valid email."
PASSWORD_POLICY_MESSAGE = "Please meet all password requirements."
GENERIC_FAILURE_MESSAGE = "Something went wrong."
IN_PROGRESS_MESSAGE = "Submission already in progress."


class SignupError(Exception):
    """Base class for signup domain errors."""

    pass


class InvalidSignupInput(SignupError):
    """A form field failed local validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class GatewayError(SignupError):
    """
    An external gateway call failed.

    The message is the human-readable text supplied by the remote side,
    or None when it supplied nothing usable.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or GENERIC_FAILURE_MESSAGE)
        self.message = message


class UploadFailed(GatewayError):
    """Profile image upload failed."""

    pass


class RegistrationRejected(GatewayError):
    """Registration endpoint rejected the request or was unreachable."""

    pass
