"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.

It also holds the value types that cross those ports: the wire-facing
registration payload, the gateway response and the resulting session.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from .form import ProfileImage

DEFAULT_AVATAR_URL = "/assets/default-avatar.jpg"
TOKEN_STORAGE_KEY = "token"
SUCCESS_PATH = "/dashboard"


class SubmissionState(str, Enum):
    """
    Submission state machine states.

    State Transitions:
    - IDLE -> VALIDATING (submit)
    - VALIDATING -> IDLE (validation error)
    - VALIDATING -> UPLOADING (image selected)
    - VALIDATING -> REGISTERING (no image selected)
    - UPLOADING -> REGISTERING (upload succeeded)
    - UPLOADING -> IDLE (upload failed)
    - REGISTERING -> AUTHENTICATED (token received)
    - REGISTERING -> IDLE (rejected, success without token, or session start failed)

    Terminal State:
    - AUTHENTICATED: further lifecycle belongs to the session/navigation layer
    """

    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    UPLOADING = "UPLOADING"
    REGISTERING = "REGISTERING"
    AUTHENTICATED = "AUTHENTICATED"


class SubmitResult(Enum):
    """
    Result of a submit attempt.

    Used by SignupController.submit() to indicate success or the stage
    that stopped the pipeline.
    """

    AUTHENTICATED = "authenticated"
    INVALID_INPUT = "invalid_input"
    UPLOAD_FAILED = "upload_failed"
    REGISTRATION_FAILED = "registration_failed"
    NO_TOKEN = "no_token"
    SESSION_FAILED = "session_failed"
    IN_PROGRESS = "in_progress"


@dataclass(frozen=True)
class RegistrationPayload:
    """Registration request body. profile_image_url is always populated."""

    full_name: str
    email: str
    password: str
    profile_image_url: str

    def to_wire(self) -> dict[str, str]:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "password": self.password,
            "profileImageUrl": self.profile_image_url,
        }


@dataclass(frozen=True)
class RegistrationResponse:
    """Successful registration response. Either field may be missing."""

    token: str | None = None
    user: dict[str, Any] | None = None


@dataclass(frozen=True)
class Session:
    """Authenticated session created from a successful registration."""

    token: str
    user: dict[str, Any] | None


@dataclass(frozen=True)
class SubmitOutcome:
    """Tagged result of one submit call."""

    result: SubmitResult
    message: str | None = None
    session: Session | None = None

    @property
    def succeeded(self) -> bool:
        return self.result == SubmitResult.AUTHENTICATED


class ImageUploadGateway(Protocol):
    """Port interface for the remote image store."""

    async def upload(self, image: ProfileImage) -> str | None:
        """
        Upload binary image content.

        Args:
            image: Selected profile image

        Returns:
            Remote URL of the stored image, or None if the store returned none

        Raises:
            UploadFailed: If the upload could not be completed
        """
        ...


class RegistrationGateway(Protocol):
    """Port interface for the registration endpoint."""

    async def register(self, payload: RegistrationPayload) -> RegistrationResponse:
        """
        Submit a registration request.

        Args:
            payload: Fully assembled registration payload

        Returns:
            RegistrationResponse carrying the session token and user record

        Raises:
            RegistrationRejected: With the server-provided message when available
        """
        ...


class EmailValidator(Protocol):
    """Port interface for email syntax validation."""

    def is_valid(self, email: str) -> bool:
        """Return True if the email is acceptable. Must not raise."""
        ...


class TokenStorage(Protocol):
    """Port interface for durable client storage."""

    def set_item(self, key: str, value: str) -> None:
        """Persist value under key."""
        ...


class UserContextSink(Protocol):
    """Port interface for the current-user context."""

    def update(self, user: dict[str, Any] | None) -> None:
        """Replace the current user record."""
        ...


class Navigator(Protocol):
    """Port interface for navigation requests."""

    def navigate(self, path: str) -> None:
        """Request a transition to path."""
        ...
