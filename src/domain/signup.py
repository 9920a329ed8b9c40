"""
Signup domain service - Submission pipeline for the registration form.

This module contains the core logic of the signup workflow: local
validation, optional profile image upload, the registration call and
session persistence.

Submission State Machine
========================

    IDLE -> VALIDATING -> IDLE                       (validation error)
    IDLE -> VALIDATING -> UPLOADING -> IDLE          (upload failed)
    IDLE -> VALIDATING -> [UPLOADING ->] REGISTERING -> IDLE
                                                     (rejected / no token /
                                                      session start failed)
    IDLE -> VALIDATING -> [UPLOADING ->] REGISTERING -> AUTHENTICATED

UPLOADING is skipped when no image is selected. AUTHENTICATED is terminal.

The two gateway calls are awaited strictly in sequence: the registration
payload needs the upload result. Token storage, user context update and
navigation happen together, only after a response carrying a token.
"""

import logging
from dataclasses import dataclass, field

from .exceptions import (
    GENERIC_FAILURE_MESSAGE,
    IN_PROGRESS_MESSAGE,
    INVALID_EMAIL_MESSAGE,
    NAME_REQUIRED_MESSAGE,
    PASSWORD_POLICY_MESSAGE,
    GatewayError,
    InvalidSignupInput,
)
from .form import FormFieldState, ProfileImage, RegistrationForm
from .password_policy import is_password_valid
from .ports import (
    DEFAULT_AVATAR_URL,
    SUCCESS_PATH,
    TOKEN_STORAGE_KEY,
    EmailValidator,
    ImageUploadGateway,
    Navigator,
    RegistrationGateway,
    RegistrationPayload,
    Session,
    SubmissionState,
    SubmitOutcome,
    SubmitResult,
    TokenStorage,
    UserContextSink,
)

logger = logging.getLogger(__name__)


def mask_email(email: str) -> str:
    """Mask the local part of an address for logging: jane@example.com -> j***@example.com."""
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


@dataclass
class SignupController:
    """
    Orchestrates a signup submission.

    Owns the error-reporting contract: every failure ends up as a message
    in the form's error field and a SubmitOutcome, never as an exception
    escaping submit().
    """

    registration_gateway: RegistrationGateway
    image_upload_gateway: ImageUploadGateway
    email_validator: EmailValidator
    token_storage: TokenStorage
    user_sink: UserContextSink
    navigator: Navigator
    default_avatar_url: str = DEFAULT_AVATAR_URL
    success_path: str = SUCCESS_PATH
    state: SubmissionState = field(default=SubmissionState.IDLE, init=False)
    session: Session | None = field(default=None, init=False)
    _in_flight: bool = field(default=False, init=False, repr=False)

    async def submit(self, form: FormFieldState) -> SubmitOutcome:
        """
        Run the submission pipeline for the current form values.

        A submit issued while another one is still awaiting a gateway
        returns IN_PROGRESS without touching the form.

        Args:
            form: Form state; its error field is updated in place

        Returns:
            SubmitOutcome describing where the pipeline stopped
        """
        if self.state == SubmissionState.AUTHENTICATED:
            return SubmitOutcome(SubmitResult.AUTHENTICATED, session=self.session)
        if self._in_flight:
            logger.debug("Submit ignored: a submission is already in progress")
            return SubmitOutcome(SubmitResult.IN_PROGRESS, message=IN_PROGRESS_MESSAGE)

        self._in_flight = True
        try:
            return await self._run(form)
        finally:
            self._in_flight = False

    async def _run(self, form: FormFieldState) -> SubmitOutcome:
        snapshot = form.snapshot()

        self.state = SubmissionState.VALIDATING
        try:
            self._validate(snapshot)
        except InvalidSignupInput as exc:
            logger.debug("Signup input rejected: %s", exc.message)
            form.set_error(exc.message)
            self.state = SubmissionState.IDLE
            return SubmitOutcome(SubmitResult.INVALID_INPUT, message=exc.message)

        form.clear_error()

        try:
            profile_image_url = await self._resolve_image_url(snapshot.profile_image)
        except Exception as exc:
            return self._fail(form, SubmitResult.UPLOAD_FAILED, exc)

        payload = RegistrationPayload(
            full_name=snapshot.full_name,
            email=snapshot.email,
            password=snapshot.password,
            profile_image_url=profile_image_url,
        )

        self.state = SubmissionState.REGISTERING
        try:
            response = await self.registration_gateway.register(payload)
        except Exception as exc:
            return self._fail(form, SubmitResult.REGISTRATION_FAILED, exc)

        if not response.token:
            # Known gap: the server reported success but issued no session.
            logger.warning(
                "Registration for %s succeeded without a session token", mask_email(snapshot.email)
            )
            self.state = SubmissionState.IDLE
            return SubmitOutcome(SubmitResult.NO_TOKEN)

        session = Session(token=response.token, user=response.user)
        try:
            self._start_session(session)
        except Exception:
            logger.exception("Signup %s: session start failed", SubmitResult.SESSION_FAILED.value)
            self.session = None
            form.set_error(GENERIC_FAILURE_MESSAGE)
            self.state = SubmissionState.IDLE
            return SubmitOutcome(SubmitResult.SESSION_FAILED, message=GENERIC_FAILURE_MESSAGE)

        logger.info("Signup complete for %s", mask_email(snapshot.email))
        return SubmitOutcome(SubmitResult.AUTHENTICATED, session=session)

    def _validate(self, form: RegistrationForm) -> None:
        """
        Check fields in order, raising on the first failure.

        Raises:
            InvalidSignupInput: With the user-visible message
        """
        if not form.full_name:
            raise InvalidSignupInput(NAME_REQUIRED_MESSAGE)
        if not self.email_validator.is_valid(form.email):
            raise InvalidSignupInput(INVALID_EMAIL_MESSAGE)
        if not is_password_valid(form.password):
            raise InvalidSignupInput(PASSWORD_POLICY_MESSAGE)

    async def _resolve_image_url(self, image: ProfileImage | None) -> str:
        """Upload the selected image, or fall back to the default avatar."""
        if image is None:
            return self.default_avatar_url

        self.state = SubmissionState.UPLOADING
        image_url = await self.image_upload_gateway.upload(image)
        return image_url or self.default_avatar_url

    def _start_session(self, session: Session) -> None:
        """
        Store the token, push the user and navigate, in that order.

        TokenStorage has no delete, so a failure in the user push or
        navigation leaves the token stored; submit() reports it as
        SESSION_FAILED and the caller stays on the form.
        """
        self.token_storage.set_item(TOKEN_STORAGE_KEY, session.token)
        self.user_sink.update(session.user)
        self.session = session
        self.state = SubmissionState.AUTHENTICATED
        self.navigator.navigate(self.success_path)

    def _fail(self, form: FormFieldState, result: SubmitResult, exc: Exception) -> SubmitOutcome:
        if isinstance(exc, GatewayError):
            logger.warning("Signup %s: %s", result.value, exc)
            message = exc.message or GENERIC_FAILURE_MESSAGE
        else:
            logger.exception("Signup %s: unexpected gateway error", result.value)
            message = GENERIC_FAILURE_MESSAGE
        form.set_error(message)
        self.state = SubmissionState.IDLE
        return SubmitOutcome(result, message=message)
