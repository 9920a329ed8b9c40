"""
API v1 routes.

Defines REST endpoints for the Signup API.
"""

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status

from src.adapters.gateway.http import HttpImageUploadGateway, HttpRegistrationGateway
from src.adapters.session.http import CookieTokenStorage, RecordingUserSink, RedirectNavigator
from src.adapters.validation.email import EmailSyntaxValidator
from src.api.dependencies import (
    get_email_validator,
    get_image_upload_gateway,
    get_registration_gateway,
)
from src.api.models import (
    ErrorResponse,
    PasswordPolicyRequest,
    PasswordPolicyResponse,
    PasswordRuleStatus,
    SignupResponse,
)
from src.config.settings import Settings, get_settings
from src.domain.form import FormFieldState, ProfileImage
from src.domain.password_policy import evaluate, is_satisfied
from src.domain.ports import SubmitResult
from src.domain.signup import SignupController

router = APIRouter(tags=["v1"])

# HTTP status for each failed submit result; a per-request controller never sees IN_PROGRESS
_FAILURE_STATUS = {
    SubmitResult.INVALID_INPUT: status.HTTP_422_UNPROCESSABLE_CONTENT,
    SubmitResult.UPLOAD_FAILED: status.HTTP_502_BAD_GATEWAY,
    SubmitResult.REGISTRATION_FAILED: status.HTTP_400_BAD_REQUEST,
    SubmitResult.SESSION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post(
    "/password-policy",
    response_model=PasswordPolicyResponse,
    summary="Evaluate password rules",
    description="Evaluate the password against every policy rule. "
    "Drives the live checklist and whether the submit control is enabled.",
)
async def password_policy(request_data: PasswordPolicyRequest) -> PasswordPolicyResponse:
    """
    Evaluate the password checklist.

    - **password**: Current password field value (may be empty)
    """
    evaluations = evaluate(request_data.password)
    return PasswordPolicyResponse(
        rules=[
            PasswordRuleStatus(id=item.id, label=item.label, satisfied=item.satisfied)
            for item in evaluations
        ],
        valid=is_satisfied(evaluations),
    )


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"model": SignupResponse, "description": "Accepted without a session token"},
        400: {"model": ErrorResponse, "description": "Registration rejected"},
        422: {"model": ErrorResponse, "description": "Form validation error"},
        500: {"model": ErrorResponse, "description": "Session could not be started"},
        502: {"model": ErrorResponse, "description": "Profile image upload failed"},
    },
    summary="Sign up a new user",
    description="Submit the signup form. The profile image, when present, is uploaded "
    "first; the account is then registered and the session token set as a cookie.",
)
async def signup(
    response: Response,
    full_name: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    profile_image: UploadFile | None = File(None),
    settings: Settings = Depends(get_settings),
    registration_gateway: HttpRegistrationGateway = Depends(get_registration_gateway),
    image_upload_gateway: HttpImageUploadGateway = Depends(get_image_upload_gateway),
    email_validator: EmailSyntaxValidator = Depends(get_email_validator),
) -> SignupResponse:
    """
    Run the signup pipeline for one form submission.

    - **full_name**: Display name
    - **email**: Email address
    - **password**: Password meeting every policy rule
    - **profile_image**: Optional image file

    Returns the redirect destination and user record on success.
    """
    form = FormFieldState()
    form.set_full_name(full_name)
    form.set_email(email)
    form.set_password(password)
    if profile_image is not None:
        data = await profile_image.read()
        if data:
            form.set_profile_image(
                ProfileImage(
                    data=data,
                    filename=profile_image.filename or "profile.jpg",
                    content_type=profile_image.content_type or "application/octet-stream",
                )
            )

    user_sink = RecordingUserSink()
    navigator = RedirectNavigator()
    controller = SignupController(
        registration_gateway=registration_gateway,
        image_upload_gateway=image_upload_gateway,
        email_validator=email_validator,
        token_storage=CookieTokenStorage(response, secure=settings.token_cookie_secure),
        user_sink=user_sink,
        navigator=navigator,
        default_avatar_url=settings.default_avatar_url,
        success_path=settings.success_path,
    )

    outcome = await controller.submit(form)

    if outcome.result == SubmitResult.AUTHENTICATED:
        return SignupResponse(
            message="Account created",
            redirect_to=navigator.destination,
            user=user_sink.user,
        )

    if outcome.result == SubmitResult.NO_TOKEN:
        response.status_code = status.HTTP_200_OK
        return SignupResponse(message="Registration accepted")

    raise HTTPException(status_code=_FAILURE_STATUS[outcome.result], detail=outcome.message)
