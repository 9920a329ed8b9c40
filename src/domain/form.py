"""
Form field state - Current values of the signup form.

Fields are independently mutable; no cross-field invariant is enforced
until submit. The password checklist is recomputed synchronously on
every password change.
"""

from dataclasses import dataclass, field

from .password_policy import RuleEvaluation, evaluate, is_satisfied


@dataclass(frozen=True)
class ProfileImage:
    """Binary image selected by the user, with upload metadata."""

    data: bytes
    filename: str = "profile.jpg"
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class RegistrationForm:
    """Immutable snapshot of the form taken when a submit starts."""

    full_name: str
    email: str
    password: str
    profile_image: ProfileImage | None = None


@dataclass
class FormFieldState:
    """
    Mutable signup form state.

    Mutated only by user input (setters) and by the submission flow
    (error field). Every write is a single attribute assignment, so
    overlapping submits leave the error field last-writer-wins.
    """

    full_name: str = ""
    email: str = ""
    password: str = ""
    profile_image: ProfileImage | None = None
    error: str | None = None
    password_checks: list[RuleEvaluation] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.password_checks = evaluate(self.password)

    def set_full_name(self, value: str) -> None:
        self.full_name = value

    def set_email(self, value: str) -> None:
        self.email = value

    def set_password(self, value: str) -> None:
        self.password = value
        self.password_checks = evaluate(value)

    def set_profile_image(self, image: ProfileImage | None) -> None:
        self.profile_image = image

    def clear_profile_image(self) -> None:
        self.profile_image = None

    @property
    def is_password_valid(self) -> bool:
        return is_satisfied(self.password_checks)

    @property
    def can_submit(self) -> bool:
        """Submit control is enabled only while the password policy passes."""
        return self.is_password_valid

    def set_error(self, message: str) -> None:
        self.error = message

    def clear_error(self) -> None:
        self.error = None

    def snapshot(self) -> RegistrationForm:
        return RegistrationForm(
            full_name=self.full_name,
            email=self.email,
            password=self.password,
            profile_image=self.profile_image,
        )
