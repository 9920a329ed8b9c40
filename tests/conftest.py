"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Mocked signup ports (gateways, validator, session sinks)
- A filled-in, valid signup form
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from src.domain.form import FormFieldState
from src.domain.ports import RegistrationResponse
from src.domain.signup import SignupController

VALID_PASSWORD = "Abcdef1!"
USER_RECORD = {"_id": "u1", "fullName": "Jane Doe", "email": "jane@example.com"}


@pytest.fixture
def ports() -> SimpleNamespace:
    """Mocked ports with a successful default behaviour."""
    registration_gateway = AsyncMock()
    registration_gateway.register.return_value = RegistrationResponse(token="abc", user=USER_RECORD)
    image_upload_gateway = AsyncMock()
    image_upload_gateway.upload.return_value = "https://images.example.com/u1.png"
    email_validator = Mock()
    email_validator.is_valid.return_value = True
    return SimpleNamespace(
        registration_gateway=registration_gateway,
        image_upload_gateway=image_upload_gateway,
        email_validator=email_validator,
        token_storage=Mock(),
        user_sink=Mock(),
        navigator=Mock(),
    )


@pytest.fixture
def controller(ports: SimpleNamespace) -> SignupController:
    """SignupController wired to the mocked ports."""
    return SignupController(
        registration_gateway=ports.registration_gateway,
        image_upload_gateway=ports.image_upload_gateway,
        email_validator=ports.email_validator,
        token_storage=ports.token_storage,
        user_sink=ports.user_sink,
        navigator=ports.navigator,
    )


@pytest.fixture
def valid_form() -> FormFieldState:
    """Form with a name, email and policy-valid password and no image."""
    form = FormFieldState()
    form.set_full_name("Jane Doe")
    form.set_email("jane@example.com")
    form.set_password(VALID_PASSWORD)
    return form
