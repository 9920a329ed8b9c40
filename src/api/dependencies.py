"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
gateway adapters and the email validator into routes.
"""

import httpx
from fastapi import Depends, Request

from src.adapters.gateway.http import HttpImageUploadGateway, HttpRegistrationGateway
from src.adapters.validation.email import EmailSyntaxValidator
from src.config.settings import Settings, get_settings

# Module-level singleton - EmailSyntaxValidator is stateless
_email_validator = EmailSyntaxValidator()


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.http_client


def get_registration_gateway(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> HttpRegistrationGateway:
    """Create registration gateway bound to the shared client."""
    return HttpRegistrationGateway(client, settings.register_path)


def get_image_upload_gateway(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> HttpImageUploadGateway:
    """Create image upload gateway bound to the shared client."""
    return HttpImageUploadGateway(client, settings.upload_image_path)


def get_email_validator() -> EmailSyntaxValidator:
    """Get email validator (singleton)."""
    return _email_validator
