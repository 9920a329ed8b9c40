"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from typing import Any

from pydantic import BaseModel, Field


class PasswordPolicyRequest(BaseModel):
    """Request model for the live password checklist."""

    password: str = Field(default="", description="Current password field value")


class PasswordRuleStatus(BaseModel):
    """One checklist line."""

    id: str
    label: str
    satisfied: bool


class PasswordPolicyResponse(BaseModel):
    """Response model for the password checklist."""

    rules: list[PasswordRuleStatus]
    valid: bool = Field(..., description="True when every rule is satisfied; gates the submit control")


class SignupResponse(BaseModel):
    """Response model for a completed signup submission."""

    message: str
    redirect_to: str | None = None
    user: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
