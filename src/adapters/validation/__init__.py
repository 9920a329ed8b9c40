"""Validation adapters."""

from .email import EmailSyntaxValidator

__all__ = ["EmailSyntaxValidator"]
