"""
Email validator adapter - Implements EmailValidator protocol.

Delegates syntax checking to the email-validator package (the library
behind pydantic's EmailStr). Only a bare address is accepted: display-name
forms such as "Jane <jane@example.com>" are rejected, and no DNS or
deliverability lookups are made.
"""

from email_validator import EmailNotValidError, validate_email


class EmailSyntaxValidator:
    """
    Implements EmailValidator protocol via email-validator.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def is_valid(self, email: str) -> bool:
        try:
            validate_email(email, check_deliverability=False, allow_display_name=False)
        except EmailNotValidError:
            return False
        return True
