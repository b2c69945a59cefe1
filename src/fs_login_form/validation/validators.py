"""Leaf field validation rules.

Every rule is pure and stateless: ``validate(value)`` returns a
``FieldValidationError`` instance on failure and ``None`` otherwise. Rules
other than ``RequiredFieldValidation`` let empty values through, leaving
presence checks to the required rule.
"""

import logging
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from fs_login_form.validation.errors import (
    FieldValidationError,
    InvalidFieldError,
    MinLengthError,
    RequiredFieldError,
)

logger = logging.getLogger(__name__)


class RequiredFieldValidation:
    def __init__(self, field: str):
        self.field = field

    def validate(self, value: Optional[str]) -> Optional[FieldValidationError]:
        if value is None or not value.strip():
            return RequiredFieldError()
        return None

    def __repr__(self) -> str:
        return f"RequiredFieldValidation(field={self.field!r})"


class EmailValidation:
    def __init__(self, field: str):
        self.field = field

    def validate(self, value: Optional[str]) -> Optional[FieldValidationError]:
        if not value:
            return None
        try:
            # Syntax-only validation; deliverability checks would hit DNS
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            logger.debug("Email rejected for field %s: %s", self.field, e)
            return InvalidFieldError()
        return None

    def __repr__(self) -> str:
        return f"EmailValidation(field={self.field!r})"


class MinLengthValidation:
    def __init__(self, field: str, min_length: int):
        if min_length < 1:
            raise ValueError("min_length must be a positive integer")
        self.field = field
        self.min_length = min_length

    def validate(self, value: Optional[str]) -> Optional[FieldValidationError]:
        if not value:
            return None
        if len(value) < self.min_length:
            return MinLengthError(self.min_length)
        return None

    def __repr__(self) -> str:
        return f"MinLengthValidation(field={self.field!r}, min_length={self.min_length})"
