"""Field validation: pluggable per-field rules and their composite."""

from fs_login_form.validation.builder import ValidationBuilder
from fs_login_form.validation.composite import ValidationComposite
from fs_login_form.validation.errors import (
    FieldValidationError,
    InvalidFieldError,
    MinLengthError,
    RequiredFieldError,
)
from fs_login_form.validation.protocols import FieldValidation, Validation
from fs_login_form.validation.validators import (
    EmailValidation,
    MinLengthValidation,
    RequiredFieldValidation,
)

__all__ = [
    "EmailValidation",
    "FieldValidation",
    "FieldValidationError",
    "InvalidFieldError",
    "MinLengthError",
    "MinLengthValidation",
    "RequiredFieldError",
    "RequiredFieldValidation",
    "Validation",
    "ValidationBuilder",
    "ValidationComposite",
]
