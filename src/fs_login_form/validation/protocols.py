from typing import Optional, Protocol, runtime_checkable

from fs_login_form.validation.errors import FieldValidationError


@runtime_checkable
class FieldValidation(Protocol):
    """A single pure rule bound to one field."""

    field: str

    def validate(self, value: Optional[str]) -> Optional[FieldValidationError]:
        ...


@runtime_checkable
class Validation(Protocol):
    """Form-level validator consumed by the login form."""

    def validate(self, field_name: str, value: Optional[str]) -> Optional[str]:
        ...
