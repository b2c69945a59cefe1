"""Errors returned (not raised) by field validation rules."""


class FieldValidationError(ValueError):
    """Base class for per-field validation failures."""

    default_message = "Valor inválido"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class RequiredFieldError(FieldValidationError):
    default_message = "Campo obrigatório"


class InvalidFieldError(FieldValidationError):
    default_message = "Valor inválido"


class MinLengthError(FieldValidationError):
    def __init__(self, min_length: int):
        self.min_length = min_length
        super().__init__(f"Mínimo de {min_length} caracteres")
