from typing import List

from fs_login_form.validation.protocols import FieldValidation
from fs_login_form.validation.validators import (
    EmailValidation,
    MinLengthValidation,
    RequiredFieldValidation,
)


class ValidationBuilder:
    """Fluent construction of the rule list for one field.

    Usage::

        rules = ValidationBuilder.field("email").required().email().build()
    """

    def __init__(self, field_name: str, validations: List[FieldValidation]):
        self.field_name = field_name
        self.validations = validations

    @classmethod
    def field(cls, field_name: str) -> "ValidationBuilder":
        return cls(field_name, [])

    def required(self) -> "ValidationBuilder":
        self.validations.append(RequiredFieldValidation(self.field_name))
        return self

    def email(self) -> "ValidationBuilder":
        self.validations.append(EmailValidation(self.field_name))
        return self

    def min_length(self, length: int) -> "ValidationBuilder":
        self.validations.append(MinLengthValidation(self.field_name, length))
        return self

    def build(self) -> List[FieldValidation]:
        return list(self.validations)
