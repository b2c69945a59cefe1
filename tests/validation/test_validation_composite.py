from typing import Optional

from fs_login_form.validation import (
    FieldValidationError,
    ValidationBuilder,
    ValidationComposite,
)
from fs_login_form.validation.validators import EmailValidation, MinLengthValidation, RequiredFieldValidation


class FieldValidationSpy:
    def __init__(self, field: str, error: Optional[FieldValidationError] = None):
        self.field = field
        self.error = error
        self.values = []

    def validate(self, value):
        self.values.append(value)
        return self.error


def test_returns_first_error_in_registration_order():
    composite = ValidationComposite.build([
        FieldValidationSpy("email"),
        FieldValidationSpy("email", FieldValidationError("first_error")),
        FieldValidationSpy("email", FieldValidationError("second_error")),
    ])
    assert composite.validate("email", "any") == "first_error"


def test_stops_at_first_failure():
    failing = FieldValidationSpy("email", FieldValidationError("boom"))
    later = FieldValidationSpy("email")
    composite = ValidationComposite({"email": [failing, later]})

    composite.validate("email", "value")

    assert failing.values == ["value"]
    assert later.values == []


def test_returns_none_when_all_rules_pass():
    composite = ValidationComposite.build([FieldValidationSpy("email"), FieldValidationSpy("email")])
    assert composite.validate("email", "any") is None


def test_rules_scoped_to_their_field():
    composite = ValidationComposite.build([
        FieldValidationSpy("email", FieldValidationError("email_error")),
        FieldValidationSpy("password"),
    ])
    assert composite.validate("password", "any") is None
    assert composite.validate("email", "any") == "email_error"


def test_unknown_field_is_valid():
    composite = ValidationComposite({})
    assert composite.validate("nickname", "") is None


def test_rule_table_is_frozen():
    source = {"email": [FieldValidationSpy("email")]}
    composite = ValidationComposite(source)
    source["email"].append(FieldValidationSpy("email", FieldValidationError("late")))

    assert composite.validate("email", "any") is None


class TestValidationBuilder:
    def test_builds_rules_in_call_order(self):
        rules = ValidationBuilder.field("email").required().email().build()
        assert [type(r) for r in rules] == [RequiredFieldValidation, EmailValidation]
        assert all(r.field == "email" for r in rules)

    def test_min_length(self):
        (rule,) = ValidationBuilder.field("password").min_length(8).build()
        assert isinstance(rule, MinLengthValidation)
        assert rule.min_length == 8

    def test_required_reported_before_format(self):
        composite = ValidationComposite.build(ValidationBuilder.field("email").required().email().build())
        assert composite.validate("email", "") == "Campo obrigatório"
        assert composite.validate("email", "nope") == "Valor inválido"
        assert composite.validate("email", "user@example.com") is None
