"""Pure reducer for the login form: ``(state, event) -> state``."""

from fs_login_form.schemas.form_schemas import (
    FieldChanged,
    FormEvent,
    FormState,
    SubmitFailed,
    SubmitRequested,
    SubmitSucceeded,
)
from fs_login_form.validation.protocols import Validation


def validate_fields(email: str, password: str, validation: Validation) -> dict:
    return {
        "email_error": validation.validate("email", email),
        "password_error": validation.validate("password", password),
    }


def initial_state(validation: Validation) -> FormState:
    """Empty form with errors computed for the empty values."""
    return FormState(**validate_fields("", "", validation))


def reduce(state: FormState, event: FormEvent, validation: Validation) -> FormState:
    """Return the snapshot that follows ``state`` once ``event`` is applied.

    Events that do not apply to the current state (a submit request while
    loading or with field errors) return ``state`` itself, unchanged.
    """
    if isinstance(event, FieldChanged):
        values = {"email": state.email, "password": state.password}
        values[event.field] = event.value
        # Both fields are re-validated on any change
        return state.model_copy(update={**values, **validate_fields(values["email"], values["password"], validation)})

    if isinstance(event, SubmitRequested):
        if not state.can_submit:
            return state
        return state.model_copy(update={"is_loading": True, "main_error": None})

    if isinstance(event, SubmitSucceeded):
        return state.model_copy(update={"is_loading": False, "main_error": None})

    if isinstance(event, SubmitFailed):
        return state.model_copy(update={"is_loading": False, "main_error": event.message})

    raise TypeError(f"Unsupported form event: {event!r}")
