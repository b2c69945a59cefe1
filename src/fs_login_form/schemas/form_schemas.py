"""Pydantic schemas for the login form state and the events that transform it."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

FieldName = Literal["email", "password"]


class FormState(BaseModel):
    """Immutable snapshot of the login form.

    A new instance replaces the previous one on every transition; nothing
    mutates a published snapshot.
    """
    email: str = ""
    password: str = ""
    email_error: Optional[str] = None
    password_error: Optional[str] = None
    main_error: Optional[str] = None
    is_loading: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def has_field_errors(self) -> bool:
        return self.email_error is not None or self.password_error is not None

    @property
    def can_submit(self) -> bool:
        """True when both fields are valid and no submission is in flight."""
        return not self.has_field_errors and not self.is_loading


class FieldChanged(BaseModel):
    """The user edited one of the form fields."""
    field: FieldName
    value: str

    model_config = ConfigDict(frozen=True)


class SubmitRequested(BaseModel):
    model_config = ConfigDict(frozen=True)


class SubmitSucceeded(BaseModel):
    model_config = ConfigDict(frozen=True)


class SubmitFailed(BaseModel):
    """Submission ended without success.

    ``message`` is None when the attempt was abandoned (e.g. cancelled)
    rather than rejected, in which case no main error is shown.
    """
    message: Optional[str] = None

    model_config = ConfigDict(frozen=True)


FormEvent = Union[FieldChanged, SubmitRequested, SubmitSucceeded, SubmitFailed]
