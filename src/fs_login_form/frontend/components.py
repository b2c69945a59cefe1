"""View-model helpers mapping a ``FormState`` to what the page displays."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from fs_login_form.schemas.form_schemas import FormState

VALID_TITLE = "Tudo certo"
VALID_INDICATOR = "🟢"
INVALID_INDICATOR = "🔴"


class FieldStatus(BaseModel):
    """Status badge shown next to an input."""
    title: str
    indicator: str

    model_config = ConfigDict(frozen=True)


class FormStatus(BaseModel):
    """Spinner and main error area below the form."""
    show_spinner: bool
    main_error: Optional[str] = None

    model_config = ConfigDict(frozen=True)


def field_status(error: Optional[str]) -> FieldStatus:
    if error:
        return FieldStatus(title=error, indicator=INVALID_INDICATOR)
    return FieldStatus(title=VALID_TITLE, indicator=VALID_INDICATOR)


def form_status(state: FormState) -> FormStatus:
    return FormStatus(show_spinner=state.is_loading, main_error=state.main_error)
