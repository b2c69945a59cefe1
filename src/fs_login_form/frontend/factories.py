"""Composition root wiring the login form to its collaborators."""

from typing import Any, Optional

import httpx

from fs_login_form.config import settings
from fs_login_form.frontend.collaborators import StreamlitNavigator, StreamlitSessionStore
from fs_login_form.frontend.login_form import LoginForm
from fs_login_form.services.authentication import RemoteAuthentication
from fs_login_form.validation import ValidationBuilder, ValidationComposite

# session_state key holding the per-session LoginForm
LOGIN_FORM_KEY = "login_form"


def make_login_validation() -> ValidationComposite:
    return ValidationComposite.build([
        *ValidationBuilder.field("email").required().email().build(),
        *ValidationBuilder.field("password").required().min_length(settings.PASSWORD_MIN_LENGTH).build(),
    ])


def make_remote_authentication(client: Optional[httpx.AsyncClient] = None) -> RemoteAuthentication:
    return RemoteAuthentication(settings.login_url, client=client)


def make_login_form(st: Any, client: Optional[httpx.AsyncClient] = None) -> LoginForm:
    return LoginForm(
        validation=make_login_validation(),
        authentication=make_remote_authentication(client),
        session_store=StreamlitSessionStore(st),
        navigator=StreamlitNavigator(st),
        access_token_key=settings.ACCESS_TOKEN_KEY,
        home_path=settings.HOME_PATH,
    )
