import asyncio
import logging

import streamlit as st

from fs_login_form.frontend import factories
from fs_login_form.frontend.components import field_status, form_status

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Entrando..."


def _get_form():
    # One form state machine per browser session
    form = st.session_state.get(factories.LOGIN_FORM_KEY)
    if form is None:
        form = factories.make_login_form(st)
        st.session_state[factories.LOGIN_FORM_KEY] = form
    return form


def _sync_field(form, field: str, value: str) -> None:
    if value != getattr(form.state, field):
        form.on_field_change(field, value)


def _render_status(error) -> None:
    status = field_status(error)
    st.caption(f"{status.indicator} {status.title}")


def _render_form_status(area, state) -> None:
    status = form_status(state)
    if status.show_spinner:
        area.info(LOADING_MESSAGE)
    elif status.main_error:
        area.error(status.main_error)
    else:
        area.empty()


def _render():
    try:
        form = _get_form()
        st.subheader("Login")

        email = st.text_input("Email", placeholder="Digite seu email", key="email")
        _sync_field(form, "email", email or "")
        _render_status(form.state.email_error)

        password = st.text_input("Password", type="password", placeholder="Digite sua senha", key="password")
        _sync_field(form, "password", password or "")
        _render_status(form.state.password_error)

        submitted = st.button("Entrar", disabled=not form.state.can_submit)
        status_area = st.empty()
        _render_form_status(status_area, form.state)

        if submitted:
            unsubscribe = form.subscribe(lambda state: _render_form_status(status_area, state))
            try:
                asyncio.run(form.on_submit())
            finally:
                unsubscribe()
    except Exception as e:
        logger.error(e, exc_info=True)
        st.error("Unexpected error rendering login page.")


# Execute render at import to mimic Streamlit page behavior
_render()
