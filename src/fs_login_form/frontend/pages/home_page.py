import logging

import streamlit as st

from fs_login_form.config import settings
from fs_login_form.frontend import factories
from fs_login_form.frontend.collaborators import StreamlitNavigator, StreamlitSessionStore

logger = logging.getLogger(__name__)


def _render():
    store = StreamlitSessionStore(st)
    navigator = StreamlitNavigator(st)

    # Only reachable with a stored token
    if not store.get_item(settings.ACCESS_TOKEN_KEY):
        navigator.navigate(settings.LOGIN_ROUTE)
        return

    st.subheader("Home")
    st.success("Login realizado com sucesso.")

    if st.button("Sair"):
        store.remove_item(settings.ACCESS_TOKEN_KEY)
        # next visit to the login page starts a fresh form
        st.session_state.pop(factories.LOGIN_FORM_KEY, None)
        navigator.navigate(settings.LOGIN_ROUTE)


# Execute render at import to mimic Streamlit page behavior
_render()
