"""Streamlit entry script registering the login and home pages."""

import streamlit as st

from fs_login_form.config import settings

st.set_page_config(page_title="Login")


def _build_navigation():
    pages = [
        st.Page(script, default=(path == settings.LOGIN_ROUTE))
        for path, script in settings.PAGE_ROUTES.items()
    ]
    return st.navigation(pages, position="hidden")


_build_navigation().run()
