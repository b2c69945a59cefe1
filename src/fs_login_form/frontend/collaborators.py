"""Session and navigation collaborators used by the login form.

The Streamlit adapters take the ``st`` module (or a test double exposing
``session_state`` and ``switch_page``) as a constructor argument.
"""

import logging
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from fs_login_form.config import settings

logger = logging.getLogger(__name__)


@runtime_checkable
class SessionStore(Protocol):
    def set_item(self, key: str, value: str) -> None:
        ...


@runtime_checkable
class Navigator(Protocol):
    def navigate(self, path: str) -> None:
        ...


class StreamlitSessionStore:
    """Session store backed by ``st.session_state``."""

    def __init__(self, st: Any):
        self.st = st

    def set_item(self, key: str, value: str) -> None:
        self.st.session_state[key] = value

    def get_item(self, key: str) -> Optional[str]:
        return self.st.session_state.get(key)

    def remove_item(self, key: str) -> None:
        self.st.session_state.pop(key, None)


class StreamlitNavigator:
    """Navigator mapping paths to the page scripts registered in ``frontend/app.py``.

    Raises:
        LookupError: If no page is registered for the path
    """

    def __init__(self, st: Any, routes: Optional[Dict[str, str]] = None):
        self.st = st
        self.routes = dict(settings.PAGE_ROUTES if routes is None else routes)

    def navigate(self, path: str) -> None:
        page = self.routes.get(path)
        if page is None:
            logger.error("No page registered for path %s", path)
            raise LookupError(f"No page registered for path {path}")
        # switch_page ends the current run by raising Streamlit's rerun signal
        self.st.switch_page(page)
