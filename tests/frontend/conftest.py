import importlib
import sys

import pytest

PAGE_MODULES = (
    "fs_login_form.frontend.pages.login_page",
    "fs_login_form.frontend.pages.home_page",
)


class FakePlaceholder:
    """Stand-in for ``st.empty()``; remembers only the last element written."""

    def __init__(self):
        self.history = []

    @property
    def current(self):
        return self.history[-1] if self.history else None

    def info(self, msg):
        self.history.append(("info", msg))

    def error(self, msg):
        self.history.append(("error", msg))

    def empty(self):
        self.history.append(None)


class FakeStreamlit:
    def __init__(self):
        # simulate Streamlit session state
        self.session_state = {}
        # inputs keyed by label
        self._inputs = {}
        # button returns keyed by label
        self._buttons = {}
        self.errors = []
        self.successes = []
        self.captions = []
        self.placeholders = []
        self.switch_page_calls = []
        self.disabled_buttons = []

    def subheader(self, text):
        pass

    def text_input(self, label, type=None, placeholder=None, key=None):
        return self._inputs.get(label, "")

    def button(self, label, disabled=False):
        if disabled:
            self.disabled_buttons.append(label)
            return False
        return bool(self._buttons.get(label, False))

    def empty(self):
        placeholder = FakePlaceholder()
        self.placeholders.append(placeholder)
        return placeholder

    def caption(self, text):
        self.captions.append(text)

    def error(self, msg):
        self.errors.append(msg)

    def success(self, msg):
        self.successes.append(msg)

    def switch_page(self, name):
        self.switch_page_calls.append(name)


@pytest.fixture
def fake_st():
    fake = FakeStreamlit()
    # inject fake streamlit module
    sys.modules["streamlit"] = fake
    yield fake
    # cleanup
    sys.modules.pop("streamlit", None)
    for name in PAGE_MODULES:
        sys.modules.pop(name, None)


@pytest.fixture
def import_page():
    def _import(module_name):
        # ensure module re-imported fresh
        sys.modules.pop(module_name, None)
        return importlib.import_module(module_name)
    return _import
