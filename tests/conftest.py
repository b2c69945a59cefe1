import asyncio
from typing import List, Optional, Tuple

import pytest

from fs_login_form.schemas.auth_schemas import Account, AuthenticationParams


class ValidationStub:
    """Reports ``error_message`` for every field, or nothing when it is None."""

    def __init__(self, error_message: Optional[str] = None):
        self.error_message = error_message
        self.calls: List[Tuple[str, str]] = []

    def validate(self, field_name, value):
        self.calls.append((field_name, value))
        return self.error_message


class AuthenticationSpy:
    def __init__(self, access_token: str = "any_token"):
        self.account = Account(access_token=access_token)
        self.params: Optional[AuthenticationParams] = None
        self.calls_count = 0
        self.error: Optional[BaseException] = None
        # When set, auth() waits on it before resolving
        self.gate: Optional[asyncio.Event] = None

    async def auth(self, params: AuthenticationParams) -> Account:
        self.calls_count += 1
        self.params = params
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.account


class SessionStoreSpy:
    def __init__(self):
        self.calls: List[Tuple[str, str]] = []
        self.error: Optional[BaseException] = None

    def set_item(self, key: str, value: str) -> None:
        self.calls.append((key, value))
        if self.error is not None:
            raise self.error


class NavigatorSpy:
    def __init__(self):
        self.paths: List[str] = []
        self.error: Optional[BaseException] = None

    def navigate(self, path: str) -> None:
        self.paths.append(path)
        if self.error is not None:
            raise self.error


@pytest.fixture
def validation_stub():
    return ValidationStub()


@pytest.fixture
def authentication_spy():
    return AuthenticationSpy()


@pytest.fixture
def session_store_spy():
    return SessionStoreSpy()


@pytest.fixture
def navigator_spy():
    return NavigatorSpy()
