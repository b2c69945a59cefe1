"""Login form state machine.

Owns the ``FormState`` snapshot, re-validates fields on every change and
runs at most one authentication request at a time. Rendering layers read
``state``, call ``on_field_change``/``on_submit`` and ``subscribe`` to be
told about every new snapshot.
"""

import logging
from typing import Callable, List

from fs_login_form.errors import UnexpectedError
from fs_login_form.frontend.collaborators import Navigator, SessionStore
from fs_login_form.frontend.form_reducer import initial_state, reduce
from fs_login_form.schemas.auth_schemas import AuthenticationParams
from fs_login_form.schemas.form_schemas import (
    FieldChanged,
    FormEvent,
    FormState,
    SubmitFailed,
    SubmitRequested,
    SubmitSucceeded,
)
from fs_login_form.services.authentication import Authentication
from fs_login_form.validation.protocols import Validation

logger = logging.getLogger(__name__)

# Type aliases
StateListener = Callable[[FormState], None]
Unsubscribe = Callable[[], None]

ACCESS_TOKEN_KEY = "accessToken"
HOME_PATH = "/"


def error_message(exc: BaseException) -> str:
    """Message shown as the form's main error for a failed submission."""
    return str(exc) or UnexpectedError.default_message


class LoginForm:
    def __init__(
        self,
        validation: Validation,
        authentication: Authentication,
        session_store: SessionStore,
        navigator: Navigator,
        access_token_key: str = ACCESS_TOKEN_KEY,
        home_path: str = HOME_PATH,
    ):
        self.validation = validation
        self.authentication = authentication
        self.session_store = session_store
        self.navigator = navigator
        self.access_token_key = access_token_key
        self.home_path = home_path
        self._listeners: List[StateListener] = []
        self._state = initial_state(validation)

    @property
    def state(self) -> FormState:
        return self._state

    def subscribe(self, listener: StateListener) -> Unsubscribe:
        """Register ``listener`` for every new snapshot. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def on_field_change(self, field: str, value: str) -> None:
        self._dispatch(FieldChanged(field=field, value=value))

    async def on_submit(self) -> None:
        """Submit the current credentials.

        No-op while a submission is in flight or while any field is invalid.
        Only BaseExceptions such as task cancellation propagate, after loading
        has been cleared.
        """
        if not self._state.can_submit:
            logger.debug(
                "Submit ignored (loading=%s, field errors=%s)",
                self._state.is_loading,
                self._state.has_field_errors,
            )
            return

        self._dispatch(SubmitRequested())
        params = AuthenticationParams(email=self._state.email, password=self._state.password)
        try:
            account = await self.authentication.auth(params)
            self.session_store.set_item(self.access_token_key, account.access_token)
            self._dispatch(SubmitSucceeded())
            logger.debug("Authentication succeeded")
            self.navigator.navigate(self.home_path)
        except Exception as e:
            logger.error(f"Authentication failed: {e}", exc_info=True)
            self._dispatch(SubmitFailed(message=error_message(e)))
        except BaseException:
            # Cancellation, interpreter exit or framework control flow
            if self._state.is_loading:
                logger.info("Authentication abandoned while in flight")
                self._dispatch(SubmitFailed())
            raise

    def _dispatch(self, event: FormEvent) -> None:
        new_state = reduce(self._state, event, self.validation)
        if new_state is self._state:
            return
        self._state = new_state
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception:
                logger.error("State listener failed", exc_info=True)
