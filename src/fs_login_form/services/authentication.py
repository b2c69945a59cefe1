"""Authentication gateway contract and its HTTP implementation."""

import logging
from typing import Optional, Protocol, runtime_checkable

import httpx
from pydantic import ValidationError

from fs_login_form.errors import InvalidCredentialsError, UnexpectedError
from fs_login_form.schemas.auth_schemas import Account, AuthenticationParams

logger = logging.getLogger(__name__)


@runtime_checkable
class Authentication(Protocol):
    async def auth(self, params: AuthenticationParams) -> Account:
        """Exchange credentials for an account.

        Raises:
            InvalidCredentialsError: If the credentials were rejected
            UnexpectedError: On any other failure
        """
        ...


class RemoteAuthentication:
    """Authentication gateway backed by an HTTP login endpoint.

    Maps ``200`` to an ``Account``, ``401`` to ``InvalidCredentialsError``
    and every other outcome to ``UnexpectedError``.
    """

    def __init__(self, url: str, client: Optional[httpx.AsyncClient] = None):
        self.url = url
        self.client = client

    async def auth(self, params: AuthenticationParams) -> Account:
        close_client = False
        client = self.client
        if client is None:
            client = httpx.AsyncClient()
            close_client = True

        try:
            try:
                resp = await client.post(self.url, json=params.model_dump())
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.error(f"Transport error during authentication: {e}", exc_info=True)
                raise UnexpectedError() from e

            if resp.status_code == httpx.codes.OK:
                try:
                    return Account.model_validate(resp.json())
                except (ValueError, ValidationError) as e:
                    logger.error(f"Malformed authentication response: {e}", exc_info=True)
                    raise UnexpectedError() from e

            if resp.status_code == httpx.codes.UNAUTHORIZED:
                logger.debug("Authentication rejected: invalid credentials")
                raise InvalidCredentialsError()

            logger.error("Unexpected authentication status %s", resp.status_code)
            raise UnexpectedError()
        finally:
            if close_client:
                await client.aclose()
