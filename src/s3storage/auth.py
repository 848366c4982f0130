"""Auth session providers supplying per-call credentials and identity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from .types import AuthSession, Credentials

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)


class StaticAuthProvider:
    """Hands out a fixed set of credentials."""

    def __init__(self, credentials: Credentials | None, identity_id: str | None = None) -> None:
        self._credentials = credentials
        self._identity_id = identity_id

    def fetch_auth_session(self) -> AuthSession:
        return AuthSession(credentials=self._credentials, identity_id=self._identity_id)


class Boto3AuthProvider:
    """Resolves credentials through a boto3 session on every fetch.

    The session's credential chain (environment, shared config, instance
    metadata, ...) refreshes temporary credentials on its own, so each call
    gets a frozen snapshot that is valid at the time of the request.
    """

    def __init__(
        self,
        session: boto3.Session | None = None,
        *,
        identity_id: str | None = None,
    ) -> None:
        """Initialize the provider.

        Parameters
        ----------
        session : boto3.Session | None
            Session to draw credentials from. A default session is created
            lazily when *None*.
        identity_id : str | None
            Caller identity, used for private/protected prefixes.
        """
        self._session = session
        self._identity_id = identity_id

    @property
    def session(self) -> boto3.Session:
        if self._session is None:
            import boto3

            self._session = boto3.Session()
        return self._session

    def fetch_auth_session(self) -> AuthSession:
        boto_credentials = self.session.get_credentials()
        if boto_credentials is None:
            logger.debug("No credentials found in boto3 credential chain")
            return AuthSession(credentials=None, identity_id=self._identity_id)

        frozen = boto_credentials.get_frozen_credentials()
        credentials = Credentials(
            access_key_id=frozen.access_key,
            secret_access_key=frozen.secret_key,
            session_token=frozen.token,
        )
        return AuthSession(credentials=credentials, identity_id=self._identity_id)


AuthProvider = Union[StaticAuthProvider, Boto3AuthProvider]
