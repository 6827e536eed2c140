"""
Credential providers for the MangoPay SDK.

A provider supplies the authentication header for each outgoing request.
Providers are written as generators so the same code runs under the blocking
and the asynchronous client: whenever a provider needs the network (to fetch
an OAuth token, say) it yields an ``httpx.Request``, the running client sends
it and resumes the generator with the ``httpx.Response``. The generator's
return value is the ``(header_name, header_value)`` pair.

Example:
    ```python
    provider = OAuthCredentialProvider(
        client_id="my-client",
        client_api_key="my-api-key",
        base_url="https://api.sandbox.mangopay.com",
    )
    api = MangoPayApi(client_id="my-client", credentials=provider)
    ```
"""
from __future__ import annotations

import base64
import logging
import time
from typing import TYPE_CHECKING, Generator, Optional, Tuple

import httpx
from pydantic import BaseModel, Field

from .constants import AUTHORIZATION_HEADER, USER_AGENT, USER_AGENT_HEADER
from .endpoints import MethodKey, get_endpoint
from .models.errors import AuthenticationError, ResponseError, TimeoutError

if TYPE_CHECKING:
    from .config import MangoPaySettings
    from .rest_tool import RequestContext

logger = logging.getLogger(__name__)

AuthFlow = Generator[httpx.Request, httpx.Response, Tuple[str, str]]


class CredentialProvider:
    """Base class for credential providers."""

    def authorization_flow(self, context: Optional["RequestContext"] = None) -> AuthFlow:
        """Produce the authentication header for a request.

        Errors raised here reach the caller unchanged.
        """
        raise NotImplementedError


class StaticTokenProvider(CredentialProvider):
    """Uses an access token obtained out of band."""

    def __init__(self, access_token: str, token_type: str = "Bearer"):
        if not access_token:
            raise ValueError("Access token is required")
        self._access_token = access_token
        self._token_type = token_type

    def authorization_flow(self, context: Optional["RequestContext"] = None) -> AuthFlow:
        yield from ()
        return AUTHORIZATION_HEADER, f"{self._token_type} {self._access_token}"


class OAuthToken(BaseModel):
    """OAuth access token as returned by the token endpoint."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 0
    created_at: float = Field(default_factory=time.time)

    def is_expired(self, leeway: float = 10.0) -> bool:
        return time.time() >= self.created_at + self.expires_in - leeway

    def header_value(self) -> str:
        return f"{self.token_type} {self.access_token}"


class InMemoryTokenStorage:
    """Keeps the current token for the lifetime of the process."""

    def __init__(self) -> None:
        self._token: Optional[OAuthToken] = None

    def get(self) -> Optional[OAuthToken]:
        return self._token

    def store(self, token: OAuthToken) -> None:
        self._token = token


class OAuthCredentialProvider(CredentialProvider):
    """Client-credentials OAuth flow with a cached token.

    A new token is requested only when none is stored or the stored one has
    expired. The check and the store are not guarded: concurrent calls that
    find no valid token each fetch one, and the last to complete is kept.
    """

    def __init__(
        self,
        client_id: str,
        client_api_key: str,
        base_url: str,
        api_version: str = "v2.01",
        storage: Optional[InMemoryTokenStorage] = None,
    ):
        if not client_id or not client_api_key:
            raise ValueError("Client id and API key are required")
        self._client_id = client_id
        self._client_api_key = client_api_key
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version.strip("/")
        self._storage = storage or InMemoryTokenStorage()

    @classmethod
    def from_settings(cls, settings: "MangoPaySettings") -> "OAuthCredentialProvider":
        return cls(
            client_id=settings.client_id,
            client_api_key=settings.client_api_key.get_secret_value(),
            base_url=settings.base_url,
            api_version=settings.api_version,
        )

    @property
    def storage(self) -> InMemoryTokenStorage:
        return self._storage

    def token_request(self) -> httpx.Request:
        endpoint = get_endpoint(MethodKey.AUTHENTICATION_OAUTH)
        credentials = base64.b64encode(
            f"{self._client_id}:{self._client_api_key}".encode("utf-8")
        ).decode("ascii")
        return httpx.Request(
            endpoint.http_verb.value,
            f"{self._base_url}/{self._api_version}{endpoint.resolve()}",
            headers={
                AUTHORIZATION_HEADER: f"Basic {credentials}",
                USER_AGENT_HEADER: USER_AGENT,
            },
            data={"grant_type": "client_credentials"},
        )

    def authorization_flow(self, context: Optional["RequestContext"] = None) -> AuthFlow:
        token = self._storage.get()
        if token is None or token.is_expired():
            token = yield from self._fetch_token()
            self._storage.store(token)
        return AUTHORIZATION_HEADER, token.header_value()

    def _fetch_token(self) -> Generator[httpx.Request, httpx.Response, OAuthToken]:
        request = self.token_request()
        logger.debug("Requesting OAuth token from %s", request.url)

        try:
            response = yield request
        except httpx.TimeoutException as exc:
            raise TimeoutError(str(exc) or "OAuth token request timed out") from exc
        except httpx.RequestError as exc:
            raise ResponseError("", 0, message=str(exc)) from exc

        if response.status_code == 401:
            raise AuthenticationError(response.text)
        if response.status_code != 200:
            raise ResponseError(response.text, response.status_code)

        try:
            return OAuthToken.model_validate(response.json())
        except ValueError as exc:
            raise ResponseError(
                response.text, response.status_code, message="Malformed OAuth token response"
            ) from exc
