"""Credentials and bearer-token caching.

The token cache is the only mutable state a client shares between calls.
A token is published by a single attribute assignment once it is fully
built, and concurrent callers that find the cache empty or expired wait on
one shared authentication exchange instead of starting their own.
"""

import asyncio
import base64
import binascii
import json
import logging
import threading
import time
from concurrent.futures import Future
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Union

import httpx
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from eversend.exceptions import AuthenticationFailed, TransportError

logger = logging.getLogger(__name__)

TOKEN_PATH = "/auth/token"


@dataclass(frozen=True)
class Credentials:
    """Client id and secret as shown in the Eversend business dashboard."""

    client_id: str
    client_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.client_id or not self.client_secret:
            raise ValueError("client_id and client_secret are required")

    def headers(self) -> dict[str, str]:
        return {"clientId": self.client_id, "clientSecret": self.client_secret}


@dataclass(frozen=True)
class Token:
    """Bearer token with the moment it was obtained and its lifetime.

    ``obtained_at`` is read from the cache's clock (monotonic by default).
    ``ttl`` of ``None`` means the API reported no expiry.
    """

    value: str = field(repr=False)
    obtained_at: float
    ttl: Optional[float] = None

    @property
    def expires_at(self) -> Optional[float]:
        if self.ttl is None:
            return None
        return self.obtained_at + self.ttl

    def is_expired(self, now: float) -> bool:
        expires_at = self.expires_at
        return expires_at is not None and now >= expires_at


class TokenResponse(BaseModel):
    """Body returned by the identity endpoint."""

    model_config = ConfigDict(extra="ignore")

    token: str = Field(min_length=1)
    expires_in: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("expiresIn", "expires_in")
    )
    expires_at: Optional[Union[float, str]] = Field(
        default=None, validation_alias=AliasChoices("expiresAt", "expires_at")
    )


def _jwt_expiry(value: str) -> Optional[float]:
    """Return the ``exp`` claim of a JWT, or None if the token is not one."""
    parts = value.split(".")
    if len(parts) != 3:
        return None
    segment = parts[1] + "=" * (-len(parts[1]) % 4)
    try:
        claims = json.loads(base64.urlsafe_b64decode(segment))
    except (binascii.Error, ValueError):
        return None
    if not isinstance(claims, dict):
        return None
    exp = claims.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        return None
    return float(exp)


def _epoch(value: Union[float, str]) -> float:
    if isinstance(value, (int, float)):
        # Values this large are millisecond timestamps.
        return value / 1000.0 if value > 1e12 else float(value)
    text = value.strip()
    try:
        return _epoch(float(text))
    except ValueError:
        pass
    parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def token_ttl(data: TokenResponse, wall_now: float) -> Optional[float]:
    """Work out a token's lifetime from what the identity endpoint reported.

    Checked in order: an explicit ``expiresIn``, an explicit ``expiresAt``,
    then the JWT ``exp`` claim. Without any of these the token has no
    expiry and lives until a 401 invalidates it.
    """
    if data.expires_in is not None:
        return data.expires_in
    if data.expires_at is not None:
        try:
            return _epoch(data.expires_at) - wall_now
        except ValueError:
            logger.debug("Ignoring unparseable token expiry %r", data.expires_at)
    exp = _jwt_expiry(data.token)
    if exp is not None:
        return exp - wall_now
    return None


class _TokenCacheBase:
    def __init__(
        self,
        credentials: Credentials,
        base_url: str,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], float] = time.time,
    ) -> None:
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self._clock = clock
        self._wall_clock = wall_clock
        self._token: Optional[Token] = None

    @property
    def token(self) -> Optional[Token]:
        """The cached token, whether or not it has expired."""
        return self._token

    def seed(self, value: str) -> None:
        """Cache a pre-issued token with no expiry."""
        self._token = Token(value=value, obtained_at=self._clock(), ttl=None)

    def _is_valid(self, token: Optional[Token]) -> bool:
        return token is not None and not token.is_expired(self._clock())

    def _token_url(self) -> str:
        return f"{self.base_url}{TOKEN_PATH}"

    def _parse(self, response: httpx.Response) -> Token:
        if response.status_code >= 400:
            raise AuthenticationFailed(
                "Credential exchange rejected",
                status_code=response.status_code,
                body=response.text,
            )
        try:
            body: Any = response.json()
        except ValueError as e:
            raise AuthenticationFailed(
                "Identity endpoint returned a non-JSON body",
                status_code=response.status_code,
                body=response.text,
            ) from e
        if isinstance(body, dict) and "token" not in body and isinstance(body.get("data"), dict):
            body = body["data"]
        try:
            data = TokenResponse.model_validate(body)
        except ValidationError as e:
            raise AuthenticationFailed(
                "Identity endpoint returned no token",
                status_code=response.status_code,
                body=response.text,
            ) from e

        ttl = token_ttl(data, self._wall_clock())
        logger.debug(
            "Obtained API token (ttl=%s)",
            "none" if ttl is None else f"{ttl:.0f}s",
        )
        return Token(value=data.token, obtained_at=self._clock(), ttl=ttl)


class TokenCache(_TokenCacheBase):
    """Thread-safe token cache for the blocking client.

    Args:
        http_client: Client used for the authentication exchange
        credentials: Client id and secret
        base_url: Base URL of the Eversend API
        clock: Monotonic clock used for expiry checks
    """

    def __init__(
        self,
        http_client: httpx.Client,
        credentials: Credentials,
        base_url: str,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(credentials, base_url, clock, wall_clock)
        self._http = http_client
        self._lock = threading.Lock()
        self._inflight: Optional[Future] = None

    def get_token(self) -> Token:
        """Return a non-expired token, authenticating if needed.

        Raises:
            AuthenticationFailed: If the credential exchange fails
        """
        with self._lock:
            token = self._token
            if self._is_valid(token):
                return token  # type: ignore[return-value]
            flight = self._inflight
            leader = flight is None
            if leader:
                flight = self._inflight = Future()

        if not leader:
            return flight.result()

        try:
            token = self._authenticate()
        except BaseException as e:
            with self._lock:
                self._inflight = None
            flight.set_exception(e)
            raise

        with self._lock:
            self._token = token
            self._inflight = None
        flight.set_result(token)
        return token

    def invalidate(self, token: Token) -> None:
        """Drop ``token`` if it is still the cached one."""
        with self._lock:
            if self._token is token:
                self._token = None

    def clear(self) -> None:
        with self._lock:
            self._token = None

    def _authenticate(self) -> Token:
        logger.debug("Requesting API token for client %s", self.credentials.client_id)
        try:
            response = self._http.get(self._token_url(), headers=self.credentials.headers())
        except httpx.RequestError as e:
            raise AuthenticationFailed(
                f"Could not reach identity endpoint: {e}"
            ) from TransportError(str(e), cause=e)
        return self._parse(response)


class AsyncTokenCache(_TokenCacheBase):
    """Token cache for the asyncio client.

    The exchange runs in its own task and callers await it through
    ``asyncio.shield``, so cancelling one caller never cancels a refresh
    that others are waiting on.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        credentials: Credentials,
        base_url: str,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(credentials, base_url, clock, wall_clock)
        self._http = http_client
        self._inflight: Optional[asyncio.Task] = None

    async def get_token(self) -> Token:
        """Return a non-expired token, authenticating if needed.

        Raises:
            AuthenticationFailed: If the credential exchange fails
        """
        token = self._token
        if self._is_valid(token):
            return token  # type: ignore[return-value]
        task = self._inflight
        if task is None:
            task = self._inflight = asyncio.ensure_future(self._refresh())
            task.add_done_callback(_retrieve_exception)
        return await asyncio.shield(task)

    def invalidate(self, token: Token) -> None:
        """Drop ``token`` if it is still the cached one."""
        if self._token is token:
            self._token = None

    def clear(self) -> None:
        self._token = None

    async def _refresh(self) -> Token:
        try:
            token = await self._authenticate()
            self._token = token
            return token
        finally:
            self._inflight = None

    async def _authenticate(self) -> Token:
        logger.debug("Requesting API token for client %s", self.credentials.client_id)
        try:
            response = await self._http.get(
                self._token_url(), headers=self.credentials.headers()
            )
        except httpx.RequestError as e:
            raise AuthenticationFailed(
                f"Could not reach identity endpoint: {e}"
            ) from TransportError(str(e), cause=e)
        return self._parse(response)


def _retrieve_exception(task: asyncio.Task) -> None:
    # Every waiter may have been cancelled; keep asyncio from warning.
    if not task.cancelled():
        task.exception()
