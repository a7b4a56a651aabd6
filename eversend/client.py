"""Eversend API clients."""

from typing import Any, Optional

import httpx

from eversend._version import __version__
from eversend.auth import AsyncTokenCache, Credentials, TokenCache
from eversend.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, EversendSettings
from eversend.executor import AsyncRequestExecutor, RequestExecutor
from eversend.resources import (
    Accounts,
    Beneficiaries,
    Collections,
    Crypto,
    Exchange,
    Payouts,
    Transactions,
    Wallets,
)

USER_AGENT = f"eversend-python/{__version__}"


class _ClientBase:
    def _bind_resources(self, executor: Any) -> None:
        self.wallets = Wallets(executor)
        self.transactions = Transactions(executor)
        self.exchange = Exchange(executor)
        self.beneficiaries = Beneficiaries(executor)
        self.collections = Collections(executor)
        self.payouts = Payouts(executor)
        self.accounts = Accounts(executor)
        self.crypto = Crypto(executor)

    @staticmethod
    def _settings_kwargs(settings: EversendSettings) -> dict[str, Any]:
        return {
            "client_id": settings.CLIENT_ID,
            "client_secret": settings.CLIENT_SECRET.get_secret_value(),
            "base_url": settings.BASE_URL,
            "timeout": settings.TIMEOUT,
            "max_retries": settings.MAX_RETRIES,
            "api_token": (
                settings.API_TOKEN.get_secret_value() if settings.API_TOKEN else None
            ),
        }


class Eversend(_ClientBase):
    """Client for the Eversend API.

    Resource groups are attributes: ``client.wallets.get_wallets()``,
    ``client.payouts.create_quotation(...)`` and so on. The client may be
    shared between threads.

    Args:
        client_id: Client ID from the Eversend business dashboard
        client_secret: Client secret from the Eversend business dashboard
        base_url: Base URL of the Eversend API
        timeout: Request timeout in seconds
        max_retries: Connection retries performed by the HTTP transport
        api_token: Pre-issued token to use until the API rejects it
        http_client: Client to send requests with; not closed by ``close()``
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 0,
        api_token: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.credentials = Credentials(client_id=client_id, client_secret=client_secret)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=timeout,
            transport=httpx.HTTPTransport(retries=max_retries),
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
        )
        self.tokens = TokenCache(self._client, self.credentials, self.base_url)
        if api_token:
            self.tokens.seed(api_token)
        self.executor = RequestExecutor(self._client, self.tokens, self.base_url)
        self._bind_resources(self.executor)

    @classmethod
    def from_settings(
        cls, settings: EversendSettings, http_client: Optional[httpx.Client] = None
    ) -> "Eversend":
        return cls(http_client=http_client, **cls._settings_kwargs(settings))

    @classmethod
    def from_env(cls, http_client: Optional[httpx.Client] = None) -> "Eversend":
        """Build a client from ``EVERSEND_*`` environment variables."""
        return cls.from_settings(EversendSettings(), http_client=http_client)

    def __enter__(self) -> "Eversend":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        if self._owns_client:
            self._client.close()


class AsyncEversend(_ClientBase):
    """Asyncio client for the Eversend API.

    Takes the same arguments as ``Eversend``. Resource methods return
    awaitables: ``await client.wallets.get_wallets()``. The client may be
    shared between tasks of one event loop.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = 0,
        api_token: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.credentials = Credentials(client_id=client_id, client_secret=client_secret)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=timeout,
            transport=httpx.AsyncHTTPTransport(retries=max_retries),
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
        )
        self.tokens = AsyncTokenCache(self._client, self.credentials, self.base_url)
        if api_token:
            self.tokens.seed(api_token)
        self.executor = AsyncRequestExecutor(self._client, self.tokens, self.base_url)
        self._bind_resources(self.executor)

    @classmethod
    def from_settings(
        cls, settings: EversendSettings, http_client: Optional[httpx.AsyncClient] = None
    ) -> "AsyncEversend":
        return cls(http_client=http_client, **cls._settings_kwargs(settings))

    @classmethod
    def from_env(cls, http_client: Optional[httpx.AsyncClient] = None) -> "AsyncEversend":
        """Build a client from ``EVERSEND_*`` environment variables."""
        return cls.from_settings(EversendSettings(), http_client=http_client)

    async def __aenter__(self) -> "AsyncEversend":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._owns_client:
            await self._client.aclose()
