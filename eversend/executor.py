"""Authenticated request execution.

Every resource method builds a ``RequestDescriptor`` and hands it to an
executor, which attaches the cached bearer token, sends the request and
turns the response into the expected type or a typed error.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from eversend.auth import AsyncTokenCache, Token, TokenCache
from eversend.exceptions import (
    AuthenticationFailed,
    DecodeError,
    NotFound,
    TransportError,
    raise_for_error_response,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestDescriptor:
    """One API call: where to send it and what to expect back.

    Args:
        method: HTTP method
        path: API path relative to the base URL
        params: Query parameters (``None`` values are dropped)
        json: JSON body
        model: Expected result type; ``None`` when the call returns nothing
        data_key: Field of the response ``data`` object holding the result
        first: The result is the first item of a list
    """

    method: str
    path: str
    params: Optional[dict[str, Any]] = None
    json: Any = None
    model: Any = None
    data_key: Optional[str] = None
    first: bool = False


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


class _ExecutorBase:
    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def _request_kwargs(self, descriptor: RequestDescriptor, token: Token) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "method": descriptor.method,
            "url": f"{self.base_url}{descriptor.path}",
            "headers": {"Authorization": f"Bearer {token.value}"},
        }
        if descriptor.params:
            params = {k: v for k, v in descriptor.params.items() if v is not None}
            if params:
                kwargs["params"] = params
        if descriptor.json is not None:
            kwargs["json"] = descriptor.json
        return kwargs

    def _transport_error(
        self, descriptor: RequestDescriptor, exc: httpx.RequestError
    ) -> TransportError:
        return TransportError(f"{descriptor.method} {descriptor.path} failed: {exc}", cause=exc)

    def _rejected(self, descriptor: RequestDescriptor, response: httpx.Response) -> AuthenticationFailed:
        logger.warning(
            "%s %s rejected with a freshly issued token",
            descriptor.method,
            descriptor.path,
        )
        return AuthenticationFailed(
            "Request rejected after token refresh",
            status_code=response.status_code,
            body=response.text,
        )

    def _handle(self, descriptor: RequestDescriptor, response: httpx.Response) -> Any:
        """Turn a non-401 response into the expected result."""
        logger.debug(
            "%s %s -> %s", descriptor.method, descriptor.path, response.status_code
        )
        if response.status_code >= 400:
            try:
                error_data: Any = response.json()
            except ValueError:
                error_data = response.text
            raise_for_error_response(response.status_code, error_data)

        try:
            body = response.json()
        except ValueError as e:
            if descriptor.model is None:
                return None
            raise DecodeError(
                f"{descriptor.method} {descriptor.path} returned invalid JSON",
                body=response.text,
                status_code=response.status_code,
            ) from e

        payload = self._unwrap(body, response.status_code)
        if descriptor.model is None:
            return None
        if descriptor.data_key and isinstance(payload, dict) and descriptor.data_key in payload:
            payload = payload[descriptor.data_key]

        try:
            result = _adapter(descriptor.model).validate_python(payload)
        except ValidationError as e:
            raise DecodeError(
                f"{descriptor.method} {descriptor.path} returned an unexpected body: {e}",
                body=response.text,
                status_code=response.status_code,
            ) from e

        if descriptor.first:
            if not result:
                raise NotFound(
                    message=f"Nothing found at {descriptor.path}",
                    status_code=404,
                    body=body,
                )
            return result[0]
        return result

    @staticmethod
    def _unwrap(body: Any, status_code: int) -> Any:
        """Strip the ``{code, success, data}`` envelope when present."""
        if not isinstance(body, dict):
            return body
        if body.get("success") is False:
            code = body.get("code")
            if isinstance(code, int) and code >= 400:
                status_code = code
            raise_for_error_response(status_code, body)
        if "data" not in body or ("success" not in body and "code" not in body):
            return body
        return body["data"]


class RequestExecutor(_ExecutorBase):
    """Sends requests for the blocking client.

    Args:
        http_client: Client used to send requests
        tokens: Token cache shared by every call of the client
        base_url: Base URL of the Eversend API
    """

    def __init__(self, http_client: httpx.Client, tokens: TokenCache, base_url: str) -> None:
        super().__init__(base_url)
        self._http = http_client
        self.tokens = tokens

    def execute(self, descriptor: RequestDescriptor) -> Any:
        """Execute a request and return its decoded result.

        Raises:
            AuthenticationFailed: If no token can be obtained or a refreshed
                token is rejected
            TransportError: If no response was received
            DecodeError: If the body does not match the expected type
            ApiError: If the API answered with an error status
        """
        token = self.tokens.get_token()
        response = self._send(descriptor, token)

        if response.status_code == 401:
            logger.info("%s %s unauthorized, refreshing token", descriptor.method, descriptor.path)
            self.tokens.invalidate(token)
            token = self.tokens.get_token()
            response = self._send(descriptor, token)
            if response.status_code == 401:
                self.tokens.invalidate(token)
                raise self._rejected(descriptor, response)

        return self._handle(descriptor, response)

    def _send(self, descriptor: RequestDescriptor, token: Token) -> httpx.Response:
        try:
            return self._http.request(**self._request_kwargs(descriptor, token))
        except httpx.RequestError as e:
            raise self._transport_error(descriptor, e) from e


class AsyncRequestExecutor(_ExecutorBase):
    """Sends requests for the asyncio client."""

    def __init__(
        self, http_client: httpx.AsyncClient, tokens: AsyncTokenCache, base_url: str
    ) -> None:
        super().__init__(base_url)
        self._http = http_client
        self.tokens = tokens

    async def execute(self, descriptor: RequestDescriptor) -> Any:
        """Execute a request and return its decoded result.

        Raises the same errors as ``RequestExecutor.execute``.
        """
        token = await self.tokens.get_token()
        response = await self._send(descriptor, token)

        if response.status_code == 401:
            logger.info("%s %s unauthorized, refreshing token", descriptor.method, descriptor.path)
            self.tokens.invalidate(token)
            token = await self.tokens.get_token()
            response = await self._send(descriptor, token)
            if response.status_code == 401:
                self.tokens.invalidate(token)
                raise self._rejected(descriptor, response)

        return self._handle(descriptor, response)

    async def _send(self, descriptor: RequestDescriptor, token: Token) -> httpx.Response:
        try:
            return await self._http.request(**self._request_kwargs(descriptor, token))
        except httpx.RequestError as e:
            raise self._transport_error(descriptor, e) from e
