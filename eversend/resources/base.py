"""Shared plumbing for resource groups."""

from typing import Any, Optional
from urllib.parse import quote

from eversend.executor import RequestDescriptor


class Resource:
    """A group of API operations bound to a request executor.

    Methods return whatever the executor returns: the decoded result on the
    blocking client, an awaitable of it on the asyncio client.
    """

    def __init__(self, executor: Any) -> None:
        self._executor = executor

    def _request(
        self,
        method: str,
        path: str,
        model: Any = None,
        data_key: Optional[str] = None,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        first: bool = False,
    ) -> Any:
        return self._executor.execute(
            RequestDescriptor(
                method=method,
                path=path,
                params=params,
                json=json,
                model=model,
                data_key=data_key,
                first=first,
            )
        )


def require(name: str, value: Any) -> str:
    """Reject empty identifiers before they end up in a URL path."""
    if value is None or str(value).strip() == "":
        raise ValueError(f"{name} is required")
    return str(value)


def segment(name: str, value: Any) -> str:
    """Require ``value`` and percent-encode it as a single URL path segment."""
    return quote(require(name, value), safe="")
