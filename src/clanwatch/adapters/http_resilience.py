from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict

import httpx
from httpx_retries import Retry, RetryTransport

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._types import HeaderTypes, QueryParamTypes, TimeoutTypes, URLTypes

    from clanwatch.config.http_resilience import ResilienceConfig, RetryPolicy


def build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=tuple(policy.allowed_methods),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
        backoff_jitter=policy.backoff_jitter,
    )


class AsyncClientOptions(TypedDict, total=False):
    base_url: str
    timeout: TimeoutTypes
    headers: HeaderTypes
    transport: httpx.AsyncBaseTransport


class ResilientClient:
    def __init__(self, config: ResilienceConfig) -> None:
        self.config = config

        retry_transport = RetryTransport(retry=build_retry(config.retry))

        client_kwargs: AsyncClientOptions = {
            "timeout": config.timeout_seconds,
            "transport": retry_transport,
        }
        if config.base_url is not None:
            client_kwargs["base_url"] = config.base_url
        if config.default_headers:
            client_kwargs["headers"] = dict(config.default_headers)

        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(
        self,
        url: URLTypes,
        *,
        params: QueryParamTypes | None = None,
    ) -> httpx.Response:
        return await self._client.get(url, params=params)
