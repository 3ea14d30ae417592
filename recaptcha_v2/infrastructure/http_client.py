"""Shared HTTP clients with configurable timeout and User-Agent."""

from typing import Any

import httpx


class HttpClient:
    """Thin sync wrapper around httpx.Client with a configurable timeout.

    httpx.Client is safe to share between threads, so one instance can back
    every verification a process makes. Pass ``transport`` to swap in an
    ``httpx.MockTransport`` under test.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"User-Agent": user_agent} if user_agent else None
        self._client = httpx.Client(
            timeout=timeout, headers=headers, transport=transport
        )

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return self._client.post(url, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncHttpClient:
    """Async counterpart of HttpClient, wrapping httpx.AsyncClient."""

    def __init__(
        self,
        timeout: float = 5.0,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"User-Agent": user_agent} if user_agent else None
        self._client = httpx.AsyncClient(
            timeout=timeout, headers=headers, transport=transport
        )

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._client.post(url, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
