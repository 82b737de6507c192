"""Async single-shot HTTP transport."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import StellariaClientConfig
from .errors import StellariaTransportError
from .transport_shared import (
    RawResponse,
    build_default_headers,
    build_default_timeout,
    normalize_base_url,
    normalize_endpoint,
    to_raw_response,
)

logger = logging.getLogger("stellaria")


class AsyncTransportClient(Protocol):
    async def get(self, endpoint: str, params: Mapping[str, str]) -> object: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport issuing exactly one GET per request."""

    def __init__(
        self,
        config: StellariaClientConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=normalize_base_url(config),
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(self, endpoint: str, *, params: Mapping[str, str]) -> RawResponse:
        if self._closed:
            raise StellariaTransportError("transport is already closed")

        normalized_endpoint = normalize_endpoint(endpoint)
        logger.debug("request start endpoint=%s", normalized_endpoint)
        try:
            response = await self._client.get(normalized_endpoint, params=params)
        except Exception as exc:
            raise StellariaTransportError(
                f"network/transport error: {exc.__class__.__name__}",
                cause="network",
            ) from exc

        raw = to_raw_response(response)
        logger.debug(
            "response received endpoint=%s http_status=%s",
            normalized_endpoint,
            raw.status_code,
        )
        return raw


__all__ = [
    "AsyncTransport",
]
