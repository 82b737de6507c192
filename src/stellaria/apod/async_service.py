"""Async APOD request execution (one GET per call)."""

from __future__ import annotations

from ..config import StellariaClientConfig
from ..core.async_transport import AsyncTransport
from .models import ApodRecord
from .params import ApodParams
from .parser import evaluate_apod_response
from .service_shared import build_apod_request_params


class AsyncApodService:
    """Fetch APOD records over an async transport.

    Holds no per-call state, so one instance may serve concurrent tasks.
    """

    def __init__(self, transport: AsyncTransport, config: StellariaClientConfig) -> None:
        self._transport = transport
        self._config = config

    async def get(self, params: ApodParams | None = None) -> tuple[ApodRecord, ...]:
        request_params = build_apod_request_params(self._config, params)
        raw = await self._transport.request(self._config.apod_endpoint, params=request_params)
        return evaluate_apod_response(raw)


__all__ = [
    "AsyncApodService",
]
