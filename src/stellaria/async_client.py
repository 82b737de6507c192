"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .apod.async_service import AsyncApodService
from .apod.models import ApodRecord
from .apod.params import ApodParams
from .client_shared import validate_client_config
from .config import StellariaClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import StellariaClientClosedError


class _GuardedAsyncApodService:
    """Guard wrapper to block usage after async client close."""

    def __init__(self, owner: "AsyncStellariaClient", delegate: AsyncApodService) -> None:
        self._owner = owner
        self._delegate = delegate

    async def get(self, params: ApodParams | None = None) -> tuple[ApodRecord, ...]:
        self._owner._ensure_open()
        return await self._delegate.get(params)


class AsyncStellariaClient:
    """Public async NASA open API client.

    Calls share no mutable state; a single instance may be used from many
    concurrent tasks.
    """

    def __init__(
        self,
        *,
        config: StellariaClientConfig | None = None,
        transport: AsyncTransport | None = None,
        apod_service: AsyncApodService | None = None,
    ) -> None:
        self._config = config or StellariaClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        internal_apod = apod_service or AsyncApodService(self._transport, self._config)
        self._closed = False
        self.apod = _GuardedAsyncApodService(self, internal_apod)

    @classmethod
    def from_api_key(cls, api_key: str, **kwargs: object) -> "AsyncStellariaClient":
        return cls(config=StellariaClientConfig(api_key=api_key), **kwargs)  # type: ignore[arg-type]

    @property
    def api_key(self) -> str:
        return self._config.api_key

    def _ensure_open(self) -> None:
        if self._closed:
            raise StellariaClientClosedError("AsyncStellariaClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncStellariaClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncStellariaClient",
]
