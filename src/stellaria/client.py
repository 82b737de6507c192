"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .apod.models import ApodRecord
from .apod.params import ApodParams
from .apod.service import ApodService
from .client_shared import validate_client_config
from .config import StellariaClientConfig
from .core.errors import StellariaClientClosedError
from .core.transport import SyncTransport


class _GuardedApodService:
    """Guard wrapper to block usage after client close."""

    def __init__(self, owner: "StellariaClient", delegate: ApodService) -> None:
        self._owner = owner
        self._delegate = delegate

    def get(self, params: ApodParams | None = None) -> tuple[ApodRecord, ...]:
        self._owner._ensure_open()
        return self._delegate.get(params)


class StellariaClient:
    """Public NASA open API client."""

    def __init__(
        self,
        *,
        config: StellariaClientConfig | None = None,
        transport: SyncTransport | None = None,
        apod_service: ApodService | None = None,
    ) -> None:
        self._config = config or StellariaClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        internal_apod = apod_service or ApodService(self._transport, self._config)
        self._closed = False
        self.apod = _GuardedApodService(self, internal_apod)

    @classmethod
    def from_api_key(cls, api_key: str, **kwargs: object) -> "StellariaClient":
        return cls(config=StellariaClientConfig(api_key=api_key), **kwargs)  # type: ignore[arg-type]

    @property
    def api_key(self) -> str:
        return self._config.api_key

    def _ensure_open(self) -> None:
        if self._closed:
            raise StellariaClientClosedError("StellariaClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "StellariaClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "StellariaClient",
]
