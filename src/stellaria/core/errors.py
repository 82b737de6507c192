"""Error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..apod.models import ApodApiErrorPayload


class StellariaError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class StellariaTransportError(StellariaError):
    """Network/transport-level failure."""


class StellariaClientClosedError(StellariaError):
    """Raised when client is used after close."""


class StellariaValidationError(StellariaError):
    """Invalid input / request rejected before any network call."""


class ApodParamsError(StellariaValidationError):
    """APOD parameter builder rejected its inputs."""

    DATE_OUT_OF_RANGE = "date_out_of_range"
    DATE_RANGE_REVERSED = "date_range_reversed"

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message)
        if reason not in (self.DATE_OUT_OF_RANGE, self.DATE_RANGE_REVERSED):
            raise ValueError(f"unknown params error reason: {reason!r}")
        self.reason = reason


class StellariaApiError(StellariaError):
    """Remote service reported a logical failure."""

    def __init__(
        self,
        msg: str,
        *,
        code: int,
        service_version: str,
        http_status: int | None = None,
    ) -> None:
        super().__init__(f"http code {code}: {msg}", http_status=http_status, cause="api")
        self.code = code
        self.msg = msg
        self.service_version = service_version

    def payload(self) -> "ApodApiErrorPayload":
        from ..apod.models import ApodApiErrorPayload

        return ApodApiErrorPayload(
            code=self.code,
            msg=self.msg,
            service_version=self.service_version,
        )


class StellariaDecodeError(StellariaError):
    """Response body did not match any expected shape."""


class DateFormatError(StellariaDecodeError):
    """Date string is not in YYYY-MM-DD form."""


__all__ = [
    "StellariaError",
    "StellariaTransportError",
    "StellariaClientClosedError",
    "StellariaValidationError",
    "ApodParamsError",
    "StellariaApiError",
    "StellariaDecodeError",
    "DateFormatError",
]
