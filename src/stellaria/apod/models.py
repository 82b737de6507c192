"""APOD response models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.errors import StellariaApiError


@dataclass(slots=True, frozen=True)
class ApodRecord:
    """One Astronomy Picture of the Day entry."""

    date: date
    explanation: str
    media_type: str
    service_version: str
    title: str
    url: str
    copyright: str | None = None
    hdurl: str | None = None
    thumbnail_url: str | None = None


@dataclass(slots=True, frozen=True)
class ApodApiErrorPayload:
    """Logical failure reported by the APOD service."""

    code: int
    msg: str
    service_version: str

    def to_error(self, *, http_status: int | None = None) -> StellariaApiError:
        return StellariaApiError(
            self.msg,
            code=self.code,
            service_version=self.service_version,
            http_status=http_status,
        )


__all__ = [
    "ApodRecord",
    "ApodApiErrorPayload",
]
