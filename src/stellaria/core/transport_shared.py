"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from ..config import StellariaClientConfig


@dataclass(slots=True, frozen=True)
class RawResponse:
    """HTTP status plus undecoded body text."""

    status_code: int
    text: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


def build_default_headers(config: StellariaClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: StellariaClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def normalize_base_url(config: StellariaClientConfig) -> str:
    return config.base_url.rstrip("/") + "/"


def normalize_endpoint(endpoint: str) -> str:
    return endpoint.lstrip("/")


def to_raw_response(response: object) -> RawResponse:
    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int):
        raise TypeError("transport response must expose an int status_code")
    text = getattr(response, "text", "")
    return RawResponse(status_code=status_code, text=text if isinstance(text, str) else "")


__all__ = [
    "RawResponse",
    "build_default_headers",
    "build_default_timeout",
    "normalize_base_url",
    "normalize_endpoint",
    "to_raw_response",
]
