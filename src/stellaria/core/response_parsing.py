"""Shared response parsing helpers for sync/async services."""

from __future__ import annotations

import json

from .errors import StellariaApiError, StellariaDecodeError
from .transport_shared import RawResponse

MAX_ERROR_BODY_CHARS = 1024
UNKNOWN_SERVICE_VERSION = "unknown"


def raise_for_http_status(raw: RawResponse) -> None:
    """Map a non-2xx status to an API error without decoding the body."""

    if raw.is_success:
        return
    raise StellariaApiError(
        raw.text[:MAX_ERROR_BODY_CHARS],
        code=raw.status_code,
        service_version=UNKNOWN_SERVICE_VERSION,
        http_status=raw.status_code,
    )


def parse_json_payload(raw: RawResponse) -> object:
    """Parse response text into a generic JSON value."""

    try:
        return json.loads(raw.text)
    except ValueError as exc:
        raise StellariaDecodeError(
            "response body is not valid JSON",
            http_status=raw.status_code,
        ) from exc


__all__ = [
    "MAX_ERROR_BODY_CHARS",
    "UNKNOWN_SERVICE_VERSION",
    "raise_for_http_status",
    "parse_json_payload",
]
