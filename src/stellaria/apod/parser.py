"""Decode APOD payloads into typed records.

The endpoint answers with one of three JSON shapes and carries no
discriminator field:

* an error object ``{code, msg, service_version}``,
* a single record object,
* an array of record objects.

Shapes are tried in that order and the first structural match wins. The error
shape must be tried before the single-record shape because both are objects.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import httpx

from ..core.errors import StellariaDecodeError
from ..core.response_parsing import parse_json_payload, raise_for_http_status
from ..core.transport_shared import RawResponse
from .dates import decode_date
from .models import ApodApiErrorPayload, ApodRecord

JsonObject = dict[str, object]
_MAX_ERROR_CODE = 65535


class _ShapeMismatch(Exception):
    """Payload does not fit the shape under test."""


@dataclass(slots=True, frozen=True)
class ApodErrorShape:
    error: ApodApiErrorPayload


@dataclass(slots=True, frozen=True)
class ApodSingleShape:
    record: ApodRecord


@dataclass(slots=True, frozen=True)
class ApodManyShape:
    records: tuple[ApodRecord, ...]


ApodShape = ApodErrorShape | ApodSingleShape | ApodManyShape


def _as_object(payload: object) -> JsonObject:
    if not isinstance(payload, dict):
        raise _ShapeMismatch("expected a JSON object")
    return payload


def _required_str(item: JsonObject, key: str) -> str:
    value = item.get(key)
    if not isinstance(value, str):
        raise _ShapeMismatch(f"{key} must be a string")
    return value


def _optional_str(item: JsonObject, key: str) -> str | None:
    value = item.get(key)
    if value is not None and not isinstance(value, str):
        raise _ShapeMismatch(f"{key} must be a string or null")
    return value


def _absolute_url(value: str, *, key: str) -> str:
    try:
        parsed = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise _ShapeMismatch(f"{key} is not a valid URL") from exc
    if not parsed.is_absolute_url:
        raise _ShapeMismatch(f"{key} must be an absolute URL")
    return value


def _optional_url(item: JsonObject, key: str) -> str | None:
    value = _optional_str(item, key)
    return _absolute_url(value, key=key) if value is not None else None


def _record_from_item(item: object) -> ApodRecord:
    obj = _as_object(item)
    try:
        record_date = decode_date(_required_str(obj, "date"))
    except StellariaDecodeError as exc:
        raise _ShapeMismatch(str(exc)) from exc
    return ApodRecord(
        date=record_date,
        explanation=_required_str(obj, "explanation"),
        media_type=_required_str(obj, "media_type"),
        service_version=_required_str(obj, "service_version"),
        title=_required_str(obj, "title"),
        url=_absolute_url(_required_str(obj, "url"), key="url"),
        copyright=_optional_str(obj, "copyright"),
        hdurl=_optional_url(obj, "hdurl"),
        thumbnail_url=_optional_url(obj, "thumbnail_url"),
    )


def _match_error(payload: object) -> ApodErrorShape:
    obj = _as_object(payload)
    code = obj.get("code")
    if isinstance(code, bool) or not isinstance(code, int):
        raise _ShapeMismatch("code must be an integer")
    if not 0 <= code <= _MAX_ERROR_CODE:
        raise _ShapeMismatch("code is out of range")
    return ApodErrorShape(
        ApodApiErrorPayload(
            code=code,
            msg=_required_str(obj, "msg"),
            service_version=_required_str(obj, "service_version"),
        )
    )


def _match_single(payload: object) -> ApodSingleShape:
    return ApodSingleShape(_record_from_item(payload))


def _match_many(payload: object) -> ApodManyShape:
    if not isinstance(payload, list):
        raise _ShapeMismatch("expected a JSON array")
    records: list[ApodRecord] = []
    for index, item in enumerate(payload):
        try:
            records.append(_record_from_item(item))
        except _ShapeMismatch as exc:
            raise _ShapeMismatch(f"[{index}]: {exc}") from exc
    return ApodManyShape(tuple(records))


_SHAPE_MATCHERS: tuple[tuple[str, Callable[[object], ApodShape]], ...] = (
    ("error", _match_error),
    ("single", _match_single),
    ("many", _match_many),
)


def match_apod_shape(payload: object) -> ApodShape:
    """Return the first shape the payload structurally satisfies."""

    mismatches: list[str] = []
    for name, matcher in _SHAPE_MATCHERS:
        try:
            return matcher(payload)
        except _ShapeMismatch as exc:
            mismatches.append(f"{name}: {exc}")
    raise StellariaDecodeError(
        "response did not match any APOD shape (" + "; ".join(mismatches) + ")"
    )


def parse_apod_payload(
    payload: object,
    *,
    http_status: int | None = None,
) -> tuple[ApodRecord, ...]:
    shape = match_apod_shape(payload)
    if isinstance(shape, ApodErrorShape):
        raise shape.error.to_error(http_status=http_status)
    if isinstance(shape, ApodSingleShape):
        return (shape.record,)
    return shape.records


def evaluate_apod_response(raw: RawResponse) -> tuple[ApodRecord, ...]:
    """Turn a raw APOD HTTP response into records or a domain error."""

    raise_for_http_status(raw)
    payload = parse_json_payload(raw)
    return parse_apod_payload(payload, http_status=raw.status_code)


__all__ = [
    "ApodErrorShape",
    "ApodSingleShape",
    "ApodManyShape",
    "ApodShape",
    "match_apod_shape",
    "parse_apod_payload",
    "evaluate_apod_response",
]
