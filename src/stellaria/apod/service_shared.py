"""Shared request preparation for sync/async APOD services."""

from __future__ import annotations

from ..config import StellariaClientConfig
from .params import ApodParams, build_apod_query


def build_apod_request_params(
    config: StellariaClientConfig,
    params: ApodParams | None,
) -> dict[str, str]:
    resolved = params if params is not None else ApodParams.builder().build()
    return {"api_key": config.api_key, **build_apod_query(resolved)}


__all__ = [
    "build_apod_request_params",
]
