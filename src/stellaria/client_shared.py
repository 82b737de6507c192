"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import StellariaClientConfig
from .core.errors import StellariaValidationError


def validate_client_config(config: StellariaClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise StellariaValidationError(str(exc)) from exc


__all__ = [
    "validate_client_config",
]
