"""APOD (Astronomy Picture of the Day) service package."""

from .models import ApodApiErrorPayload, ApodRecord
from .params import ApodParams, ApodParamsBuilder

__all__ = [
    "ApodParams",
    "ApodParamsBuilder",
    "ApodRecord",
    "ApodApiErrorPayload",
]
