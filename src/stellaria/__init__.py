"""Public package exports for the Stellaria NASA API client."""

from .async_client import AsyncStellariaClient
from .client import StellariaClient
from .config import StellariaClientConfig

__all__ = ["StellariaClient", "AsyncStellariaClient", "StellariaClientConfig"]
