"""Access to the hosted backend that stores festival data."""

from .client import BackendClient, BackendError

__all__ = ["BackendClient", "BackendError"]
