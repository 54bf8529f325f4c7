"""Client entrypoints."""

from jwoc.client.async_client import AsyncJWoCClient, connect

__all__ = ["AsyncJWoCClient", "connect"]
