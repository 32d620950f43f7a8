"""Application-facing protocols and host context."""

from .context import HostContext
from .protocols import ClassLoader, MetadataStoreProvider, ResourceResolver

__all__ = [
    "HostContext",
    "ClassLoader",
    "MetadataStoreProvider",
    "ResourceResolver",
]
