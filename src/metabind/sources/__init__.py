"""Concrete collaborators: metadata providers, resource tables, class loading."""

from .classes import ImportClassLoader
from .providers import StaticMetadataProvider, TomlMetadataProvider
from .resources import MappingResourceResolver

__all__ = [
    "ImportClassLoader",
    "MappingResourceResolver",
    "StaticMetadataProvider",
    "TomlMetadataProvider",
]
