"""Protocol definitions for the decoder's collaborators.

The decoder consumes three external services and owns none of them:

- MetadataStoreProvider: supplies the raw key/value store
- ResourceResolver: turns a resource handle into a concrete value
- ClassLoader: turns a class identifier string into a type

Example:
    class PackagedResources:
        def get_string(self, handle: int) -> str:
            return self._strings[handle]
        ...

    decoder = ManifestMetadata(provider, PackagedResources())
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


# =============================================================================
# Metadata Store Protocol
# =============================================================================


@runtime_checkable
class MetadataStoreProvider(Protocol):
    """Protocol for obtaining the metadata store of an application."""

    def load_metadata(self) -> Mapping[str, Any]:
        """Return the key to raw value mapping.

        Raises:
            StoreUnavailableError: If the store cannot be obtained.
        """
        ...


# =============================================================================
# Resource Resolver Protocol
# =============================================================================


@runtime_checkable
class ResourceResolver(Protocol):
    """Protocol for resolving resource handles, one entry point per kind."""

    def get_string(self, handle: int) -> str:
        ...

    def get_integer(self, handle: int) -> int:
        ...

    def get_boolean(self, handle: int) -> bool:
        ...

    def get_dimension(self, handle: int) -> float:
        ...

    def get_dimension_pixel_offset(self, handle: int) -> int:
        ...

    def get_dimension_pixel_size(self, handle: int) -> int:
        ...

    def get_color(self, handle: int) -> int:
        ...

    def get_drawable(self, handle: int) -> Any:
        ...

    def get_animation(self, handle: int) -> Any:
        ...

    def get_int_array(self, handle: int) -> list[int]:
        ...


# =============================================================================
# Class Loader Protocol
# =============================================================================


@runtime_checkable
class ClassLoader(Protocol):
    """Protocol for loading a class from its identifier."""

    def load_class(self, name: str) -> type:
        """Load a class by name.

        Raises:
            ClassResolutionError: If the class cannot be loaded.
        """
        ...
