"""Application context handed to the decoder."""

from __future__ import annotations

from dataclasses import dataclass, field

from .protocols import ClassLoader, MetadataStoreProvider, ResourceResolver


def _default_class_loader() -> ClassLoader:
    from ..sources.classes import ImportClassLoader

    return ImportClassLoader()


@dataclass(eq=False)
class HostContext:
    """Collaborators of one application, bundled for the decoder.

    Attributes:
        provider: Supplies the metadata store.
        resources: Resolves resource handles.
        class_loader: Loads class identifiers (default: ImportClassLoader).
    """

    provider: MetadataStoreProvider
    resources: ResourceResolver
    class_loader: ClassLoader = field(default_factory=_default_class_loader)
