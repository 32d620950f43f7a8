"""metabind: populate annotated objects from an application's metadata store.

Example:
    from typing import Annotated

    from metabind import HostContext, Kind, MetadataProperty, get_manifest_metadata

    class Settings:
        greeting: Annotated[str, MetadataProperty("app.greeting")] = ""
        accent: Annotated[int, MetadataProperty("app.accent", from_resource=True,
                                                resource_type=Kind.COLOR)] = 0

    decoder = get_manifest_metadata(HostContext(provider, resources))
    decoder.bind(settings := Settings())
"""

from .app import ClassLoader, HostContext, MetadataStoreProvider, ResourceResolver
from .binding import MetadataMethod, MetadataProperty, metadata_method
from .bootstrap import configure
from .coercion import CoercionRegistry, get_default_coercion_registry
from .core import (
    AnimationHandle,
    BindResult,
    ClassResolutionError,
    Config,
    DeclarationError,
    Kind,
    MetabindError,
    MissingBindingError,
    ResourceNotFoundError,
    StoreUnavailableError,
    TypeMismatchError,
    UnsupportedKindError,
)
from .decoder import (
    DecoderHolder,
    ManifestMetadata,
    ObjectBinder,
    ValueResolver,
    get_manifest_metadata,
    reset_manifest_metadata,
)
from .sources import (
    ImportClassLoader,
    MappingResourceResolver,
    StaticMetadataProvider,
    TomlMetadataProvider,
)

__version__ = "1.0.0"

__all__ = [
    "ClassLoader",
    "HostContext",
    "MetadataStoreProvider",
    "ResourceResolver",
    "MetadataMethod",
    "MetadataProperty",
    "metadata_method",
    "configure",
    "CoercionRegistry",
    "get_default_coercion_registry",
    "AnimationHandle",
    "BindResult",
    "Config",
    "Kind",
    "MetabindError",
    "StoreUnavailableError",
    "MissingBindingError",
    "TypeMismatchError",
    "UnsupportedKindError",
    "ClassResolutionError",
    "ResourceNotFoundError",
    "DeclarationError",
    "DecoderHolder",
    "ManifestMetadata",
    "ObjectBinder",
    "ValueResolver",
    "get_manifest_metadata",
    "reset_manifest_metadata",
    "ImportClassLoader",
    "MappingResourceResolver",
    "StaticMetadataProvider",
    "TomlMetadataProvider",
]
