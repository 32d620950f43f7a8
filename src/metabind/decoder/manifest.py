"""Metadata decoder and its process-wide accessor.

ManifestMetadata owns a read-only snapshot of one application's metadata
store and exposes direct value lookups plus the object binder. A process
normally has one decoder; get_manifest_metadata() hands it out, holding it
through a weak reference so a rebuilt application context gets a fresh one.
"""

from __future__ import annotations

import threading
import weakref
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, TypeVar

from loguru import logger

from ..app.context import HostContext
from ..app.protocols import ClassLoader, MetadataStoreProvider, ResourceResolver
from ..coercion.registry import CoercionRegistry, get_default_coercion_registry
from ..core.config import Config
from ..core.exceptions import StoreUnavailableError
from ..core.types import BindResult, Kind
from .binder import ObjectBinder
from .resolver import ValueResolver

if TYPE_CHECKING:
    from opentelemetry.trace import Tracer

T = TypeVar("T")


class ManifestMetadata:
    """Decoder for one application's metadata store.

    Usage:

        decoder = get_manifest_metadata(context)
        greeting = decoder.get_string("app.greeting")
        timeout = decoder.get_value("app.timeout", int)
        decoder.bind(settings)

    Attributes:
        config: Decoder configuration.
        context: Collaborators the decoder was built from.
    """

    def __init__(
        self,
        provider: MetadataStoreProvider,
        resources: ResourceResolver,
        class_loader: ClassLoader | None = None,
        *,
        registry: CoercionRegistry | None = None,
        config: Config | None = None,
        tracer: "Tracer | None" = None,
    ):
        """Initialize the decoder and read the metadata store.

        Raises:
            StoreUnavailableError: If the provider cannot supply the store.
        """
        self.config = config or Config()
        if class_loader is None:
            self.context = HostContext(provider, resources)
        else:
            self.context = HostContext(provider, resources, class_loader)

        self._metadata: Mapping[str, Any] = MappingProxyType(dict(provider.load_metadata()))
        self._resolver = ValueResolver(
            self._metadata,
            resources,
            self.context.class_loader,
            registry or get_default_coercion_registry(),
        )
        self._binder = ObjectBinder(self._resolver, tracer=tracer)

        logger.info(f"ManifestMetadata loaded {len(self._metadata)} metadata entries")

    @classmethod
    def from_context(cls, context: HostContext, *, config: Config | None = None) -> "ManifestMetadata":
        """Create a decoder from a HostContext."""
        return cls(context.provider, context.resources, context.class_loader, config=config)

    @classmethod
    def from_config(
        cls,
        config: Config,
        resources: ResourceResolver,
        class_loader: ClassLoader | None = None,
    ) -> "ManifestMetadata":
        """Create a decoder reading the TOML descriptor named in the config."""
        from ..sources.providers import TomlMetadataProvider

        if config.descriptor_path is None:
            raise StoreUnavailableError("No metadata descriptor configured (METABIND_DESCRIPTOR)")

        provider = TomlMetadataProvider(config.descriptor_path, table=config.metadata_table)
        return cls(provider, resources, class_loader, config=config)

    @classmethod
    def get(cls, context: HostContext) -> "ManifestMetadata":
        """Get the process-wide decoder for a context."""
        return get_manifest_metadata(context)

    @property
    def metadata(self) -> Mapping[str, Any]:
        """Read-only view of the metadata store."""
        return self._metadata

    @property
    def resolver(self) -> ValueResolver:
        """The value resolver backing this decoder."""
        return self._resolver

    def contains(self, name: str) -> bool:
        """Check if a metadata key is defined."""
        return name in self._metadata

    def get_string(self, name: str) -> str | None:
        """Get a metadata value as a string, or None if absent or not a string."""
        value = self._metadata.get(name)
        return value if isinstance(value, str) else None

    def get_value(
        self,
        name: str,
        type_hint: type[T] | Any = object,
        *,
        from_resource: bool = False,
        resource_type: Kind = Kind.AUTO,
    ) -> T:
        """Get a metadata value resolved for a declared type.

        Args:
            name: Metadata key.
            type_hint: Declared type of the result; ``type`` loads a class.
            from_resource: The stored value is a resource handle.
            resource_type: Explicit kind for resource values.

        Raises:
            MissingBindingError: If the key is not defined.
        """
        return self._resolver.resolve(name, from_resource, resource_type, type_hint)

    def bind(self, target: Any, *, atomic: bool | None = None) -> BindResult:
        """Initialize the annotated members of a target from metadata.

        Args:
            target: Object whose class declares bindings.
            atomic: Resolve everything before applying anything. Defaults
                to config.atomic_bind.
        """
        if atomic is None:
            atomic = self.config.atomic_bind
        return self._binder.bind(target, atomic=atomic)

    init_from_metadata = bind


class DecoderHolder:
    """Holds at most one live decoder, weakly referenced.

    A hosting application can own a DecoderHolder in its composition root;
    the module-level accessor uses a shared default instance. Construction
    failures are not cached: the next call tries again.
    """

    def __init__(self, config: Config | None = None):
        self._config = config
        self._ref: weakref.ref[ManifestMetadata] | None = None
        self._lock = threading.Lock()

    def peek(self) -> ManifestMetadata | None:
        """Get the live decoder without creating one."""
        ref = self._ref
        return ref() if ref is not None else None

    def get_or_create(self, context: HostContext) -> ManifestMetadata:
        """Return the live decoder, constructing it for the context if needed."""
        instance = self.peek()
        if instance is None:
            with self._lock:
                instance = self.peek()
                if instance is None:
                    config = self._config or Config.from_env()
                    instance = ManifestMetadata.from_context(context, config=config)
                    self._ref = weakref.ref(instance)
                    return instance

        if instance.context.provider is not context.provider:
            logger.warning("ManifestMetadata already bound to a different context; reusing it")
        return instance

    def reset(self) -> None:
        """Drop the reference to the live decoder."""
        with self._lock:
            self._ref = None


_default_holder = DecoderHolder()


def get_manifest_metadata(context: HostContext) -> ManifestMetadata:
    """Get the process-wide decoder, creating it on first use."""
    return _default_holder.get_or_create(context)


def reset_manifest_metadata() -> None:
    """Forget the process-wide decoder."""
    _default_holder.reset()
