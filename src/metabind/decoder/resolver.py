"""Value resolution: raw store lookup, resource indirection, class loading."""

from __future__ import annotations

from typing import Any, get_args

from loguru import logger

from ..app.protocols import ClassLoader, ResourceResolver
from ..binding.typeinfo import is_class_type, normalize_type
from ..coercion.registry import CoercionRegistry
from ..core.exceptions import ClassResolutionError, MissingBindingError, TypeMismatchError
from ..core.types import Kind, MetadataStore


class ValueResolver:
    """Produces the final typed value for one metadata key.

    Resolution happens in up to three steps:

    1. Look the key up in the metadata store.
    2. If the binding reads from a resource, treat the raw value as a handle
       and resolve it with the hinted kind, or the kind inferred from the
       target type.
    3. If the target type holds a class, load the class named by the value.

    Values read directly from the store are passed through untouched; the
    coercion registry is only consulted for resource bindings.
    """

    def __init__(
        self,
        store: MetadataStore,
        resources: ResourceResolver,
        class_loader: ClassLoader,
        registry: CoercionRegistry,
    ):
        """Initialize the resolver.

        Args:
            store: Read-only metadata store.
            resources: Resolver for resource handles.
            class_loader: Loader for class identifiers.
            registry: Kind to resolution function mapping.
        """
        self._store = store
        self._resources = resources
        self._class_loader = class_loader
        self._registry = registry

    def resolve(
        self,
        key: str,
        from_resource: bool = False,
        resource_type: Kind = Kind.AUTO,
        target_type: Any = object,
    ) -> Any:
        """Resolve the value stored under a key.

        Args:
            key: Metadata key.
            from_resource: The stored value is a resource handle.
            resource_type: Explicit kind; Kind.AUTO infers it from target_type.
            target_type: Declared type of the destination.

        Returns:
            The resolved value, or None when a resource kind cannot be
            inferred from target_type.

        Raises:
            MissingBindingError: If the key is not in the store.
            TypeMismatchError: If a handle is not an integer, or a class
                identifier is not a string.
            UnsupportedKindError: If the kind has no resolution function.
            ClassResolutionError: If a class identifier cannot be loaded.
        """
        if key not in self._store:
            raise MissingBindingError(key)

        target_type = normalize_type(target_type)
        value = self._store[key]

        if from_resource:
            value = self._resolve_resource(key, value, resource_type, target_type)
            if value is None:
                return None

        if is_class_type(target_type):
            value = self._load_class(key, value, target_type)

        return value

    def _resolve_resource(
        self,
        key: str,
        handle: Any,
        resource_type: Kind,
        target_type: Any,
    ) -> Any:
        if isinstance(handle, bool) or not isinstance(handle, int):
            raise TypeMismatchError(
                f"{key}: resource handle must be an integer, got {type(handle).__name__}"
            )

        kind = resource_type
        if kind is Kind.AUTO:
            kind = self._registry.infer_kind(target_type)
            if kind is None:
                logger.debug(f"{key}: no resource kind applies to {target_type!r}, leaving unresolved")
                return None

        fn = self._registry.resolve_by_kind(kind)
        logger.debug(f"{key}: resolving handle {handle:#x} as {kind.value}")
        return fn(self._resources, handle)

    def _load_class(self, key: str, name: Any, target_type: Any) -> type:
        if not isinstance(name, str):
            raise TypeMismatchError(
                f"{key}: class identifier must be a string, got {type(name).__name__}"
            )

        cls = self._class_loader.load_class(name)

        bound = get_args(target_type)
        if bound and isinstance(bound[0], type) and not (
            isinstance(cls, type) and issubclass(cls, bound[0])
        ):
            raise ClassResolutionError(name, f"not a subclass of {bound[0].__qualname__}")

        logger.debug(f"{key}: loaded class {name}")
        return cls
