"""Coercion registry: resource kinds to resolution functions.

The registry answers two questions for the value resolver:

- Given a kind, which function turns a handle into a value?
- Given a declared type, which kind should be used when none is hinted?
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable

from loguru import logger

from ..app.protocols import ResourceResolver
from ..binding.typeinfo import accepts, accepts_int_array
from ..core.exceptions import UnsupportedKindError
from ..core.types import AnimationHandle, Kind

# Takes (resources, handle) and returns the resolved value
ResolverFn = Callable[[ResourceResolver, int], Any]


@dataclass(frozen=True)
class InferenceRule:
    """One rung of the type inference ladder.

    Attributes:
        kind: Kind selected when the rule matches.
        matches: Predicate over the declared type.
    """

    kind: Kind
    matches: Callable[[Any], bool]


# Checked in order; the first match wins.
INFERENCE_LADDER: tuple[InferenceRule, ...] = (
    InferenceRule(Kind.STRING, lambda tp: accepts(tp, str)),
    InferenceRule(Kind.INTEGER, lambda tp: accepts(tp, int)),
    InferenceRule(Kind.BOOLEAN, lambda tp: accepts(tp, bool)),
    InferenceRule(Kind.DIMENSION, lambda tp: accepts(tp, float)),
    InferenceRule(Kind.INT_ARRAY, accepts_int_array),
    InferenceRule(Kind.ANIMATION, lambda tp: accepts(tp, AnimationHandle)),
)


class CoercionRegistry:
    """Registry mapping resource kinds to resolution functions."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._resolvers: dict[Kind, ResolverFn] = {}

    def register(self, kind: Kind, fn: ResolverFn, *, override: bool = False) -> None:
        """Register the resolution function for a kind."""
        if kind is Kind.AUTO:
            raise ValueError("Kind.AUTO is a hint and cannot have a resolver")

        if kind in self._resolvers and not override:
            raise ValueError(
                f"Resolver for {kind} is already registered. "
                f"Use override=True to replace."
            )

        self._resolvers[kind] = fn

    def install_accessor(self, kind: Kind, method_name: str) -> None:
        """Map a kind onto a ResourceResolver method by name.

        Unknown method names are logged and leave the kind unmapped, so a
        bad table entry only fails lookups against that kind.
        """
        if not hasattr(ResourceResolver, method_name):
            logger.warning(f"ResourceResolver has no method {method_name!r}; {kind} unavailable")
            return

        def accessor(resources: ResourceResolver, handle: int) -> Any:
            return getattr(resources, method_name)(handle)

        accessor.__name__ = f"resolve_{kind.value}"
        self.register(kind, accessor, override=True)

    def unregister(self, kind: Kind) -> bool:
        """Remove the resolver for a kind."""
        return self._resolvers.pop(kind, None) is not None

    def resolve_by_kind(self, kind: Kind) -> ResolverFn:
        """Get the resolution function bound to a kind.

        Raises:
            UnsupportedKindError: If the kind is AUTO or has no resolver.
        """
        fn = self._resolvers.get(kind)
        if fn is None:
            raise UnsupportedKindError(kind)
        return fn

    def infer_kind(self, declared_type: Any) -> Kind | None:
        """Infer the resource kind from a declared type, or None if no rule matches."""
        for rule in INFERENCE_LADDER:
            if rule.matches(declared_type):
                return rule.kind
        return None

    def is_registered(self, kind: Kind) -> bool:
        """Check if a kind has a resolver."""
        return kind in self._resolvers

    def list_kinds(self) -> list[Kind]:
        """Get all kinds with a registered resolver."""
        return sorted(self._resolvers, key=lambda k: k.value)


# =============================================================================
# Default Registry
# =============================================================================

_default_registry: CoercionRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_coercion_registry() -> CoercionRegistry:
    """Get the default global coercion registry."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                registry = CoercionRegistry()
                _install_builtin_accessors(registry)
                _default_registry = registry
    return _default_registry


def _install_builtin_accessors(registry: CoercionRegistry) -> None:
    """Install the standard kind to accessor table."""
    registry.install_accessor(Kind.ANIMATION, "get_animation")
    registry.install_accessor(Kind.BOOLEAN, "get_boolean")
    registry.install_accessor(Kind.COLOR, "get_color")
    registry.install_accessor(Kind.DIMENSION, "get_dimension")
    registry.install_accessor(Kind.DIMENSION_PIXEL_OFFSET, "get_dimension_pixel_offset")
    registry.install_accessor(Kind.DIMENSION_PIXEL_SIZE, "get_dimension_pixel_size")
    registry.install_accessor(Kind.DRAWABLE, "get_drawable")
    registry.install_accessor(Kind.ID, "get_integer")
    registry.install_accessor(Kind.INTEGER, "get_integer")
    registry.install_accessor(Kind.INT_ARRAY, "get_int_array")
    registry.install_accessor(Kind.STRING, "get_string")
