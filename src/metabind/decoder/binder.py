"""Object binder: applies resolved metadata to annotated targets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from loguru import logger

from ..binding.discovery import discover_bindings
from ..core.exceptions import MissingBindingError
from ..core.instrumentation import traced_bind
from ..core.types import BindResult, BoundMember
from .resolver import ValueResolver

if TYPE_CHECKING:
    from opentelemetry.trace import Tracer


class ObjectBinder:
    """Drives the value resolver for every binding declared on a target.

    Binding is best-effort per member: keys missing from the store are
    skipped and the member keeps its current value. Any other error
    propagates and stops the bind. In the default mode members bound before
    the error stay bound; with ``atomic=True`` every value is resolved
    before the first one is applied, so a resolution error leaves the
    target untouched.
    """

    def __init__(self, resolver: ValueResolver, *, tracer: "Tracer | None" = None):
        self._resolver = resolver
        self._tracer = tracer

    def bind(self, target: Any, *, atomic: bool = False) -> BindResult:
        """Populate a target object from metadata.

        Args:
            target: Instance whose class declares bindings.
            atomic: Resolve all bindings before applying any.

        Returns:
            Names of applied and skipped members.
        """
        target_type = type(target)
        members = discover_bindings(target_type)
        result = BindResult(applied=[], skipped=[])

        if not members:
            return result

        with traced_bind(target_type.__qualname__, tracer=self._tracer, atomic=atomic) as meta:
            pending: list[tuple[BoundMember, Any]] = []

            for bound in members:
                declaration = bound.declaration
                try:
                    value = self._resolver.resolve(
                        bound.key,
                        declaration.from_resource,
                        declaration.resource_type,
                        bound.target_type,
                    )
                except MissingBindingError:
                    logger.debug(f"{target_type.__qualname__}.{bound.member}: {bound.key} not in metadata, skipped")
                    result.skipped.append(bound.member)
                    continue

                if atomic:
                    pending.append((bound, value))
                else:
                    self._apply(target, bound, value)
                    result.applied.append(bound.member)

            for bound, value in pending:
                self._apply(target, bound, value)
                result.applied.append(bound.member)

            meta["applied"] = len(result.applied)
            meta["skipped"] = len(result.skipped)

        logger.debug(
            f"Bound {target_type.__qualname__}: "
            f"{len(result.applied)} applied, {len(result.skipped)} skipped"
        )
        return result

    @staticmethod
    def _apply(target: Any, bound: BoundMember, value: Any) -> None:
        if bound.is_method:
            getattr(target, bound.member)(value)
        else:
            setattr(target, bound.member, value)
