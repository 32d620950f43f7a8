"""Binding declarations for fields and setter methods.

Fields are declared with ``typing.Annotated``; setters with the
``metadata_method`` decorator::

    class Settings:
        greeting: Annotated[str, MetadataProperty("app.greeting")] = ""
        accent: Annotated[int, MetadataProperty("app.accent", from_resource=True,
                                                resource_type=Kind.COLOR)] = 0

        @metadata_method("app.title")
        def set_title(self, title: str) -> None:
            self._title = title
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from ..core.exceptions import DeclarationError
from ..core.types import Kind

_F = TypeVar("_F", bound=Callable[..., Any])

METHOD_BINDING_ATTR = "__metabind_method__"


@dataclass(frozen=True)
class MetadataProperty:
    """Binding declaration for a class attribute.

    Attributes:
        name: Metadata key; empty means the attribute's own name.
        from_resource: The stored value is a resource handle.
        resource_type: Explicit resource kind, or Kind.AUTO to infer it.
    """

    name: str = ""
    from_resource: bool = False
    resource_type: Kind = Kind.AUTO


@dataclass(frozen=True)
class MetadataMethod:
    """Binding declaration for a single-parameter setter method.

    Attributes:
        name: Metadata key (required).
        from_resource: The stored value is a resource handle.
        resource_type: Explicit resource kind, or Kind.AUTO to infer it.
    """

    name: str
    from_resource: bool = False
    resource_type: Kind = Kind.AUTO

    def __post_init__(self) -> None:
        if not self.name:
            raise DeclarationError("MetadataMethod requires a metadata name")


def metadata_method(
    name: str,
    *,
    from_resource: bool = False,
    resource_type: Kind = Kind.AUTO,
) -> Callable[[_F], _F]:
    """Declare a setter method as bound to a metadata key.

    The decorated function must accept exactly one argument besides self.
    The function is returned unchanged, with the declaration attached.
    """
    declaration = MetadataMethod(name, from_resource=from_resource, resource_type=resource_type)

    def decorator(func: _F) -> _F:
        params = [
            p
            for p in inspect.signature(func).parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        ]
        if len(params) != 2:
            raise DeclarationError(
                f"{func.__qualname__} must take exactly one parameter to be a metadata setter"
            )
        setattr(func, METHOD_BINDING_ATTR, declaration)
        return func

    return decorator


def get_method_declaration(func: Any) -> MetadataMethod | None:
    """Return the MetadataMethod attached to a function, if any."""
    return getattr(func, METHOD_BINDING_ATTR, None)
