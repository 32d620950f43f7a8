"""Discovery of binding declarations on target classes.

Discovery runs once per class and produces an ordered tuple of BoundMember
entries: annotated fields first, then decorated setter methods. The binder
only ever works from that tuple.
"""

from __future__ import annotations

import inspect
import sys
from functools import lru_cache
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from loguru import logger

from ..core.exceptions import DeclarationError
from ..core.types import BoundMember
from .declarations import MetadataProperty, get_method_declaration
from .typeinfo import normalize_type


def discover_bindings(target_type: type) -> tuple[BoundMember, ...]:
    """Get the bindable members declared by a class.

    Args:
        target_type: Class to inspect.

    Returns:
        Field bindings followed by method bindings. Empty when the class
        declares none.
    """
    return _discover(target_type)


@lru_cache(maxsize=256)
def _discover(target_type: type) -> tuple[BoundMember, ...]:
    members = _field_bindings(target_type) + _method_bindings(target_type)
    logger.debug(f"Discovered {len(members)} bindings on {target_type.__qualname__}")
    return members


def _field_bindings(target_type: type) -> tuple[BoundMember, ...]:
    try:
        hints = get_type_hints(target_type, include_extras=True)
    except (NameError, TypeError):
        hints = _resolve_hints_individually(target_type)

    found = []
    for name, hint in hints.items():
        if get_origin(hint) is not Annotated:
            continue

        declarations = [m for m in hint.__metadata__ if isinstance(m, MetadataProperty)]
        if not declarations:
            continue
        if len(declarations) > 1:
            raise DeclarationError(
                f"{target_type.__qualname__}.{name} has more than one MetadataProperty"
            )

        found.append(
            BoundMember(
                member=name,
                declaration=declarations[0],
                target_type=normalize_type(get_args(hint)[0]),
            )
        )

    return tuple(found)


def _resolve_hints_individually(target_type: type) -> dict[str, Any]:
    """Resolve class annotations one name at a time.

    Annotations that cannot be evaluated (typically names imported only under
    TYPE_CHECKING) are dropped unless they declare a MetadataProperty.
    """
    hints: dict[str, Any] = {}
    for klass in reversed(target_type.__mro__):
        module = sys.modules.get(klass.__module__)
        globalns = getattr(module, "__dict__", {})
        localns = dict(vars(klass))

        for name, annotation in inspect.get_annotations(klass).items():
            if not isinstance(annotation, str):
                hints[name] = annotation
                continue

            try:
                hints[name] = eval(annotation, globalns, localns)
            except (NameError, TypeError, AttributeError, SyntaxError) as e:
                if MetadataProperty.__name__ in annotation:
                    raise DeclarationError(
                        f"Cannot resolve annotation of {target_type.__qualname__}.{name}: {e}"
                    ) from e
                logger.debug(f"{target_type.__qualname__}.{name}: unresolvable annotation ignored ({e})")
                hints.pop(name, None)

    return hints


def _method_bindings(target_type: type) -> tuple[BoundMember, ...]:
    found = []
    for name in dir(target_type):
        attr = inspect.getattr_static(target_type, name, None)
        declaration = get_method_declaration(attr)
        if declaration is None:
            continue

        found.append(
            BoundMember(
                member=name,
                declaration=declaration,
                target_type=_parameter_type(target_type, attr),
                is_method=True,
            )
        )

    return tuple(found)


def _parameter_type(target_type: type, func: Any) -> Any:
    """Declared type of a setter's sole parameter (object when unannotated)."""
    params = [
        p
        for p in inspect.signature(func).parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]
    param = params[-1]

    try:
        hints = get_type_hints(func)
    except (NameError, TypeError) as e:
        raise DeclarationError(
            f"Cannot resolve annotations of {target_type.__qualname__}.{func.__name__}: {e}"
        ) from e

    return normalize_type(hints.get(param.name, Any))


def clear_discovery_cache() -> None:
    """Forget discovered bindings (for classes redefined at runtime)."""
    _discover.cache_clear()
