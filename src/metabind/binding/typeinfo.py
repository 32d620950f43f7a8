"""Helpers for interpreting declared types."""

from __future__ import annotations

import types
from typing import Annotated, Any, Union, get_args, get_origin


def normalize_type(tp: Any) -> Any:
    """Strip Annotated wrappers and a None member from Optional types.

    ``Optional[str]`` and ``str | None`` become ``str``; unions of several
    non-None members are returned unchanged. ``Any`` becomes ``object``.
    """
    if tp is Any or tp is None:
        return object

    if get_origin(tp) is Annotated:
        return normalize_type(get_args(tp)[0])

    if get_origin(tp) in (Union, types.UnionType):
        members = [arg for arg in get_args(tp) if arg is not type(None)]
        if len(members) == 1:
            return normalize_type(members[0])

    return tp


def is_class_type(tp: Any) -> bool:
    """True when the declared type holds a class (``type`` or ``type[X]``)."""
    tp = normalize_type(tp)
    return tp is type or get_origin(tp) is type


def accepts(tp: Any, probe: type) -> bool:
    """True when a value of type ``probe`` can be assigned to declared type ``tp``."""
    tp = normalize_type(tp)
    if get_origin(tp) in (Union, types.UnionType):
        return any(accepts(arg, probe) for arg in get_args(tp))
    if get_origin(tp) is not None or not isinstance(tp, type):
        return False
    try:
        return issubclass(probe, tp)
    except TypeError:
        # Non-runtime_checkable protocols refuse subclass checks
        return False


def accepts_int_array(tp: Any) -> bool:
    """True when the declared type accepts a list of integers."""
    tp = normalize_type(tp)
    origin = get_origin(tp)
    args = get_args(tp)

    if origin is None:
        return tp is list
    if not isinstance(origin, type) or not issubclass(list, origin):
        return False
    return not args or args[0] is int
