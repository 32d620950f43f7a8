"""Table-backed resource resolver."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.exceptions import ResourceNotFoundError
from ..core.types import Kind


class MappingResourceResolver:
    """Resolves resource handles from per-kind lookup tables.

    Example:
        resources = MappingResourceResolver({
            Kind.STRING: {0x7F0A0001: "Hello, World!"},
            Kind.COLOR: {0x7F060000: 0xFF000000},
        })
    """

    def __init__(self, tables: Mapping[Kind, Mapping[int, Any]] | None = None):
        self._tables: dict[Kind, dict[int, Any]] = {
            kind: dict(values) for kind, values in (tables or {}).items()
        }

    def add(self, kind: Kind, handle: int, value: Any) -> None:
        """Define the value of one resource."""
        self._tables.setdefault(kind, {})[handle] = value

    def _lookup(self, kind: Kind, handle: int) -> Any:
        try:
            return self._tables[kind][handle]
        except KeyError:
            raise ResourceNotFoundError(kind, handle) from None

    def get_string(self, handle: int) -> str:
        return self._lookup(Kind.STRING, handle)

    def get_integer(self, handle: int) -> int:
        return self._lookup(Kind.INTEGER, handle)

    def get_boolean(self, handle: int) -> bool:
        return self._lookup(Kind.BOOLEAN, handle)

    def get_dimension(self, handle: int) -> float:
        return self._lookup(Kind.DIMENSION, handle)

    def get_dimension_pixel_offset(self, handle: int) -> int:
        return int(self.get_dimension(handle))

    def get_dimension_pixel_size(self, handle: int) -> int:
        value = self.get_dimension(handle)
        size = int(value + 0.5) if value >= 0 else int(value - 0.5)
        if size == 0 and value != 0:
            return 1 if value > 0 else -1
        return size

    def get_color(self, handle: int) -> int:
        return self._lookup(Kind.COLOR, handle)

    def get_drawable(self, handle: int) -> Any:
        return self._lookup(Kind.DRAWABLE, handle)

    def get_animation(self, handle: int) -> Any:
        return self._lookup(Kind.ANIMATION, handle)

    def get_int_array(self, handle: int) -> list[int]:
        return list(self._lookup(Kind.INT_ARRAY, handle))
