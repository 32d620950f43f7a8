"""Type definitions for metabind."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


MetadataStore = Mapping[str, Any]
"""Read-only mapping from metadata key to its raw stored value."""


class Kind(Enum):
    """Category of resource a handle resolves to."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DIMENSION = "dimension"
    DIMENSION_PIXEL_OFFSET = "dimension_pixel_offset"
    DIMENSION_PIXEL_SIZE = "dimension_pixel_size"
    COLOR = "color"
    DRAWABLE = "drawable"
    ANIMATION = "animation"
    INT_ARRAY = "int_array"
    ID = "id"
    AUTO = "auto"  # Hint only: derive the kind from the declared type


class AnimationHandle:
    """Opaque animation resource returned by a resource resolver.

    Resolvers return instances of (subclasses of) this type for
    ``Kind.ANIMATION`` so that fields declared with it can be inferred.
    """

    def __init__(self, source: Any = None):
        self.source = source

    def __repr__(self) -> str:
        return f"AnimationHandle({self.source!r})"


@dataclass(frozen=True)
class BoundMember:
    """One bindable member discovered on a target class.

    Attributes:
        member: Attribute name of the field or method.
        declaration: The MetadataProperty or MetadataMethod attached to it.
        target_type: Declared type of the field, or of the method's sole parameter.
        is_method: True when the member is a setter method.
    """

    member: str
    declaration: Any
    target_type: Any
    is_method: bool = False

    @property
    def key(self) -> str:
        """Metadata key looked up for this member."""
        return self.declaration.name or self.member


@dataclass
class BindResult:
    """Outcome of a single bind call.

    Attributes:
        applied: Member names that received a value.
        skipped: Member names whose key was absent from the store.
    """

    applied: list[str]
    skipped: list[str]
