"""Binding declarations and their discovery on target classes."""

from .declarations import MetadataMethod, MetadataProperty, metadata_method
from .discovery import clear_discovery_cache, discover_bindings
from .typeinfo import accepts, accepts_int_array, is_class_type, normalize_type

__all__ = [
    "MetadataMethod",
    "MetadataProperty",
    "metadata_method",
    "discover_bindings",
    "clear_discovery_cache",
    "accepts",
    "accepts_int_array",
    "is_class_type",
    "normalize_type",
]
