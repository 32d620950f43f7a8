"""The decode/bind pipeline and the decoder accessor."""

from .binder import ObjectBinder
from .manifest import (
    DecoderHolder,
    ManifestMetadata,
    get_manifest_metadata,
    reset_manifest_metadata,
)
from .resolver import ValueResolver

__all__ = [
    "DecoderHolder",
    "ManifestMetadata",
    "ObjectBinder",
    "ValueResolver",
    "get_manifest_metadata",
    "reset_manifest_metadata",
]
