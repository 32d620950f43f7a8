"""Core types, configuration, and errors for metabind."""

from .config import Config
from .exceptions import (
    ClassResolutionError,
    DeclarationError,
    MetabindError,
    MissingBindingError,
    ResourceNotFoundError,
    StoreUnavailableError,
    TypeMismatchError,
    UnsupportedKindError,
)
from .instrumentation import TracingConfig
from .types import AnimationHandle, BindResult, BoundMember, Kind, MetadataStore

__all__ = [
    "Config",
    "TracingConfig",
    "MetabindError",
    "StoreUnavailableError",
    "MissingBindingError",
    "TypeMismatchError",
    "UnsupportedKindError",
    "ClassResolutionError",
    "ResourceNotFoundError",
    "DeclarationError",
    "AnimationHandle",
    "BindResult",
    "BoundMember",
    "Kind",
    "MetadataStore",
]
