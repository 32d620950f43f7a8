"""Kind to resolution function mapping and type-based kind inference."""

from .registry import (
    INFERENCE_LADDER,
    CoercionRegistry,
    InferenceRule,
    ResolverFn,
    get_default_coercion_registry,
)

__all__ = [
    "INFERENCE_LADDER",
    "CoercionRegistry",
    "InferenceRule",
    "ResolverFn",
    "get_default_coercion_registry",
]
