"""Pytest configuration and fixtures."""

import pytest

from metabind import (
    CoercionRegistry,
    ImportClassLoader,
    ManifestMetadata,
    StaticMetadataProvider,
    ValueResolver,
    get_default_coercion_registry,
    reset_manifest_metadata,
)
from tests.fakes import SAMPLE_METADATA, RecordingResourceResolver, make_sample_resources

METABIND_ENV_VARS = (
    "METABIND_CONFIG",
    "METABIND_DESCRIPTOR",
    "METABIND_TABLE",
    "METABIND_ATOMIC",
    "METABIND_LOG_LEVEL",
    "METABIND_TRACING",
    "METABIND_TRACING_ENDPOINT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's METABIND_* variables out of tests."""
    for name in METABIND_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_decoder():
    """Drop the process-wide decoder between tests."""
    reset_manifest_metadata()
    yield
    reset_manifest_metadata()


@pytest.fixture
def resources() -> RecordingResourceResolver:
    """Provide resources matching SAMPLE_METADATA."""
    return make_sample_resources()


@pytest.fixture
def registry() -> CoercionRegistry:
    """Provide the default coercion registry."""
    return get_default_coercion_registry()


@pytest.fixture
def make_resolver(resources, registry):
    """Build a ValueResolver over an arbitrary store."""

    def _make(store: dict, **overrides) -> ValueResolver:
        return ValueResolver(
            store,
            overrides.get("resources", resources),
            overrides.get("class_loader", ImportClassLoader()),
            overrides.get("registry", registry),
        )

    return _make


@pytest.fixture
def decoder(resources) -> ManifestMetadata:
    """Provide a decoder over SAMPLE_METADATA."""
    return ManifestMetadata(StaticMetadataProvider(SAMPLE_METADATA), resources)
