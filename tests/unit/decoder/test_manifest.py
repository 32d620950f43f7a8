"""Tests for ManifestMetadata and its accessors."""

import gc
import threading
import time
from unittest.mock import MagicMock

import pytest

from metabind import (
    ClassResolutionError,
    Config,
    DecoderHolder,
    HostContext,
    ImportClassLoader,
    Kind,
    ManifestMetadata,
    MissingBindingError,
    StaticMetadataProvider,
    StoreUnavailableError,
    get_manifest_metadata,
)
from tests.fakes import SAMPLE_METADATA, MetadataValues, SampleWorker, WorkerConfig


@pytest.fixture
def context(resources):
    return HostContext(StaticMetadataProvider(SAMPLE_METADATA), resources)


class TestManifestMetadata:
    """Tests for the decoder surface."""

    def test_metadata_view(self, decoder):
        assert decoder.metadata["metadata.string"] == "Hello, World!"
        assert decoder.contains("metadata.integer")
        assert not decoder.contains("missing.key")

    def test_metadata_is_read_only(self, decoder):
        with pytest.raises(TypeError):
            decoder.metadata["metadata.string"] = "changed"

    def test_store_snapshot(self, resources):
        """Later changes to the source mapping do not leak into the decoder."""
        source = {"key": "before"}
        decoder = ManifestMetadata(StaticMetadataProvider(source), resources)
        source["key"] = "after"

        assert decoder.get_string("key") == "before"

    def test_get_string(self, decoder):
        assert decoder.get_string("metadata.string") == "Hello, World!"
        assert decoder.get_string("metadata.integer") is None
        assert decoder.get_string("missing.key") is None

    def test_get_value(self, decoder):
        assert decoder.get_value("metadata.integer", int) == 42
        assert decoder.get_value("metadata.classname", type) is SampleWorker
        assert decoder.get_value("metadata.resource.color", int, from_resource=True, resource_type=Kind.COLOR) == 0

    def test_get_value_missing_raises(self, decoder):
        with pytest.raises(MissingBindingError, match="missing.key"):
            decoder.get_value("missing.key", str)

    def test_bind(self, decoder):
        values = MetadataValues()
        result = decoder.init_from_metadata(values)

        assert values.the_string == "Hello, World!"
        assert values.color_black == 0x000000
        assert "set_metadata_string" in result.applied

    def test_atomic_default_from_config(self, resources):
        store = {"first": "one", "worker": "com.example.TestClass"}
        decoder = ManifestMetadata(
            StaticMetadataProvider(store), resources, config=Config(atomic_bind=True)
        )
        target = WorkerConfig()

        with pytest.raises(ClassResolutionError):
            decoder.bind(target)

        assert target.first == "unset"

        with pytest.raises(ClassResolutionError):
            decoder.bind(target, atomic=False)

        assert target.first == "one"

    def test_store_unavailable_propagates(self, resources):
        provider = MagicMock()
        error = StoreUnavailableError("no descriptor")
        provider.load_metadata.side_effect = error

        with pytest.raises(StoreUnavailableError) as exc_info:
            ManifestMetadata(provider, resources)

        assert exc_info.value is error

    def test_default_class_loader(self, decoder):
        assert isinstance(decoder.context.class_loader, ImportClassLoader)

    def test_from_config(self, tmp_path, resources):
        descriptor = tmp_path / "app.toml"
        descriptor.write_text('[metadata]\ngreeting = "Hello"\n', encoding="utf-8")

        decoder = ManifestMetadata.from_config(Config(descriptor_path=descriptor), resources)

        assert decoder.get_string("greeting") == "Hello"

    def test_from_config_without_descriptor(self, resources):
        with pytest.raises(StoreUnavailableError, match="METABIND_DESCRIPTOR"):
            ManifestMetadata.from_config(Config(), resources)


class TestDecoderHolder:
    """Tests for the weakly held process-wide decoder."""

    def test_returns_same_instance(self, context):
        holder = DecoderHolder()
        first = holder.get_or_create(context)

        assert holder.get_or_create(context) is first
        assert holder.peek() is first

    def test_recreated_after_release(self, resources):
        provider = MagicMock()
        provider.load_metadata.return_value = {"key": "value"}
        context = HostContext(provider, resources)
        holder = DecoderHolder()

        holder.get_or_create(context)
        gc.collect()

        assert holder.peek() is None
        assert holder.get_or_create(context).get_string("key") == "value"
        assert provider.load_metadata.call_count == 2

    def test_failure_not_cached(self, resources):
        provider = MagicMock()
        provider.load_metadata.side_effect = [StoreUnavailableError("missing"), {"key": "value"}]
        context = HostContext(provider, resources)
        holder = DecoderHolder()

        with pytest.raises(StoreUnavailableError):
            holder.get_or_create(context)

        assert holder.peek() is None
        decoder = holder.get_or_create(context)
        assert decoder.get_string("key") == "value"
        assert provider.load_metadata.call_count == 2

    def test_concurrent_access_constructs_once(self, resources):
        calls = []

        class SlowProvider:
            def load_metadata(self):
                calls.append(1)
                time.sleep(0.05)
                return {"key": "value"}

        context = HostContext(SlowProvider(), resources)
        holder = DecoderHolder()
        results = []
        lock = threading.Lock()

        def worker():
            decoder = holder.get_or_create(context)
            with lock:
                results.append(decoder)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert len(results) == 8
        assert all(r is results[0] for r in results)

    def test_reset(self, context):
        holder = DecoderHolder()
        first = holder.get_or_create(context)
        holder.reset()

        assert holder.peek() is None
        assert holder.get_or_create(context) is not first

    def test_uses_holder_config(self, context):
        holder = DecoderHolder(Config(atomic_bind=True))

        assert holder.get_or_create(context).config.atomic_bind is True


class TestProcessWideAccessor:
    """Tests for get_manifest_metadata and ManifestMetadata.get."""

    def test_singleton(self, context):
        decoder = get_manifest_metadata(context)

        assert ManifestMetadata.get(context) is decoder

    def test_config_from_env(self, context, monkeypatch):
        monkeypatch.setenv("METABIND_ATOMIC", "true")

        assert get_manifest_metadata(context).config.atomic_bind is True
