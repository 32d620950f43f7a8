"""Tests for Config TOML loading and env overrides."""

from pathlib import Path

from metabind import Config


def test_defaults():
    config = Config()

    assert config.descriptor_path is None
    assert config.metadata_table == "metadata"
    assert config.atomic_bind is False
    assert config.log_level == "WARNING"
    assert config.tracing.enabled is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("METABIND_DESCRIPTOR", "/srv/app/app.toml")
    monkeypatch.setenv("METABIND_TABLE", "tool.app.metadata")
    monkeypatch.setenv("METABIND_ATOMIC", "yes")
    monkeypatch.setenv("METABIND_LOG_LEVEL", "debug")
    monkeypatch.setenv("METABIND_TRACING", "1")

    config = Config.from_env()

    assert config.descriptor_path == Path("/srv/app/app.toml")
    assert config.metadata_table == "tool.app.metadata"
    assert config.atomic_bind is True
    assert config.log_level == "DEBUG"
    assert config.tracing.enabled is True


def test_from_env_false_flag(monkeypatch):
    monkeypatch.setenv("METABIND_ATOMIC", "off")

    assert Config.from_env().atomic_bind is False


def test_from_file_applies_toml_then_env(tmp_path: Path, monkeypatch):
    """Environment variables should override TOML values."""
    toml_path = tmp_path / "metabind.toml"
    toml_path.write_text(
        "\n".join(
            [
                'descriptor_path = "/tmp/from_toml.toml"',
                'metadata_table = "meta"',
                "atomic_bind = true",
                "",
                "[tracing]",
                "enabled = true",
                'endpoint = ""',
            ]
        ),
        encoding="utf-8",
    )

    monkeypatch.setenv("METABIND_DESCRIPTOR", "/tmp/from_env.toml")

    config = Config.from_file(toml_path)

    assert str(config.descriptor_path) == "/tmp/from_env.toml"
    assert config.metadata_table == "meta"
    assert config.atomic_bind is True
    assert config.tracing.enabled is True
    assert config.tracing.endpoint == ""


def test_from_env_or_file_uses_metabind_config(tmp_path: Path, monkeypatch):
    """METABIND_CONFIG should be used when no explicit path is provided."""
    toml_path = tmp_path / "metabind.toml"
    toml_path.write_text('log_level = "info"', encoding="utf-8")

    monkeypatch.setenv("METABIND_CONFIG", str(toml_path))

    config = Config.from_env_or_file()

    assert config.log_level == "INFO"


def test_from_env_or_file_without_file():
    assert Config.from_env_or_file() == Config()
