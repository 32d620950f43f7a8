"""Metadata store providers."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from ..core.exceptions import StoreUnavailableError


class StaticMetadataProvider:
    """Provider backed by an in-memory mapping."""

    def __init__(self, metadata: Mapping[str, Any]):
        self._metadata = dict(metadata)

    def load_metadata(self) -> Mapping[str, Any]:
        return dict(self._metadata)


class TomlMetadataProvider:
    """Provider reading one table of a TOML descriptor.

    Nested tables are flattened into dotted keys, so

        [metadata]
        greeting = "Hello"

        [metadata.resource]
        color = 0x7f010001

    yields ``{"greeting": "Hello", "resource.color": 2130771969}``.
    """

    def __init__(self, path: Path | str, table: str = "metadata"):
        """Initialize the provider.

        Args:
            path: Path to the TOML descriptor.
            table: Dotted name of the table holding metadata.
        """
        self.path = Path(path)
        self.table = table

    def load_metadata(self) -> Mapping[str, Any]:
        """Read and flatten the metadata table.

        Raises:
            StoreUnavailableError: If the file is missing, unparsable, or
                has no such table.
        """
        try:
            with open(self.path, "rb") as f:
                data = tomllib.load(f)
        except FileNotFoundError as e:
            raise StoreUnavailableError(f"Metadata descriptor not found: {self.path}") from e
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Failed to read metadata descriptor {self.path}: {e}")
            raise StoreUnavailableError(f"Cannot read metadata descriptor {self.path}: {e}") from e

        section: Any = data
        for part in self.table.split("."):
            if not isinstance(section, dict) or part not in section:
                raise StoreUnavailableError(f"Table [{self.table}] not defined in {self.path}")
            section = section[part]

        if not isinstance(section, dict):
            raise StoreUnavailableError(f"[{self.table}] in {self.path} is not a table")

        metadata = _flatten(section)
        logger.debug(f"Read {len(metadata)} metadata entries from {self.path}")
        return metadata


def _flatten(table: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in table.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{name}."))
        else:
            flat[name] = value
    return flat
