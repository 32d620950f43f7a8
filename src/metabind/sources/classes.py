"""Class loading by dotted identifier."""

from __future__ import annotations

import pkgutil

from ..core.exceptions import ClassResolutionError


class ImportClassLoader:
    """Loads classes through the import system.

    Accepts ``"package.module.Class"`` and ``"package.module:Class"``.
    """

    def load_class(self, name: str) -> type:
        """Import and return the named class.

        Raises:
            ClassResolutionError: If the name cannot be imported or does not
                name a class.
        """
        try:
            obj = pkgutil.resolve_name(name)
        except (ImportError, AttributeError, ValueError) as e:
            raise ClassResolutionError(name, str(e)) from e

        if not isinstance(obj, type):
            raise ClassResolutionError(name, f"resolves to {type(obj).__name__}, not a class")
        return obj
