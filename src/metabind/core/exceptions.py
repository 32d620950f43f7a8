"""Custom exceptions for metabind."""

from typing import Any


class MetabindError(Exception):
    """Base exception for all metabind errors."""

    pass


class StoreUnavailableError(MetabindError):
    """The metadata store could not be obtained."""

    pass


class MissingBindingError(MetabindError):
    """A metadata key is not defined in the store."""

    def __init__(self, name: str):
        """Initialize exception with the missing key.

        Args:
            name: Metadata key that was looked up.
        """
        self.name = name
        super().__init__(f"{name} not defined in metadata")


class TypeMismatchError(MetabindError):
    """A stored value does not have the type its binding requires."""

    pass


class UnsupportedKindError(MetabindError):
    """No resolution function is registered for a resource kind."""

    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f"No resolver registered for resource kind: {kind}")


class ClassResolutionError(MetabindError):
    """A class identifier could not be loaded."""

    def __init__(self, name: str, reason: str | None = None):
        self.name = name
        message = f"Unable to load class: {name}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ResourceNotFoundError(MetabindError):
    """A resource handle is unknown to the resource resolver."""

    def __init__(self, kind: Any, handle: int):
        self.kind = kind
        self.handle = handle
        super().__init__(f"No {kind} resource for handle {handle:#x}")


class DeclarationError(MetabindError):
    """A binding declaration is malformed."""

    pass
