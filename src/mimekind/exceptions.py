"""Exception classes for MIME classification."""

from typing import Any


class MimeError(Exception):
    """Base exception for MIME classification errors."""

    def __init__(self, message: str, data: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.data = data or {}

    def __str__(self) -> str:
        if self.data:
            return f"{self.message}: {self.data}"
        return self.message


class UnknownExtensionError(MimeError):
    """Extension has no entry in the registry."""

    def __init__(self, extension: str):
        super().__init__("Unknown extension", {"extension": extension})
        self.extension = extension


class MimeDecodeError(MimeError):
    """Serialized MIME record could not be decoded."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message, {"value": value} if value is not None else None)
        self.value = value
