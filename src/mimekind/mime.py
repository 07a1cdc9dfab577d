"""MIME records built from file extensions and URLs."""

import os
from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote, urlsplit

from .exceptions import MimeDecodeError, UnknownExtensionError
from .filetype import FileType
from .logging import get_logger
from .registry import DEFAULT_MIME, DEFAULT_TYPE, lookup_extension, normalize_extension

logger = get_logger(__name__)


@dataclass(frozen=True)
class Mime:
    """A MIME type classified from a file extension.

    Compared and hashed by value. Unknown extensions produce an
    ``application/octet-stream`` record of type ``BIN`` that keeps the
    normalized extension.
    """

    mime: str  # e.g. "text/html"
    ext: str  # Normalized extension that produced this record
    type: FileType

    def __str__(self) -> str:
        return self.mime

    @classmethod
    def from_extension(cls, extension: str) -> "Mime":
        """
        Classify a file extension.

        Args:
            extension: Extension with or without a leading dot, any case.

        Returns:
            The registered record, or the octet-stream fallback.
        """
        ext = normalize_extension(extension)
        try:
            mime, file_type = lookup_extension(ext)
        except UnknownExtensionError:
            logger.debug("Unknown extension %r, falling back to %s", ext, DEFAULT_MIME)
            return cls(mime=DEFAULT_MIME, ext=ext, type=DEFAULT_TYPE)
        return cls(mime=mime, ext=ext, type=file_type)

    @classmethod
    def from_url(cls, url: str | os.PathLike[str]) -> "Mime":
        """Classify the extension of a URL's (or path's) last component."""
        return cls.from_extension(url_extension(url))

    def to_json(self) -> str:
        """Serialize to the extension string."""
        return self.ext

    @classmethod
    def from_json(cls, value: Any) -> "Mime":
        """
        Rebuild a record from its serialized extension.

        The record is re-classified, so it reflects the current table rather
        than whatever was registered when it was serialized.

        Raises:
            MimeDecodeError: If value is not a string.
        """
        if not isinstance(value, str):
            raise MimeDecodeError(
                f"Expected extension string, got {type(value).__name__}", value
            )
        return cls.from_extension(value)


def url_extension(url: str | os.PathLike[str]) -> str:
    """
    Extract the extension of the last path component of a URL or path.

    A string is always parsed as a URL: query and fragment are ignored and
    percent-escapes are decoded, so a literal ``#`` or ``?`` in a file name
    must be escaped. An ``os.PathLike`` value is taken as a filesystem path
    as-is. Only the final suffix counts (``archive.tar.gz`` gives ``gz``); a
    name without a dot, or ending in one, gives an empty string.
    """
    if isinstance(url, os.PathLike):
        name = os.path.basename(os.fspath(url))
    else:
        name = unquote(urlsplit(url).path).rsplit("/", 1)[-1]
    _, dot, ext = name.rpartition(".")
    return ext if dot else ""


def classify_extension(extension: str) -> Mime:
    """Get the MIME record for a file extension."""
    return Mime.from_extension(extension)


def classify_url(url: str | os.PathLike[str]) -> Mime:
    """Get the MIME record for a URL or file path."""
    return Mime.from_url(url)
