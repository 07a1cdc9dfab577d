"""
mimekind - Classify file extensions and URLs into MIME types and file kinds.
"""

from .exceptions import MimeDecodeError, MimeError, UnknownExtensionError
from .filetype import FileType
from .mime import Mime, classify_extension, classify_url, url_extension
from .registry import (
    DEFAULT_EXTENSION,
    DEFAULT_MIME,
    DEFAULT_TYPE,
    MIME_TYPES,
    extensions_for,
    get_extension,
    get_mime_type,
    is_known_extension,
    lookup_extension,
    normalize_extension,
)
from .serialization import MimeJSONEncoder, decode, dumps, encode, loads

__version__ = "0.1.0"
__all__ = [
    # Records
    "Mime",
    "FileType",
    "classify_extension",
    "classify_url",
    "url_extension",
    # Registry
    "MIME_TYPES",
    "DEFAULT_MIME",
    "DEFAULT_EXTENSION",
    "DEFAULT_TYPE",
    "normalize_extension",
    "lookup_extension",
    "is_known_extension",
    "get_mime_type",
    "get_extension",
    "extensions_for",
    # Serialization
    "encode",
    "decode",
    "dumps",
    "loads",
    "MimeJSONEncoder",
    # Errors
    "MimeError",
    "UnknownExtensionError",
    "MimeDecodeError",
]
