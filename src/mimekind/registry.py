"""Extension to MIME type registry."""

import string
from collections.abc import Mapping
from types import MappingProxyType

from .exceptions import UnknownExtensionError
from .filetype import FileType

DEFAULT_MIME = "application/octet-stream"
DEFAULT_EXTENSION = "bin"
DEFAULT_TYPE = FileType.BIN

# ASCII-only lowercasing; other characters pass through unchanged.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Lowercase extension -> (MIME type, file type). Table order matters for
# get_extension: the first extension listed for a MIME type is its canonical one.
_MIME_TYPES: dict[str, tuple[str, FileType]] = {
    "md": ("text/markdown", FileType.MD),
    "txt": ("text/plain", FileType.TXT),
    "html": ("text/html", FileType.HTML),
    "htm": ("text/html", FileType.HTML),
    "shtml": ("text/html", FileType.HTML),
    "css": ("text/css", FileType.CSS),
    "vcf": ("text/vcard", FileType.VCARD),
    "vcard": ("text/vcard", FileType.VCARD),
    "ics": ("text/calendar", FileType.ICAL),
    "ical": ("text/calendar", FileType.ICAL),
    "xml": ("text/xml", FileType.XML),
    "mml": ("text/mathml", FileType.MML),
    "jad": ("text/vnd.sun.j2me.app-descriptor", FileType.JAD),
    "wml": ("text/vnd.wap.wml", FileType.WML),
    "htc": ("text/x-component", FileType.HTC),
    "js": ("application/javascript", FileType.JS),
    "atom": ("application/atom+xml", FileType.ATOM),
    "rss": ("application/rss+xml", FileType.RSS),
    "woff": ("application/font-woff", FileType.WOFF),
    "woff2": ("application/font-woff", FileType.WOFF),
    "jar": ("application/java-archive", FileType.JAR),
    "war": ("application/java-archive", FileType.WAR),
    "ear": ("application/java-archive", FileType.EAR),
    "json": ("application/json", FileType.JSON),
    "hqx": ("application/mac-binhex40", FileType.HQX),
    "doc": ("application/msword", FileType.DOC),
    "pdf": ("application/pdf", FileType.PDF),
    "ps": ("application/postscript", FileType.PS),
    "eps": ("application/postscript", FileType.EPS),
    "ai": ("application/postscript", FileType.AI),
    "epub": ("application/epub+zip", FileType.EPUB),
    "rtf": ("application/rtf", FileType.RTF),
    "m3u8": ("application/vnd.apple.mpegurl", FileType.M3U8),
    "xls": ("application/vnd.ms-excel", FileType.XLS),
    "eot": ("application/vnd.ms-fontobject", FileType.EOT),
    "ttf": ("application/font-sfnt", FileType.TTF),
    "otf": ("application/font-sfnt", FileType.OTF),
    "ppt": ("application/vnd.ms-powerpoint", FileType.PPT),
    "wmlc": ("application/vnd.wap.wmlc", FileType.WMLC),
    "kml": ("application/vnd.google-earth.kml+xml", FileType.KML),
    "kmz": ("application/vnd.google-earth.kmz", FileType.KMZ),
    "7z": ("application/x-7z-compressed", FileType.SEVEN_Z),
    "cco": ("application/x-cocoa", FileType.CCO),
    "jardiff": ("application/x-java-archive-diff", FileType.JARDIFF),
    "jnlp": ("application/x-java-jnlp-file", FileType.JNLP),
    "run": ("application/x-makeself", FileType.RUN),
    "pl": ("application/x-perl", FileType.PL),
    "pm": ("application/x-perl", FileType.PM),
    "prc": ("application/x-pilot", FileType.PRC),
    "pdb": ("application/x-pilot", FileType.PDB),
    "rar": ("application/x-rar-compressed", FileType.RAR),
    "rpm": ("application/x-redhat-package-manager", FileType.RPM),
    "sea": ("application/x-sea", FileType.SEA),
    "swf": ("application/x-shockwave-flash", FileType.SWF),
    "sit": ("application/x-stuffit", FileType.SIT),
    "tcl": ("application/x-tcl", FileType.TCL),
    "tk": ("application/x-tcl", FileType.TK),
    "der": ("application/x-x509-ca-cert", FileType.DER),
    "pem": ("application/x-x509-ca-cert", FileType.PEM),
    "crt": ("application/x-x509-ca-cert", FileType.CRT),
    "xpi": ("application/x-xpinstall", FileType.XPI),
    "xhtml": ("application/xhtml+xml", FileType.HTML),
    "xspf": ("application/xspf+xml", FileType.XSPF),
    "xz": ("application/x-xz", FileType.XZ),
    "sqlite": ("application/x-sqlite3", FileType.SQLITE),
    "nes": ("application/x-nintendo-nes-rom", FileType.NES),
    "crx": ("application/x-google-chrome-extension", FileType.CRX),
    "ar": ("application/x-unix-archive", FileType.AR),
    "zip": ("application/zip", FileType.ZIP),
    "tar": ("application/x-tar", FileType.TAR),
    "gz": ("application/gzip", FileType.GZ),
    "bz2": ("application/x-bzip2", FileType.BZ2),
    "z": ("application/x-compress", FileType.Z),
    "lz": ("application/x-lzip", FileType.LZ),
    "bin": ("application/octet-stream", FileType.BIN),
    "cab": ("application/vnd.ms-cab-compressed", FileType.CAB),
    "exe": ("application/octet-stream", FileType.EXE),
    "dll": ("application/octet-stream", FileType.DLL),
    "deb": ("application/x-deb", FileType.DEB),
    "dmg": ("application/octet-stream", FileType.DMG),
    "iso": ("application/octet-stream", FileType.ISO),
    "img": ("application/octet-stream", FileType.IMG),
    "msi": ("application/octet-stream", FileType.MSI),
    "msp": ("application/octet-stream", FileType.MSP),
    "msm": ("application/octet-stream", FileType.MSM),
    "mxf": ("application/mxf", FileType.MXF),
    "docx": ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", FileType.DOC),
    "xlsx": ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", FileType.XLS),
    "pptx": ("application/vnd.openxmlformats-officedocument.presentationml.presentation", FileType.PPT),
    "aac": ("audio/aac", FileType.AAC),
    "amr": ("audio/amr", FileType.AMR),
    "awb": ("audio/amr-wb", FileType.AMR),
    "flac": ("audio/x-flac", FileType.FLAC),
    "mid": ("audio/midi", FileType.MIDI),
    "midi": ("audio/midi", FileType.MIDI),
    "kar": ("audio/midi", FileType.MIDI),
    "mp3": ("audio/mpeg", FileType.MP3),
    "ogg": ("audio/ogg", FileType.OGG),
    "opus": ("audio/opus", FileType.OPUS),
    "m4a": ("audio/x-m4a", FileType.M4A),
    "wav": ("audio/x-wav", FileType.WAV),
    "ra": ("audio/x-realaudio", FileType.RA),
    "3gpp": ("video/3gpp", FileType.THREE_GP),
    "3gp": ("video/3gpp", FileType.THREE_GP),
    "ts": ("video/mp2t", FileType.TS),
    "mp4": ("video/mp4", FileType.MP4),
    "mpeg": ("video/mpeg", FileType.MPG),
    "mpg": ("video/mpeg", FileType.MPG),
    "mov": ("video/quicktime", FileType.MOV),
    "webm": ("video/webm", FileType.WEBM),
    "flv": ("video/x-flv", FileType.FLV),
    "m4v": ("video/x-m4v", FileType.M4V),
    "mkv": ("video/x-matroska", FileType.MKV),
    "mng": ("video/x-mng", FileType.MNG),
    "asx": ("video/x-ms-asf", FileType.ASX),
    "asf": ("video/x-ms-asf", FileType.ASF),
    "wmv": ("video/x-ms-wmv", FileType.WMV),
    "avi": ("video/x-msvideo", FileType.AVI),
    "gif": ("image/gif", FileType.GIF),
    "jpeg": ("image/jpeg", FileType.JPG),
    "jpg": ("image/jpeg", FileType.JPG),
    "png": ("image/png", FileType.PNG),
    "flif": ("image/flif", FileType.FLIF),
    "cr2": ("image/x-canon-cr2", FileType.CR2),
    "tif": ("image/tiff", FileType.TIF),
    "tiff": ("image/tiff", FileType.TIF),
    "wbmp": ("image/vnd.wap.wbmp", FileType.WBMP),
    "ico": ("image/x-icon", FileType.ICO),
    "jng": ("image/x-jng", FileType.JNG),
    "jxr": ("image/vnd.ms-photo", FileType.JXR),
    "bmp": ("image/x-ms-bmp", FileType.BMP),
    "svg": ("image/svg+xml", FileType.SVG),
    "svgz": ("image/svg+xml", FileType.SVG),
    "webp": ("image/webp", FileType.WEBP),
    "psd": ("image/vnd.adobe.photoshop", FileType.PSD),
}

MIME_TYPES: Mapping[str, tuple[str, FileType]] = MappingProxyType(_MIME_TYPES)

# Built in reverse so the first extension listed for a MIME type wins.
EXT_BY_MIME: Mapping[str, str] = MappingProxyType(
    {mime: ext for ext, (mime, _) in reversed(_MIME_TYPES.items())}
)


def normalize_extension(extension: str) -> str:
    """Lowercase an extension (ASCII letters only) and strip any leading dots."""
    return extension.lstrip(".").translate(_ASCII_LOWER)


def lookup_extension(extension: str) -> tuple[str, FileType]:
    """
    Look up the (MIME type, file type) pair for an extension.

    Args:
        extension: File extension, with or without a leading dot, any case.

    Returns:
        The registered (MIME type, file type) pair.

    Raises:
        UnknownExtensionError: If the extension has no table entry.
    """
    ext = normalize_extension(extension)
    try:
        return MIME_TYPES[ext]
    except KeyError:
        raise UnknownExtensionError(ext) from None


def is_known_extension(extension: str) -> bool:
    """Check whether an extension has a table entry."""
    return normalize_extension(extension) in MIME_TYPES


def get_mime_type(extension: str) -> str:
    """Get MIME type from file extension."""
    entry = MIME_TYPES.get(normalize_extension(extension))
    return entry[0] if entry else DEFAULT_MIME


def get_extension(mime_type: str) -> str:
    """Get the canonical file extension for a MIME type."""
    return EXT_BY_MIME.get(mime_type.lower(), DEFAULT_EXTENSION)


def extensions_for(file_type: FileType) -> tuple[str, ...]:
    """Get every extension registered under a file type, in table order."""
    return tuple(ext for ext, (_, kind) in MIME_TYPES.items() if kind is file_type)
