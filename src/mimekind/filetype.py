"""File type categories for classified MIME records."""

from enum import Enum


class FileType(str, Enum):
    """Closed set of file kinds a MIME record can belong to.

    Several extensions may share one category (``jpg`` and ``jpeg`` are both
    ``JPG``). Values are lowercase and stable across releases.
    """

    AAC = "aac"
    AMR = "amr"
    AI = "ai"
    AR = "ar"
    ASF = "asf"
    ASX = "asx"
    ATOM = "atom"
    AVI = "avi"
    BIN = "bin"
    BMP = "bmp"
    BZ2 = "bz2"
    CAB = "cab"
    CCO = "cco"
    CR2 = "cr2"
    CRT = "crt"
    CRX = "crx"
    CSS = "css"
    DEB = "deb"
    DER = "der"
    DLL = "dll"
    DMG = "dmg"
    DOC = "doc"
    EAR = "ear"
    EOT = "eot"
    EPS = "eps"
    EPUB = "epub"
    EXE = "exe"
    FLAC = "flac"
    FLIF = "flif"
    FLV = "flv"
    GIF = "gif"
    GZ = "gz"
    HQX = "hqx"
    HTC = "htc"
    HTML = "html"
    ICAL = "ical"
    ICO = "ico"
    IMG = "img"
    ISO = "iso"
    JAD = "jad"
    JAR = "jar"
    JARDIFF = "jardiff"
    JNG = "jng"
    JNLP = "jnlp"
    JPG = "jpg"
    JS = "js"
    JSON = "json"
    JXR = "jxr"
    KML = "kml"
    KMZ = "kmz"
    LZ = "lz"
    M3U8 = "m3u8"
    M4A = "m4a"
    M4V = "m4v"
    MD = "md"
    MIDI = "midi"
    MKV = "mkv"
    MML = "mml"
    MNG = "mng"
    MOV = "mov"
    MP3 = "mp3"
    MP4 = "mp4"
    MPG = "mpg"
    MSI = "msi"
    MSM = "msm"
    MSP = "msp"
    MXF = "mxf"
    NES = "nes"
    OGG = "ogg"
    OPUS = "opus"
    OTF = "otf"
    PDF = "pdf"
    PDB = "pdb"
    PEM = "pem"
    PL = "pl"
    PM = "pm"
    PNG = "png"
    PPT = "ppt"
    PRC = "prc"
    PS = "ps"
    PSD = "psd"
    RA = "ra"
    RAR = "rar"
    RPM = "rpm"
    RSS = "rss"
    RTF = "rtf"
    RUN = "run"
    SEA = "sea"
    SEVEN_Z = "7z"
    SIT = "sit"
    SQLITE = "sqlite"
    SVG = "svg"
    SWF = "swf"
    TAR = "tar"
    TCL = "tcl"
    THREE_GP = "3gp"
    TIF = "tif"
    TK = "tk"
    TS = "ts"
    TTF = "ttf"
    TXT = "txt"
    VCARD = "vcard"
    WAR = "war"
    WAV = "wav"
    WBMP = "wbmp"
    WEBM = "webm"
    WEBP = "webp"
    WML = "wml"
    WMLC = "wmlc"
    WMV = "wmv"
    WOFF = "woff"
    XLS = "xls"
    XML = "xml"
    XPI = "xpi"
    XSPF = "xspf"
    XZ = "xz"
    Z = "z"
    ZIP = "zip"
