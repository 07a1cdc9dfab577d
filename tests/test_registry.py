"""Tests for mimekind/registry.py."""

import pytest

from mimekind.exceptions import UnknownExtensionError
from mimekind.filetype import FileType
from mimekind.registry import (
    DEFAULT_EXTENSION,
    DEFAULT_MIME,
    EXT_BY_MIME,
    MIME_TYPES,
    extensions_for,
    get_extension,
    get_mime_type,
    is_known_extension,
    lookup_extension,
    normalize_extension,
)


class TestMimeTypes:
    """Tests for the MIME_TYPES table."""

    def test_html(self):
        assert MIME_TYPES["html"] == ("text/html", FileType.HTML)

    def test_jpeg(self):
        assert MIME_TYPES["jpeg"] == ("image/jpeg", FileType.JPG)

    def test_seven_zip(self):
        assert MIME_TYPES["7z"] == ("application/x-7z-compressed", FileType.SEVEN_Z)

    def test_three_gp(self):
        assert MIME_TYPES["3gp"] == ("video/3gpp", FileType.THREE_GP)
        assert MIME_TYPES["3gpp"] == ("video/3gpp", FileType.THREE_GP)

    def test_ts_is_transport_stream(self):
        assert MIME_TYPES["ts"] == ("video/mp2t", FileType.TS)

    def test_office_formats_share_legacy_types(self):
        assert MIME_TYPES["docx"][1] is FileType.DOC
        assert MIME_TYPES["xlsx"][1] is FileType.XLS
        assert MIME_TYPES["pptx"][1] is FileType.PPT

    def test_entry_count(self):
        assert len(MIME_TYPES) == 135

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            MIME_TYPES["foo"] = ("application/foo", FileType.BIN)  # type: ignore[index]

    def test_keys_are_lowercase_without_dots(self):
        for ext in MIME_TYPES:
            assert ext == ext.lower()
            assert not ext.startswith(".")
            assert ext.isascii()


class TestTableCompleteness:
    """Every file type is reachable and every entry is typed."""

    def test_every_file_type_is_used(self):
        used = {file_type for _, file_type in MIME_TYPES.values()}
        assert used == set(FileType)

    def test_every_entry_has_file_type(self):
        for mime, file_type in MIME_TYPES.values():
            assert isinstance(file_type, FileType)
            assert "/" in mime


class TestNormalizeExtension:
    """Tests for normalize_extension function."""

    def test_lowercases(self):
        assert normalize_extension("PNG") == "png"
        assert normalize_extension("Png") == "png"

    def test_strips_leading_dot(self):
        assert normalize_extension(".png") == "png"
        assert normalize_extension("..png") == "png"

    def test_ascii_only(self):
        assert normalize_extension("\u212AML") == "\u212Aml"
        assert normalize_extension("ÄPNG") == "Äpng"

    def test_empty(self):
        assert normalize_extension("") == ""
        assert normalize_extension(".") == ""

    def test_keeps_inner_dots(self):
        assert normalize_extension(".tar.gz") == "tar.gz"


class TestLookupExtension:
    """Tests for lookup_extension function."""

    def test_known(self):
        assert lookup_extension("pdf") == ("application/pdf", FileType.PDF)

    def test_case_and_dot_insensitive(self):
        assert lookup_extension(".PDF") == lookup_extension("pdf")

    def test_unknown_raises(self):
        with pytest.raises(UnknownExtensionError) as exc_info:
            lookup_extension(".XYZ")
        assert exc_info.value.extension == "xyz"

    def test_empty_raises(self):
        with pytest.raises(UnknownExtensionError):
            lookup_extension("")


class TestIsKnownExtension:
    """Tests for is_known_extension function."""

    def test_known(self):
        assert is_known_extension("mp3")
        assert is_known_extension(".MP3")

    def test_unknown(self):
        assert not is_known_extension("not-a-real-ext")
        assert not is_known_extension("")
        assert not is_known_extension("a/b")


class TestGetMimeType:
    """Tests for get_mime_type function."""

    def test_known_extensions(self):
        assert get_mime_type("jpg") == "image/jpeg"
        assert get_mime_type("png") == "image/png"
        assert get_mime_type("mp4") == "video/mp4"
        assert get_mime_type("mp3") == "audio/mpeg"
        assert get_mime_type("pdf") == "application/pdf"

    def test_extension_with_dot(self):
        assert get_mime_type(".jpg") == "image/jpeg"
        assert get_mime_type(".PDF") == "application/pdf"

    def test_unknown_extension_returns_octet_stream(self):
        assert get_mime_type("unknown") == DEFAULT_MIME
        assert get_mime_type("") == DEFAULT_MIME


class TestGetExtension:
    """Tests for get_extension function."""

    def test_known_mime_types(self):
        assert get_extension("image/jpeg") == "jpeg"
        assert get_extension("image/png") == "png"
        assert get_extension("audio/mpeg") == "mp3"

    def test_first_registered_extension_wins(self):
        assert get_extension("text/html") == "html"
        assert get_extension("application/octet-stream") == "bin"
        assert get_extension("video/mpeg") == "mpeg"

    def test_case_insensitive(self):
        assert get_extension("Text/HTML") == "html"

    def test_unknown_mime_type_returns_bin(self):
        assert get_extension("application/unknown") == DEFAULT_EXTENSION
        assert get_extension("") == DEFAULT_EXTENSION

    def test_every_mime_type_maps_back(self):
        for mime, ext in EXT_BY_MIME.items():
            assert MIME_TYPES[ext][0] == mime


class TestExtensionsFor:
    """Tests for extensions_for function."""

    def test_html(self):
        assert extensions_for(FileType.HTML) == ("html", "htm", "shtml", "xhtml")

    def test_jpg(self):
        assert extensions_for(FileType.JPG) == ("jpeg", "jpg")

    def test_single(self):
        assert extensions_for(FileType.PNG) == ("png",)

    def test_bin_only_covers_bin_extension(self):
        assert extensions_for(FileType.BIN) == ("bin",)
