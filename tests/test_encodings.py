"""Tests for metadata byte decoding."""

import pytest

from metapath.utils.encodings import EncodingDetector


class TestEncodingDetector:
    def test_plain_utf8(self):
        assert EncodingDetector().decode("tïtle".encode("utf-8")) == ("tïtle", "utf-8")

    def test_bom_detection(self):
        assert EncodingDetector.detect_bom(b"\xef\xbb\xbfa") == "utf-8-sig"
        assert EncodingDetector.detect_bom(b"\xff\xfe\x00\x00") == "utf-32-le"
        assert EncodingDetector.detect_bom(b"\xff\xfea\x00") == "utf-16-le"
        assert EncodingDetector.detect_bom(b"abc") is None

    def test_bom_wins_over_fallbacks(self):
        raw = b"\xff\xfe" + "a: b".encode("utf-16-le")
        assert EncodingDetector(["latin-1"]).decode(raw) == ("a: b", "utf-16-le")

    def test_legacy_code_page(self):
        text, encoding = EncodingDetector().decode("Café".encode("cp1252"))
        assert text == "Café"
        assert encoding == "latin-1"

    def test_nothing_fits(self):
        with pytest.raises(UnicodeError, match="no encoding out of ascii fits"):
            EncodingDetector(["ascii"]).decode(b"caf\xe9")

    def test_unknown_encoding_is_skipped(self):
        assert EncodingDetector(["no-such-codec", "utf-8"]).decode(b"ok") == ("ok", "utf-8")
