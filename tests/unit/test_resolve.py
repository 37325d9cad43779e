"""Unit tests for glyph identifier resolution."""

import pytest

from fontview import Codepoint, Font, GlyphId, Point, Scale
from fontview.core.resolve import NOTDEF, SupportsGlyphId, into_glyph_id
from tests.conftest import GID_A, GID_B, GID_NOTDEF, GID_ODIERESIS, GID_V


class TestIntoGlyphId:
    """Tests for into_glyph_id."""

    def test_char(self, font: Font) -> None:
        assert into_glyph_id("A", font) == GID_A
        assert into_glyph_id("ö", font) == GID_ODIERESIS

    def test_char_result_type(self, font: Font) -> None:
        assert isinstance(into_glyph_id("A", font), GlyphId)

    def test_unmapped_char_falls_back_to_notdef(self, font: Font) -> None:
        assert into_glyph_id("q", font) == NOTDEF == GID_NOTDEF

    def test_control_char_falls_back_to_notdef(self, font: Font) -> None:
        assert into_glyph_id("\n", font) == GID_NOTDEF

    def test_codepoint(self, font: Font) -> None:
        assert into_glyph_id(Codepoint(0x42), font) == GID_B
        assert into_glyph_id(Codepoint(0x10FFFF), font) == GID_NOTDEF

    def test_glyph_id_unchanged(self, font: Font) -> None:
        gid = GlyphId(GID_V)
        assert into_glyph_id(gid, font) is gid

    def test_raw_id_not_range_checked(self, font: Font) -> None:
        assert into_glyph_id(GlyphId(5000), font) == 5000

    def test_plain_int_is_raw_index(self, font: Font) -> None:
        # 0x41 would be "A" as a codepoint; as a raw index it stays 65
        resolved = into_glyph_id(0x41, font)
        assert resolved == 0x41
        assert isinstance(resolved, GlyphId)

    def test_glyph_handles(self, font: Font) -> None:
        glyph = font.glyph("V")
        scaled = glyph.scaled(Scale.uniform(12.0))
        positioned = scaled.positioned(Point(1.0, 2.0))
        assert into_glyph_id(glyph, font) == GID_V
        assert into_glyph_id(scaled, font) == GID_V
        assert into_glyph_id(positioned, font) == GID_V

    def test_custom_protocol_object(self, font: Font) -> None:
        class Named:
            def into_glyph_id(self, font: Font) -> GlyphId:
                return GlyphId(GID_B)

        assert isinstance(Named(), SupportsGlyphId)
        assert into_glyph_id(Named(), font) == GID_B

    @pytest.mark.parametrize("value", ["", "AB"])
    def test_multi_char_string_rejected(self, font: Font, value: str) -> None:
        with pytest.raises(ValueError, match="single character"):
            into_glyph_id(value, font)

    @pytest.mark.parametrize("value", [True, 1.5, None, b"A"])
    def test_unsupported_types_rejected(self, font: Font, value: object) -> None:
        with pytest.raises(TypeError):
            into_glyph_id(value, font)  # type: ignore[arg-type]
