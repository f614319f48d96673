"""
Unit tests for CustomBorder and Border outlines.
"""
import pytest

from vexes.core.attributes import NORMAL, get_attribute
from vexes.core.geometry import Rect, Vec2
from vexes.renderables.borders import Border, CustomBorder


class TestCustomBorder:

    def test_outline(self, engine, surface):
        CustomBorder("--||++++", Rect(0, 0, 4, 2)).draw(engine)

        snapshot = surface.snapshot()
        assert snapshot[0][:6] == "+---+ "
        assert snapshot[1][:6] == "|   | "
        assert snapshot[2][:6] == "+---+ "
        assert snapshot[3][:6] == "      "

    def test_glyph_order(self, engine, surface):
        """top, bottom, left, right, ul, ur, ll, lr"""
        CustomBorder("TBLRabcd", Rect(1, 1, 3, 3)).draw(engine)

        snapshot = surface.snapshot()
        assert snapshot[1][1:5] == "aTTb"
        assert snapshot[2][1:5] == "L  R"
        assert snapshot[3][1:5] == "L  R"
        assert snapshot[4][1:5] == "cBBd"

    def test_pieces(self):
        border = CustomBorder("--||++++", Rect(0, 0, 4, 2))

        assert len(border.lines) == 4
        assert len(border.corners) == 4
        assert [c.position for c in border.corners] == [
            Vec2(0, 0), Vec2(4, 0), Vec2(0, 2), Vec2(4, 2),
        ]

    @pytest.mark.parametrize("glyphs", ["", "-------", "---------"])
    def test_requires_eight_glyphs(self, glyphs):
        with pytest.raises(ValueError, match="8"):
            CustomBorder(glyphs, Rect(0, 0, 2, 2))

    def test_rejects_multi_character_glyphs(self):
        with pytest.raises(ValueError, match="exactly one character"):
            CustomBorder(["--"] * 8, Rect(0, 0, 2, 2))

    def test_accepts_glyph_list(self):
        border = CustomBorder(list("--||++++"), Rect(0, 0, 2, 2))
        assert border.glyphs == tuple("--||++++")

    def test_center(self):
        assert CustomBorder("--||++++", Rect(2, 2, 7, 5)).center() == Vec2(5, 4)

    def test_set_dimensions_rebuilds_pieces(self, engine, surface):
        border = CustomBorder("--||++++", Rect(0, 0, 4, 2))
        border.set_dimensions(Rect(5, 5, 2, 2))
        border.draw(engine)

        assert border.dim == Rect(5, 5, 2, 2)
        assert border.position == Vec2(5, 5)
        assert border.glyphs == tuple("--||++++")
        assert surface.char_at(Vec2(5, 5)) == "+"
        assert surface.char_at(Vec2(7, 7)) == "+"
        assert surface.char_at(Vec2(0, 0)) == " "

    def test_from_preset(self, engine, surface):
        CustomBorder.from_preset("ascii", Rect(0, 0, 2, 2)).draw(engine)
        assert surface.snapshot()[0][:3] == "+-+"

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            CustomBorder.from_preset("nonexistent", Rect(0, 0, 2, 2))

    def test_attributes(self, engine, surface):
        border = CustomBorder("--||++++", Rect(0, 0, 2, 2))
        border.set_attributes(get_attribute("yellow"))
        border.draw(engine)

        assert surface.attr_at(Vec2(1, 0)) == get_attribute("yellow")
        assert surface.attr_at(Vec2(0, 0)) == get_attribute("yellow")
        assert surface.current_attr() == NORMAL


class TestBorder:

    def test_line_drawing_outline(self, engine, surface):
        Border(Rect(0, 0, 4, 2)).draw(engine)

        snapshot = surface.snapshot()
        assert snapshot[0][:5] == "┌───┐"
        assert snapshot[1][:5] == "│   │"
        assert snapshot[2][:5] == "└───┘"

    def test_raw_glyphs_are_alternate_charset(self, engine, surface):
        Border(Rect(0, 0, 4, 2)).draw(engine)

        raw = surface.snapshot(translate=False)
        assert raw[0][:5] == "lqqqk"
        assert raw[1][:5] == "x   x"
        assert raw[2][:5] == "mqqqj"

    def test_forces_alternate_attribute(self, engine, surface):
        Border(Rect(0, 0, 3, 3)).draw(engine)

        assert surface.attr_at(Vec2(0, 0)) & get_attribute("alternate")
        assert surface.attr_at(Vec2(1, 3)) & get_attribute("alternate")
        assert surface.current_attr() == NORMAL

    def test_glyph_set(self):
        assert Border(Rect(0, 0, 1, 1)).glyphs == tuple("qqxxlkmj")
