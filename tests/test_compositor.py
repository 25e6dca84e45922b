import threading

import pytest

from robofont.base import BLANK, FontDefinition, Glyph
from robofont.compositor import Canvas, Compositor, advance_width
from robofont.loader import parse_font


@pytest.fixture
def compositor(tiny_font):
    return Compositor(tiny_font)


def test_empty_input(compositor):
    assert compositor.render("") == ""


def test_single_glyph(compositor):
    assert compositor.render("A").split("\n") == ["A.", ".A", "AA"]


def test_two_glyphs_are_kerned(compositor, tiny_font):
    lines = compositor.render("AB").split("\n")
    assert lines == ["A..", ".AA", "AAA"]
    assert len(lines[0]) < tiny_font.get("A").width + tiny_font.get("B").width


def test_first_ink_wins_on_shared_column(compositor):
    lines = compositor.render("AB").split("\n")
    # column 1 is where B's first column lands on A's last column
    assert [line[1] for line in lines] == [".", "A", "A"]


def test_space_adds_exactly_space_width(compositor, tiny_font):
    lines = compositor.render("A B").split("\n")
    assert lines == ["A.   A.", ".A   .A", "AA   AA"]
    gap = lines[0].index("A", 1) - tiny_font.get("A").width
    # one trailing column after a run plus the space itself
    assert gap == 1 + tiny_font.space_width


def test_unknown_characters_are_invisible(compositor):
    assert compositor.render("A?B") == compositor.render("AB")
    assert compositor.render("?A??B?") == compositor.render("AB")
    assert compositor.render("A? B") == compositor.render("A B")


def test_only_unknown_characters_give_blank_rows(compositor):
    assert compositor.render("???") == "\n\n"


def test_row_count_and_uniform_width(compositor):
    for text in ("A", "AB", "A B", "BAB  A", "ab"):
        lines = compositor.render(text).split("\n")
        assert len(lines) == 3
        assert len({len(line) for line in lines}) == 1


def test_lowercase_is_upper_cased(compositor):
    assert compositor.render("ab") == compositor.render("AB")


def test_case_kept_when_uppercase_disabled():
    font = parse_font('#define height=1\n\n@"a"\nx\n@"A"\nY\n')
    assert Compositor(font, uppercase=False).render("a") == "x"
    assert Compositor(font).render("a") == "Y"


def test_render_is_repeatable(compositor):
    first = compositor.render("AB BA")
    assert all(compositor.render("AB BA") == first for _ in range(5))


def test_concurrent_renders_match(compositor):
    expected = compositor.render("ABBA AB")
    results = []

    def worker():
        for _ in range(50):
            results.append(compositor.render("ABBA AB"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(results) == 400
    assert set(results) == {expected}


def test_advance_defaults_to_bottom_row():
    glyph = Glyph.from_lines(["abc", "ab"])
    font = FontDefinition({"G": glyph}, height=2)
    assert advance_width(font, glyph, None) == 2


def test_advance_grows_when_strokes_meet():
    current = Glyph.from_lines(["   /", "  / ", "/"])
    following = Glyph.from_lines(["/  ", " x ", "xx "])
    font = FontDefinition({"C": current, "N": following}, height=3)
    assert advance_width(font, current, following) == 4


def test_advance_ignores_blank_matches():
    current = Glyph.from_lines(["a   ", "b"])
    following = Glyph.from_lines(["  a", "c"])
    font = FontDefinition({"C": current, "N": following}, height=2)
    assert advance_width(font, current, following) == 1


def test_jagged_rows_are_padded():
    font = parse_font('#define height=2 spaces=1\n\n@"J"\nlong\nx\n')
    assert Compositor(font).render("J").split("\n") == ["long", "x   "]


def test_glyph_with_empty_bottom_row_never_moves_cursor_back():
    font = parse_font('#define height=2 spaces=1\n\n@"E"\nee\n@"F"\nf\nf\n')
    assert font.get("E").bottom_width == 0
    lines = Compositor(font).render("EF").split("\n")
    assert lines == ["ee", "f "]


def test_canvas_first_write_wins():
    canvas = Canvas(1)
    canvas.put(0, 2, "x")
    canvas.put(0, 2, "y")
    canvas.put(0, 0, BLANK)
    canvas.put(0, 0, "z")
    assert canvas.rows[0] == ["z", BLANK, "x"]
    assert canvas.to_string() == "z x"


def test_canvas_pads_to_widest_row():
    canvas = Canvas(3)
    canvas.put(1, 3, "#")
    assert canvas.width == 4
    assert canvas.to_string().split("\n") == ["    ", "   #", "    "]
