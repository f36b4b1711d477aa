"""
Tests for styles, measurement and block joins.
"""

from canopy.core.style import Style, background_style, height, join_horizontal, join_vertical, width


class TestStyle:
    """Tests for Style rendering."""

    def test_null_style_is_identity(self):
        assert Style().render("Foo") == "Foo"
        assert Style().render("") == ""

    def test_foreground_truecolor(self):
        assert Style().foreground("#ff0000").render("x") == "\x1b[38;2;255;0;0mx\x1b[0m"

    def test_bold(self):
        assert Style().bold().render("x") == "\x1b[1mx\x1b[0m"

    def test_palette_index_color(self):
        """Bare numbers select the 256-color palette."""
        rendered = Style().foreground("212").render("x")

        assert rendered.startswith("\x1b[38;5;212m")

    def test_padding_on_every_line(self):
        style = Style().padding_left(2).padding_right(1)

        assert style.render("a\nbc") == "  a \n  bc "

    def test_padding_of_empty_text(self):
        assert Style().padding_right(1).render("") == " "

    def test_negative_padding_is_clamped(self):
        assert Style().padding_left(-3).render("a") == "a"

    def test_setters_return_new_styles(self):
        base = Style()
        bold = base.bold()

        assert bold is not base
        assert base.render("x") == "x"

    def test_no_color(self, plain_settings):
        assert Style().foreground("#ff0000").bold().padding_right(1).render("x") == "x "

    def test_background(self):
        style = Style().background("#0000ff")

        assert style.get_background() is not None
        assert background_style(style).render(" ") == "\x1b[48;2;0;0;255m \x1b[0m"
        assert background_style(Style().bold()).render(" ") == " "


class TestMeasurement:
    """Tests for width and height."""

    def test_width_ignores_ansi(self):
        assert width("\x1b[1mabc\x1b[0m") == 3

    def test_width_box_drawing(self):
        assert width("├──") == 3

    def test_width_wide_characters(self):
        assert width("日本") == 4

    def test_width_is_widest_line(self):
        assert width("a\nabcd\nab") == 4

    def test_width_empty(self):
        assert width("") == 0

    def test_height(self):
        assert height("a") == 1
        assert height("a\nb\n") == 3


class TestJoins:
    """Tests for block joins."""

    def test_join_vertical(self):
        assert join_vertical("a", "b") == "a\nb"

    def test_join_horizontal_pads_non_final_blocks(self):
        assert join_horizontal("ab\nc", "1\n2\n3") == "ab1\nc 2\n  3"

    def test_join_horizontal_last_block_not_padded(self):
        assert join_horizontal("a\nb", "xyz") == "axyz\nb"

    def test_join_horizontal_measures_ansi(self):
        styled = Style().bold().render("ab")

        assert join_horizontal(f"{styled}\nc", "1\n2") == f"{styled}1\nc 2"

    def test_join_horizontal_empty(self):
        assert join_horizontal() == ""
