import pytest

from clicolor import (
    ColorContext,
    ColorPair,
    FormatError,
    MemoryConsole,
    Palette,
    RangeError,
    Rgb,
    RgbColorPair,
    parse_style_string,
)


def test_default_pair_is_gray_on_black():
    pair = ColorPair()
    assert pair.fore is Palette.Gray
    assert pair.back is Palette.Black


def test_no_arguments_takes_console_colors(context):
    assert ColorPair() == ColorPair(Palette.Yellow, Palette.DarkBlue)


def test_one_argument_keeps_fixed_default(context):
    assert ColorPair(Palette.Red) == ColorPair(Palette.Red, Palette.Black)
    assert ColorPair(back=Palette.Red) == ColorPair(Palette.Gray, Palette.Red)


def test_construct_from_indexes_and_rgb():
    assert ColorPair(12, 9) == ColorPair(Palette.Red, Palette.Blue)
    assert ColorPair((255, 0, 0), (0, 0, 250)) == ColorPair(Palette.Red, Palette.Blue)
    with pytest.raises(RangeError):
        ColorPair(16)


def test_accessors_mutate():
    pair = ColorPair()
    pair.fore = Palette.White
    pair.back = 3
    assert pair.colors == (Palette.White, Palette.DarkCyan)


def test_inverse():
    pair = ColorPair(Palette.Red, Palette.Blue)
    assert pair.inverse == ColorPair(Palette.Blue, Palette.Red)
    assert pair.inverse.inverse == pair
    assert pair == ColorPair(Palette.Red, Palette.Blue)


def test_alt():
    pair = ColorPair(Palette.Red, Palette.Blue)

    derived = pair.alt(back=Palette.White)
    assert derived == ColorPair(Palette.Red, Palette.White)

    derived = pair.alt(fore=Palette.Black)
    assert derived == ColorPair(Palette.Black, Palette.Blue)

    copy = pair.alt()
    assert copy == pair
    assert copy is not pair
    assert pair == ColorPair(Palette.Red, Palette.Blue)


def test_equality_and_hashing():
    assert ColorPair() == ColorPair(Palette.Gray, Palette.Black)
    assert ColorPair() != ColorPair(Palette.Gray, Palette.White)
    assert ColorPair() != "( Gray, Black )"
    with pytest.raises(TypeError):
        hash(ColorPair())


def test_str_and_repr():
    assert str(ColorPair()) == "( Gray, Black )"
    assert repr(ColorPair(Palette.Red, Palette.Blue)) == "ColorPair(Red, Blue)"


def test_to_hex_pair():
    assert ColorPair(Palette.Yellow, Palette.DarkBlue).to_hex_pair() == "E1"
    assert ColorPair(Palette.Black, Palette.Black).to_hex_pair() == "00"
    assert ColorPair(Palette.White, Palette.White).to_hex_pair() == "FF"
    assert ColorPair(Palette.Black, Palette.White).to_hex_pair() == "0F"


def test_hex_pair_round_trip():
    for fore in Palette:
        for back in Palette:
            pair = ColorPair(fore, back)
            assert ColorPair.from_hex_pair(pair.to_hex_pair()) == pair


def test_from_hex_pair():
    assert ColorPair.from_hex_pair("e1") == ColorPair(Palette.Yellow, Palette.DarkBlue)
    assert ColorPair.from_hex_pair(0x1F) == ColorPair(Palette.DarkBlue, Palette.White)


@pytest.mark.parametrize("code", ["G1", "123", "", "#1F", "7"])
def test_from_hex_pair_rejects_text(code):
    with pytest.raises(FormatError):
        ColorPair.from_hex_pair(code)


@pytest.mark.parametrize("code", [256, -1])
def test_from_hex_pair_rejects_values(code):
    with pytest.raises(RangeError):
        ColorPair.from_hex_pair(code)


def test_to_style_string():
    pair = ColorPair(Palette.Yellow, Palette.DarkBlue)
    assert pair.to_style_string() == "foreGround:Yellow; backGround:DarkBlue;"


class TestParseStyleString:
    default = ColorPair(Palette.White, Palette.DarkGreen)

    def test_both_keys(self):
        result = parse_style_string("forecolor:red;backcolor:blue;", self.default)
        assert result == ColorPair(Palette.Red, Palette.Blue)

    def test_without_colon_returns_default(self):
        result = parse_style_string("garbage", self.default)
        assert result == self.default
        assert result is not self.default

    def test_default_is_not_mutated(self):
        default = ColorPair(Palette.White, Palette.DarkGreen)
        parse_style_string("forecolor:red;", default)
        assert default == ColorPair(Palette.White, Palette.DarkGreen)

    def test_keys_are_case_insensitive_and_trimmed(self):
        result = parse_style_string("  ForeColor : cyan ;BACKCOLOR:#800000", self.default)
        assert result == ColorPair(Palette.Cyan, Palette.DarkRed)

    def test_last_clause_needs_no_semicolon(self):
        result = parse_style_string("backcolor:black", self.default)
        assert result == ColorPair(Palette.White, Palette.Black)

    def test_unknown_keys_are_ignored(self):
        result = parse_style_string("border:red; forecolor:yellow; :blue; nokey", self.default)
        assert result == ColorPair(Palette.Yellow, Palette.DarkGreen)

    def test_bad_values_use_the_default_side(self):
        result = parse_style_string("forecolor:nonsense; backcolor:;", self.default)
        assert result == self.default

    def test_value_may_contain_colons(self):
        result = parse_style_string("forecolor:red:blue;", self.default)
        assert result == self.default

    def test_none(self):
        assert parse_style_string(None, self.default) == self.default

    def test_uses_context_default(self, isolated_context):
        isolated_context.default = ColorPair(Palette.Magenta, Palette.Cyan)
        assert parse_style_string("forecolor:black;") == ColorPair(Palette.Black, Palette.Cyan)

    def test_round_trip(self):
        for fore in Palette:
            for back in Palette:
                pair = ColorPair(fore, back)
                assert parse_style_string(pair.to_style_string(), self.default) == pair

    def test_classmethod_keeps_type(self):
        result = RgbColorPair.parse_style_string("forecolor:red;", self.default)
        assert isinstance(result, RgbColorPair)
        assert result.fore == Rgb(255, 0, 0)


class TestFromText:
    def test_hex_digits(self, context):
        assert ColorPair.from_text("1F") == ColorPair(Palette.DarkBlue, Palette.White)
        assert ColorPair.from_text("c", "0") == ColorPair(Palette.Red, Palette.Black)
        assert ColorPair.from_text("7;0") == ColorPair(Palette.Gray, Palette.Black)

    def test_asterisk_uses_console_colors(self, context):
        assert ColorPair.from_text("*4") == ColorPair(Palette.Yellow, Palette.DarkRed)
        assert ColorPair.from_text("a*") == ColorPair(Palette.Green, Palette.DarkBlue)
        assert ColorPair.from_text("**") == ColorPair(Palette.Yellow, Palette.DarkBlue)

    def test_single_digit_keeps_console_background(self, context):
        assert ColorPair.from_text("a") == ColorPair(Palette.Green, Palette.DarkBlue)

    def test_names(self, context):
        assert ColorPair.from_text("red", "blue") == ColorPair(Palette.Red, Palette.Blue)
        assert ColorPair.from_text("#ffff00", "purple") == ColorPair(Palette.Yellow, Palette.DarkMagenta)

    def test_empty_background_keeps_console_background(self, context):
        assert ColorPair.from_text("red") == ColorPair(Palette.Red, Palette.DarkBlue)
        assert ColorPair.from_text("red", "  ") == ColorPair(Palette.Red, Palette.DarkBlue)

    def test_unknown_names_use_context_default(self, context):
        context.default = ColorPair(Palette.White, Palette.DarkGray)
        assert ColorPair.from_text("nonsense", "xyz") == ColorPair(Palette.White, Palette.DarkGray)

    def test_explicit_context(self):
        context = ColorContext(MemoryConsole(Palette.Cyan, Palette.Red))
        assert ColorPair.from_text("*", context=context) == ColorPair(Palette.Cyan, Palette.Red)


def test_current_and_normalize(context):
    assert ColorPair.current() == ColorPair(Palette.Yellow, Palette.DarkBlue)
    assert ColorPair.normalize(fore=Palette.Red) == ColorPair(Palette.Red, Palette.DarkBlue)
    assert ColorPair.normalize(back=Palette.White) == ColorPair(Palette.Yellow, Palette.White)


def test_current_without_console_uses_default(isolated_context):
    isolated_context.default = ColorPair(Palette.Green, Palette.DarkRed)
    assert ColorPair.current() == ColorPair(Palette.Green, Palette.DarkRed)


def test_from_rgb():
    assert ColorPair.from_rgb((200, 30, 30), (0, 0, 0)) == ColorPair(Palette.Red, Palette.Black)
    assert ColorPair.from_rgb((192, 192, 192), (0, 0, 0)).fore is Palette.Gray
    assert ColorPair.from_rgb((192, 192, 192), (0, 0, 0), approximate=True).fore is Palette.White


def test_to_console(context, console):
    assert ColorPair(Palette.Red, Palette.White).to_console() is True
    assert console.get_foreground() is Palette.Red
    assert console.get_background() is Palette.White


def test_to_console_without_console():
    assert ColorPair().to_console() is False


class TestRgbColorPair:
    def test_accessors_speak_rgb(self):
        pair = RgbColorPair(Palette.Red, Palette.Blue)
        assert pair.fore == Rgb(255, 0, 0)
        assert pair.back == Rgb(0, 0, 255)

    def test_writes_are_quantized(self):
        pair = RgbColorPair()
        pair.fore = (250, 5, 5)
        pair.back = Rgb(0, 0, 120)
        assert pair.palette == ColorPair(Palette.Red, Palette.DarkBlue)
        assert pair.fore == Rgb(255, 0, 0)

    def test_derivations_keep_type(self):
        pair = RgbColorPair((255, 0, 0), (0, 0, 255))
        assert isinstance(pair.inverse, RgbColorPair)
        assert pair.inverse.fore == Rgb(0, 0, 255)
        assert isinstance(pair.alt(back=Palette.White), RgbColorPair)
        assert isinstance(pair.copy(), RgbColorPair)

    def test_compares_with_color_pair(self):
        assert RgbColorPair(Palette.Red, Palette.Blue) == ColorPair(Palette.Red, Palette.Blue)
        assert RgbColorPair(Palette.Red, Palette.Blue).to_hex_pair() == "C9"

    def test_from_rgb(self):
        pair = RgbColorPair.from_rgb((255, 165, 0), (10, 10, 10))
        assert pair.palette == ColorPair(Palette.DarkYellow, Palette.Black)
