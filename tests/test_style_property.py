"""
Unit tests for StyleProperty parsing and typed extraction.

This suite verifies:
- Token sequences built from raw property text, in source order
- Whole-value failure on lexical errors and unsupported tokens
- Each typed accessor on valid input and its failure messages
- Box shorthand expansion for one to four values
- Text rendering and re-parsing
"""

import pytest

from stylekit.colors import Color
from stylekit.errors import InvalidPropertyValue
from stylekit.geometry import Length, Rect
from stylekit.numeric import NumericValue
from stylekit.property import (
    Comma,
    Dimension,
    HashLiteral,
    Identifier,
    Number,
    Percentage,
    QuotedString,
    Slash,
    StyleProperty,
)


def px(value):
    return Length.px(value)


# Parsing


@pytest.mark.parametrize(
    "source, expected",
    [
        ("10px", [Dimension(NumericValue(10.0))]),
        ("50%", [Percentage(NumericValue(50.0))]),
        ("3", [Number(NumericValue(3.0))]),
        ("red", [Identifier("red")]),
        ("#FF0000", [HashLiteral("FF0000")]),
        ('"Fira Sans"', [QuotedString("Fira Sans")]),
    ],
)
def test_parse_single_token(parse, source, expected):
    assert list(parse(source)) == expected


def test_parse_keeps_source_order(parse):
    assert list(parse("10px/1.4 sans, auto")) == [
        Dimension(NumericValue(10.0)),
        Slash(),
        Number(NumericValue(1.4)),
        Identifier("sans"),
        Comma(),
        Identifier("auto"),
    ]


def test_whitespace_and_comments_are_dropped(parse):
    assert parse("  1px /* gap */  2px ") == parse("1px 2px")


def test_duplicates_are_kept(parse):
    assert len(parse("a a a")) == 3


def test_empty_value(parse):
    assert len(parse("")) == 0


def test_from_str_is_parse():
    assert StyleProperty.from_str("1px") == StyleProperty.parse("1px")


def test_parsed_properties_are_hashable(parse):
    assert {parse("1px 2px"): "margin"}[parse("1px  2px")] == "margin"


@pytest.mark.parametrize(
    "source, detail",
    [
        ("'ab\ncd'", "String literal not closed before newline"),
        ("url(a b)", "Whitespace inside of unquoted url"),
        ("a{b}", "Invalid token"),
        ("10px !important", "Invalid token"),
        ("rgb(1, 2, 3)", "Invalid token"),
        ("a; b", "Invalid token"),
    ],
)
def test_parse_failures_name_the_input(parse, source, detail):
    with pytest.raises(InvalidPropertyValue) as excinfo:
        parse(source)
    assert f"`{source}`" in excinfo.value.message
    assert detail in excinfo.value.message


@pytest.mark.parametrize(
    "source, expected",
    [
        ("'abc", [QuotedString("abc")]),
        ("\"Fira Sans", [QuotedString("Fira Sans")]),
        ("1px /* c", [Dimension(NumericValue(1.0))]),
    ],
)
def test_unterminated_input_still_parses(parse, source, expected):
    """A value ending inside a string or comment parses as if it were closed."""
    assert list(parse(source)) == expected


def test_parse_logs_when_verbose(parse, caplog):
    with caplog.at_level("DEBUG"):
        parse("1px 2px", verbose=True)
    assert "Parsed `1px 2px` into 2 tokens" in caplog.text


# Text


def test_to_text(parse):
    assert parse("10px/1.4 sans").to_text() == "10px / 1.4 sans"
    assert parse('"a" #fff 50%,b').to_text() == '"a" #fff 50% , b'
    assert parse("").to_text() == ""


@pytest.mark.parametrize(
    "source",
    [
        "10px/1.4 sans",
        "1px 2px 3px 4px",
        "#ff0000",
        '"Fira Sans", serif',
        "50% auto",
        "-2.5em none",
        "1.5e3",
    ],
)
def test_to_text_parses_back(parse, source):
    prop = parse(source)
    assert parse(prop.to_text()) == prop


# Strings and identifiers


def test_as_string(parse):
    assert parse('"hello world" x').as_string() == "hello world"


@pytest.mark.parametrize(
    "source, message",
    [("", "Expected string literal, got nothing"), ("hello", "Expected string literal, got hello")],
)
def test_as_string_failures(parse, source, message):
    with pytest.raises(InvalidPropertyValue, match=message):
        parse(source).as_string()


def test_as_identifier(parse):
    assert parse("10px center").as_identifier() == "center"
    assert parse("10px 2px").as_identifier() is None
    assert parse("").as_identifier() is None


# Lengths and numbers


@pytest.mark.parametrize(
    "source, expected",
    [
        ("10px", px(10.0)),
        ("2em", px(2.0)),
        ("50%", Length.percent(50.0)),
        ("auto", Length.AUTO),
        ("undefined", Length.UNDEFINED),
    ],
)
def test_as_length(parse, source, expected):
    assert parse(source).as_length() == expected


@pytest.mark.parametrize(
    "source, message",
    [("", "Expected length, found none"), ("3", "Can't parse length from '3'"), ("red", "Can't parse length from 'red'")],
)
def test_as_length_failures(parse, source, message):
    with pytest.raises(InvalidPropertyValue, match=message):
        parse(source).as_length()


@pytest.mark.parametrize("source, expected", [("3.5", 3.5), ("50%", 50.0), ("10px", 10.0), ("-2", -2.0)])
def test_as_number(parse, source, expected):
    assert parse(source).as_number() == expected


def test_as_number_is_float32(parse):
    assert parse("1.4").as_number() == pytest.approx(1.4)
    assert parse("1.4").as_number() == NumericValue(1.4).to_float()


@pytest.mark.parametrize(
    "source, message",
    [("", "Expected number, found none"), ("auto", "Can't parse number from 'auto'")],
)
def test_as_number_failures(parse, source, message):
    with pytest.raises(InvalidPropertyValue, match=message):
        parse(source).as_number()


def test_as_optional_number(parse):
    assert parse("none").as_optional_number() is None
    assert parse("3.5").as_optional_number() == 3.5
    assert parse("25%").as_optional_number() == 25.0


@pytest.mark.parametrize(
    "source, message",
    [
        ("", "Expected optional number, found none"),
        ("bogus", "Can't parse optional number from bogus"),
        ('"3"', 'Can\'t parse optional number from "3"'),
    ],
)
def test_as_optional_number_failures(parse, source, message):
    with pytest.raises(InvalidPropertyValue, match=message):
        parse(source).as_optional_number()


# Colors


def test_as_color_from_hex(parse):
    assert parse("#FF0000").as_color() == Color(1.0, 0.0, 0.0)
    assert parse("#0f08").as_color() == Color.rgba(0, 255, 0, 136)


def test_as_color_from_name(parse):
    assert parse("red").as_color() == Color(1.0, 0.0, 0.0)


def test_as_color_with_stub_table(parse):
    brand = Color(0.1, 0.2, 0.3)
    assert parse("brand").as_color(named={"brand": brand}.get) == brand
    with pytest.raises(InvalidPropertyValue, match="Unknown color name 'red'"):
        parse("red").as_color(named={"brand": brand}.get)


@pytest.mark.parametrize(
    "source, message",
    [
        ("", "Expected color, got nothing"),
        ("unknownname", "Unknown color name 'unknownname'"),
        ("Red", "Unknown color name 'Red'"),
        ("#zzz", "Invalid hex color '#zzz'"),
        ("#12345", "Hex color must be 3, 4, 6 or 8 digits"),
        ("10px", "Can't parse color from 10px"),
    ],
)
def test_as_color_failures(parse, source, message):
    with pytest.raises(InvalidPropertyValue, match=message):
        parse(source).as_color()


# Rects


def test_rect_one_value(parse):
    assert parse("1px").as_rect() == Rect.all(px(1.0))


def test_rect_two_values(parse):
    rect = parse("1px 2px").as_rect()
    assert (rect.top, rect.bottom) == (px(1.0), px(1.0))
    assert (rect.left, rect.right) == (px(2.0), px(2.0))


def test_rect_three_values(parse):
    rect = parse("1px auto 50%").as_rect()
    assert rect.top == px(1.0)
    assert rect.left == rect.right == Length.AUTO
    assert rect.bottom == Length.percent(50.0)


def test_rect_four_values_go_clockwise(parse):
    rect = parse("1px 2px 3px 4px").as_rect()
    assert rect.points == (px(1.0), px(2.0), px(3.0), px(4.0))
    assert rect == Rect(left=px(4.0), right=px(2.0), top=px(1.0), bottom=px(3.0))


@pytest.mark.parametrize("source", ["", "1px 2px 3px 4px 5px"])
def test_rect_bad_arity(parse, source):
    with pytest.raises(InvalidPropertyValue, match="Can't extract rect from"):
        parse(source).as_rect()


def test_rect_bad_component(parse):
    with pytest.raises(InvalidPropertyValue, match="Can't treat `red` as size value"):
        parse("1px red").as_rect()


def test_rect_map(parse):
    assert parse("1px 2px").rect_map("margin") == {
        "margin-left": px(2.0),
        "margin-right": px(2.0),
        "margin-top": px(1.0),
        "margin-bottom": px(1.0),
    }


def test_slices_keep_accessors(parse):
    prop = parse("solid 1px 2px")
    assert prop[1:].as_rect() == Rect(px(2.0), px(2.0), px(1.0), px(1.0))
