import pytest

from nmoney import Money, NegativeView, Sign, StringError, format_money, parse_money
from nmoney.utils.numeric_tools import U64_MAX

POS = Sign.POSITIVE
NEG = Sign.NEGATIVE


# region Formatting


def test_format_default():
    assert str(Money(12, 29)) == "$12.29"


def test_format_pads_cents():
    assert str(Money(0, 5)) == "$0.05"
    assert str(Money(7, 0)) == "$7.00"


def test_format_new_symbol():
    m = Money(12, 29)
    m.options.set_symbol("#")
    assert str(m) == "#12.29"


def test_format_hidden_symbol():
    m = Money(12, 29, NEG)
    m.options.set_show_symbol(False)
    assert str(m) == "-12.29"


@pytest.mark.parametrize(
    "negative_view, expected",
    [
        [NegativeView.MINUS, "-$12.29"],
        [NegativeView.PAREN, "($12.29)"],
        [NegativeView.HIDE, "$12.29"],
    ],
)
def test_format_negative_views(negative_view: NegativeView, expected: str):
    m = Money(12, 29, NEG)
    m.options.set_negative_view(negative_view)
    assert format_money(m) == expected
    assert str(m) == expected


def test_format_negative_view_ignored_for_positive():
    m = Money(12, 29)
    m.options.set_negative_view(NegativeView.PAREN)
    assert str(m) == "$12.29"


def test_format_large_dollars():
    assert str(Money(U64_MAX, 99)) == f"${U64_MAX}.99"


# endregion

# region Parsing


def test_parse_positive_without_symbol():
    m = Money.from_str("5.34")
    assert m == Money(5, 34, POS)
    assert m.options.symbol == "$"
    assert m.options.show_symbol is False
    assert str(m) == "5.34"


def test_parse_positive_with_symbol():
    m = Money.from_str("$5.34")
    assert m == Money(5, 34, POS)
    assert m.options.symbol == "$"
    assert m.options.show_symbol is True


def test_parse_positive_with_other_symbol():
    m = Money.from_str("£5.34")
    assert m == Money(5, 34, POS)
    assert m.options.symbol == "£"
    assert m.options.show_symbol is True


@pytest.mark.parametrize(
    "text, show_symbol, negative_view",
    [
        ["-5.34", False, NegativeView.MINUS],
        ["-$5.34", True, NegativeView.MINUS],
        ["(5.34)", False, NegativeView.PAREN],
        ["($5.34)", True, NegativeView.PAREN],
    ],
)
def test_parse_negative(text: str, show_symbol: bool, negative_view: NegativeView):
    m = parse_money(text)
    assert m == Money(5, 34, NEG)
    assert m.options.symbol == "$"
    assert m.options.show_symbol is show_symbol
    assert m.options.negative_view is negative_view


def test_parse_alias():
    assert Money.parse("#1.01") == Money(1, 1)


def test_parse_negative_zero_is_positive():
    assert Money.from_str("-0.00").sign is POS
    assert Money.from_str("($0.00)").sign is POS


def test_parse_reads_cents_as_integer():
    assert Money.from_str("5.5") == Money(5, 5)
    assert Money.from_str("5.005") == Money(5, 5)


def test_parse_max_dollars():
    assert Money.from_str(f"{U64_MAX}.99") == Money(U64_MAX, 99)


@pytest.mark.parametrize(
    "text",
    [
        "$a.00",
        "(5.34",
        "($5.34",
        "5.34)",
        "",
        "-",
        "()",
        "$",
        "5",
        "$5",
        "5.34.1",
        "5.",
        ".34",
        "5.100",
        "5.256",
        "5.-1",
        "5.+1",
        "--5.34",
        "-(5.34)",
        "$$5.34",
        "5 .34",
        "5_0.34",
        "٣.34",
        f"{U64_MAX + 1}.00",
    ],
)
def test_parse_invalid(text: str):
    with pytest.raises(StringError):
        Money.from_str(text)


def test_parse_rejects_non_string():
    with pytest.raises(TypeError):
        parse_money(5.34)


# endregion

# region Round trip


@pytest.mark.parametrize(
    "m",
    [Money(12, 29), Money(12, 29, NEG), Money(0, 1, NEG), Money()],
)
@pytest.mark.parametrize("negative_view", [NegativeView.MINUS, NegativeView.PAREN])
@pytest.mark.parametrize("symbol", ["$", "#", "£"])
def test_format_then_parse_recovers_value(m: Money, negative_view: NegativeView, symbol: str):
    m.options.set_negative_view(negative_view)
    m.options.set_symbol(symbol)

    parsed = parse_money(str(m))

    assert parsed == m
    assert parsed.options.symbol == symbol
    assert str(parsed) == str(m)


def test_hide_view_loses_sign():
    m = Money(12, 29, NEG)
    m.options.set_negative_view(NegativeView.HIDE)
    assert parse_money(str(m)) == Money(12, 29, POS)


# endregion
