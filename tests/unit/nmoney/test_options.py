import pytest

from nmoney import DisplayOptions, NegativeView


def test_defaults():
    options = DisplayOptions()
    assert options.symbol == "$"
    assert options.show_symbol is True
    assert options.negative_view is NegativeView.MINUS


@pytest.mark.parametrize("symbol", ["#", "£", "€", "¥", " ", "-"])
def test_set_symbol_valid(symbol: str):
    options = DisplayOptions()
    assert options.set_symbol(symbol)
    assert options.symbol == symbol


@pytest.mark.parametrize("symbol", ["1", "0", "9", "", "$$", 1, None])
def test_set_symbol_invalid_keeps_previous(symbol):
    options = DisplayOptions()
    options.set_symbol("#")

    assert not options.set_symbol(symbol)
    assert options.symbol == "#"


def test_set_show_symbol_and_negative_view():
    options = DisplayOptions()
    options.set_show_symbol(False)
    options.set_negative_view(NegativeView.HIDE)

    assert options.show_symbol is False
    assert options.negative_view is NegativeView.HIDE


def test_setters_reject_wrong_types():
    options = DisplayOptions()
    with pytest.raises(TypeError):
        options.set_show_symbol(1)
    with pytest.raises(TypeError):
        options.set_negative_view("PAREN")


def test_update_from_and_copy():
    src = DisplayOptions()
    src.set_symbol("€")
    src.set_show_symbol(False)
    src.set_negative_view(NegativeView.PAREN)

    dest = DisplayOptions()
    dest.update_from(src)
    duplicate = src.copy()

    assert dest == src
    assert duplicate == src
    assert duplicate is not src
    assert dest != DisplayOptions()


def test_options_are_not_hashable():
    with pytest.raises(TypeError):
        hash(DisplayOptions())
