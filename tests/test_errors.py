import pytest

from ferrule.lessons.errors import (
    NegativeError,
    ParseIntError,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    ZeroError,
    generate_nametag_text,
    parse_int,
    parse_pos_nonzero,
    remaining_tokens,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError, match="^`name` was empty; it must be nonempty.$"):
        generate_nametag_text("")


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ParseIntError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("", "cannot parse integer from empty string"),
        ("-", "invalid digit found in string"),
        (" 5", "invalid digit found in string"),
        ("2147483648", "number too large to fit in target type"),
        ("-2147483649", "number too small to fit in target type"),
    ],
)
def test_parse_int_errors(text, message):
    with pytest.raises(ParseIntError) as info:
        parse_int(text)
    assert str(info.value) == message


@pytest.mark.parametrize(("text", "value"), [("+7", 7), ("-12", -12), ("2147483647", 2147483647)])
def test_parse_int_values(text, value):
    assert parse_int(text) == value


def test_remaining_tokens_affordable(capsys):
    assert remaining_tokens(100, "8") == 59
    assert "You now have 59 tokens." in capsys.readouterr().out


def test_remaining_tokens_too_expensive(capsys):
    assert remaining_tokens(10, "8") == 10
    assert "You can't afford that many!" in capsys.readouterr().out


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(NegativeError):
        PositiveNonzeroInteger(-10)
    with pytest.raises(ZeroError):
        PositiveNonzeroInteger(0)


def test_creation_error_messages():
    assert str(NegativeError()) == "number is negative"
    assert str(ZeroError()) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert isinstance(info.value.error, ParseIntError)


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert info.value.error == NegativeError()


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert info.value.error == ZeroError()


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)