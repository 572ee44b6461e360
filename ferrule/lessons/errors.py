"""Error handling: parsing input, validating values and wrapping failures."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


class ParseIntError(ValueError):
    """Text could not be read as an integer of the required width."""


def _parse_int(text: str, bits: int) -> int:
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    sign, digits = (text[0], text[1:]) if text[0] in "+-" else ("+", text)
    if not digits or not set(digits) <= _DIGITS:
        raise ParseIntError("invalid digit found in string")
    value = int(digits) if sign == "+" else -int(digits)
    if value >= 1 << (bits - 1):
        raise ParseIntError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ParseIntError("number too small to fit in target type")
    return value


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer with an optional sign and no spaces."""
    return _parse_int(text, 32)


def generate_nametag_text(name: str) -> str:
    """Return the text for a nametag; an empty name is rejected."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens due for the typed-in quantity, including the processing fee."""
    quantity = parse_int(item_quantity)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


def remaining_tokens(tokens: int, user_input: str) -> int:
    """Buy the requested items if affordable and return the tokens left."""
    cost = total_cost(user_input)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationError(ValueError):
    """A value cannot become a positive nonzero integer."""


class NegativeError(CreationError):
    """The value is below zero."""

    def __init__(self) -> None:
        super().__init__("number is negative")

    def __eq__(self, other: object) -> bool:
        return type(other) is NegativeError

    def __hash__(self) -> int:
        return hash(NegativeError)


class ZeroError(CreationError):
    """The value is zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")

    def __eq__(self, other: object) -> bool:
        return type(other) is ZeroError

    def __hash__(self) -> int:
        return hash(ZeroError)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()


class ParsePosNonzeroError(ValueError):
    """Parsing a positive nonzero integer failed; `error` holds the reason."""

    def __init__(self, error: ParseIntError | CreationError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a 64-bit integer and require it to be positive and nonzero."""
    try:
        value = _parse_int(text, 64)
    except ParseIntError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err