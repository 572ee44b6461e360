"""Quizzes: pricing apples, transforming strings and printing report cards."""

from __future__ import annotations

import enum
import math
import struct
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

_U8_MAX = 255


def calculate_price_of_apples(amount: int) -> int:
    """Two per apple, or one per apple when more than 40 are bought."""
    price_per_item = 2 if amount <= 40 else 1
    return amount * price_per_item


class CommandKind(enum.Enum):
    """What to do with a string."""

    UPPERCASE = "uppercase"
    TRIM = "trim"
    APPEND = "append"


@dataclass(frozen=True)
class Command:
    """A command; `times` says how often "bar" is appended."""

    kind: CommandKind
    times: int = 0

    def __post_init__(self) -> None:
        if self.times < 0:
            raise ValueError("times must not be negative")

    @classmethod
    def uppercase(cls) -> Command:
        return cls(CommandKind.UPPERCASE)

    @classmethod
    def trim(cls) -> Command:
        return cls(CommandKind.TRIM)

    @classmethod
    def append(cls, times: int) -> Command:
        return cls(CommandKind.APPEND, times)


def _apply(text: str, command: Command) -> str:
    match command.kind:
        case CommandKind.UPPERCASE:
            return text.upper()
        case CommandKind.TRIM:
            return text.strip()
        case CommandKind.APPEND:
            return text + "bar" * command.times
    raise ValueError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _format_f32(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    shortest = repr(value)
    for precision in range(1, 18):
        candidate = f"{value:.{precision}g}"
        if _to_f32(float(candidate)) == value:
            shortest = candidate
            break
    return format(Decimal(shortest), "f")


@dataclass(frozen=True)
class Grade:
    """A grade given as letters or as a single-precision number."""

    value: str | float

    @classmethod
    def from_alphabetical(cls, grade: str) -> Grade:
        return cls(grade)

    @classmethod
    def from_numerical(cls, grade: float) -> Grade:
        return cls(_to_f32(float(grade)))

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return _format_f32(_to_f32(self.value))


@dataclass(frozen=True)
class ReportCard:
    """A student's report card."""

    grade: Grade
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= _U8_MAX:
            raise ValueError("student_age must be in 0..=255")

    def render(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"