"""A recursive cons list and a copy-on-write sequence."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """One item of a cons list followed by the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(5, Nil())


class Cow:
    """Integers that are only copied the first time they have to change."""

    def __init__(self, data: Sequence[int], owned: bool = False) -> None:
        self.data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        """Wrap data that must not be modified."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: list[int]) -> Cow:
        """Take over a list that may be modified in place."""
        return cls(data, owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    def to_mut(self) -> list[int]:
        """Return a list that may be changed, copying borrowed data first."""
        if not self._owned:
            self.data = list(self.data)
            self._owned = True
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self.data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every value non-negative, copying borrowed data only if needed."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow