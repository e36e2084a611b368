"""Random strings of binary digits."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

_DIGITS = ("0", "1")


class _Source(Protocol):
    def random_string_element(self, items: Sequence[str]) -> str: ...


class BinaryString:
    """Produces random strings made of '0' and '1'."""

    def __init__(self, faker: _Source) -> None:
        self.faker = faker

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.faker!r})"

    def binary_string(self, length: int) -> str:
        """Return a string of the given length made of '0' and '1'."""
        return "".join(
            self.faker.random_string_element(_DIGITS) for _ in range(length)
        )