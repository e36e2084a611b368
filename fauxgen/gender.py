"""Random gender names."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

GENDER_NAMES = ("masculine", "feminine")
GENDER_ABBREVIATIONS = ("masc", "fem")


class _Source(Protocol):
    def random_string_element(self, items: Sequence[str]) -> str: ...


class Gender:
    """Produces random gender names and abbreviations."""

    def __init__(self, faker: _Source) -> None:
        self.faker = faker

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.faker!r})"

    def name(self) -> str:
        """Return 'masculine' or 'feminine'."""
        return self.faker.random_string_element(GENDER_NAMES)

    def abbr(self) -> str:
        """Return 'masc' or 'fem'."""
        return self.faker.random_string_element(GENDER_ABBREVIATIONS)