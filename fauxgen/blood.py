"""Random blood types."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

BLOOD_TYPES = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")


class _Source(Protocol):
    def random_string_element(self, items: Sequence[str]) -> str: ...


class Blood:
    """Produces random blood types."""

    def __init__(self, faker: _Source) -> None:
        self.faker = faker

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.faker!r})"

    def name(self) -> str:
        """Return a blood type such as 'AB+'."""
        return self.faker.random_string_element(BLOOD_TYPES)