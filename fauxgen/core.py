"""Random number sources and the primitive random-value helpers."""

from __future__ import annotations

import abc
import random
import struct
from collections.abc import Mapping, Sequence

from fauxgen.boolean import Boolean

MAX_INT = 2**63 - 1
MIN_INT = -(2**63)


def _wrap_signed(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Generator(abc.ABC):
    """A source of random integers."""

    @abc.abstractmethod
    def intn(self, n: int) -> int:
        """Return an integer in [0, n)."""

    @abc.abstractmethod
    def int63(self) -> int:
        """Return a non-negative 63-bit integer."""


class RandomGenerator(Generator):
    """A generator backed by :class:`random.Random`."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def intn(self, n: int) -> int:
        if n <= 0:
            raise ValueError("intn requires a positive bound")
        return self._rng.randrange(n)

    def int63(self) -> int:
        return self._rng.getrandbits(63)


class Randomizer:
    """Primitive random values drawn from a :class:`Generator`."""

    def __init__(self, generator: Generator | None = None) -> None:
        self.generator = generator if generator is not None else RandomGenerator()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.generator!r})"

    def random_digit(self) -> int:
        """Return a digit from 0 to 9."""
        return self.generator.int63() % 10

    def random_digit_not(self, *args: int) -> int:
        """Return a digit that is not among the given ones."""
        ignored = set(args)
        if ignored.issuperset(range(10)):
            raise ValueError("every digit is excluded")
        while True:
            digit = self.random_digit()
            if digit not in ignored:
                return digit

    def random_digit_not_null(self) -> int:
        """Return a digit from 1 to 8."""
        return self.generator.int63() % 8 + 1

    def random_number(self, size: int) -> int:
        """Return a number with the given count of digits."""
        if size == 1:
            return self.random_digit()
        low = int(10 ** (size - 1))
        high = int(10**size) - 1
        return self.int_between(low, high)

    def _decimal(self, max_decimals: int, minimum: int, maximum: int) -> float:
        whole = self.int_between(minimum, maximum - 1)
        fraction = self.int_between(1, max_decimals)
        return _to_float32(float(f"{whole}.{fraction}"))

    def random_float(self, max_decimals: int, minimum: int, maximum: int) -> float:
        """Return a float whose integer part lies in [minimum, maximum)."""
        return self._decimal(max_decimals, minimum, maximum)

    def float(self, max_decimals: int, minimum: int, maximum: int) -> float:
        """Same as :meth:`random_float`."""
        return self._decimal(max_decimals, minimum, maximum)

    def float32(self, max_decimals: int, minimum: int, maximum: int) -> float:
        """Same as :meth:`random_float`, at single precision."""
        return self._decimal(max_decimals, minimum, maximum)

    def float64(self, max_decimals: int, minimum: int, maximum: int) -> float:
        """Same as :meth:`random_float`."""
        return self._decimal(max_decimals, minimum, maximum)

    def int(self) -> int:
        """Return a non-negative 64-bit signed integer."""
        return self.int_between(0, MAX_INT - 1)

    def int8(self) -> int:
        return _wrap_signed(self.int(), 8)

    def int16(self) -> int:
        return _wrap_signed(self.int(), 16)

    def int32(self) -> int:
        return _wrap_signed(self.int(), 32)

    def int64(self) -> int:
        return _wrap_signed(self.int(), 64)

    def uint(self) -> int:
        """Return an integer in [0, MAX_INT]."""
        return self.int_between(0, MAX_INT)

    def uint8(self) -> int:
        return _wrap_unsigned(self.int(), 8)

    def uint16(self) -> int:
        return _wrap_unsigned(self.int(), 16)

    def uint32(self) -> int:
        return _wrap_unsigned(self.int(), 32)

    def uint64(self) -> int:
        return _wrap_unsigned(self.int(), 64)

    def int_between(self, minimum: int, maximum: int) -> int:
        """Return an integer in [minimum, maximum]; minimum if the range is empty."""
        diff = maximum - minimum
        if diff <= 0:
            return minimum
        return self.generator.intn(diff + 1) + minimum

    def int8_between(self, minimum: int, maximum: int) -> int:
        return _wrap_signed(self.int_between(minimum, maximum), 8)

    def int16_between(self, minimum: int, maximum: int) -> int:
        return _wrap_signed(self.int_between(minimum, maximum), 16)

    def int32_between(self, minimum: int, maximum: int) -> int:
        return _wrap_signed(self.int_between(minimum, maximum), 32)

    def int64_between(self, minimum: int, maximum: int) -> int:
        return _wrap_signed(self.int_between(minimum, maximum), 64)

    def uint_between(self, minimum: int, maximum: int) -> int:
        return _wrap_unsigned(self.int_between(minimum, maximum), 64)

    def uint8_between(self, minimum: int, maximum: int) -> int:
        return _wrap_unsigned(self.uint_between(minimum, maximum), 8)

    def uint16_between(self, minimum: int, maximum: int) -> int:
        return _wrap_unsigned(self.uint_between(minimum, maximum), 16)

    def uint32_between(self, minimum: int, maximum: int) -> int:
        return _wrap_unsigned(self.uint_between(minimum, maximum), 32)

    def uint64_between(self, minimum: int, maximum: int) -> int:
        return _wrap_unsigned(self.uint_between(minimum, maximum), 64)

    def letter(self) -> str:
        """Return a lowercase ASCII letter."""
        return self.random_letter()

    def random_letter(self) -> str:
        """Return a lowercase ASCII letter."""
        return chr(self.int_between(97, 122))

    def random_string_with_length(self, length: int) -> str:
        """Return a string of lowercase letters of the given length."""
        return "".join(self.random_letter() for _ in range(length))

    def random_string_element(self, items: Sequence[str]) -> str:
        """Return one element of items."""
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[self.int_between(0, len(items) - 1)]

    def random_string_map_key(self, mapping: Mapping[str, str]) -> str:
        """Return one key of mapping."""
        return self.random_string_element(list(mapping))

    def random_string_map_value(self, mapping: Mapping[str, str]) -> str:
        """Return one value of mapping."""
        return self.random_string_element(list(mapping.values()))

    def random_int_element(self, items: Sequence[int]) -> int:
        """Return one element of items."""
        if not items:
            raise IndexError("cannot choose from an empty sequence")
        return items[self.int_between(0, len(items) - 1)]

    def shuffle_string(self, text: str) -> str:
        """Return the characters of text in reverse order."""
        return text[::-1]

    def numerify(self, text: str) -> str:
        """Replace every '#' with a random digit."""
        return "".join(str(self.random_digit()) if c == "#" else c for c in text)

    def lexify(self, text: str) -> str:
        """Replace every '?' with a random lowercase letter."""
        return "".join(self.random_letter() if c == "?" else c for c in text)

    def bothify(self, text: str) -> str:
        """Apply :meth:`lexify` then :meth:`numerify`."""
        return self.numerify(self.lexify(text))

    def asciify(self, text: str) -> str:
        """Replace every '*' with a random character from 'a' to '~'."""
        return "".join(chr(self.int_between(97, 126)) if c == "*" else c for c in text)

    def bool(self) -> bool:
        """Return a random boolean."""
        return Boolean(self).bool()

    def bool_with_chance(self, chance_true: int) -> bool:
        """Return True with the given percentage chance."""
        return Boolean(self).bool_with_chance(chance_true)