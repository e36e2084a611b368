"""Random cryptocurrency addresses."""

from __future__ import annotations

from typing import Protocol

BITCOIN_MIN_LENGTH = 26
BITCOIN_MAX_LENGTH = 35
ETH_LENGTH = 42
ETH_PREFIX = "0x"

P2PKH_PREFIX = "1"
P2SH_PREFIX = "3"
BECH32_PREFIX = "bc1"

# '0', 'I', 'O' and 'l' are not used in bitcoin addresses.
_EXCLUDED_CODES = frozenset({48, 73, 79, 108})

_DIGITS = (48, 57)
_UPPERCASE = (65, 90)
_LOWERCASE = (97, 122)


class _Source(Protocol):
    def int_between(self, minimum: int, maximum: int) -> int: ...


class Crypto:
    """Produces random bitcoin and ethereum style addresses."""

    def __init__(self, faker: _Source) -> None:
        self.faker = faker

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.faker!r})"

    @staticmethod
    def _is_in_exclusion_zone(code: int) -> bool:
        return code in _EXCLUDED_CODES

    def _algorithm_range(self) -> tuple[int, int]:
        """Pick digits, uppercase or lowercase; return the code point range."""
        choice = self.faker.int_between(0, 2)
        if choice == 0:
            return _DIGITS
        if choice == 1:
            return _UPPERCASE
        return _LOWERCASE

    def _random_alnum(self) -> int:
        start, end = self._algorithm_range()
        return self.faker.int_between(start, end)

    def _generate_bitcoin_address(self, length: int, prefix: str) -> str:
        chars = []
        for _ in range(length):
            code = self._random_alnum()
            if self._is_in_exclusion_zone(code):
                code += 1
            chars.append(chr(code))
        return prefix + "".join(chars)

    def _random_length(self) -> int:
        return self.faker.int_between(BITCOIN_MIN_LENGTH, BITCOIN_MAX_LENGTH)

    def p2pkh_address(self) -> str:
        """Return a P2PKH address of 26 to 35 characters."""
        return self.p2pkh_address_with_length(self._random_length())

    def p2pkh_address_with_length(self, length: int) -> str:
        """Return a P2PKH address of the given total length."""
        return self._generate_bitcoin_address(length - len(P2PKH_PREFIX), P2PKH_PREFIX)

    def p2sh_address(self) -> str:
        """Return a P2SH address of 26 to 35 characters."""
        return self.p2sh_address_with_length(self._random_length())

    def p2sh_address_with_length(self, length: int) -> str:
        """Return a P2SH address of the given total length."""
        return self._generate_bitcoin_address(length - len(P2SH_PREFIX), P2SH_PREFIX)

    def bech32_address(self) -> str:
        """Return a Bech32 address of 26 to 35 characters."""
        return self.bech32_address_with_length(self._random_length())

    def bech32_address_with_length(self, length: int) -> str:
        """Return a Bech32 address of the given total length."""
        return self._generate_bitcoin_address(
            length - len(BECH32_PREFIX), BECH32_PREFIX
        )

    def bitcoin_address(self) -> str:
        """Return a Bech32, P2SH or P2PKH address."""
        choice = self.faker.int_between(0, 2)
        if choice == 0:
            return self.bech32_address()
        if choice == 1:
            return self.p2sh_address()
        return self.p2pkh_address()

    def etherium_address(self) -> str:
        """Return a 42-character address starting with '0x'."""
        body = "".join(
            chr(self._random_alnum()) for _ in range(ETH_LENGTH - len(ETH_PREFIX))
        )
        return ETH_PREFIX + body