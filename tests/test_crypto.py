import pytest

from fauxgen.core import Generator, RandomGenerator, Randomizer
from fauxgen.crypto import (
    BITCOIN_MAX_LENGTH,
    BITCOIN_MIN_LENGTH,
    ETH_LENGTH,
    ETH_PREFIX,
    Crypto,
)

BANNED = ("O", "I", "l", "0")
SEEDS = range(20)


class _FixedGenerator(Generator):
    def __init__(self, value: int) -> None:
        self.value = value

    def intn(self, n: int) -> int:
        return self.value

    def int63(self) -> int:
        return self.value


def _crypto(seed: int) -> Crypto:
    return Crypto(Randomizer(RandomGenerator(seed)))


def _fixed_crypto(value: int) -> Crypto:
    return Crypto(Randomizer(_FixedGenerator(value)))


def test_is_in_exclusion_zone():
    for char in BANNED:
        assert Crypto._is_in_exclusion_zone(ord(char)) is True
    assert Crypto._is_in_exclusion_zone(ord(BANNED[0]) + 1) is False


@pytest.mark.parametrize("seed", SEEDS)
def test_generate_bitcoin_address_length(seed):
    c = _crypto(seed)
    length = c.faker.int_between(5, 10)
    addr = c._generate_bitcoin_address(length, "a")
    assert len(addr) == length + 1
    assert addr.startswith("a")


@pytest.mark.parametrize("seed", SEEDS)
def test_p2pkh_address(seed):
    addr = _crypto(seed).p2pkh_address()
    assert BITCOIN_MIN_LENGTH <= len(addr) <= BITCOIN_MAX_LENGTH
    assert addr.startswith("1")
    assert not any(b in addr for b in BANNED)


@pytest.mark.parametrize("seed", SEEDS)
def test_p2pkh_address_with_length(seed):
    c = _crypto(seed)
    length = c.faker.int_between(26, 62)
    addr = c.p2pkh_address_with_length(length)
    assert len(addr) == length
    assert addr.startswith("1")


@pytest.mark.parametrize("seed", SEEDS)
def test_p2sh_address(seed):
    addr = _crypto(seed).p2sh_address()
    assert BITCOIN_MIN_LENGTH <= len(addr) <= BITCOIN_MAX_LENGTH
    assert addr.startswith("3")
    assert not any(b in addr for b in BANNED)


@pytest.mark.parametrize("seed", SEEDS)
def test_p2sh_address_with_length(seed):
    c = _crypto(seed)
    length = c.faker.int_between(26, 62)
    addr = c.p2sh_address_with_length(length)
    assert len(addr) == length
    assert addr.startswith("3")


@pytest.mark.parametrize("seed", SEEDS)
def test_bech32_address(seed):
    addr = _crypto(seed).bech32_address()
    assert BITCOIN_MIN_LENGTH <= len(addr) <= BITCOIN_MAX_LENGTH
    assert addr.startswith("bc1")
    assert not any(b in addr[3:] for b in BANNED)


@pytest.mark.parametrize("seed", SEEDS)
def test_bech32_address_with_length(seed):
    c = _crypto(seed)
    length = c.faker.int_between(26, 62)
    addr = c.bech32_address_with_length(length)
    assert len(addr) == length
    assert addr.startswith("bc1")


@pytest.mark.parametrize("seed", SEEDS)
def test_etherium_address(seed):
    addr = _crypto(seed).etherium_address()
    assert len(addr) == ETH_LENGTH
    assert addr.startswith(ETH_PREFIX)
    assert addr[2:].isalnum()


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, (ord("0"), ord("9"))),
        (1, (ord("A"), ord("Z"))),
        (2, (ord("a"), ord("z"))),
    ],
)
def test_algorithm_range(value, expected):
    assert _fixed_crypto(value)._algorithm_range() == expected


@pytest.mark.parametrize(
    "value, prefix",
    [(0, "bc1"), (1, "3"), (2, "1")],
)
def test_random_bitcoin(value, prefix):
    addr = _fixed_crypto(value).bitcoin_address()
    assert addr.startswith(prefix)
    assert BITCOIN_MIN_LENGTH <= len(addr) <= BITCOIN_MAX_LENGTH


def test_excluded_digit_is_shifted():
    # A generator that always returns 0 picks digits and the lowest one, '0',
    # which is excluded and becomes '1'.
    addr = _fixed_crypto(0).bech32_address_with_length(10)
    assert addr == "bc1" + "1" * 7


@pytest.mark.parametrize(
    "value, char",
    [(0, "0"), (1, "B"), (2, "c")],
)
def test_etherium_address_with_fixed_generator(value, char):
    assert _fixed_crypto(value).etherium_address() == "0x" + char * 40