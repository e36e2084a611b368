import pytest

from fauxgen.address import (
    CITY_PREFIXES,
    CITY_SUFFIXES,
    COUNTRIES,
    COUNTRY_ABBREVIATIONS,
    COUNTRY_CODES,
    STATE_ABBREVIATIONS,
    STATES,
    STREET_SUFFIXES,
    Address,
)
from fauxgen.core import Generator, RandomGenerator, Randomizer


class _Fixed(Generator):
    def __init__(self, value):
        self.value = value

    def intn(self, n):
        return self.value

    def int63(self):
        return self.value


@pytest.fixture
def address():
    return Address(Randomizer(RandomGenerator(1234)))


@pytest.fixture
def fixed_address():
    return Address(Randomizer(_Fixed(0)))


def test_city_prefix(address):
    value = address.city_prefix()
    assert len(value) > 0
    assert value in CITY_PREFIXES


def test_secondary_address(address):
    for _ in range(20):
        label, number = address.secondary_address().split(" ")
        assert label in ("Apt.", "Suite")
        assert len(number) == 3
        assert number.isdigit()


def test_state(address):
    assert address.state() in STATES


def test_state_abbr(address):
    assert address.state_abbr() in STATE_ABBREVIATIONS


def test_city_suffix(address):
    assert address.city_suffix() in CITY_SUFFIXES


def test_street_suffix(address):
    assert address.street_suffix() in STREET_SUFFIXES


def test_building_number(address):
    for _ in range(20):
        value = address.building_number()
        assert value[0] == "%"
        assert value[1:].isdigit()
        assert 2 <= len(value) - 1 <= 4


def test_post_code(address):
    for _ in range(20):
        parts = address.post_code().split("-")
        assert len(parts) in (1, 2)
        assert len(parts[0]) == 5
        assert parts[0].isdigit()
        if len(parts) == 2:
            assert len(parts[1]) == 4
            assert parts[1].isdigit()


def test_country(address):
    assert address.country() in COUNTRIES


def test_country_abbr(address):
    value = address.country_abbr()
    assert value in COUNTRY_ABBREVIATIONS
    assert len(value) == 3


def test_country_code(address):
    value = address.country_code()
    assert value in COUNTRY_CODES
    assert len(value) == 2


def test_latitude(address):
    value = address.latitude()
    assert 0 < value < 100


def test_longitude(address):
    value = address.longitude()
    assert 0 < value < 100


def test_fixed_generator_picks_first_entries(fixed_address):
    assert fixed_address.city_prefix() == "North"
    assert fixed_address.state() == "Alabama"
    assert fixed_address.state_abbr() == "AK"
    assert fixed_address.country() == "Afghanistan"
    assert fixed_address.country_abbr() == "ABW"
    assert fixed_address.country_code() == "AD"
    assert fixed_address.city_suffix() == "town"
    assert fixed_address.street_suffix() == "Alley"


def test_fixed_generator_formats(fixed_address):
    assert fixed_address.secondary_address() == "Apt. 000"
    assert fixed_address.building_number() == "%0000"
    assert fixed_address.post_code() == "00000"
    assert fixed_address.latitude() == 0.0
    assert fixed_address.longitude() == 0.0


@pytest.mark.parametrize(
    "name", ['Cote d"Ivoire', 'Lao People"s Democratic Republic']
)
def test_quoted_country_names_kept(name):
    address = Address(Randomizer(_Fixed(COUNTRIES.index(name))))
    assert address.country() == name