import pytest

from fauxgen.car import (
    CAR_CATEGORIES,
    CAR_FUEL_TYPES,
    CAR_MAKERS,
    CAR_MODELS,
    CAR_SERIES,
    CAR_TRANSMISSION_GEARS,
    COUNTRY_REGIONS,
    Car,
)
from fauxgen.core import Generator, RandomGenerator, Randomizer


class _FirstGenerator(Generator):
    def intn(self, n):
        return 0

    def int63(self):
        return 0


class _LastGenerator(Generator):
    def intn(self, n):
        return n - 1

    def int63(self):
        return 9


@pytest.fixture
def car():
    return Car(Randomizer(RandomGenerator(1234)))


def test_maker(car):
    value = car.maker()
    assert value != ""
    assert value in CAR_MAKERS


def test_model(car):
    value = car.model()
    assert value != ""
    assert value in CAR_MODELS


def test_category(car):
    value = car.category()
    assert value != ""
    assert value in CAR_CATEGORIES


def test_fuel_type(car):
    value = car.fuel_type()
    assert value != ""
    assert value in CAR_FUEL_TYPES


def test_transmission_gear(car):
    value = car.transmission_gear()
    assert value != ""
    assert value in CAR_TRANSMISSION_GEARS


@pytest.mark.parametrize("seed", range(20))
def test_plate_structure(seed):
    plate = Car(Randomizer(RandomGenerator(seed))).plate()
    assert plate != ""
    assert plate[:2] in COUNTRY_REGIONS
    assert plate[-2:] in CAR_SERIES
    digits = plate[2:-2]
    assert len(digits) == 4
    assert digits.isdigit()
    assert 1000 <= int(digits) <= 9999


def test_first_elements_with_fixed_generator():
    car = Car(Randomizer(_FirstGenerator()))
    assert car.maker() == "Acura"
    assert car.model() == "Q3"
    assert car.category() == "SUV"
    assert car.fuel_type() == "Bio Gas"
    assert car.transmission_gear() == "Automatic"
    assert car.plate() == COUNTRY_REGIONS[0] + "1000" + CAR_SERIES[0]


def test_last_elements_with_fixed_generator():
    car = Car(Randomizer(_LastGenerator()))
    assert car.maker() == "Volvo"
    assert car.model() == "Accent"
    assert car.category() == "Wagon"
    assert car.fuel_type() == "Petrol"
    assert car.transmission_gear() == "Tiptronic"
    assert car.plate() == COUNTRY_REGIONS[-1] + "9999" + CAR_SERIES[-1]