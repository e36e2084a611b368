import pytest

from fauxgen.blood import BLOOD_TYPES, Blood
from fauxgen.core import Generator, RandomGenerator, Randomizer


class _Fixed(Generator):
    def __init__(self, value):
        self.value = value

    def intn(self, n):
        return self.value

    def int63(self):
        return self.value


def test_blood_name():
    value = Blood(Randomizer(RandomGenerator(7))).name()
    assert value != ""
    assert value in BLOOD_TYPES


@pytest.mark.parametrize(
    "index, expected",
    [(0, "A+"), (1, "A-"), (4, "AB+"), (7, "O-")],
)
def test_blood_name_fixed_generator(index, expected):
    assert Blood(Randomizer(_Fixed(index))).name() == expected