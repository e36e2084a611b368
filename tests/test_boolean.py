import pytest

from fauxgen.boolean import Boolean
from fauxgen.core import Generator, Randomizer


class FixedGenerator(Generator):
    def __init__(self, value):
        self.value = value

    def intn(self, n):
        return self.value

    def int63(self):
        return self.value


def make(value=None):
    if value is None:
        return Boolean(Randomizer())
    return Boolean(Randomizer(FixedGenerator(value)))


def test_bool_returns_bool():
    assert make().bool() in (True, False)


def test_bool_threshold():
    assert make(51).bool() is True
    assert make(50).bool() is False
    assert make(0).bool() is False


def test_bool_with_chance_edges():
    b = make()
    assert b.bool_with_chance(100) is True
    assert b.bool_with_chance(0) is False
    assert b.bool_with_chance(101) is True
    assert b.bool_with_chance(-1) is False


def test_bool_with_chance_uses_draw():
    assert make(29).bool_with_chance(30) is True
    assert make(30).bool_with_chance(30) is False


def test_bool_with_chance_random_value_is_bool():
    assert make().bool_with_chance(30) in (True, False)


def test_bool_int():
    assert make().bool_int() in (0, 1)
    assert make(0).bool_int() == 0
    assert make(1).bool_int() == 1


@pytest.mark.parametrize("draw,expected", [(0, "yes"), (1, "no")])
def test_bool_string_fixed(draw, expected):
    assert make(draw).bool_string("yes", "no") == expected


def test_bool_string_random():
    assert make().bool_string("yes", "no") in ("yes", "no")