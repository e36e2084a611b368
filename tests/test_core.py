import pytest

from fauxgen.core import MAX_INT, MIN_INT, Generator, RandomGenerator, Randomizer


class FixedGenerator(Generator):
    def __init__(self, value):
        self.value = value

    def intn(self, n):
        return self.value

    def int63(self):
        return self.value


@pytest.fixture
def f():
    return Randomizer()


def fixed(value):
    return Randomizer(FixedGenerator(value))


def test_seeded_generators_agree():
    a = Randomizer(RandomGenerator(0))
    b = Randomizer(RandomGenerator(0))
    assert [a.int_between(0, 1000) for _ in range(20)] == [
        b.int_between(0, 1000) for _ in range(20)
    ]


def test_intn_rejects_non_positive():
    with pytest.raises(ValueError):
        RandomGenerator(1).intn(0)


def test_int63_range():
    g = RandomGenerator(5)
    assert all(0 <= g.int63() <= MAX_INT for _ in range(50))


def test_random_digit(f):
    value = f.random_digit()
    assert 0 <= value < 10


def test_random_digit_not(f):
    for _ in range(50):
        value = f.random_digit_not(1)
        assert value != 1
        assert 0 <= value <= 9


def test_random_digit_not_fixed_draw():
    assert fixed(3).random_digit_not(1) == 3


def test_random_digit_not_all_excluded(f):
    with pytest.raises(ValueError):
        f.random_digit_not(*range(10))


def test_random_digit_not_null(f):
    value = f.random_digit_not_null()
    assert 0 < value <= 9


def test_random_number(f):
    assert 1000 <= f.random_number(4) <= 9999


def test_int_types(f):
    assert 0 <= f.int() <= MAX_INT
    assert -128 <= f.int8() <= 127
    assert -(2**15) <= f.int16() < 2**15
    assert -(2**31) <= f.int32() < 2**31
    assert MIN_INT <= f.int64() <= MAX_INT


def test_uint_types(f):
    assert 0 <= f.uint() <= MAX_INT
    assert 0 <= f.uint8() < 2**8
    assert 0 <= f.uint16() < 2**16
    assert 0 <= f.uint32() < 2**32
    assert 0 <= f.uint64() < 2**64


def test_int_between(f):
    assert 1 <= f.int_between(1, 100) <= 100


def test_int_between_negative(f):
    assert -100 <= f.int_between(-100, -50) <= -50


def test_int_between_max_values(f):
    assert MIN_INT <= f.int_between(MIN_INT, MAX_INT) <= MAX_INT


def test_int_between_invalid_interval(f):
    value = f.int_between(100, 50)
    assert 50 <= value <= 100
    assert value == 100


def test_int_between_with_fixed_draw():
    assert fixed(3).int_between(10, 20) == 13


def test_int_between_reaches_first_element(f):
    assert any(f.int_between(0, 1) == 0 for _ in range(100))


def test_int_between_reaches_last_element(f):
    assert any(f.int_between(0, 1) == 1 for _ in range(100))


@pytest.mark.parametrize(
    "method",
    ["uint_between", "uint8_between", "uint16_between", "uint32_between", "uint64_between"],
)
def test_uint_between(f, method):
    assert 1 <= getattr(f, method)(1, 100) <= 100


@pytest.mark.parametrize(
    "method", ["int8_between", "int16_between", "int32_between", "int64_between"]
)
def test_signed_between(f, method):
    assert -10 <= getattr(f, method)(-10, 10) <= 10


def test_int8_between_wraps():
    assert fixed(0).int8_between(200, 200) == -56


def test_random_float(f):
    value = f.random_float(1, 1, 100)
    assert 1 <= value <= 100


@pytest.mark.parametrize("method", ["float", "float32", "float64"])
def test_float_variants(f, method):
    value = getattr(f, method)(3, 1, 1000)
    assert 1 <= value < 1000


def test_float_fixed_draw():
    assert fixed(0).random_float(5, 2, 10) == pytest.approx(2.1)


def test_letter(f):
    value = f.letter()
    assert len(value) == 1
    assert "a" <= value <= "z"


def test_random_letter(f):
    value = f.random_letter()
    assert len(value) == 1
    assert value.islower()


def test_random_string_with_length(f):
    length = f.int_between(97, 1000)
    value = f.random_string_with_length(length)
    assert len(value) == length
    assert value.isalpha()


def test_random_int_element(f):
    elements = list(range(10))
    assert f.random_int_element(elements) in elements


def test_random_string_element_empty(f):
    with pytest.raises(IndexError):
        f.random_string_element([])


def test_shuffle_string(f):
    orig = "foo bar"
    returned = f.shuffle_string(orig)
    assert len(returned) == len(orig)
    assert all(c in orig for c in returned)
    assert returned == "rab oof"


def test_numerify(f):
    value = f.numerify("Hello ##?#")
    assert len(value) == 10
    assert "Hello" in value
    assert "?" in value
    assert "#" not in value


def test_numerify_fixed():
    assert fixed(7).numerify("Hello ##?#") == "Hello 77?7"


def test_lexify(f):
    value = f.lexify("Hello ??#?")
    assert len(value) == 10
    assert "Hello" in value
    assert "#" in value
    assert "?" not in value


def test_bothify(f):
    value = f.bothify("Hello ??#?")
    assert len(value) == 10
    assert "Hello" in value
    assert "#" not in value
    assert "?" not in value


def test_asciify(f):
    value = f.asciify("Hello ??#?****")
    assert len(value) == 14
    assert "Hello" in value
    assert "#" in value
    assert "?" in value
    assert "*" not in value


def test_bool(f):
    assert f.bool() in (True, False)


def test_bool_with_chance(f):
    assert f.bool_with_chance(30) in (True, False)
    assert f.bool_with_chance(100) is True
    assert f.bool_with_chance(0) is False
    assert f.bool_with_chance(101) is True
    assert f.bool_with_chance(-1) is False


def test_random_string_map_key(f):
    m = {"k0": "v0", "k1": "v1"}
    assert f.random_string_map_key(m) in ("k0", "k1")


def test_random_string_map_value(f):
    m = {"k0": "v0", "k1": "v1"}
    assert f.random_string_map_value(m) in ("v0", "v1")
    assert fixed(1).random_string_map_value(m) == "v1"