import pytest

from fauxgen.core import Generator, RandomGenerator, Randomizer
from fauxgen.genre import GENRES, Genre


class _FixedGenerator(Generator):
    def __init__(self, value: int) -> None:
        self.value = value

    def intn(self, n: int) -> int:
        return self.value

    def int63(self) -> int:
        return self.value


def _genre(seed: int) -> Genre:
    return Genre(Randomizer(RandomGenerator(seed)))


@pytest.mark.parametrize("seed", range(10))
def test_genre_name(seed):
    name = _genre(seed).name()
    assert name != ""
    assert name in GENRES


@pytest.mark.parametrize("seed", range(10))
def test_genre_name_with_description(seed):
    name, description = _genre(seed).name_with_description()
    assert name != ""
    assert description != ""
    assert GENRES[name] == description


def test_genre_first_entry_with_fixed_generator():
    genre = Genre(Randomizer(_FixedGenerator(0)))
    assert genre.name() == "Abimegender"
    name, description = genre.name_with_description()
    assert name == "Abimegender"
    assert description.startswith("a gender that is profound")


def test_genre_name_with_space_and_last_entry():
    names = list(GENRES)
    neutral = Genre(Randomizer(_FixedGenerator(names.index("Gender Neutral"))))
    name, description = neutral.name_with_description()
    assert name == "Gender Neutral"
    assert description.startswith("the feeling of having a neutral gender")
    last = Genre(Randomizer(_FixedGenerator(len(names) - 1)))
    assert last.name_with_description() == (
        "Vocigender",
        "a gender that is weak or hollow.",
    )