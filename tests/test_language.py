import pytest

from fauxgen.core import Generator, RandomGenerator, Randomizer
from fauxgen.language import (
    LANGUAGE_ABBREVIATIONS,
    LANGUAGES,
    PROGRAMMING_LANGUAGES,
    Language,
)


class _FirstGenerator(Generator):
    def intn(self, n):
        return 0

    def int63(self):
        return 0


@pytest.fixture
def language():
    return Language(Randomizer(RandomGenerator(11)))


def test_language(language):
    value = language.language()
    assert value != ""
    assert value in LANGUAGES


def test_language_abbr(language):
    value = language.language_abbr()
    assert value != ""
    assert len(value) == 2
    assert value in LANGUAGE_ABBREVIATIONS


def test_programming_language(language):
    value = language.programming_language()
    assert value != ""
    assert value in PROGRAMMING_LANGUAGES


def test_first_elements():
    language = Language(Randomizer(_FirstGenerator()))
    assert language.language() == "Algerian Arabic"
    assert language.language_abbr() == "aa"
    assert language.programming_language() == "ABAP"