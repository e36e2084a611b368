import random

from fauxgen.file import EXTENSIONS, File


class _RandomSource:
    def __init__(self):
        self._rng = random.Random()

    def random_string_element(self, items):
        return items[self._rng.randint(0, len(items) - 1)]


class _FirstSource:
    def random_string_element(self, items):
        return items[0]


class _LastSource:
    def random_string_element(self, items):
        return items[-1]


def test_extension_is_known():
    file = File(_RandomSource())
    for _ in range(50):
        ext = file.extension()
        assert ext != ""
        assert ext in EXTENSIONS
        assert "." not in ext


def test_extension_first_and_last():
    assert File(_FirstSource()).extension() == "ods"
    assert File(_LastSource()).extension() == "cbz"