"""Fake data providers for tests and fixtures, built on fauxgen.core.Randomizer."""

__version__ = "0.1.0"