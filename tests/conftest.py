"""Shared test fixtures for the phonetic_text test suite.

WHY: Most test modules need the same converters (plain, case-prefixed,
single-line) and the same known-good sample strings. Centralising them
keeps every module testing the same wire format.

HOW: Pytest fixtures return fresh PhoneticConverter instances. An autouse
fixture strips PHONETIC_* variables so a developer's .env cannot leak
into assertions.

RULES:
- ROUND_TRIP_SAMPLE is the reference string that must survive
  encode → decode unchanged with case prefixes on.
- Converters are built from explicit configs, never from the environment.
"""

import pytest

from phonetic_text.core.converter import ConverterConfig, PhoneticConverter

ROUND_TRIP_SAMPLE = "xCBDeDe93;dDsQ"

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
SPECIALS = ";:,.'\"()[]{}-_=+\\/!@#$%^&*`~<>?|"

_ENV_VARS = (
    "PHONETIC_INCLUDE_CASE_PREFIX",
    "PHONETIC_DELIMITER",
    "PHONETIC_NEWLINE_OUTPUT",
    "PHONETIC_ALPHABET",
)


@pytest.fixture(autouse=True)
def clean_phonetic_env(monkeypatch):
    """Remove PHONETIC_* variables for the duration of each test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def converter():
    """Default converter: no case prefix, newline output."""
    return PhoneticConverter(ConverterConfig())


@pytest.fixture
def prefixed_converter():
    """Converter with "Capital " / "Lowercase " prefixes."""
    return PhoneticConverter(ConverterConfig(include_case_prefix=True))


@pytest.fixture
def pipe_converter():
    """Single-line converter joined by " | "."""
    return PhoneticConverter(ConverterConfig(newline_output=False, delimiter=" | "))
