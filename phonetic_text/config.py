"""Default converter settings loaded from the environment and .env.

WHY: Teams dictating codes usually settle on one house style (case
prefixes on or off, one line per character or a single-line delimiter).
Reading the defaults from the environment lets the CLI pick that style up
without repeating flags on every call.

HOW: python-dotenv loads the .env file on import. load_converter_config()
and load_alphabet_name() read os.environ at call time, so tests and
long-running callers see changes without re-importing.

RULES:
- PHONETIC_INCLUDE_CASE_PREFIX: "true" enables case prefixes (default false)
- PHONETIC_NEWLINE_OUTPUT: "true" joins lines with newlines (default true)
- PHONETIC_DELIMITER: joiner when newline output is off; "\\n" and "\\t"
  escapes are expanded, "\\n" first (default newline). There is no escape
  for a literal backslash, so a delimiter containing backslash-n or
  backslash-t text cannot be set from the environment; pass --delimiter
  or build a ConverterConfig instead
- PHONETIC_ALPHABET: registry key of the phonetic table (default "nato")
- Invalid combinations raise ValueError from ConverterConfig
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from phonetic_text.alphabets import DEFAULT_ALPHABET
from phonetic_text.core.converter import ConverterConfig

# Load .env from the working directory
load_dotenv()

# Applied in order.
_ESCAPES = (("\\n", "\n"), ("\\t", "\t"))


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").strip().lower() == "true"


def _unescape(value: str) -> str:
    for escaped, literal in _ESCAPES:
        value = value.replace(escaped, literal)
    return value


def load_converter_config() -> ConverterConfig:
    """Build a ConverterConfig from PHONETIC_* environment variables.

    Raises:
        ValueError: If newline output is disabled and the delimiter is empty.
    """
    return ConverterConfig(
        include_case_prefix=_env_flag("PHONETIC_INCLUDE_CASE_PREFIX", False),
        delimiter=_unescape(os.getenv("PHONETIC_DELIMITER", "\n")),
        newline_output=_env_flag("PHONETIC_NEWLINE_OUTPUT", True),
    )


def load_alphabet_name() -> str:
    """Return the configured phonetic table key (PHONETIC_ALPHABET)."""
    return os.getenv("PHONETIC_ALPHABET", DEFAULT_ALPHABET).strip() or DEFAULT_ALPHABET
