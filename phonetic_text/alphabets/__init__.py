"""Phonetic table registry.

WHY: The CLI and configuration select a table by name. A central dict
makes adding a language a two-step change: write the table module,
register it here.

HOW: ALPHABETS maps snake_case keys to PhoneticTable *instances*; tables
are immutable so one shared instance per process is enough.

RULES:
- Keys are snake_case identifiers (used in CLI flags and PHONETIC_ALPHABET)
- Values are PhoneticTable constants, never mutated
- get_alphabet() raises ValueError listing the known keys on a miss
"""

from __future__ import annotations

from typing import Dict

from phonetic_text.alphabets.base import PhoneticTable
from phonetic_text.alphabets.nato import NATO_TABLE

DEFAULT_ALPHABET = "nato"

ALPHABETS: Dict[str, PhoneticTable] = {
    NATO_TABLE.name: NATO_TABLE,
}


def get_alphabet(name: str) -> PhoneticTable:
    """Look up a registered phonetic table by name.

    Args:
        name: Registry key, case-insensitive (e.g. ``"nato"``).

    Returns:
        The shared PhoneticTable instance.

    Raises:
        ValueError: If no table is registered under ``name``.
    """
    table = ALPHABETS.get(name.strip().lower())
    if table is None:
        raise ValueError(
            "Unknown phonetic alphabet '{}'. Available: {}.".format(
                name, ", ".join(sorted(ALPHABETS))
            )
        )
    return table


__all__ = ["ALPHABETS", "DEFAULT_ALPHABET", "NATO_TABLE", "PhoneticTable", "get_alphabet"]
