"""Phonetic table container shared by every alphabet.

WHY: The converter must be able to swap one language table for another
without touching the encode/decode logic. Keeping every word and token a
table needs in one immutable object makes a table a plain value that can
be registered, looked up by name, and passed to the converter.

HOW: PhoneticTable is a frozen dataclass. The three character maps are
wrapped in ``types.MappingProxyType`` so a table cannot be mutated after
construction, even through the mapping it exposes.

RULES:
- letters holds separate entries for upper- and lowercase forms
- every key in letters, digits and specials is exactly one character
- the space character is never a key; it renders as ``space_token``
- tables are built once at import and shared by reference
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


def _freeze(mapping: Mapping[str, str]) -> Mapping[str, str]:
    """Return a read-only view of a copy of ``mapping``."""
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class PhoneticTable:
    """One complete language table for phonetic spelling.

    Attributes:
        name: Registry key, e.g. ``"nato"``.
        letters: Letter → word, both cases, e.g. ``"A" → "Alpha"``, ``"a" → "alpha"``.
        digits: Digit → word, e.g. ``"9" → "Niner"``.
        specials: Symbol → word, e.g. ``";" → "Semicolon"``.
        space_token: Line emitted for a space character.
        stop_token: Terminator appended after the last line.
        emoji_label: Word emitted after an emoji.
        capital_prefix: Prepended to uppercase letter words in case-prefix mode.
        lowercase_prefix: Prepended to lowercase letter words in case-prefix mode.
    """

    name: str
    letters: Mapping[str, str]
    digits: Mapping[str, str]
    specials: Mapping[str, str]
    space_token: str = "SPACE"
    stop_token: str = "STOP"
    emoji_label: str = "Emoji"
    capital_prefix: str = "Capital "
    lowercase_prefix: str = "Lowercase "

    def __post_init__(self) -> None:
        # frozen=True blocks normal assignment, so go through object.__setattr__
        object.__setattr__(self, "letters", _freeze(self.letters))
        object.__setattr__(self, "digits", _freeze(self.digits))
        object.__setattr__(self, "specials", _freeze(self.specials))

    def letter_word(self, char: str) -> Optional[str]:
        return self.letters.get(char)

    def digit_word(self, char: str) -> Optional[str]:
        return self.digits.get(char)

    def special_word(self, char: str) -> Optional[str]:
        return self.specials.get(char)

