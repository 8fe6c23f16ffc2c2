"""Character classification for phonetic rendering.

WHY: Each input character renders with a different line shape (letter,
digit, special, space, emoji, or unmapped echo). Deciding the class in
one place, as a closed enum, keeps the renderer a total dispatch over
that enum and makes the unmapped fallback explicit.

HOW: split_units() breaks the input into character units, keeping emoji
sequences (ZWJ joins, skin tones, flags, keycaps) together. Match
offsets come from ``emoji.emoji_list``; every code point between matches
is its own unit. classify() then checks one unit against the table in a
fixed order: space, letters, digits, emoji, specials, else unmapped.

RULES:
- Non-emoji characters are one code point per unit
- is_emoji() is an approximate, swappable policy: a unit counts as emoji
  only if the emoji library knows it AND its first code point is above
  EMOJI_CODEPOINT_THRESHOLD, which keeps digits, '#', '*', '©', '™' and
  similar low symbols out of the emoji class
- classify() never raises; anything unknown is UNMAPPED
"""

from __future__ import annotations

import enum
from typing import Callable, List

import emoji

from phonetic_text.alphabets.base import PhoneticTable

# Code points at or below this value are never treated as emoji. Unicode
# also flags digits, "#", "*", the copyright and trademark signs, several
# arrows and the keyboard symbol as Emoji; all of them sit below U+238C.
EMOJI_CODEPOINT_THRESHOLD = 0x238C

SPACE_CHARACTER = " "


class CharacterClass(enum.Enum):
    """Closed set of character classes, one line shape each."""

    SPACE = "space"
    EMOJI = "emoji"
    UPPERCASE_LETTER = "uppercase_letter"
    LOWERCASE_LETTER = "lowercase_letter"
    DIGIT = "digit"
    SPECIAL = "special"
    UNMAPPED = "unmapped"


EmojiPredicate = Callable[[str], bool]


def split_units(text: str) -> List[str]:
    """Split text into character units, keeping emoji sequences whole.

    Args:
        text: Any string.

    Returns:
        Units in input order; ``"".join(units) == text``.
    """
    units: List[str] = []
    cursor = 0
    for match in emoji.emoji_list(text):
        start, end = match["match_start"], match["match_end"]
        if start < cursor:
            continue
        # Stray selectors and joiners around matches stay as their own units.
        units.extend(text[cursor:start])
        units.append(text[start:end])
        cursor = end
    units.extend(text[cursor:])
    return units


def is_emoji(unit: str) -> bool:
    """Approximate emoji test for one character unit."""
    if not unit or ord(unit[0]) <= EMOJI_CODEPOINT_THRESHOLD:
        return False
    return emoji.is_emoji(unit)


def classify(
    unit: str,
    table: PhoneticTable,
    emoji_predicate: EmojiPredicate = is_emoji,
) -> CharacterClass:
    """Classify one character unit against a phonetic table.

    Args:
        unit: A single unit from split_units().
        table: The table whose letters, digits and specials are checked.
        emoji_predicate: Emoji policy, is_emoji() unless overridden.

    Returns:
        The unit's CharacterClass.
    """
    if unit == SPACE_CHARACTER:
        return CharacterClass.SPACE
    if table.letter_word(unit) is not None:
        if unit.isupper():
            return CharacterClass.UPPERCASE_LETTER
        return CharacterClass.LOWERCASE_LETTER
    if table.digit_word(unit) is not None:
        return CharacterClass.DIGIT
    if emoji_predicate(unit):
        return CharacterClass.EMOJI
    if table.special_word(unit) is not None:
        return CharacterClass.SPECIAL
    return CharacterClass.UNMAPPED
