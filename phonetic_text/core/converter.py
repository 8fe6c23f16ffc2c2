"""Phonetic encoder and decoder.

WHY: Dictating codes over a voice channel needs every character spelled
out unambiguously ("x: xray", "C: Charlie", "; Semicolon"), and the
listener's transcription must turn back into the exact original string.

HOW: encode() splits the input into character units, classifies each
one, renders one PhoneticLine per unit through a renderer table keyed by
CharacterClass, appends the terminator, and joins with the configured
joiner. decode() splits on the same joiner, drops the terminator, and
recovers each character as the first unit of its line.

RULES:
- Line shapes: "SPACE" | "<c>: Emoji" | "<c>: <prefix><word>" |
  "<c>: <word>" | "<c> <word>" (specials, no colon) | "<c>: <c>"
- The terminator line is always appended, even for empty input
- Every run of N spaces produces N SPACE lines
- decode() must use the configuration that produced the text
- Neither encode() nor decode() raises for any string input; decode
  falls back to a line's first unit when the line has no known shape
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from phonetic_text.alphabets.base import PhoneticTable
from phonetic_text.alphabets.nato import NATO_TABLE
from phonetic_text.core.classify import (
    SPACE_CHARACTER,
    CharacterClass,
    EmojiPredicate,
    classify,
    is_emoji,
    split_units,
)

logger = logging.getLogger(__name__)

NEWLINE = "\n"


@dataclass(frozen=True)
class ConverterConfig:
    """Formatting options shared by encode and decode.

    Attributes:
        include_case_prefix: Prefix letter words with "Capital " / "Lowercase ".
        delimiter: Joiner used when ``newline_output`` is False.
        newline_output: Join lines with a newline and ignore ``delimiter``.

    Raises:
        ValueError: If ``newline_output`` is False and ``delimiter`` is empty.
    """

    include_case_prefix: bool = False
    delimiter: str = NEWLINE
    newline_output: bool = True

    def __post_init__(self) -> None:
        if not self.newline_output and not self.delimiter:
            raise ValueError(
                "A non-empty delimiter is required when newline output is disabled."
            )

    @property
    def joiner(self) -> str:
        return NEWLINE if self.newline_output else self.delimiter


@dataclass(frozen=True)
class PhoneticLine:
    """One rendered output line for one input character unit."""

    unit: str
    char_class: CharacterClass
    text: str


Renderer = Callable[[str, PhoneticTable, ConverterConfig], str]


def _render_space(unit: str, table: PhoneticTable, config: ConverterConfig) -> str:
    return table.space_token


def _render_emoji(unit: str, table: PhoneticTable, config: ConverterConfig) -> str:
    return "{}: {}".format(unit, table.emoji_label)


def _render_uppercase(unit: str, table: PhoneticTable, config: ConverterConfig) -> str:
    prefix = table.capital_prefix if config.include_case_prefix else ""
    return "{}: {}{}".format(unit, prefix, table.letters[unit])


def _render_lowercase(unit: str, table: PhoneticTable, config: ConverterConfig) -> str:
    prefix = table.lowercase_prefix if config.include_case_prefix else ""
    return "{}: {}{}".format(unit, prefix, table.letters[unit])


def _render_digit(unit: str, table: PhoneticTable, config: ConverterConfig) -> str:
    return "{}: {}".format(unit, table.digits[unit])


def _render_special(unit: str, table: PhoneticTable, config: ConverterConfig) -> str:
    # Single space, no colon: distinguishes specials from letters and digits.
    return "{} {}".format(unit, table.specials[unit])


def _render_unmapped(unit: str, table: PhoneticTable, config: ConverterConfig) -> str:
    logger.debug("No phonetic word for %r; echoing it verbatim", unit)
    return "{}: {}".format(unit, unit)


_RENDERERS: Dict[CharacterClass, Renderer] = {
    CharacterClass.SPACE: _render_space,
    CharacterClass.EMOJI: _render_emoji,
    CharacterClass.UPPERCASE_LETTER: _render_uppercase,
    CharacterClass.LOWERCASE_LETTER: _render_lowercase,
    CharacterClass.DIGIT: _render_digit,
    CharacterClass.SPECIAL: _render_special,
    CharacterClass.UNMAPPED: _render_unmapped,
}


def _has_line_shape(line: str, unit: str) -> bool:
    """True if ``line`` is ``<unit>: ...`` or ``<unit> <word>``."""
    rest = line[len(unit):]
    return rest.startswith(": ") or (rest.startswith(" ") and len(rest) > 1)


class PhoneticConverter:
    """Bidirectional converter between text and phonetic spelling.

    Holds an immutable configuration and a shared phonetic table, so one
    instance can be used from any number of threads.

    Args:
        config: Formatting options; defaults to ConverterConfig().
        table: Phonetic table; defaults to the NATO table.
        emoji_predicate: Emoji policy used during classification.
        include_case_prefix, delimiter, newline_output: Optional
            keyword overrides applied on top of ``config``.
    """

    def __init__(
        self,
        config: Optional[ConverterConfig] = None,
        table: PhoneticTable = NATO_TABLE,
        emoji_predicate: EmojiPredicate = is_emoji,
        *,
        include_case_prefix: Optional[bool] = None,
        delimiter: Optional[str] = None,
        newline_output: Optional[bool] = None,
    ) -> None:
        overrides = {
            key: value
            for key, value in (
                ("include_case_prefix", include_case_prefix),
                ("delimiter", delimiter),
                ("newline_output", newline_output),
            )
            if value is not None
        }
        config = config if config is not None else ConverterConfig()
        if overrides:
            config = dataclasses.replace(config, **overrides)
        self._config = config
        self._table = table
        self._emoji_predicate = emoji_predicate

    @property
    def config(self) -> ConverterConfig:
        return self._config

    @property
    def table(self) -> PhoneticTable:
        return self._table

    def render_lines(self, text: str) -> List[PhoneticLine]:
        """Render one PhoneticLine per character unit, without the terminator."""
        lines: List[PhoneticLine] = []
        for unit in split_units(text):
            char_class = classify(unit, self._table, self._emoji_predicate)
            rendered = _RENDERERS[char_class](unit, self._table, self._config)
            lines.append(PhoneticLine(unit=unit, char_class=char_class, text=rendered))
        return lines

    def encode(self, text: str) -> str:
        """Convert text into its phonetic spelling.

        Args:
            text: The string to spell out.

        Returns:
            One line per character unit plus the terminator, joined by
            the configured joiner. ``encode("")`` is the terminator alone.
        """
        parts = [line.text for line in self.render_lines(text)]
        parts.append(self._table.stop_token)
        return self._config.joiner.join(parts)

    def decode(self, phonetic_text: str) -> str:
        """Recover the original string from phonetic text.

        Best effort: lines that match no known shape contribute their
        first character unit, empty lines contribute nothing, and a
        missing terminator is tolerated.

        Args:
            phonetic_text: Text produced by encode() with the same config.

        Returns:
            The reconstructed string.
        """
        lines = phonetic_text.strip().split(self._config.joiner)
        if lines[-1] == self._table.stop_token:
            lines.pop()
        elif lines[-1]:
            logger.debug("Phonetic text has no %s terminator", self._table.stop_token)

        characters: List[str] = []
        for line in lines:
            if not line:
                continue
            if line == self._table.space_token:
                characters.append(SPACE_CHARACTER)
                continue
            unit = split_units(line)[0]
            if not _has_line_shape(line, unit):
                logger.debug("Unrecognised phonetic line %r; keeping %r", line, unit)
            characters.append(unit)
        return "".join(characters)


def encode(text: str, config: Optional[ConverterConfig] = None) -> str:
    """Encode with the NATO table; see PhoneticConverter.encode()."""
    return PhoneticConverter(config).encode(text)


def decode(phonetic_text: str, config: Optional[ConverterConfig] = None) -> str:
    """Decode with the NATO table; see PhoneticConverter.decode()."""
    return PhoneticConverter(config).decode(phonetic_text)
