"""Phonetic Text — spell strings out for voice dictation and back.

WHY: Codes such as licence plates, Wi-Fi keys or setup codes are hard to
read aloud without mistakes. This package turns every character into an
unambiguous spoken word ("C: Charlie", "9: Niner", "; Semicolon") and
turns that spelling back into the original string.

HOW: A phonetic table (alphabets/) supplies the words, the classifier
(core/classify.py) tags each character unit, and the converter
(core/converter.py) renders and parses one line per character.

RULES:
- encode/decode are pure and never raise for string input
- decode must be called with the configuration used to encode
- Tables are immutable and shared; converters are thread-safe
"""

from phonetic_text.alphabets import ALPHABETS, NATO_TABLE, PhoneticTable, get_alphabet
from phonetic_text.core.classify import CharacterClass, classify, is_emoji
from phonetic_text.core.converter import (
    ConverterConfig,
    PhoneticConverter,
    PhoneticLine,
    decode,
    encode,
)

__all__ = [
    "ALPHABETS",
    "NATO_TABLE",
    "CharacterClass",
    "ConverterConfig",
    "PhoneticConverter",
    "PhoneticLine",
    "PhoneticTable",
    "classify",
    "decode",
    "encode",
    "get_alphabet",
    "is_emoji",
]

__version__ = "0.1.0"
