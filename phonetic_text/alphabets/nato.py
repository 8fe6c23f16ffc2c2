"""The ICAO/NATO radiotelephony table for English dictation.

WHY: Reading codes such as licence plates, setup keys or passwords over
a voice channel is error-prone. The NATO words are designed to be
unambiguous over poor audio, so they are the default table.

HOW: Plain dict literals, frozen into a PhoneticTable at import.

RULES:
- Uppercase letters use capitalised words, lowercase letters lowercase words
- "9" is "Niner" (ICAO spelling, avoids confusion with German "nein")
- Specials cover the symbols of a standard US keyboard
- The space character is not a special; it has its own token
"""

from __future__ import annotations

from typing import Dict

from phonetic_text.alphabets.base import PhoneticTable

_UPPER_LETTERS: Dict[str, str] = {
    "A": "Alpha", "B": "Bravo", "C": "Charlie", "D": "Delta",
    "E": "Echo", "F": "Foxtrot", "G": "Golf", "H": "Hotel",
    "I": "India", "J": "Juliett", "K": "Kilo", "L": "Lima",
    "M": "Mike", "N": "November", "O": "Oscar", "P": "Papa",
    "Q": "Quebec", "R": "Romeo", "S": "Sierra", "T": "Tango",
    "U": "Uniform", "V": "Victor", "W": "Whiskey", "X": "Xray",
    "Y": "Yankee", "Z": "Zulu",
}

NATO_LETTERS: Dict[str, str] = dict(_UPPER_LETTERS)
NATO_LETTERS.update({char.lower(): word.lower() for char, word in _UPPER_LETTERS.items()})

NATO_DIGITS: Dict[str, str] = {
    "0": "Zero", "1": "One", "2": "Two", "3": "Three",
    "4": "Four", "5": "Five", "6": "Six", "7": "Seven",
    "8": "Eight", "9": "Niner",
}

US_KEYBOARD_SPECIALS: Dict[str, str] = {
    ";": "Semicolon", ":": "Colon", ",": "Comma", ".": "Period",
    "!": "Exclamation", "?": "Question Mark", "'": "Apostrophe",
    "\"": "Quotation", "(": "Open Parenthesis", ")": "Close Parenthesis",
    "[": "Open Bracket", "]": "Close Bracket", "{": "Open Brace",
    "}": "Close Brace", "-": "Hyphen", "_": "Underscore",
    "+": "Plus", "=": "Equals", "/": "Slash", "\\": "Backslash",
    "*": "Asterisk", "&": "Ampersand", "^": "Caret", "%": "Percent",
    "$": "Dollar", "#": "Hash", "@": "At", "`": "Backtick",
    "~": "Tilde", "<": "Less Than", ">": "Greater Than", "|": "Pipe",
}

NATO_TABLE = PhoneticTable(
    name="nato",
    letters=NATO_LETTERS,
    digits=NATO_DIGITS,
    specials=US_KEYBOARD_SPECIALS,
)
