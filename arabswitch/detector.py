"""Script detection — decides which way a selection should be converted."""
from enum import Enum

# Arabic Unicode block
_ARABIC_MIN = '\u0600'
_ARABIC_MAX = '\u06ff'


class Script(Enum):
    SOURCE = 'en'   # Latin / QWERTY
    TARGET = 'ar'   # Arabic / AZERTY-102


def is_arabic(c: str) -> bool:
    return _ARABIC_MIN <= c <= _ARABIC_MAX


def is_latin_letter(c: str) -> bool:
    return ('a' <= c <= 'z') or ('A' <= c <= 'Z')


def classify(text: str) -> Script:
    """Return the dominant script of text.

    TARGET only when Arabic characters strictly outnumber ASCII letters.
    Ties, empty strings and strings without letters fall back to SOURCE.
    Digits, punctuation and everything outside both ranges are ignored.
    """
    ar_count = 0
    en_count = 0
    for c in text:
        if is_arabic(c):
            ar_count += 1
        elif is_latin_letter(c):
            en_count += 1

    if ar_count > en_count:
        return Script.TARGET
    return Script.SOURCE
