"""
Utilities for sanitizing raw corpus bytes before tokenization.
"""

import regex as re

# anything outside the printable ASCII range, i.e. C isprint() in the "C" locale
_NON_PRINTABLE = re.compile(rb"[^\x20-\x7e]")


def replace_non_printable(data: bytes | bytearray) -> bytearray:
    """
    Replace every non-printable byte with a space.

    Control characters (including CR, LF and TAB) and every byte of a
    multi-byte UTF-8 sequence become token delimiters. Punctuation is kept.
    """
    return bytearray(_NON_PRINTABLE.sub(b" ", data))
