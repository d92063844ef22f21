"""Conversion between Python string indices and UTF-16 code-unit offsets.

Browser collaborators count offsets in UTF-16 code units; characters outside
the Basic Multilingual Plane take two units there but one index here.
"""


def _units(ch: str) -> int:
    return 2 if ord(ch) > 0xFFFF else 1


def utf16_offset(text: str, index: int) -> int:
    """UTF-16 offset of Python index *index* in *text*."""
    index = max(0, min(index, len(text)))
    return sum(_units(ch) for ch in text[:index])


def index_from_utf16(text: str, offset: int) -> int:
    """Python index for UTF-16 *offset*; an offset inside a surrogate pair rounds down."""
    if offset <= 0:
        return 0
    units = 0
    for i, ch in enumerate(text):
        units += _units(ch)
        if units > offset:
            return i
        if units == offset:
            return i + 1
    return len(text)
