"""Text helpers for the on-screen keyboard and system font selection."""

from __future__ import annotations


def utf8_to_utf16(text, available: int) -> list[int]:
    """Convert UTF-8 text to at most ``available`` UTF-16 code units.

    Conversion stops at a NUL byte, at a malformed sequence, or when the
    next character no longer fits. Code points at or above 0xE000 are kept
    as a single 16-bit unit.
    """
    raw = text.encode("utf-8", "surrogatepass") if isinstance(text, str) else bytes(text)
    nul = raw.find(b"\x00")
    if nul >= 0:
        raw = raw[:nul]

    units: list[int] = []
    pos = 0
    while pos < len(raw):
        lead = raw[pos]
        pos += 1
        if lead < 0x80:
            code, extra = lead, 0
        elif lead & 0xE0 == 0xC0:
            code, extra = lead & 31, 1
        elif lead & 0xF0 == 0xE0:
            code, extra = lead & 15, 2
        else:
            code, extra = lead & 7, 3

        for _ in range(extra):
            nxt = raw[pos] if pos < len(raw) else 0
            pos += 1
            if nxt == 0 or nxt & 0xC0 != 0x80:
                return units
            code = (code << 6) | (nxt & 0x3F)

        if code < 0xD800 or code >= 0xE000:
            if available < 1:
                return units
            units.append(code & 0xFFFF)
            available -= 1
        else:
            if available < 2:
                return units
            code = (code - 0x10000) & 0xFFFFFFFF
            units.append((0xD800 | (code >> 10)) & 0xFFFF)
            units.append(0xDC00 | (code & 0x3FF))
            available -= 2
    return units


def utf16_to_utf8(units, size: int) -> str:
    """Convert UTF-16 code units to text whose UTF-8 form fits in ``size`` bytes.

    Conversion stops at a zero unit, at a surrogate pair it does not accept,
    or when the next character no longer fits.
    """
    out = bytearray()
    stream = iter(units)
    for unit in stream:
        ch = unit & 0xFFFF
        if ch == 0:
            break
        if ch < 0xD800 or ch >= 0xE000:
            code = ch
        else:
            ch2 = next(stream, 0) & 0xFFFF
            if ch < 0xDC00 or ch > 0xE000 or ch2 < 0xD800 or ch2 > 0xDC00:
                break
            code = 0x10000 + ((ch & 0x3FF) << 10) + (ch2 & 0x3FF)

        encoded = chr(code).encode("utf-8")
        if len(encoded) > size - len(out):
            break
        out += encoded
    return out.decode("utf-8")


def is_korean_char(code: int) -> bool:
    """Whether a character belongs to the Hangul ranges served by the Korean font."""
    ch = code & 0xFFFF
    return 0x3130 <= ch <= 0x318F or 0xAC00 <= ch <= 0xD7AF or ch == 0xFFE6


def is_latin_char(code: int) -> bool:
    """Whether a character is Latin-1 or Cyrillic, served by the Latin font."""
    ch = code & 0xFFFF
    return ch <= 0x00FF or 0x0400 <= ch <= 0x04FF