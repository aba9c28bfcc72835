"""Decoding of zRIF strings: base64 text holding a zlib-compressed licence."""

from __future__ import annotations

from .inflate import InflateError, inflate

ADLER32_MOD = 65521
ZLIB_DEFLATE_METHOD = 8
ZLIB_DICTIONARY_ID_ZRIF = 0x627D1D5D

# Preset dictionary shared by every zRIF; its Adler-32 is ZLIB_DICTIONARY_ID_ZRIF.
ZRIF_DICTIONARY = (
    bytes(880)
    + b"0000" b"9"
    + bytes(11)
    + b"00006" b"0000700008"
    + b"\x00"
    + b"000030" b"0004000050_00-ADD"
    + b"CONT00002-PCSG000" b"0000000" b"1-PCSE000-"
    + b"PCSF000-PCSC000-P" b"CSD000-PCSA000-PC" b"SB000"
    + b"\x00\x01\x00\x01\x00\x01\x00\x02\xef\xcd\xab\x89\x67\x45\x23\x01"
)

# Output space of the decoder, shared between the dictionary and the licence.
_OUTPUT_SPACE = 1024 + len(ZRIF_DICTIONARY)
_RIF_SIZES = (512, 1024)

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_B64_VALUES = [64] * 256
for _value, _char in enumerate(_ALPHABET):
    _B64_VALUES[_char] = _value
del _value, _char


class ZrifError(ValueError):
    """Raised when a zRIF string cannot be decoded."""


def adler32(data) -> int:
    """Return the Adler-32 checksum of ``data``."""
    a, b = 1, 0
    for byte in bytes(data):
        a = (a + byte) % ADLER32_MOD
        b = (b + a) % ADLER32_MOD
    return (b << 16) | a


def base64_decode(text) -> bytes:
    """Decode base64 leniently: up to two trailing '=' are dropped, a
    trailing partial group yields its bytes, unknown characters are not
    rejected."""
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    for _ in range(2):
        if raw.endswith(b"="):
            raw = raw[:-1]
    values = [_B64_VALUES[byte] for byte in raw]

    out = bytearray()
    full = len(values) - len(values) % 4
    for i in range(0, full, 4):
        a, b, c, d = values[i:i + 4]
        out += bytes((
            ((a << 2) + ((b & 0x30) >> 4)) & 0xFF,
            ((b << 4) + (c >> 2)) & 0xFF,
            ((c << 6) + d) & 0xFF,
        ))

    tail = values[full:]
    if len(tail) == 2:
        a, b = tail
        out += bytes((((a << 2) + ((b & 0x30) >> 4)) & 0xFF, (b << 4) & 0xFF))
    elif len(tail) == 3:
        a, b, c = tail
        out += bytes((
            ((a << 2) + ((b & 0x30) >> 4)) & 0xFF,
            ((b << 4) + (c >> 2)) & 0xFF,
            (c << 6) & 0xFF,
        ))
    return bytes(out)


def zlib_inflate(data) -> bytes:
    """Decompress a zlib stream that may use the zRIF preset dictionary."""
    data = bytes(data)
    if len(data) < 2 + 4:
        raise ZrifError("zRIF is too short")
    if ((data[0] << 8) + data[1]) % 31 != 0:
        raise ZrifError("zRIF header is corrupted")
    if data[0] & 0xF != ZLIB_DEFLATE_METHOD:
        raise ZrifError("only deflate method supported in zRIF")

    if data[1] & (1 << 5):
        if int.from_bytes(data[2:6], "big") != ZLIB_DICTIONARY_ID_ZRIF:
            raise ZrifError("zRIF uses unknown dictionary")
        dictionary = ZRIF_DICTIONARY
        start = 6
    else:
        dictionary = b""
        start = 2

    body = data[start:max(start, len(data) - 4)]
    try:
        result = inflate(body, dictionary, _OUTPUT_SPACE - len(dictionary))
    except InflateError as exc:
        raise ZrifError("failed to uncompress zRIF") from exc

    checksum_at = start + result.consumed
    checksum = data[checksum_at:checksum_at + 4]
    if len(checksum) < 4 or adler32(result.data) != int.from_bytes(checksum, "big"):
        raise ZrifError("zRIF is corrupted, wrong checksum")
    return result.data


def decode_zrif(text) -> bytes:
    """Turn a zRIF string into the licence bytes (512 or 1024 long)."""
    rif = zlib_inflate(base64_decode(text))
    if len(rif) not in _RIF_SIZES:
        raise ZrifError("wrong size of zRIF, is it corrupted?")
    return rif