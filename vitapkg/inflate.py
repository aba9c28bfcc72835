"""Raw deflate decompression with an optional preset dictionary."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

MAX_BITS = 15
MAX_LCODES = 286
MAX_DCODES = 30
FIX_LCODES = 288

_LENGTH_BASE = (
    3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 15, 17, 19, 23, 27, 31,
    35, 43, 51, 59, 67, 83, 99, 115, 131, 163, 195, 227, 258,
)
_LENGTH_EXTRA = (
    0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2, 2,
    3, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5, 0,
)
_DIST_BASE = (
    1, 2, 3, 4, 5, 7, 9, 13, 17, 25, 33, 49, 65, 97, 129, 193,
    257, 385, 513, 769, 1025, 1537, 2049, 3073, 4097, 6145,
    8193, 12289, 16385, 24577,
)
_DIST_EXTRA = (
    0, 0, 0, 0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6,
    7, 7, 8, 8, 9, 9, 10, 10, 11, 11, 12, 12, 13, 13,
)
_CODE_LENGTH_ORDER = (16, 17, 18, 0, 8, 7, 9, 6, 10, 5, 11, 4, 12, 3, 13, 2, 14, 1, 15)

_MESSAGES = {
    2: "ran out of input",
    1: "output space exhausted",
    -1: "invalid block type",
    -2: "stored block length does not match its complement",
    -3: "too many length or distance codes",
    -4: "code lengths code is incomplete",
    -5: "repeat instruction with no previous length",
    -6: "too many code lengths",
    -7: "invalid literal/length code lengths",
    -8: "invalid distance code lengths",
    -9: "missing end-of-block code",
    -10: "invalid code",
    -11: "distance too far back",
}


class InflateError(Exception):
    """Raised when a deflate stream cannot be decoded.

    ``code`` is 2 when input runs out, 1 when the output limit is reached
    and negative for malformed data.
    """

    def __init__(self, code: int, message: str | None = None) -> None:
        super().__init__(message or _MESSAGES.get(code, "inflate error"))
        self.code = code


@dataclass(frozen=True)
class InflateResult:
    """Decompressed bytes and the number of input bytes consumed."""

    data: bytes
    consumed: int


@dataclass(frozen=True)
class _Huffman:
    count: tuple[int, ...]
    symbol: tuple[int, ...]


def _construct(lengths: list[int] | tuple[int, ...]) -> tuple[_Huffman, int]:
    """Build a canonical code; the second value is 0 when complete,
    positive when incomplete and negative when over-subscribed."""
    n = len(lengths)
    count = [0] * (MAX_BITS + 1)
    for length in lengths:
        count[length] += 1
    if count[0] == n:
        return _Huffman(tuple(count), ()), 0

    left = 1
    for length in range(1, MAX_BITS + 1):
        left <<= 1
        left -= count[length]
        if left < 0:
            return _Huffman(tuple(count), ()), left

    offsets = [0] * (MAX_BITS + 1)
    for length in range(1, MAX_BITS):
        offsets[length + 1] = offsets[length] + count[length]

    symbols = [0] * n
    for symbol, length in enumerate(lengths):
        if length:
            symbols[offsets[length]] = symbol
            offsets[length] += 1
    return _Huffman(tuple(count), tuple(symbols)), left


@lru_cache(maxsize=None)
def _fixed_tables() -> tuple[_Huffman, _Huffman]:
    lengths = [8] * 144 + [9] * 112 + [7] * 24 + [8] * 8
    lencode, _ = _construct(lengths)
    distcode, _ = _construct([5] * MAX_DCODES)
    return lencode, distcode


class _Decoder:
    def __init__(self, source: bytes, dictionary: bytes, limit: int | None) -> None:
        self.data = source
        self.pos = 0
        self.bitbuf = 0
        self.bitcnt = 0
        self.out = bytearray(dictionary)
        self.limit = limit

    def bits(self, need: int) -> int:
        val = self.bitbuf
        while self.bitcnt < need:
            if self.pos == len(self.data):
                raise InflateError(2)
            val |= self.data[self.pos] << self.bitcnt
            self.pos += 1
            self.bitcnt += 8
        self.bitbuf = val >> need
        self.bitcnt -= need
        return val & ((1 << need) - 1)

    def decode(self, h: _Huffman) -> int:
        code = first = index = 0
        for length in range(1, MAX_BITS + 1):
            code |= self.bits(1)
            count = h.count[length]
            if code - count < first:
                return h.symbol[index + (code - first)]
            index += count
            first += count
            first <<= 1
            code <<= 1
        raise InflateError(-10)

    def _room(self, amount: int) -> None:
        if self.limit is not None and len(self.out) + amount > self.limit:
            raise InflateError(1)

    def stored(self) -> None:
        self.bitbuf = 0
        self.bitcnt = 0
        if self.pos + 4 > len(self.data):
            raise InflateError(2)
        header = self.data[self.pos:self.pos + 4]
        self.pos += 4
        length = header[0] | (header[1] << 8)
        if header[2] != (~length & 0xFF) or header[3] != ((~length >> 8) & 0xFF):
            raise InflateError(-2)
        if self.pos + length > len(self.data):
            raise InflateError(2)
        self._room(length)
        self.out += self.data[self.pos:self.pos + length]
        self.pos += length

    def codes(self, lencode: _Huffman, distcode: _Huffman) -> None:
        while True:
            symbol = self.decode(lencode)
            if symbol < 256:
                self._room(1)
                self.out.append(symbol)
            elif symbol == 256:
                return
            else:
                symbol -= 257
                if symbol >= 29:
                    raise InflateError(-10)
                length = _LENGTH_BASE[symbol] + self.bits(_LENGTH_EXTRA[symbol])
                symbol = self.decode(distcode)
                dist = _DIST_BASE[symbol] + self.bits(_DIST_EXTRA[symbol])
                if dist > len(self.out):
                    raise InflateError(-11)
                self._room(length)
                out = self.out
                for _ in range(length):
                    out.append(out[-dist])

    def fixed(self) -> None:
        self.codes(*_fixed_tables())

    def dynamic(self) -> None:
        nlen = self.bits(5) + 257
        ndist = self.bits(5) + 1
        ncode = self.bits(4) + 4
        if nlen > MAX_LCODES or ndist > MAX_DCODES:
            raise InflateError(-3)

        cl_lengths = [0] * 19
        for position in _CODE_LENGTH_ORDER[:ncode]:
            cl_lengths[position] = self.bits(3)
        clcode, err = _construct(cl_lengths)
        if err != 0:
            raise InflateError(-4)

        total = nlen + ndist
        lengths: list[int] = []
        while len(lengths) < total:
            symbol = self.decode(clcode)
            if symbol < 16:
                lengths.append(symbol)
                continue
            value = 0
            if symbol == 16:
                if not lengths:
                    raise InflateError(-5)
                value = lengths[-1]
                repeat = 3 + self.bits(2)
            elif symbol == 17:
                repeat = 3 + self.bits(3)
            else:
                repeat = 11 + self.bits(7)
            if len(lengths) + repeat > total:
                raise InflateError(-6)
            lengths.extend([value] * repeat)

        if lengths[256] == 0:
            raise InflateError(-9)

        lencode, err = _construct(lengths[:nlen])
        if err and (err < 0 or nlen != lencode.count[0] + lencode.count[1]):
            raise InflateError(-7)
        distcode, err = _construct(lengths[nlen:])
        if err and (err < 0 or ndist != distcode.count[0] + distcode.count[1]):
            raise InflateError(-8)

        self.codes(lencode, distcode)

    def run(self) -> None:
        while True:
            last = self.bits(1)
            block_type = self.bits(2)
            if block_type == 0:
                self.stored()
            elif block_type == 1:
                self.fixed()
            elif block_type == 2:
                self.dynamic()
            else:
                raise InflateError(-1)
            if last:
                return


def inflate(source, dictionary=b"", max_output=None) -> InflateResult:
    """Decompress a raw deflate stream.

    ``dictionary`` is preset history that back-references may reach into;
    it is not part of the returned data. ``max_output`` limits the number
    of decompressed bytes; ``None`` means no limit.
    """
    if max_output is not None and max_output < 0:
        raise ValueError("max_output must not be negative")
    source = bytes(source)
    dictionary = bytes(dictionary)
    limit = None if max_output is None else len(dictionary) + max_output
    decoder = _Decoder(source, dictionary, limit)
    decoder.run()
    return InflateResult(bytes(decoder.out[len(dictionary):]), decoder.pos)