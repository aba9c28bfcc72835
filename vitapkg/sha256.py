"""SHA-256 digests and the HMAC-SHA256 variant used for package keys."""

from __future__ import annotations

from collections.abc import Iterable

BLOCK_SIZE = 64
DIGEST_SIZE = 32
MAC_LEN = 32

_MASK = 0xFFFFFFFF

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1,
    0x923F82A4, 0xAB1C5ED5, 0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174, 0xE49B69C1, 0xEFBE4786,
    0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147,
    0x06CA6351, 0x14292967, 0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85, 0xA2BFE8A1, 0xA81A664B,
    0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A,
    0x5B9CCA4F, 0x682E6FF3, 0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _ror(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _process(state: list[int], block: bytes) -> None:
    w = [int.from_bytes(block[i:i + 4], "big") for i in range(0, BLOCK_SIZE, 4)]
    for r in range(16, 64):
        x15 = w[r - 15]
        x2 = w[r - 2]
        gamma0 = _ror(x15, 7) ^ _ror(x15, 18) ^ (x15 >> 3)
        gamma1 = _ror(x2, 17) ^ _ror(x2, 19) ^ (x2 >> 10)
        w.append((gamma1 + gamma0 + w[r - 7] + w[r - 16]) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k, wr in zip(_K, w):
        sigma1 = _ror(e, 6) ^ _ror(e, 11) ^ _ror(e, 25)
        ch = g ^ (e & (f ^ g))
        t1 = (h + sigma1 + ch + k + wr) & _MASK
        sigma0 = _ror(a, 2) ^ _ror(a, 13) ^ _ror(a, 22)
        maj = ((a | b) & c) | (a & b)
        t2 = (sigma0 + maj) & _MASK
        h, g, f, e = g, f, e, (d + t1) & _MASK
        d, c, b, a = c, b, a, (t1 + t2) & _MASK

    for i, value in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + value) & _MASK


class Sha256:
    """Incremental SHA-256 hash."""

    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data=b"") -> None:
        self._state = list(_INITIAL_STATE)
        self._pending = bytearray()
        self._count = 0
        if data:
            self.update(data)

    def update(self, data) -> None:
        """Feed more bytes into the hash."""
        data = bytes(data)
        if not data:
            return
        self._count += len(data)
        self._pending += data
        full = len(self._pending) - len(self._pending) % BLOCK_SIZE
        for offset in range(0, full, BLOCK_SIZE):
            _process(self._state, bytes(self._pending[offset:offset + BLOCK_SIZE]))
        del self._pending[:full]

    def digest(self) -> bytes:
        """Return the digest of the data fed so far without altering the hash."""
        state = list(self._state)
        last = self._count % BLOCK_SIZE
        pad = (BLOCK_SIZE - 8 - last) if last < BLOCK_SIZE - 8 else (2 * BLOCK_SIZE - 8 - last)
        tail = (
            bytes(self._pending)
            + b"\x80"
            + b"\x00" * (pad - 1)
            + ((self._count * 8) & 0xFFFFFFFFFFFFFFFF).to_bytes(8, "big")
        )
        for offset in range(0, len(tail), BLOCK_SIZE):
            _process(state, tail[offset:offset + BLOCK_SIZE])
        return b"".join(value.to_bytes(4, "big") for value in state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def sha256_vector(parts: Iterable) -> bytes:
    """Hash the concatenation of several byte strings."""
    ctx = Sha256()
    for part in parts:
        ctx.update(part)
    return ctx.digest()


def hmac_sha256_vector(key, parts) -> bytes:
    """HMAC-SHA256 over at most five byte strings.

    The outer pad is derived from the inner pad, which yields the usual
    0x5c outer pad for keys of up to 64 bytes.
    """
    parts = [bytes(part) for part in parts]
    if len(parts) > 5:
        raise ValueError("Too many parts for HMAC-SHA256")

    key = bytes(key)
    if len(key) > 64:
        key = sha256_vector([key])

    k_pad = bytes(b ^ 0x36 for b in key.ljust(64, b"\x00"))
    inner = sha256_vector([k_pad, *parts])
    k_pad = bytes(b ^ 0x6A for b in k_pad)
    return sha256_vector([k_pad, inner])


def hmac_sha256(key, data) -> bytes:
    """HMAC-SHA256 over a single byte string."""
    return hmac_sha256_vector(key, [data])