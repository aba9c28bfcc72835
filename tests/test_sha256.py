import hashlib
import hmac

import pytest

from vitapkg.sha256 import Sha256, hmac_sha256, hmac_sha256_vector, sha256_vector


def test_abc_known_vector():
    assert (
        Sha256(b"abc").hexdigest()
        == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


@pytest.mark.parametrize("size", [0, 1, 55, 56, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_hashlib(size):
    data = bytes(i % 251 for i in range(size))
    assert Sha256(data).digest() == hashlib.sha256(data).digest()


def test_incremental_chunks_match_single_update():
    data = bytes(range(256)) * 3
    ctx = Sha256()
    for start in range(0, len(data), 37):
        ctx.update(data[start:start + 37])
    assert ctx.digest() == Sha256(data).digest()


def test_digest_does_not_change_state():
    ctx = Sha256(b"hello")
    first = ctx.digest()
    assert ctx.digest() == first
    ctx.update(b" world")
    assert ctx.digest() == hashlib.sha256(b"hello world").digest()


def test_empty_update_is_noop():
    ctx = Sha256(b"data")
    ctx.update(b"")
    assert ctx.hexdigest() == hashlib.sha256(b"data").hexdigest()


def test_sha256_vector_concatenates():
    parts = [b"ab", b"", b"c" * 70, b"d"]
    assert sha256_vector(parts) == hashlib.sha256(b"".join(parts)).digest()


@pytest.mark.parametrize("key_len", [0, 16, 64, 65, 100])
def test_hmac_matches_standard(key_len):
    key = bytes(range(key_len))
    data = b"message body" * 5
    expected = hmac.new(key, data, hashlib.sha256).digest()
    assert hmac_sha256(key, data) == expected


def test_hmac_vector_equals_joined():
    key = b"k" * 20
    parts = [b"one", b"two", b"three"]
    assert hmac_sha256_vector(key, parts) == hmac_sha256(key, b"".join(parts))


def test_hmac_too_many_parts():
    with pytest.raises(ValueError):
        hmac_sha256_vector(b"k", [b"a"] * 6)


def test_hmac_five_parts_allowed():
    parts = [b"x"] * 5
    assert len(hmac_sha256_vector(b"k", parts)) == 32
    assert hmac_sha256_vector(b"k", parts) == hmac.new(b"k", b"xxxxx", hashlib.sha256).digest()