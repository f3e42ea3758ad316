import hashlib
import os

import pytest

from awsv4_signer import (
    EMPTY_SHA256,
    HashingError,
    InvalidInputError,
    hex_decode,
    hex_encode,
    hmac_sha256,
    sha256_hex,
)


@pytest.mark.parametrize(
    "data", [b"", b"\x00", b"\xff\x10\xab", bytes(range(256)), os.urandom(64)]
)
def test_hex_round_trip(data: bytes):
    encoded = hex_encode(data)

    assert hex_decode(encoded) == data
    assert len(encoded) == 2 * len(data)
    assert encoded == encoded.lower()


def test_hex_decode_accepts_uppercase():
    assert hex_decode("ABCDEF") == b"\xab\xcd\xef"


@pytest.mark.parametrize("text", ["abc", "zz", None])
def test_hex_decode_rejects_invalid(text):
    with pytest.raises(InvalidInputError, match="Not a hex string"):
        hex_decode(text)


def test_sha256_of_empty_string():
    assert sha256_hex("") == EMPTY_SHA256
    assert sha256_hex(b"") == EMPTY_SHA256
    assert EMPTY_SHA256 == hashlib.sha256(b"").hexdigest()


def test_sha256_hex_encodes_str_as_utf8():
    assert sha256_hex("café") == hashlib.sha256("café".encode("utf-8")).hexdigest()


def test_hmac_sha256_known_answer():
    # RFC 4231 test case 2
    digest = hmac_sha256(b"Jefe", "what do ya want for nothing?")

    assert (
        hex_encode(digest)
        == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
    )


def test_hmac_sha256_rejects_bad_key():
    with pytest.raises(HashingError, match="HMAC-SHA256 failed: TypeError"):
        hmac_sha256(None, "message")  # type: ignore


@pytest.mark.parametrize("data", [3, "abc", None])
def test_hex_encode_rejects_non_bytes(data):
    with pytest.raises(InvalidInputError, match="Expected bytes"):
        hex_encode(data)  # type: ignore


def test_hex_encode_accepts_bytearray():
    assert hex_encode(bytearray(b"\x01\xfe")) == "01fe"


def test_hmac_sha256_rejects_non_str_message():
    with pytest.raises(InvalidInputError, match="Expected str message"):
        hmac_sha256(b"key", b"message")  # type: ignore
