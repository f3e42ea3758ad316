import hashlib
import hmac
from typing import Union

from .errors import HashingError, InvalidInputError

EMPTY_SHA256: str = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def hex_encode(data: bytes) -> str:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidInputError(f"Expected bytes, not {type(data).__name__}")
    # bytes.hex() is always lowercase, two characters per byte
    return data.hex()


def hex_decode(text: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except (TypeError, ValueError) as err:
        raise InvalidInputError(f"Not a hex string: {text!r}") from err


def sha256_hex(data: Union[str, bytes]) -> str:
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        return hashlib.sha256(data).hexdigest()
    except (TypeError, ValueError) as err:
        raise HashingError(f"SHA-256 failed: {type(err).__name__}") from err


def hmac_sha256(key: bytes, msg: str) -> bytes:
    """
    Compute HMAC-SHA256 of ``msg`` (UTF-8 encoded) under ``key``.

    No hash object outlives the call. Error messages never carry the key.
    """
    if not isinstance(msg, str):
        raise InvalidInputError(f"Expected str message, not {type(msg).__name__}")
    try:
        return hmac.new(key, msg.encode("utf-8"), hashlib.sha256).digest()
    except (TypeError, ValueError) as err:
        raise HashingError(f"HMAC-SHA256 failed: {type(err).__name__}") from err
