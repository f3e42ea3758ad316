"""
AWS Signature Version 4 header signing without an SDK.
"""

from .auth import AWSV4Auth
from .canonical import canonical_headers, canonical_request, signed_headers
from .errors import HashingError, InvalidInputError, SigningError
from .hashing import EMPTY_SHA256, hex_decode, hex_encode, hmac_sha256, sha256_hex
from .request import SigningRequest
from .signer import (
    ALGORITHM,
    AWS4_REQUEST,
    authorization_header,
    calculate_signature,
    get_signature_key,
    sign,
    sign_json,
    string_to_sign,
)

__version__ = "0.1.0"
__all__ = [
    "ALGORITHM",
    "AWS4_REQUEST",
    "AWSV4Auth",
    "EMPTY_SHA256",
    "HashingError",
    "InvalidInputError",
    "SigningError",
    "SigningRequest",
    "authorization_header",
    "calculate_signature",
    "canonical_headers",
    "canonical_request",
    "get_signature_key",
    "hex_decode",
    "hex_encode",
    "hmac_sha256",
    "sha256_hex",
    "sign",
    "sign_json",
    "signed_headers",
    "string_to_sign",
]
