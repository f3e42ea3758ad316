import datetime
import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import msgspec

from .canonical import build_canonical_request, canonical_headers, signed_headers
from .errors import InvalidInputError
from .hashing import hex_encode, hmac_sha256, sha256_hex
from .request import (
    AMZ_DATE_HEADER,
    AUTHORIZATION_HEADER,
    SigningRequest,
    check_headers,
)

logger = logging.getLogger("awsv4_signer")
logger.addHandler(logging.NullHandler())

ALGORITHM: str = "AWS4-HMAC-SHA256"
AWS4_REQUEST: str = "aws4_request"
AMZ_DATE_FORMAT: str = "%Y%m%dT%H%M%SZ"
DATE_STAMP_FORMAT: str = "%Y%m%d"

json_encoder = msgspec.json.Encoder()


def credential_scope(date_stamp: str, region: str, service: str) -> str:
    return "/".join([date_stamp, region, service, AWS4_REQUEST])


def string_to_sign(
    canonical_request: str,
    amz_date: str,
    date_stamp: str,
    region: str,
    service: str,
) -> str:
    return "\n".join(
        [
            ALGORITHM,
            amz_date,
            credential_scope(date_stamp, region, service),
            sha256_hex(canonical_request),
        ]
    )


def get_signature_key(
    secret_key: str, date_stamp: str, region: str, service: str
) -> bytes:
    # Not cached: the derived key must not outlive the signing call.
    k_date = hmac_sha256(f"AWS4{secret_key}".encode("utf-8"), date_stamp)
    k_region = hmac_sha256(k_date, region)
    k_service = hmac_sha256(k_region, service)
    k_signing = hmac_sha256(k_service, AWS4_REQUEST)
    return k_signing


def calculate_signature(signing_key: bytes, string_to_sign: str) -> str:
    return hex_encode(hmac_sha256(signing_key, string_to_sign))


def authorization_header(
    access_key: str,
    date_stamp: str,
    region: str,
    service: str,
    signed_headers: str,
    signature: str,
) -> str:
    return (
        f"{ALGORITHM} Credential={access_key}/"
        f"{credential_scope(date_stamp, region, service)}, "
        f"SignedHeaders={signed_headers}, Signature={signature}"
    )


def _as_utc(now: datetime.datetime) -> datetime.datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=datetime.timezone.utc)
    return now.astimezone(datetime.timezone.utc)


def sign(
    request: SigningRequest, now: Optional[datetime.datetime] = None
) -> Dict[str, str]:
    """
    Sign a request and return its headers with ``x-amz-date`` and
    ``Authorization`` added.

    The clock is read once; the timestamp and the credential scope date both
    come from that reading. ``request.headers`` is left untouched.

    :param request: The request to sign.
    :type request: SigningRequest
    :param now: Signing instant. Naive values are taken as UTC. Defaults to
        the current time.
    :type now: Optional[datetime.datetime]
    :return: A new header mapping.
    :rtype: Dict[str, str]
    :raises InvalidInputError: If the headers cannot be canonicalized.
    :raises HashingError: If a hash primitive fails.
    """
    # https://docs.aws.amazon.com/IAM/latest/UserGuide/reference_sigv-create-signed-request.html
    dt_now = (
        _as_utc(now)
        if now is not None
        else datetime.datetime.now(datetime.timezone.utc)
    )
    amz_date = dt_now.strftime(AMZ_DATE_FORMAT)
    date_stamp = dt_now.strftime(DATE_STAMP_FORMAT)

    headers = dict(request.headers)
    check_headers(headers)
    headers[AMZ_DATE_HEADER] = amz_date

    pairs = canonical_headers(headers)
    header_list = signed_headers(pairs)

    logger.debug(
        f"Signing {request.method.upper()} {request.path} for "
        f"{request.service}/{request.region} at {amz_date} "
        f"[SignedHeaders={header_list}]"
    )

    canonical = build_canonical_request(
        request.method, request.path, pairs, request.payload
    )
    to_sign = string_to_sign(
        canonical, amz_date, date_stamp, request.region, request.service
    )

    signature = calculate_signature(
        get_signature_key(
            request.secret_key, date_stamp, request.region, request.service
        ),
        to_sign,
    )

    headers[AUTHORIZATION_HEADER] = authorization_header(
        request.access_key,
        date_stamp,
        request.region,
        request.service,
        header_list,
        signature,
    )

    return headers


def sign_json(
    access_key: str,
    secret_key: str,
    path: str,
    region: str,
    service: str,
    payload: Any,
    headers: Optional[Mapping[str, str]] = None,
    method: str = "POST",
    encoder: Optional[Callable[[Any], bytes]] = None,
    now: Optional[datetime.datetime] = None,
) -> Tuple[Dict[str, str], bytes]:
    """
    Encode ``payload`` as JSON and sign the encoded bytes.

    Returns the signed headers together with the exact body that was hashed,
    which is what must be sent.

    :param payload: JSON-serializable request body.
    :type payload: Any
    :param encoder: Replaces the default msgspec JSON encoder.
    :type encoder: Optional[Callable[[Any], bytes]]
    :return: Signed headers and encoded payload.
    :rtype: Tuple[Dict[str, str], bytes]
    :raises InvalidInputError: If the payload cannot be encoded.
    """
    encode = encoder or json_encoder.encode
    try:
        encoded_payload = encode(payload)
    except (TypeError, ValueError, msgspec.EncodeError) as err:
        raise InvalidInputError(f"Payload is not JSON serializable: {err}") from err

    request = SigningRequest(
        access_key=access_key,
        secret_key=secret_key,
        path=path,
        region=region,
        service=service,
        method=method,
        headers=dict(headers or {}),
        payload=encoded_payload,
    )
    return sign(request, now=now), encoded_payload
