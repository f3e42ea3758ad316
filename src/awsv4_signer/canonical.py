from typing import List, Mapping, Optional, Tuple, Union

from .errors import InvalidInputError
from .hashing import sha256_hex

HeaderPairs = List[Tuple[str, str]]


def canonical_headers(headers: Mapping[str, str]) -> HeaderPairs:
    """
    Normalize and sort a header mapping for signing.

    Names are trimmed and lower-cased, values are trimmed at both ends only
    (internal whitespace is kept as is).

    :param headers: Header name to value mapping.
    :type headers: Mapping[str, str]
    :return: ``(name, value)`` pairs sorted by normalized name.
    :rtype: List[Tuple[str, str]]
    :raises InvalidInputError: If two names collide after normalization.
    """
    normalized = {}
    for key, value in headers.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise InvalidInputError(f"Header names and values must be str: {key!r}")

        name = key.strip().lower()
        if name in normalized:
            raise InvalidInputError(f"Duplicate header: {name!r}")
        normalized[name] = value.strip()

    return sorted(normalized.items())


def signed_headers(pairs: HeaderPairs) -> str:
    return ";".join(name for name, _ in pairs)


def build_canonical_request(
    method: str,
    path: str,
    pairs: HeaderPairs,
    payload: Optional[Union[str, bytes]] = None,
) -> str:
    # https://docs.aws.amazon.com/IAM/latest/UserGuide/reference_sigv-create-signed-request.html
    canonical_querystring = ""
    header_block = "".join(f"{name}:{value}\n" for name, value in pairs)

    return "\n".join(
        [
            method.upper(),
            path,
            canonical_querystring,
            header_block,
            signed_headers(pairs),
            sha256_hex(payload if payload is not None else ""),
        ]
    )


def canonical_request(
    method: str,
    path: str,
    headers: Mapping[str, str],
    payload: Optional[Union[str, bytes]] = None,
) -> str:
    return build_canonical_request(method, path, canonical_headers(headers), payload)
