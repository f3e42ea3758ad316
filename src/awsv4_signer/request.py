from typing import Dict, Mapping, Optional, Union

import msgspec
import msgspec.structs

from .canonical import canonical_headers
from .errors import InvalidInputError

AMZ_DATE_HEADER: str = "x-amz-date"
AUTHORIZATION_HEADER: str = "Authorization"

RESERVED_HEADERS = frozenset({AMZ_DATE_HEADER, AUTHORIZATION_HEADER.lower()})


def check_headers(headers: Mapping[str, str]) -> None:
    for name, _ in canonical_headers(headers):
        if name in RESERVED_HEADERS:
            raise InvalidInputError(f"Header {name!r} is set by the signer")


class SigningRequest(msgspec.Struct, frozen=True):
    """
    Everything needed to sign one request.

    Validated on construction; instances are immutable. ``headers`` is never
    modified by the signer, which works on its own copy.

    :param access_key: AWS access key id.
    :type access_key: str
    :param secret_key: AWS secret access key. May be empty, but not None.
    :type secret_key: str
    :param path: Request path, starting with ``/``. Used verbatim.
    :type path: str
    :param region: AWS region (e.g., "us-east-1").
    :type region: str
    :param service: AWS service name (e.g., "ProductAdvertisingAPI").
    :type service: str
    :param method: HTTP method, any case.
    :type method: str
    :param headers: Headers to sign. Must not contain ``x-amz-date`` or
        ``Authorization``.
    :type headers: Dict[str, str]
    :param payload: Request body. None is signed as an empty body.
    :type payload: Optional[Union[str, bytes]]
    """

    access_key: str
    secret_key: str
    path: str
    region: str
    service: str
    method: str
    headers: Dict[str, str] = {}
    payload: Optional[Union[str, bytes]] = None

    def __post_init__(self) -> None:
        for field in ("access_key", "region", "service", "method"):
            value = getattr(self, field)
            if not isinstance(value, str) or not value:
                raise InvalidInputError(f"{field} is required")

        if not isinstance(self.secret_key, str):
            raise InvalidInputError("secret_key is required")

        if not isinstance(self.path, str) or not self.path.startswith("/"):
            raise InvalidInputError(f"Path must start with '/': {self.path!r}")

        if self.payload is not None and not isinstance(
            self.payload, (str, bytes, bytearray)
        ):
            raise InvalidInputError(
                f"Payload must be str or bytes, not {type(self.payload).__name__}"
            )

        if not isinstance(self.headers, Mapping):
            raise InvalidInputError("headers must be a mapping")

        msgspec.structs.force_setattr(self, "headers", dict(self.headers))
        check_headers(self.headers)

    def __repr__(self) -> str:
        return (
            f"SigningRequest(access_key={self.access_key!r}, secret_key='***', "
            f"path={self.path!r}, region={self.region!r}, "
            f"service={self.service!r}, method={self.method!r}, "
            f"headers={self.headers!r})"
        )
