import datetime
from typing import Dict, Optional, Union

from .request import SigningRequest
from .signer import sign


class AWSV4Auth:
    """
    Signer bound to a single request.

    Arguments are validated up front; each :meth:`get_headers` call signs
    the same immutable request at its own instant.

    :param access_key: AWS access key id.
    :type access_key: str
    :param secret_key: AWS secret access key.
    :type secret_key: str
    :param path: Request path, starting with ``/``.
    :type path: str
    :param region: AWS region (e.g., "us-east-1").
    :type region: str
    :param service: AWS service name.
    :type service: str
    :param method: HTTP method.
    :type method: str
    :param headers: Headers to sign.
    :type headers: Optional[Dict[str, str]]
    :param payload: Request body.
    :type payload: Optional[Union[str, bytes]]
    """

    def __init__(
        self,
        access_key: str,
        secret_key: str,
        path: str,
        region: str,
        service: str,
        method: str,
        headers: Optional[Dict[str, str]] = None,
        payload: Optional[Union[str, bytes]] = None,
    ):
        self.request = SigningRequest(
            access_key=access_key,
            secret_key=secret_key,
            path=path,
            region=region,
            service=service,
            method=method,
            headers=dict(headers or {}),
            payload=payload,
        )

    def get_headers(self, now: Optional[datetime.datetime] = None) -> Dict[str, str]:
        return sign(self.request, now=now)
