"""AWS Signature Version 4 for SP-API requests.

Only ``host``, ``x-amz-date`` and (when present) ``x-amz-security-token`` are
signed. The access token, content type and user agent travel unsigned.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote

from botocore.auth import SigV4Auth  # type: ignore[import-untyped]
from botocore.awsrequest import AWSRequest  # type: ignore[import-untyped]
from botocore.credentials import Credentials  # type: ignore[import-untyped]

from ..constants import REGION_ENDPOINT_CODES, SIGNING_SERVICE
from ..exceptions import SigningError
from .credentials import TemporaryAwsCredentials

logger = logging.getLogger(__name__)

QueryValue = Union[str, int, float, bool, Sequence[Union[str, int, float, bool]], None]
QueryParams = Mapping[str, QueryValue]

SIGV4_TIMESTAMP = "%Y%m%dT%H%M%SZ"


def endpoint_host(region: str) -> str:
    """Map an AWS region to the SP-API host used for signing and dispatch."""
    code = REGION_ENDPOINT_CODES.get(region, region)
    return f"sellingpartnerapi-{code}.amazon.com"


def _encode(value: str) -> str:
    return quote(value, safe="-_.~")


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def normalize_query(query: Optional[QueryParams]) -> List[Tuple[str, str]]:
    """Flatten query params to (key, value) strings.

    List values are comma-joined, the form SP-API expects for
    parameters such as MarketplaceIds. None values are dropped.
    """
    pairs = []
    for key, value in (query or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            value = ",".join(_stringify(v) for v in value)
        pairs.append((str(key), _stringify(value)))
    return pairs


def canonical_query_string(query: Optional[QueryParams]) -> str:
    encoded = sorted((_encode(k), _encode(v)) for k, v in normalize_query(query))
    return "&".join(f"{k}={v}" for k, v in encoded)


def encode_path(path: str) -> str:
    """Percent-encode a raw request path for the wire.

    The signature covers this path encoded a second time, as SigV4 requires
    for every service other than S3.
    """
    return quote(path or "/", safe="/-_.~")


@dataclass(frozen=True)
class SignedRequest:
    """Everything that went into one signature, plus the resulting headers."""

    method: str
    url: str
    canonical_uri: str
    canonical_query: str
    canonical_headers: str
    signed_headers: str
    payload_hash: str
    canonical_request: str
    string_to_sign: str
    headers: Dict[str, str]


class RequestSigner:
    """Produces SigV4 headers for requests to one SP-API region."""

    def __init__(self, region: str, service: str = SIGNING_SERVICE) -> None:
        self.region = region
        self.service = service
        self.host = endpoint_host(region)

    def url_for(self, path: str, query: Optional[QueryParams] = None) -> str:
        """The exact URL that is signed and dispatched."""
        url = f"https://{self.host}{encode_path(path)}"
        query_string = canonical_query_string(query)
        return f"{url}?{query_string}" if query_string else url

    def sign(
        self,
        method: str,
        path: str,
        query: Optional[QueryParams],
        payload: Union[str, bytes, None],
        credentials: TemporaryAwsCredentials,
        access_token: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Dict[str, str]:
        """Return the ``x-amz-date``, ``Authorization`` and optional
        ``x-amz-security-token`` headers for a request.

        Args:
            method: HTTP method
            path: Request path, e.g. ``/orders/v0/orders``
            query: Query parameters; order does not matter
            payload: Serialized request body ("" for none)
            credentials: AWS credentials to sign with
            access_token: LWA token sent with the request (not part of the signature)
            now: Signing time, defaults to the current UTC time

        Raises:
            SigningError: If the credentials are unusable
        """
        return self.build(method, path, query, payload, credentials, now).headers

    def build(
        self,
        method: str,
        path: str,
        query: Optional[QueryParams],
        payload: Union[str, bytes, None],
        credentials: TemporaryAwsCredentials,
        now: Optional[datetime] = None,
    ) -> SignedRequest:
        if credentials is None or not credentials.access_key_id or not credentials.secret_access_key:
            raise SigningError("Cannot sign request: AWS access key id and secret access key are required")
        if not method:
            raise SigningError("Cannot sign request: HTTP method is required")

        now = now or datetime.now(timezone.utc)
        if now.tzinfo is not None:
            now = now.astimezone(timezone.utc)

        method = method.upper()
        body = payload.encode("utf-8") if isinstance(payload, str) else payload
        url = self.url_for(path, query)

        auth = SigV4Auth(
            Credentials(
                credentials.access_key_id,
                credentials.secret_access_key,
                credentials.session_token,
            ),
            self.service,
            self.region,
        )
        # host is the only caller-supplied header, so nothing else gets signed
        request = AWSRequest(method=method, url=url, data=body or None, headers={"host": self.host})
        # SigV4Auth.add_auth steps, with the signing time taken from `now`
        request.context["timestamp"] = now.strftime(SIGV4_TIMESTAMP)
        auth._modify_request_before_signing(request)
        canonical_request = auth.canonical_request(request)
        string_to_sign = auth.string_to_sign(request, canonical_request)
        auth._inject_signature_to_request(request, auth.signature(string_to_sign, request))

        headers = {
            "x-amz-date": request.headers["X-Amz-Date"],
            "Authorization": request.headers["Authorization"],
        }
        if credentials.session_token:
            headers["x-amz-security-token"] = request.headers["X-Amz-Security-Token"]

        # method, uri, query, header lines..., "", signed headers, payload hash
        lines = canonical_request.split("\n")
        signed = SignedRequest(
            method=method,
            url=url,
            canonical_uri=lines[1],
            canonical_query=lines[2],
            canonical_headers="".join(f"{line}\n" for line in lines[3:-3]),
            signed_headers=lines[-2],
            payload_hash=lines[-1],
            canonical_request=canonical_request,
            string_to_sign=string_to_sign,
            headers=headers,
        )
        logger.debug(f"Signed {method} {signed.canonical_uri} (signed headers: {signed.signed_headers})")
        return signed
