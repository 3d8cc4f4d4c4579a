"""Credential management and request signing for SP-API."""

from .credentials import AccessToken, CredentialCache, TemporaryAwsCredentials
from .lwa import TokenRefresher
from .signer import RequestSigner, SignedRequest, canonical_query_string, endpoint_host
from .sts import RoleAssumer

__all__ = [
    "AccessToken",
    "CredentialCache",
    "RequestSigner",
    "RoleAssumer",
    "SignedRequest",
    "TemporaryAwsCredentials",
    "TokenRefresher",
    "canonical_query_string",
    "endpoint_host",
]
