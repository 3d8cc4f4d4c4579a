"""Utility modules for SP-API operations."""

from .decorators import error_response, handle_sp_api_errors
from .errors import ErrorEnvelope, parse_error_envelope

__all__ = [
    "ErrorEnvelope",
    "error_response",
    "handle_sp_api_errors",
    "parse_error_envelope",
]
