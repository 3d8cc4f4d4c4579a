"""Parsing of SP-API error envelopes.

SP-API answers errors in a few shapes. Each extractor below recognizes one
shape; they are tried in order and the first match wins.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple


@dataclass
class ErrorEnvelope:
    """A provider error reduced to what callers need."""

    message: str
    code: Optional[str] = None
    details: List[Any] = field(default_factory=list)
    shape: str = "status"


def _from_errors_list(payload: Any) -> Optional[ErrorEnvelope]:
    # {"errors": [{"code": "...", "message": "...", "details": "..."}]}
    if not isinstance(payload, dict):
        return None
    errors = payload.get("errors")
    if not isinstance(errors, list) or not errors or not isinstance(errors[0], dict):
        return None
    message = errors[0].get("message")
    if not message:
        return None
    return ErrorEnvelope(message=str(message), code=errors[0].get("code"), details=errors, shape="errors")


def _from_message(payload: Any) -> Optional[ErrorEnvelope]:
    # {"message": "...", "code": "..."} as sent by the API gateway
    if not isinstance(payload, dict) or not payload.get("message"):
        return None
    code = payload.get("code") or payload.get("__type")
    return ErrorEnvelope(message=str(payload["message"]), code=code, shape="message")


ENVELOPE_PARSERS: Tuple[Callable[[Any], Optional[ErrorEnvelope]], ...] = (
    _from_errors_list,
    _from_message,
)


def parse_error_envelope(payload: Any, status_code: int, reason: str = "") -> ErrorEnvelope:
    """Extract a human-readable message from an error response body.

    Args:
        payload: Decoded JSON body, or any other value when decoding failed
        status_code: HTTP status of the response
        reason: HTTP reason phrase, used for the fallback message

    Returns:
        ErrorEnvelope from the first matching shape, or a status-text fallback
    """
    for parser in ENVELOPE_PARSERS:
        envelope = parser(payload)
        if envelope is not None:
            return envelope
    message = f"HTTP {status_code}: {reason}" if reason else f"HTTP {status_code}"
    return ErrorEnvelope(message=message)
