"""Decorators for SP-API tool error handling."""

import functools
import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict

from ..exceptions import ClientRequestError, SPAPIError, SPAPIRateLimitError

logger = logging.getLogger(__name__)


def _metadata(request_id: str) -> Dict[str, str]:
    return {
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "request_id": request_id,
    }


def error_response(error_code: str, message: str, request_id: str, **extra: Any) -> str:
    """Serialize a failed tool result."""
    response: Dict[str, Any] = {
        "success": False,
        "error": error_code,
        "message": message,
        "metadata": _metadata(request_id),
    }
    response.update({key: value for key, value in extra.items() if value})
    return json.dumps(response, indent=2, default=str)


def handle_sp_api_errors(func: Callable[..., str]) -> Callable[..., str]:
    """Decorator to turn exceptions raised by a tool into structured results.

    Tracebacks go to the diagnostic log only; the caller receives a JSON
    object with ``success: false``, an error code and a readable message.

    Args:
        func: The tool function to decorate

    Returns:
        Decorated function that never raises
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        request_id = str(uuid.uuid4())
        start_time = datetime.now()

        try:
            logger.info(f"Tool {request_id}: Starting {func.__name__}")
            result = func(*args, **kwargs)

            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.info(f"Tool {request_id}: Completed {func.__name__} in {duration_ms}ms")
            return result

        except SPAPIRateLimitError as e:
            logger.warning(f"Tool {request_id}: {func.__name__} rate limited: {e}")
            return error_response(
                e.error_code, e.message, request_id, retry_after=e.retry_after, details=e.details
            )

        except ClientRequestError as e:
            logger.error(f"Tool {request_id}: {func.__name__} failed with HTTP {e.status_code}: {e}")
            return error_response(
                e.error_code,
                e.message,
                request_id,
                status_code=e.status_code,
                api_error_code=e.api_error_code,
                details=e.details,
            )

        except SPAPIError as e:
            logger.exception(f"Tool {request_id}: {func.__name__} failed: {e}")
            return error_response(e.error_code, e.message, request_id, details=e.details)

        except ValueError as e:
            logger.exception(f"Tool {request_id}: Validation error in {func.__name__}: {e}")
            return error_response("invalid_input", str(e), request_id)

        except Exception as e:
            logger.exception(f"Tool {request_id}: Unexpected error in {func.__name__}: {e}")
            return error_response("unexpected_error", f"An unexpected error occurred: {e!s}", request_id)

    return wrapper
