"""Exception handlers for the form session API.

The survey engine and :class:`FormSessionRegistry` signal client mistakes
with ``ValueError``: a PATCH to a field the survey schema does not define,
a lookup of an expired or evicted form session, or a second POST with the
same session id.  The message text tells these apart.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# Matched case-insensitively against the ValueError message; first hit wins.
_VALUE_ERROR_PATTERNS: list[tuple[str, int]] = [
    ("already exists", 409),
    ("not found", 404),
    ("unknown form field", 400),
]

# Field names and session ids stay in the server log only.
_SAFE_MESSAGES: dict[int, str] = {
    404: "Form session not found",
    409: "Form session already exists",
    400: "Invalid form request",
}


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Answer a rejected form operation with 404, 409, or 400."""
    msg = str(exc)
    status = 400
    for pattern, code in _VALUE_ERROR_PATTERNS:
        if pattern in msg.lower():
            status = code
            break

    logger.warning("Form request rejected [%d] at %s: %s", status, request.url, msg)
    return JSONResponse(status_code=status, content={"detail": _SAFE_MESSAGES.get(status, "Invalid form request")})


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log anything else the form routes let through and answer 500."""
    logger.exception("Unhandled error in survey server at %s", request.url)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )
