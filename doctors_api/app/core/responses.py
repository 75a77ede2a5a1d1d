"""
Response envelopes.

Every body returned by the API is wrapped in an envelope carrying a
``status`` field.  Successful responses put their payload under
``data``; error responses carry a human readable ``message`` instead.
"""

from typing import Any, Dict

from fastapi.responses import JSONResponse

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


def success_envelope(data: Dict[str, Any], **extra: Any) -> Dict[str, Any]:
    """Build a success body.  ``extra`` keys are placed before ``data``."""
    return {"status": STATUS_SUCCESS, **extra, "data": data}


def error_response(message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse(
        content={"status": STATUS_ERROR, "message": message},
        status_code=status_code,
    )
