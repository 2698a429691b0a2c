from datetime import datetime, timezone
from typing import Any, Optional
from fastapi.responses import JSONResponse


def success_response(
    data: Optional[Any] = None,
    message: str = "Success",
    code: int = 200,
) -> JSONResponse:
    """Standard success JSON response."""
    content = {"success": True, "message": message}
    if data is not None:
        content["data"] = data
    return JSONResponse(status_code=code, content=content)


def error_response(
    message: str,
    code: int = 400,
    error_code: Optional[str] = None,
    data: Optional[Any] = None,
) -> JSONResponse:
    """Standard error JSON response. `error_code` is a machine-readable tag."""
    error = {"code": code, "message": message}
    if error_code:
        error["type"] = error_code
    content = {
        "success": False,
        "error": error,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if data is not None:
        content["data"] = data
    return JSONResponse(status_code=code, content=content)
