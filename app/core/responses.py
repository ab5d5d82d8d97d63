from typing import Any, Dict, List, Optional

from fastapi.responses import JSONResponse


def envelope(
    message: str,
    *,
    success: bool = True,
    data: Any = None,
    meta: Optional[Dict[str, Any]] = None,
    errors: Optional[Dict[str, List[str]]] = None,
    error: Optional[str] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": success}
    if data is not None:
        body["data"] = data
    body["message"] = message
    if errors is not None:
        body["errors"] = errors
    if meta is not None:
        body["meta"] = meta
    if error is not None:
        body["error"] = error
    return body


def success_response(message: str, data: Any = None, *, status_code: int = 200, meta=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope(message, data=data, meta=meta),
    )


def error_response(message: str, *, status_code: int, errors=None, error=None, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope(message, success=False, errors=errors, error=error),
        headers=headers,
    )


__all__ = ["envelope", "error_response", "success_response"]
