"""JSON error bodies shared by route handlers and middleware."""

from starlette.responses import JSONResponse


def error_response(
    error: str,
    status_code: int,
    message: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a `{success: false, error[, message]}` response."""
    body: dict[str, object] = {"success": False, "error": error}
    if message is not None:
        body["message"] = message
    return JSONResponse(body, status_code=status_code, headers=headers)
