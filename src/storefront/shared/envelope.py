"""The JSON envelope every endpoint answers with.

``{"success": bool, "data"?, "message"?, "error"?, "errors"?, "pagination"?}``
"""

from typing import Any

from fastapi.responses import JSONResponse

from storefront.shared.pagination import Page


def ok(
    data: Any = None,
    message: str | None = None,
    status_code: int = 200,
    pagination: dict | None = None,
) -> JSONResponse:
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if pagination is not None:
        body["pagination"] = pagination
    return JSONResponse(status_code=status_code, content=body)


def paged(page: Page, data: list) -> JSONResponse:
    return ok(data=data, pagination=page.pagination())


def failure(
    message: str,
    status_code: int,
    error: str | None = None,
    errors: dict | None = None,
) -> JSONResponse:
    body: dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    if errors:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=body)
