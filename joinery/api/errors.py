"""Exception handlers mapping domain errors to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from joinery.core.errors import (
    InvalidDimensionError, ProjectNotFoundError, UnknownWindowTypeError,
    WindowNotFoundError, XmlImportError,
)


def _error(status: int, message: str, error_type: str, details: object = None) -> JSONResponse:
    return JSONResponse(
        status_code=status,
        content={"error": message, "errorType": error_type, "details": details},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register domain exception handlers with the FastAPI app."""

    @app.exception_handler(InvalidDimensionError)
    async def invalid_dimension_handler(request: Request, exc: InvalidDimensionError) -> JSONResponse:
        return _error(422, str(exc), "invalid_dimension",
                      {"width": exc.width, "height": exc.height})

    @app.exception_handler(UnknownWindowTypeError)
    async def unknown_type_handler(request: Request, exc: UnknownWindowTypeError) -> JSONResponse:
        return _error(422, str(exc), "unknown_type", {"type": exc.type_id})

    @app.exception_handler(ProjectNotFoundError)
    async def project_not_found_handler(request: Request, exc: ProjectNotFoundError) -> JSONResponse:
        return _error(404, str(exc), "not_found", {"projectId": exc.project_id})

    @app.exception_handler(WindowNotFoundError)
    async def window_not_found_handler(request: Request, exc: WindowNotFoundError) -> JSONResponse:
        return _error(404, str(exc), "not_found", {"windowId": exc.window_id})

    @app.exception_handler(XmlImportError)
    async def xml_import_handler(request: Request, exc: XmlImportError) -> JSONResponse:
        return _error(400, str(exc), "xml_import")
