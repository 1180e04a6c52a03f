"""Global error-handling middleware.

Turns application exceptions into JSON ``{error, detail}`` bodies.  The
generation pipelines do not raise for bad input, so anything that reaches
this layer is a server-side fault.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from src.utils.exceptions import PromptComposerError, TemplateRenderError
from src.utils.logging import get_logger

logger = get_logger(__name__)

_STATUS_MAP: dict[type, int] = {
    TemplateRenderError: 500,
}


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Wrap every request and convert exceptions to JSON error responses.

    Unknown exceptions are logged and returned as HTTP 500.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)

        except PromptComposerError as exc:
            status_code = _STATUS_MAP.get(type(exc), 500)
            logger.warning(
                "handled_error",
                error_type=type(exc).__name__,
                status_code=status_code,
                detail=str(exc),
                path=request.url.path,
            )
            return JSONResponse(
                status_code=status_code,
                content={"error": type(exc).__name__, "detail": str(exc)},
            )

        except Exception as exc:
            logger.error(
                "unhandled_error",
                error_type=type(exc).__name__,
                detail=str(exc),
                path=request.url.path,
                exc_info=True,
            )
            return JSONResponse(
                status_code=500,
                content={
                    "error": "InternalServerError",
                    "detail": "An unexpected error occurred.  Please try again later.",
                },
            )
