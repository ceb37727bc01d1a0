"""Error handling for the production request pipeline."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from starlette.responses import Response

from micfx.interfaces.api.middleware import apply_hsts
from micfx.interfaces.web import render

logger = logging.getLogger(__name__)


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Log ``exc`` and render the generic error view.

    Starlette sends this response from its outermost error middleware, so the
    HSTS header is applied here rather than by the HTTP middleware.
    """

    logger.exception(
        "Unhandled error while processing %s %s", request.method, request.url.path
    )
    response = render(
        request,
        "shared/error.html",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    return apply_hsts(request, response, request.app.state.settings)


def register_exception_handlers(app: FastAPI) -> None:
    """Render the error view instead of a traceback for unhandled errors."""

    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers", "unhandled_exception_handler"]
