"""Transport hardening applied outside the development environment."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.responses import Response

from micfx.config import Settings

HSTS_HEADER = "Strict-Transport-Security"


def apply_hsts(request: Request, response: Response, settings: Settings) -> Response:
    """Add the HSTS header to ``response`` when ``request`` arrived over HTTPS."""

    if request.url.scheme == "https":
        response.headers.setdefault(HSTS_HEADER, f"max-age={settings.hsts_max_age}")
    return response


def add_security_middleware(app: FastAPI, settings: Settings) -> None:
    """Add HSTS and, when enabled, HTTP to HTTPS redirection."""

    @app.middleware("http")
    async def add_hsts_header(request: Request, call_next):
        response = await call_next(request)
        return apply_hsts(request, response, settings)

    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)


__all__ = ["HSTS_HEADER", "add_security_middleware", "apply_hsts"]
