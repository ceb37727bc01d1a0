"""Site-level endpoints: root redirect and the generic error page."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from micfx.interfaces.web import render

router = APIRouter(tags=["home"])


@router.get("/", include_in_schema=False)
def root(request: Request) -> RedirectResponse:
    return RedirectResponse(
        url=request.app.url_path_for("hello_index"),
        status_code=status.HTTP_302_FOUND,
    )


@router.get("/Error", response_class=HTMLResponse, include_in_schema=False)
def error_page(request: Request):
    """Render the generic error view shown for unhandled failures."""

    return render(
        request,
        "shared/error.html",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


__all__ = ["router"]
