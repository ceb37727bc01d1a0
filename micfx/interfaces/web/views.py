"""Jinja2 template environment shared by the view-returning routes."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_DIR = Path(__file__).resolve().parents[2] / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> Response:
    """Render the template ``name`` inside the site layout."""

    payload: dict[str, Any] = {"settings": request.app.state.settings}
    if context:
        payload.update(context)
    return templates.TemplateResponse(
        request, name, payload, status_code=status_code
    )
