"""HelloWorld module: a rendered view and a static JSON payload.

Paths are matched case-sensitively. Only the spellings registered below are
served; ``/hello/test`` or ``/Hello/Test/1`` return 404.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from micfx.application.use_cases.create_greeting import create_greeting, greet
from micfx.domain.entities import Greeting
from micfx.interfaces.api.schemas import GreetingRead
from micfx.interfaces.web import render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Hello", tags=["hello"])


def _greeting_to_schema(greeting: Greeting) -> GreetingRead:
    return GreetingRead(message=greeting.message)


@router.get("", response_class=HTMLResponse, name="hello_index")
@router.get(
    "/Index",
    response_class=HTMLResponse,
    name="hello_index_action",
    include_in_schema=False,
)
def index(request: Request):
    """Render the HelloWorld landing view."""

    logger.debug("Rendering HelloWorld index view")
    return render(request, "hello/index.html")


@router.get("/test", response_model=GreetingRead, name="hello_test")
@router.get(
    "/Test",
    response_model=GreetingRead,
    name="hello_test_action",
    include_in_schema=False,
)
def test() -> GreetingRead:
    """Return the fixed HelloWorld greeting as JSON."""

    return _greeting_to_schema(create_greeting())


@router.get("/Greet/{name}", response_model=GreetingRead, name="hello_greet")
def greet_by_name(name: str) -> GreetingRead:
    """Return a greeting addressed to ``name``."""

    return _greeting_to_schema(greet(name))


__all__ = ["router"]
