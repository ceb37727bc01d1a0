"""Use cases for producing greeting messages."""

from micfx.domain.entities.greeting import Greeting


HELLO_MESSAGE = "Hello from MicFx!"


def create_greeting() -> Greeting:
    """Return the fixed greeting served by the HelloWorld module."""

    return Greeting(message=HELLO_MESSAGE)


def greet(name: str | None = None) -> Greeting:
    """Return a personalised greeting for ``name``.

    ``None`` is treated as an empty name, so the result is ``"Hello, !"``.
    """

    return Greeting(message=f"Hello, {name or ''}!")
