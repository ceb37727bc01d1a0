from dataclasses import dataclass


@dataclass(frozen=True)
class Greeting:
    """Message text produced by the HelloWorld module and the greeter."""

    message: str
