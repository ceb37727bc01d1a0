"""Aggregate application use cases."""

from .create_greeting import HELLO_MESSAGE, create_greeting, greet

__all__ = [
    "HELLO_MESSAGE",
    "create_greeting",
    "greet",
]
