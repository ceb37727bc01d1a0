"""Domain entities exposed by the application."""

from .greeting import Greeting

__all__ = ["Greeting"]
