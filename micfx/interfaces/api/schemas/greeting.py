"""Pydantic schemas for greeting endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GreetingRead(BaseModel):
    message: str = Field(..., description="Greeting text")

    model_config = ConfigDict(from_attributes=True)


__all__ = ["GreetingRead"]
