"""Pydantic schemas for the fuzzy locator."""

from .match import Match

__all__ = ["Match"]
