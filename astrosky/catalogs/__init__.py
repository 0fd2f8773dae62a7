"""Compiled-in catalog data."""

from .bright_stars import BRIGHT_STARS

__all__ = ["BRIGHT_STARS"]
