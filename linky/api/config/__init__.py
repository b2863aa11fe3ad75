"""Configuration for linky runs."""

from .LinkyConfig import LinkyConfig

__all__ = ["LinkyConfig"]
