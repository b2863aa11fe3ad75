"""API module for linky.

Functions defined here are the engine behind the CLI: link parsing, target
fetching, fragment resolution and the orchestrating checker.
"""

__all__ = []
