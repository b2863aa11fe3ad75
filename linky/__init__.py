"""Extract and check links in Markdown documents."""

__version__ = "0.1.0"
