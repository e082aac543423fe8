"""Diagnostic snippets, reporters that collect them, and a Markdown document tree visitor."""

__version__ = "0.1.0"

__all__ = ["reporters", "snippet", "tree"]