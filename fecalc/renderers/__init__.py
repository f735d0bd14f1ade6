"""Console output for forecast reports."""

from .text_renderer import TextRenderer

__all__ = ["TextRenderer"]
