"""Rendering adapters - Implementations of TimelineRendererPort.

Available implementations:
- TextTimelineRenderer: Plain-text timeline for the terminal
"""

from .text_renderer import TextTimelineRenderer

__all__ = ["TextTimelineRenderer"]
