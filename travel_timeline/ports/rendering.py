"""Rendering port - Abstraction for timeline output.

The derived timeline is handed to a renderer; how it is presented
(plain text for the CLI, anything else for another host) is up to
the implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import TimelineView


class TimelineRendererPort(Protocol):
    """Port for timeline rendering.

    Implementation: adapters/rendering/text_renderer.py
    """

    def render(self, view: TimelineView) -> str:
        """Render a timeline.

        Args:
            view: The derived timeline to present.

        Returns:
            The rendered timeline.
        """
        ...
