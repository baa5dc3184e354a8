"""Display Protocol — the review loop's output port."""

from typing import Protocol

from labeller.review.domain.snapshot import RenderSnapshot


class Display(Protocol):
    """Redraws the full frame from a snapshot. Keeps no state between frames."""

    def draw(self, snapshot: RenderSnapshot) -> None: ...
