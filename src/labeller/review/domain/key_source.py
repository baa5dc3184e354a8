"""KeySource Protocol — the review loop's input port."""

from typing import Protocol

from labeller.review.domain.command import Command


class KeySource(Protocol):
    """Blocks for one key press and returns its Command, or None if it is unbound."""

    def next_command(self) -> Command | None: ...
