"""RichDisplay — full-screen Rich rendering of a review snapshot."""

from __future__ import annotations

from types import TracebackType

from rich.align import Align
from rich.console import Console, RenderableType
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from labeller.review.domain.snapshot import LegendEntry, RenderSnapshot

_LABEL_STYLE = "bold bright_cyan on grey23"
_UNSET_LABEL_STYLE = "bold black on bright_yellow"
_KEY_STYLE = "bold white on grey23"


def percent_complete(snapshot: RenderSnapshot) -> int:
    """Floor of ``snapshot.progress`` as a whole percentage, computed exactly."""
    return snapshot.position * 100 // snapshot.total


def _progress_row(snapshot: RenderSnapshot) -> RenderableType:
    percent = percent_complete(snapshot)
    grid = Table.grid(expand=True)
    grid.add_column(ratio=1)
    grid.add_column(width=5, justify="right")
    grid.add_row(ProgressBar(total=100, completed=percent), Text(f"{percent}%"))
    return grid


def _legend(entries: tuple[LegendEntry, ...]) -> RenderableType:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(no_wrap=True)
    grid.add_column()
    for entry in entries:
        grid.add_row(Text(f" {entry.key} ", style=_KEY_STYLE), entry.action)
    return grid


def build_frame(snapshot: RenderSnapshot) -> Layout:
    """
    Build the whole frame for snapshot.

    The left three quarters hold a progress bar, the example text and the
    ground truth. The right quarter holds the current label and the key legend.
    """
    text_panel = Panel(
        Align.center(Text(snapshot.text, justify="center")),
        title=f" Example text ({snapshot.position} / {snapshot.total}) ",
        padding=(2, 2),
    )
    ground_truth_panel = Panel(
        Align.center(Text(snapshot.ground_truth, justify="center")),
        title=" Ground truth ",
        padding=(1, 1),
    )
    label_style = _LABEL_STYLE if snapshot.is_labelled else _UNSET_LABEL_STYLE
    label_panel = Panel(
        Align.center(Text(snapshot.label, style=label_style)),
        title=" Label ",
        padding=(1, 1),
    )

    layout = Layout(name="root")
    layout.split_row(
        Layout(name="left", ratio=3),
        Layout(name="right", ratio=1),
    )
    layout["left"].split_column(
        Layout(_progress_row(snapshot), name="progress", size=1),
        Layout(text_panel, name="text"),
        Layout(ground_truth_panel, name="ground_truth"),
    )
    layout["right"].split_column(
        Layout(label_panel, name="label", size=5),
        Layout(_legend(snapshot.legend), name="legend"),
    )
    return layout


class RichDisplay:
    """Owns the terminal's alternate screen for the duration of a review.

    Use as a context manager; the terminal is restored on exit even when the
    review raises. Satisfies the Display protocol structurally.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()
        self._live: Live | None = None

    def __enter__(self) -> RichDisplay:
        self._live = Live(
            console=self._console,
            screen=True,
            auto_refresh=False,
            transient=True,
        )
        self._live.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def draw(self, snapshot: RenderSnapshot) -> None:
        if self._live is None:
            raise RuntimeError("RichDisplay.draw called outside of its context")
        self._live.update(build_frame(snapshot), refresh=True)
