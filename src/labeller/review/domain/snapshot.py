"""RenderSnapshot — an immutable projection of the review state for one frame."""

from pydantic import BaseModel, Field

GROUND_TRUTH_UNAVAILABLE = "n/a"
LABEL_UNSET = "<None>"


class LegendEntry(BaseModel, frozen=True):
    key: str
    action: str


LEGEND: tuple[LegendEntry, ...] = (
    LegendEntry(key="←", action="Previous example"),
    LegendEntry(key="→", action="Next example"),
    LegendEntry(key="↑", action="Next label"),
    LegendEntry(key="TAB", action="Skip to first unlabelled"),
    LegendEntry(key="Ctrl-C", action="Save and exit"),
)


class RenderSnapshot(BaseModel, frozen=True):
    """Everything a display needs to draw the current example.

    ``position`` is 1-based. ``progress`` is ``position / total``; turning it
    into a whole percentage is left to the display.
    """

    position: int = Field(ge=1)
    total: int = Field(ge=1)
    progress: float = Field(gt=0.0, le=1.0)
    text: str
    ground_truth: str
    label: str
    is_labelled: bool
    legend: tuple[LegendEntry, ...] = LEGEND
