"""ExampleRepository Protocol — structural interface for loading and saving examples."""

from pathlib import Path
from typing import Protocol

from labeller.dataset.domain.example import LabelledExample


class ExampleRepository(Protocol):
    """Loads the examples to review and writes the reviewed result back out."""

    def load(self, path: Path, prelabelled: bool) -> list[LabelledExample]: ...

    def write(self, path: Path, examples: list[LabelledExample]) -> None: ...
