"""ExampleStore — the ordered examples under review and the fixed label vocabulary."""

from collections.abc import Callable, Sequence
from typing import Self

from labeller.dataset.domain.example import LabelledExample

type Label = str
type LabelUpdate = Callable[[Label | None], Label | None]


class ExampleStore:
    """Holds a non-empty sequence of LabelledExample and a non-empty vocabulary.

    The shape of both is fixed for the life of the store; only the ``label`` of
    existing entries changes. Indices passed to ``get`` and ``mutate`` must be
    valid; an out-of-range index raises IndexError.
    """

    def __init__(
        self, examples: list[LabelledExample], labels: tuple[Label, ...]
    ) -> None:
        self._examples = examples
        self._labels = labels

    @classmethod
    def create(
        cls, examples: list[LabelledExample], labels: Sequence[Label]
    ) -> Self | None:
        """Return a store, or None if either examples or labels is empty."""
        if not examples or not labels:
            return None
        return cls(examples=examples, labels=tuple(labels))

    @property
    def labels(self) -> tuple[Label, ...]:
        return self._labels

    @property
    def examples(self) -> list[LabelledExample]:
        return self._examples

    def __len__(self) -> int:
        return len(self._examples)

    def get(self, index: int) -> LabelledExample:
        return self._examples[index]

    def mutate(self, index: int, update: LabelUpdate) -> Label | None:
        """Replace the label at index with ``update(current)`` and return it."""
        entry = self._examples[index]
        entry.label = update(entry.label)
        return entry.label

    def first_unlabelled_index(self) -> int | None:
        return next(
            (i for i, entry in enumerate(self._examples) if entry.label is None),
            None,
        )

    def labelled_count(self) -> int:
        return sum(1 for entry in self._examples if entry.label is not None)
