"""Navigator — owns the review cursor and applies review commands to the store."""

from collections.abc import Sequence
from typing import Self

from labeller.dataset.domain.example import LabelledExample
from labeller.review.domain.command import Command
from labeller.review.domain.observer import ReviewObserver
from labeller.review.domain.snapshot import (
    GROUND_TRUTH_UNAVAILABLE,
    LABEL_UNSET,
    RenderSnapshot,
)
from labeller.review.domain.store import ExampleStore, Label


class Navigator:
    """Review state machine over an ExampleStore.

    The cursor starts at the first example and always stays within
    ``[0, len(store) - 1]``. Every command is total: there are no invalid
    transitions once a raw key press has been mapped to a Command.
    """

    def __init__(self, store: ExampleStore, observer: ReviewObserver) -> None:
        self._store = store
        self._observer = observer
        self._cursor = 0

    @classmethod
    def create(
        cls,
        examples: list[LabelledExample],
        labels: Sequence[Label],
        observer: ReviewObserver,
    ) -> Self | None:
        """Return a Navigator, or None if examples or labels is empty."""
        store = ExampleStore.create(examples=examples, labels=labels)
        if store is None:
            return None
        return cls(store=store, observer=observer)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def store(self) -> ExampleStore:
        return self._store

    @property
    def _last_index(self) -> int:
        return len(self._store) - 1

    def dispatch(self, command: Command) -> bool:
        """Apply command. Returns False once the session should end."""
        match command:
            case Command.MOVE_PREVIOUS:
                self._cursor = max(0, self._cursor - 1)
            case Command.MOVE_NEXT:
                self._cursor = min(self._last_index, self._cursor + 1)
            case Command.CYCLE_LABEL:
                self._cycle_label()
            case Command.JUMP_TO_NEXT_UNLABELLED:
                first = self._store.first_unlabelled_index()
                self._cursor = self._last_index if first is None else first
            case Command.QUIT:
                return False
        return True

    def snapshot(self) -> RenderSnapshot:
        entry = self._store.get(self._cursor)
        total = len(self._store)
        ground_truth = entry.example.ground_truth
        return RenderSnapshot(
            position=self._cursor + 1,
            total=total,
            progress=(self._cursor + 1) / total,
            text=entry.example.text,
            ground_truth=(
                GROUND_TRUTH_UNAVAILABLE if ground_truth is None else ground_truth
            ),
            label=LABEL_UNSET if entry.label is None else entry.label,
            is_labelled=entry.label is not None,
        )

    def _cycle_label(self) -> None:
        previous = self._store.get(self._cursor).label
        current = self._store.mutate(self._cursor, self._next_label)
        self._observer.label_changed(
            index=self._cursor, previous=previous, current=current
        )

    def _next_label(self, label: Label | None) -> Label | None:
        """Advance along absent → labels[0] → … → labels[-1] → absent.

        A label that is not in the vocabulary restarts the cycle at labels[0].
        """
        labels = self._store.labels
        if label is None or label not in labels:
            return labels[0]
        position = labels.index(label)
        if position < len(labels) - 1:
            return labels[position + 1]
        return None
