"""Observer port for the review domain — defines events in domain language."""

from typing import Protocol


class ReviewObserver(Protocol):
    def review_started(
        self, total_examples: int, labelled_examples: int, labels: list[str]
    ) -> None: ...

    def label_changed(
        self, index: int, previous: str | None, current: str | None
    ) -> None: ...

    def review_finished(self, total_examples: int, labelled_examples: int) -> None: ...
