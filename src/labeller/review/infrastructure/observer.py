"""Structlog implementation of the ReviewObserver port."""

import structlog


class StructlogReviewObserver:
    """Delegates review domain events to structlog.

    Satisfies the ReviewObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def review_started(
        self, total_examples: int, labelled_examples: int, labels: list[str]
    ) -> None:
        self._log.info(
            "review.started",
            total_examples=total_examples,
            labelled_examples=labelled_examples,
            labels=labels,
        )

    def label_changed(
        self, index: int, previous: str | None, current: str | None
    ) -> None:
        self._log.debug(
            "review.label_changed", index=index, previous=previous, current=current
        )

    def review_finished(self, total_examples: int, labelled_examples: int) -> None:
        self._log.info(
            "review.finished",
            total_examples=total_examples,
            labelled_examples=labelled_examples,
        )
