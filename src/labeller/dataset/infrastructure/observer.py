"""Structlog implementation of the DatasetObserver port."""

import structlog


class StructlogDatasetObserver:
    """Delegates dataset domain events to structlog.

    Satisfies the DatasetObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def dataset_loading_started(self, path: str, prelabelled: bool) -> None:
        self._log.info("dataset.loading_started", path=path, prelabelled=prelabelled)

    def dataset_loading_completed(
        self, path: str, total_examples: int, labelled_examples: int
    ) -> None:
        self._log.info(
            "dataset.loading_completed",
            path=path,
            total_examples=total_examples,
            labelled_examples=labelled_examples,
        )

    def dataset_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("dataset.loading_failed", path=path, reason=reason)

    def dataset_write_completed(self, path: str, total_examples: int) -> None:
        self._log.info(
            "dataset.write_completed", path=path, total_examples=total_examples
        )

    def dataset_write_failed(self, path: str, reason: str) -> None:
        self._log.error("dataset.write_failed", path=path, reason=reason)
