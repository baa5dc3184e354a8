"""Observer port for the dataset domain — defines events in domain language."""

from typing import Protocol


class DatasetObserver(Protocol):
    def dataset_loading_started(self, path: str, prelabelled: bool) -> None: ...

    def dataset_loading_completed(
        self, path: str, total_examples: int, labelled_examples: int
    ) -> None: ...

    def dataset_loading_failed(self, path: str, reason: str) -> None: ...

    def dataset_write_completed(self, path: str, total_examples: int) -> None: ...

    def dataset_write_failed(self, path: str, reason: str) -> None: ...
