"""JSON example repository — reads examples to review and writes the labelled result."""

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from labeller.dataset.domain.example import Example, LabelledExample
from labeller.dataset.domain.observer import DatasetObserver
from labeller.dataset.infrastructure.errors import DatasetLoadError, DatasetWriteError


class JsonExampleRepository:
    """Loads and writes a single JSON document holding an array of examples.

    Two input shapes are supported. In bare mode every record is an Example and
    is wrapped with an absent label. In prelabelled mode every record is a
    LabelledExample as previously written by this repository.
    """

    def __init__(self, observer: DatasetObserver) -> None:
        self._observer = observer

    def load(self, path: Path, prelabelled: bool) -> list[LabelledExample]:
        """
        Load every example from the JSON document at path.

        Collects ALL per-record errors before raising a single DatasetLoadError
        listing every issue found.

        Raises:
            DatasetLoadError: if the file cannot be read, is not valid JSON, is
                not a JSON array, or any record does not match the expected shape.
        """
        path_str = str(path)
        self._observer.dataset_loading_started(path=path_str, prelabelled=prelabelled)

        try:
            raw = self._read_document(path=path)
        except DatasetLoadError as exc:
            self._observer.dataset_loading_failed(path=path_str, reason=str(exc))
            raise

        examples, errors = self._parse_records(raw=raw, prelabelled=prelabelled)

        if errors:
            reason = "; ".join(errors)
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason)

        self._observer.dataset_loading_completed(
            path=path_str,
            total_examples=len(examples),
            labelled_examples=sum(1 for e in examples if e.label is not None),
        )
        return examples

    def write(self, path: Path, examples: list[LabelledExample]) -> None:
        """
        Serialise all examples and replace the document at path.

        The full document is serialised before anything touches the disk, then
        written to a sibling temporary file and renamed over path.

        Raises:
            DatasetWriteError: if serialisation fails or the file cannot be written.
        """
        path_str = str(path)
        try:
            document = json.dumps(
                [e.model_dump(mode="json") for e in examples],
                indent=2,
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as exc:
            reason = f"cannot serialise examples: {exc}"
            self._observer.dataset_write_failed(path=path_str, reason=reason)
            raise DatasetWriteError(reason=reason) from exc

        try:
            _replace_file(path=path, content=document + "\n")
        except OSError as exc:
            reason = f"cannot write {path_str}: {exc.strerror or exc}"
            self._observer.dataset_write_failed(path=path_str, reason=reason)
            raise DatasetWriteError(reason=reason) from exc

        self._observer.dataset_write_completed(
            path=path_str, total_examples=len(examples)
        )

    def _read_document(self, path: Path) -> Any:
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DatasetLoadError(reason=f"file not found: {path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DatasetLoadError(reason=f"cannot read {path}: {exc}") from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DatasetLoadError(reason=f"invalid JSON: {exc}") from exc

    def _parse_records(
        self, raw: Any, prelabelled: bool
    ) -> tuple[list[LabelledExample], list[str]]:
        """Validate each record, collecting errors without aborting early."""
        if not isinstance(raw, list):
            return [], [f"expected a JSON array, got {type(raw).__name__}"]

        examples: list[LabelledExample] = []
        errors: list[str] = []

        for index, record in enumerate(raw):
            try:
                examples.append(_parse_record(record=record, prelabelled=prelabelled))
            except ValidationError as exc:
                fields = ", ".join(
                    ".".join(str(part) for part in err["loc"]) or "<record>"
                    for err in exc.errors()
                )
                errors.append(f"record {index}: invalid field(s) {fields}")

        return examples, errors


def _parse_record(record: Any, prelabelled: bool) -> LabelledExample:
    if prelabelled:
        return LabelledExample.model_validate(record)
    # Any label-like keys on a bare record are ignored.
    return LabelledExample(example=Example.model_validate(record))


def _target_mode(path: Path) -> int:
    """Permission bits the written file should carry: the existing file's, else umask defaults."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _replace_file(path: Path, content: str) -> None:
    """Write content to a temporary file next to path, then rename it over path."""
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(content)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
