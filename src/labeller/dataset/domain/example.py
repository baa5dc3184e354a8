"""Example and LabelledExample domain models — one reviewable text item and its label."""

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class Example(BaseModel, frozen=True):
    """Immutable source record shown to the reviewer.

    ``metadata`` is an opaque JSON payload carried through untouched. The key
    is dropped from the serialised form only when it was never set, so that
    documents with or without it round-trip unchanged, explicit nulls included.
    """

    text: str
    ground_truth: str | None = None
    metadata: Any | None = None

    @model_serializer(mode="wrap")
    def omit_absent_metadata(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        if "metadata" not in self.model_fields_set:
            data.pop("metadata", None)
        return data


class LabelledExample(BaseModel):
    """Mutable review unit: an Example plus the label assigned to it.

    ``label`` is None while the example is unlabelled.
    """

    model_config = ConfigDict(validate_assignment=True)

    example: Example
    label: str | None = None
