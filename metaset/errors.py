"""Errors raised while resolving a processing chain."""

from __future__ import annotations

from enum import Enum


class ProcessingErrorType(Enum):
    """The kinds of failure a processing step can report."""

    INVALID_CONFIG = "InvalidConfig"
    EXTERNAL_FAILURE = "ExternalFailure"
    TOO_MANY_INPUTS = "TooManyInputs"
    MISSING_INPUTS = "MissingInputs"
    INVALID_INPUTS = "InvalidInputs"
    INVALID_INPUT_ID = "InvalidInputId"

    def __str__(self) -> str:
        return self.value


class ProcessingError(Exception):
    """A failure of a processing step, tagged with the node that reported it."""

    def __init__(self, error_type: ProcessingErrorType, node_id: int | None = None) -> None:
        super().__init__(error_type, node_id)
        self.error_type = error_type
        self.node_id = node_id

    def __str__(self) -> str:
        node = "null" if self.node_id is None else str(self.node_id)
        return f"node_id: {node}, error_type: {self.error_type}"

    def __repr__(self) -> str:
        return f"ProcessingError({self.error_type.name}, node_id={self.node_id!r})"