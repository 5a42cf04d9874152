"""Processing steps that compute a MetaSet from the results of other steps."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional, Union

from metaset.errors import ProcessingError, ProcessingErrorType
from metaset.sets import MetaSet, exclude, include

Input = Union[MetaSet, ProcessingError]
FilterCriteria = Callable[[frozenset], MetaSet]


def _unwrap(value: Input) -> MetaSet:
    if isinstance(value, ProcessingError):
        raise value
    return value


def _single_input(node_id: int, inputs: Sequence[Input]) -> Input:
    if not inputs:
        raise ProcessingError(ProcessingErrorType.MISSING_INPUTS, node_id)
    if len(inputs) > 1:
        raise ProcessingError(ProcessingErrorType.TOO_MANY_INPUTS, node_id)
    return inputs[0]


def _combine(
    node_id: int, included: Optional[frozenset], excluded: Optional[frozenset]
) -> MetaSet:
    if included is None and excluded is None:
        raise ProcessingError(ProcessingErrorType.MISSING_INPUTS, node_id)
    if included is not None:
        return include(included if excluded is None else included - excluded)
    return exclude(excluded)


class Processor(ABC):
    """A step that turns its inputs into a MetaSet.

    Each input is either the MetaSet a dependency produced or the
    ProcessingError it failed with; a processor raises such an error
    when it needs that input.
    """

    @abstractmethod
    def compute_items(self, node_id: int, inputs: Sequence[Input]) -> MetaSet:
        """Compute the result for node ``node_id``, raising ProcessingError on failure."""


class LogicalAnd(Processor):
    """Combines inputs: included items are intersected, excluded items merged."""

    def compute_items(self, node_id: int, inputs: Sequence[Input]) -> MetaSet:
        included: Optional[frozenset] = None
        excluded: Optional[frozenset] = None
        for value in inputs:
            current = _unwrap(value)
            if current.is_finite():
                included = (included or frozenset()) & current.items
            else:
                excluded = (excluded or frozenset()) | current.items
        return _combine(node_id, included, excluded)


class LogicalOr(Processor):
    """Combines inputs: included items are merged, excluded items intersected."""

    def compute_items(self, node_id: int, inputs: Sequence[Input]) -> MetaSet:
        included: Optional[frozenset] = None
        excluded: Optional[frozenset] = None
        for value in inputs:
            current = _unwrap(value)
            if current.is_finite():
                included = (included or frozenset()) | current.items
            else:
                excluded = (excluded or frozenset()) & current.items
        return _combine(node_id, included, excluded)


class LogicalNot(Processor):
    """Turns its single input's including set into an excluding one and back."""

    def compute_items(self, node_id: int, inputs: Sequence[Input]) -> MetaSet:
        current = _unwrap(_single_input(node_id, inputs))
        if current.is_finite():
            return exclude(current.items)
        return include(current.items)


@dataclass
class Filter(Processor):
    """Applies a criteria function to the items of a single including input."""

    filter_criteria: Optional[FilterCriteria] = None

    def compute_items(self, node_id: int, inputs: Sequence[Input]) -> MetaSet:
        if self.filter_criteria is None:
            raise ProcessingError(ProcessingErrorType.INVALID_CONFIG, node_id)
        current = _unwrap(_single_input(node_id, inputs))
        if not current.is_finite():
            raise ProcessingError(ProcessingErrorType.INVALID_INPUTS, node_id)
        return self.filter_criteria(current.items)


@dataclass
class Source(Processor):
    """Provides a fixed MetaSet and takes no inputs."""

    items: Optional[MetaSet] = None

    def compute_items(self, node_id: int, inputs: Sequence[Input]) -> MetaSet:
        if inputs:
            raise ProcessingError(ProcessingErrorType.TOO_MANY_INPUTS, node_id)
        if self.items is None:
            raise ProcessingError(ProcessingErrorType.EXTERNAL_FAILURE, node_id)
        return self.items