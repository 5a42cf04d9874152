"""Graphs of processing nodes resolved from a root node."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from metaset.errors import ProcessingError, ProcessingErrorType
from metaset.processors import Input, Processor
from metaset.sets import MetaSet


@dataclass
class ProcessNode:
    """A processor together with the indices of the nodes it takes input from."""

    id: int
    processor: Processor
    dep_ids: Sequence[int] = ()

    def resolve(self, node_id: int, nodes: Sequence[ProcessNode]) -> MetaSet:
        """Resolve every dependency, then run the processor on the results."""
        inputs = [self._resolve_dependency(node_id, dep_id, nodes) for dep_id in self.dep_ids]
        return self.processor.compute_items(node_id, inputs)

    @staticmethod
    def _resolve_dependency(
        node_id: int, dep_id: int, nodes: Sequence[ProcessNode]
    ) -> Input:
        if not 0 <= dep_id < len(nodes):
            return ProcessingError(ProcessingErrorType.INVALID_CONFIG, node_id)
        try:
            return nodes[dep_id].resolve(dep_id, nodes)
        except ProcessingError as error:
            return error


@dataclass
class ProcessChain:
    """A list of nodes, indexed by id, and the id of the node to resolve."""

    nodes: list[ProcessNode] = field(default_factory=list)
    root_id: int = 0

    def resolve(self) -> MetaSet:
        """Resolve the root node, raising ProcessingError on failure."""
        if not 0 <= self.root_id < len(self.nodes):
            raise ProcessingError(ProcessingErrorType.MISSING_INPUTS, None)
        return self.nodes[self.root_id].resolve(self.root_id, self.nodes)