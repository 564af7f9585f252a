"""
Concrete weighted graph implementation.

Implements the Graph interface on top of a plain dict adjacency table.
"""

from enum import Enum
from typing import Mapping, Sequence
import logging

from graph import AdjacencyTable, Edge, Graph, Neighbour, NodeId

logger = logging.getLogger(__name__)


class EdgeInsertionMode(Enum):
    """
    How add_edge stores an edge.

    ONE_WAY: record only (from -> to); callers add the reverse themselves.
    SYMMETRIC: also record (to -> from) with the same weight.
    """

    ONE_WAY = "one_way"
    SYMMETRIC = "symmetric"


class UndirectedGraph(Graph):
    """
    Weighted graph backed by a node -> [(neighbour, weight), ...] mapping.

    Edges are stored exactly as given unless the graph is built with
    EdgeInsertionMode.SYMMETRIC.
    """

    def __init__(self, insertion_mode: EdgeInsertionMode = EdgeInsertionMode.ONE_WAY) -> None:
        self._adjacency_table: AdjacencyTable = {}
        self._insertion_mode = insertion_mode

    @property
    def insertion_mode(self) -> EdgeInsertionMode:
        return self._insertion_mode

    # --- Graph interface -----------------------------------------------------

    def adjacency_table_mutable(self) -> AdjacencyTable:
        return self._adjacency_table

    def adjacency_table(self) -> Mapping[NodeId, Sequence[Neighbour]]:
        return self._adjacency_table

    def add_edge(self, edge: Edge) -> None:
        super().add_edge(edge)
        if self._insertion_mode is not EdgeInsertionMode.SYMMETRIC:
            return

        src, dst, weight = edge
        # Self-loops are already recorded in both directions.
        if src != dst:
            self._adjacency_table[dst].append((src, weight))
            logger.debug("recorded reverse edge %r -> %r (%r)", dst, src, weight)

    def __repr__(self) -> str:
        entries = sum(len(v) for v in self._adjacency_table.values())
        return (
            f"{type(self).__name__}(nodes={len(self._adjacency_table)}, "
            f"edge_entries={entries}, mode={self._insertion_mode.value})"
        )
