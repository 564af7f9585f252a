"""
Weighted graph abstraction.

Nodes are plain string identifiers.
Edges are stored as (to, weight) entries under their `from` node.

Every operation is implemented once here in terms of two accessors onto the
adjacency table; concrete graphs only supply the storage.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Sequence, Set, Tuple
import logging

logger = logging.getLogger(__name__)

NodeId = str
Weight = int
Neighbour = Tuple[NodeId, Weight]
Edge = Tuple[NodeId, NodeId, Weight]
AdjacencyTable = Dict[NodeId, List[Neighbour]]


class NodeNotInGraph(LookupError):
    """Raised when looking up a node that is not a key of the adjacency table."""

    message = "accessing a node that is not in the graph"

    def __init__(self, node: NodeId) -> None:
        super().__init__(self.message)
        self.node = node


class Graph(ABC):
    """
    Weighted graph over string node ids, backed by an adjacency table.

    Subclasses implement `adjacency_table_mutable` and `adjacency_table`;
    everything else comes from here.
    """

    # --- Storage accessors ---------------------------------------------------

    @abstractmethod
    def adjacency_table_mutable(self) -> AdjacencyTable:
        """Live adjacency table, for mutation."""
        raise NotImplementedError

    @abstractmethod
    def adjacency_table(self) -> Mapping[NodeId, Sequence[Neighbour]]:
        """
        Live adjacency table, for reading.

        Returns: node -> list of (neighbour, weight), in insertion order.
        """
        raise NotImplementedError

    # --- Mutation ------------------------------------------------------------

    def add_node(self, node: NodeId) -> bool:
        """
        Ensure node exists in the graph.

        Returns True if it was newly added, False if it was already present.
        """
        if node in self.adjacency_table():
            return False
        self.adjacency_table_mutable()[node] = []
        logger.debug("added node %r", node)
        return True

    def add_edge(self, edge: Edge) -> None:
        """
        Record edge (from, to, weight) under `from`.
        Auto-adds both nodes if they don't exist. Repeated edges are kept
        as parallel entries.
        """
        src, dst, weight = edge
        self.add_node(src)
        self.add_node(dst)
        self.adjacency_table_mutable()[src].append((dst, weight))

    # --- Queries -------------------------------------------------------------

    def neighbours(self, node: NodeId) -> Sequence[Neighbour]:
        """
        Neighbours and edge weights recorded under node.

        The stored list is returned as-is, not copied.

        Raises:
            NodeNotInGraph: if node was never added.
        """
        try:
            return self.adjacency_table()[node]
        except KeyError:
            raise NodeNotInGraph(node) from None

    def contains(self, node: NodeId) -> bool:
        return node in self.adjacency_table()

    def nodes(self) -> Set[NodeId]:
        return set(self.adjacency_table().keys())

    def edges(self) -> List[Edge]:
        """
        All (from, to, weight) triples.

        Order within one node's entries follows insertion; order across nodes
        follows the table's iteration order.
        """
        return [
            (src, dst, weight)
            for src, entries in self.adjacency_table().items()
            for dst, weight in entries
        ]

    def __contains__(self, node: object) -> bool:
        return isinstance(node, str) and self.contains(node)

    def __len__(self) -> int:
        return len(self.adjacency_table())
