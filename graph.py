"""
Undirected, weighted graph abstraction.

Nodes are string labels.
Edges are (src, dst, weight) tuples with integer weights.
Storage is an adjacency table: label -> list of (neighbour, weight).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional, Set, Tuple

logger = logging.getLogger(__name__)

Edge = Tuple[str, str, int]
Neighbour = Tuple[str, int]
AdjacencyTable = Dict[str, List[Neighbour]]


class NodeNotInGraph(KeyError):
    """
    Raised by lookups that refer to a node the graph does not hold.

    Insertion never raises this: add_edge creates missing endpoints.
    """

    message = "accessing a node that is not in the graph"

    def __init__(self, node: Optional[str] = None) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeNotInGraph):
            return NotImplemented
        return self.node == other.node

    def __hash__(self) -> int:
        return hash((NodeNotInGraph, self.node))


class Graph(ABC):
    """
    Weighted graph over string labels.

    Subclasses own the adjacency table and expose it through the two
    storage properties. Every other operation is implemented here and goes
    through adjacency_table_mutable; adjacency_table is for callers only.
    add_edge only records the forward entry and is the hook a concrete
    variant overrides.
    """

    # --- Storage -------------------------------------------------------------

    @property
    @abstractmethod
    def adjacency_table_mutable(self) -> AdjacencyTable:
        """The adjacency table owned by this graph."""
        raise NotImplementedError

    @property
    @abstractmethod
    def adjacency_table(self) -> Mapping[str, Tuple[Neighbour, ...]]:
        """
        Read-only snapshot of the adjacency table.

        Neighbour lists are frozen to tuples so callers cannot break
        the graph's invariants through it.
        """
        raise NotImplementedError

    # --- Mutation ------------------------------------------------------------

    def add_node(self, node: str) -> bool:
        """
        Insert node with no neighbours.

        Returns False (and changes nothing) if node is already present.
        """
        if self.contains(node):
            return False
        self.adjacency_table_mutable[node] = []
        logger.debug("Added node %r", node)
        return True

    def add_edge(self, edge: Edge) -> None:
        """
        Append the forward entry src -> dst.
        Auto-adds nodes if they don't exist. Duplicates are kept.
        """
        src, dst, weight = edge
        self.add_node(src)
        self.add_node(dst)
        self.adjacency_table_mutable[src].append((dst, weight))
        logger.debug("Added edge %r -> %r (weight=%s)", src, dst, weight)

    # --- Queries -------------------------------------------------------------

    def contains(self, node: str) -> bool:
        return node in self.adjacency_table_mutable

    def nodes(self) -> Set[str]:
        """Snapshot of all node labels."""
        return set(self.adjacency_table_mutable)

    def edges(self) -> List[Edge]:
        """One (src, dst, weight) tuple per neighbour entry of every node."""
        return [
            (src, dst, weight)
            for src, neighbours in self.adjacency_table_mutable.items()
            for dst, weight in neighbours
        ]

    def neighbours(self, node: str) -> List[Neighbour]:
        """
        Neighbour entries of node, in insertion order.

        Raises:
            NodeNotInGraph: if node has never been added.
        """
        try:
            return list(self.adjacency_table_mutable[node])  # defensive copy
        except KeyError:
            raise NodeNotInGraph(node) from None

    def __contains__(self, node: object) -> bool:
        return isinstance(node, str) and self.contains(node)

    def __len__(self) -> int:
        return len(self.adjacency_table_mutable)
