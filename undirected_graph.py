"""
Concrete undirected, weighted graph implementation.

Implements the Graph interface using an adjacency table; every edge is
stored once under each endpoint.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Tuple

from graph import AdjacencyTable, Edge, Graph, Neighbour

logger = logging.getLogger(__name__)


class UndirectedGraph(Graph):
    """
    Undirected, weighted graph backed by a label -> [(neighbour, weight)] table.
    """

    def __init__(self) -> None:
        self._adjacency_table: AdjacencyTable = {}

    @property
    def adjacency_table_mutable(self) -> AdjacencyTable:
        return self._adjacency_table

    @property
    def adjacency_table(self) -> Mapping[str, Tuple[Neighbour, ...]]:
        return MappingProxyType(
            {node: tuple(neighbours) for node, neighbours in self._adjacency_table.items()}
        )

    def add_edge(self, edge: Edge) -> None:
        """
        Add src -> dst and dst -> src, both with the same weight.

        edges() therefore reports each logical edge twice.
        """
        super().add_edge(edge)
        src, dst, weight = edge
        self.adjacency_table_mutable[dst].append((src, weight))
        logger.debug("Added reverse edge %r -> %r (weight=%s)", dst, src, weight)

    def __repr__(self) -> str:
        entries = sum(len(n) for n in self._adjacency_table.values())
        return f"UndirectedGraph(nodes={len(self._adjacency_table)}, entries={entries})"
