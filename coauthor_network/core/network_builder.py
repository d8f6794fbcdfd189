"""Co-authorship graph construction for a year window."""

import logging
from collections import Counter
from itertools import combinations
from typing import Dict, Optional

import networkx as nx

from .global_network import GlobalAuthorNetwork

logger = logging.getLogger(__name__)


class NetworkBuilder:
    """Builds weighted networkx co-authorship graphs from a GlobalAuthorNetwork."""

    def __init__(self, network: GlobalAuthorNetwork):
        self.network = network

    def build_coauthorship_network(self, min_year: Optional[int] = None,
                                   max_year: Optional[int] = None) -> nx.Graph:
        """Build an undirected graph of the publications inside a year window.

        Nodes carry a ``publications`` count and edges a ``weight`` equal to
        the number of publications shared inside the window. Solo authors
        appear as isolated nodes.
        """
        graph = nx.Graph()
        publications: Counter = Counter()
        n_works = 0

        for _, authors in self.network.iter_publications(min_year, max_year):
            n_works += 1
            publications.update(authors)
            for name_a, name_b in combinations(authors, 2):
                if graph.has_edge(name_a, name_b):
                    graph[name_a][name_b]['weight'] += 1
                else:
                    graph.add_edge(name_a, name_b, weight=1)

        for name, count in publications.items():
            graph.add_node(name, publications=count)

        logger.info(f"Created network from {n_works} publications with "
                    f"{graph.number_of_nodes()} nodes and {graph.number_of_edges()} edges")
        return graph

    @staticmethod
    def get_network_statistics(graph: nx.Graph) -> Dict[str, float]:
        """Calculate basic network statistics."""
        if graph.number_of_nodes() == 0:
            return {}

        stats = {
            'num_nodes': graph.number_of_nodes(),
            'num_edges': graph.number_of_edges(),
            'density': nx.density(graph),
            'avg_clustering': nx.average_clustering(graph),
        }

        if nx.is_connected(graph):
            stats['is_connected'] = True
            stats['num_components'] = 1
            stats['largest_component_size'] = graph.number_of_nodes()
        else:
            stats['is_connected'] = False
            stats['num_components'] = nx.number_connected_components(graph)
            stats['largest_component_size'] = len(max(nx.connected_components(graph), key=len))

        return stats
