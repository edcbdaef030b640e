# src/netlist_core/analysis.py

"""
Connectivity analysis over a resolved `NetList`.

The component graph has one node per placed component and an edge between
every two components that share at least one net. It is built from the model
on demand and never written back, so these helpers are safe to call on a
netlist that is later mutated.
"""

import logging
from collections import defaultdict
from itertools import combinations
from typing import Dict, List, Set

import networkx as nx

from .data_structures import NetList

logger = logging.getLogger(__name__)


def build_connectivity_graph(netlist: NetList) -> nx.Graph:
    """
    Builds the component connectivity graph.

    Node attributes: `value` and `part_id` of the component.
    Edge attribute: `nets`, the sorted names of every net the two ends share.
    """
    graph = nx.Graph()
    for component in netlist.components:
        graph.add_node(component.ref_des, value=component.value, part_id=component.part_id)

    shared: Dict[tuple, Set[str]] = defaultdict(set)
    for net in netlist.nets:
        members = sorted({node.ref_des for node in net.nodes if node.ref_des in graph})
        for a, b in combinations(members, 2):
            shared[(a, b)].add(net.name)

    for (a, b), names in shared.items():
        graph.add_edge(a, b, nets=sorted(names))

    logger.debug(
        "Built connectivity graph with %d components and %d links.",
        graph.number_of_nodes(), graph.number_of_edges(),
    )
    return graph


def connected_groups(netlist: NetList) -> List[Set[str]]:
    """
    Returns the groups of electrically connected components, largest first.

    Groups of equal size are ordered by their smallest ref-des.
    """
    graph = build_connectivity_graph(netlist)
    groups = [set(group) for group in nx.connected_components(graph)]
    groups.sort(key=lambda group: (-len(group), min(group)))
    return groups


def nets_between(netlist: NetList, ref_des_a: str, ref_des_b: str) -> List[str]:
    """Returns the sorted names of the nets shared by two components."""
    graph = build_connectivity_graph(netlist)
    if not graph.has_edge(ref_des_a, ref_des_b):
        return []
    return list(graph.edges[ref_des_a, ref_des_b]["nets"])
