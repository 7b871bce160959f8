"""NetworkX parent graph and generation assignment."""

from collections.abc import Iterable

import networkx as nx

from pedchart.errors import CycleError
from pedchart.models import Individual


def build_parent_graph(individuals: Iterable[Individual]) -> nx.DiGraph:
    """
    Build a directed graph with one PARENT_OF edge per resolved parent reference.

    Every individual becomes a node, even without relatives. Parent ids that do not
    resolve to a known individual are skipped, so partially imported families still
    produce a usable graph.
    """
    G = nx.DiGraph()
    individuals = list(individuals)

    for individual in individuals:
        G.add_node(individual.id, person_name=individual.name)

    for individual in individuals:
        for parent_id in individual.relationships.parent_ids:
            if parent_id in G:
                G.add_edge(parent_id, individual.id, relationship_type="PARENT_OF")

    return G


def find_parent_cycle(G: nx.DiGraph) -> list[str] | None:
    """Return the ids along one parent/child cycle, or None if the graph is acyclic."""
    try:
        cycle = nx.find_cycle(G, orientation="original")
    except nx.NetworkXNoCycle:
        return None
    return [edge[0] for edge in cycle]


def assign_generations(individuals: Iterable[Individual]) -> dict[str, int]:
    """
    Compute the generation level of every individual.

    Individuals without resolved parents are generation 0. Everybody else sits one
    level below their deepest resolved parent. Levels are filled in topological
    order so each ancestor is visited once.

    Raises:
        CycleError: if an individual is (transitively) their own ancestor.
    """
    G = build_parent_graph(individuals)

    cycle = find_parent_cycle(G)
    if cycle is not None:
        raise CycleError(cycle)

    generations: dict[str, int] = {}
    for node in nx.topological_sort(G):
        generations[node] = max((generations[p] for p in G.predecessors(node)), default=-1) + 1
    return generations
