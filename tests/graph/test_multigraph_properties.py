"""Invariant checks over randomly mutated multigraphs.

Graphs are built from a seeded RNG so every run sees the same sequence of
operations.
"""

import random

import pytest

from mgraph.graph.multigraph import WeightedUndirectedMultigraph
from mgraph.graph.types import Node


def random_graph(seed: int, n_nodes: int = 12, n_ops: int = 300):
    rng = random.Random(seed)
    g = WeightedUndirectedMultigraph()
    live_lines = {}
    for _ in range(n_ops):
        op = rng.random()
        if op < 0.6:
            u, v = Node(rng.randrange(n_nodes)), Node(rng.randrange(n_nodes))
            line = g.new_line(u, v, rng.uniform(0.0, 10.0))
            g.set_weighted_line(line)
            live_lines[line.id] = line
        elif op < 0.85 and live_lines:
            lid = rng.choice(sorted(live_lines))
            g.remove_line(live_lines.pop(lid))
        else:
            node = Node(rng.randrange(n_nodes))
            g.remove_node(node)
            live_lines = {
                lid: line
                for lid, line in live_lines.items()
                if node not in (line.source, line.target)
            }
    return g, live_lines


SEEDS = [0, 1, 7, 42, 1234]


@pytest.mark.parametrize("seed", SEEDS)
def test_symmetry(seed):
    g, _ = random_graph(seed)
    for x in g.nodes():
        for y in g.nodes():
            assert g.has_edge_between(x, y) == g.has_edge_between(y, x)
            xy = {line.id for line in g.lines_between(x, y)}
            yx = {line.id for line in g.lines_between(y, x)}
            assert xy == yx


@pytest.mark.parametrize("seed", SEEDS)
def test_edges_count_each_live_line_once(seed):
    g, live_lines = random_graph(seed)
    seen = [lid for edge in g.edges() for lid in edge.line_ids()]
    assert len(seen) == len(set(seen))
    assert set(seen) == set(live_lines)
    assert g.number_of_lines() == len(live_lines)


@pytest.mark.parametrize("seed", SEEDS)
def test_edges_one_aggregate_per_pair(seed):
    g, _ = random_graph(seed)
    pairs = [frozenset((e.source.id, e.target.id)) for e in g.edges()]
    assert len(pairs) == len(set(pairs))
    for edge in g.edges():
        assert len({frozenset((l.source.id, l.target.id)) for l in edge}) == 1


@pytest.mark.parametrize("seed", SEEDS)
def test_degree_additivity(seed):
    g, _ = random_graph(seed)
    for n in g.nodes():
        assert g.degree(n) == sum(len(g.lines_between(n, m)) for m in g.neighbors(n))


@pytest.mark.parametrize("seed", SEEDS)
def test_cascade_removal(seed):
    g, live_lines = random_graph(seed)
    if not g.nodes():
        pytest.skip("all nodes removed by the random sequence")
    node = max(g.nodes(), key=g.degree)
    incident = {
        lid
        for lid, line in live_lines.items()
        if node in (line.source, line.target)
    }
    before = g.number_of_lines()

    g.remove_node(node)

    assert g.number_of_lines() == before - len(incident)
    for lid in incident:
        assert g.line(lid) is None
        assert lid not in g._line_ids  # pylint: disable=protected-access


@pytest.mark.parametrize("seed", SEEDS)
def test_new_line_issues_smallest_free_id(seed):
    g, live_lines = random_graph(seed)
    expected = min(set(range(len(live_lines) + 1)) - set(live_lines))
    assert g.new_line(Node(0), Node(1)).id == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_idempotent_removal(seed):
    g, live_lines = random_graph(seed)
    snapshot = {n.id: g.degree(n) for n in g.nodes()}
    absent = Node(10_000)
    g.remove_node(absent)
    g.remove_node(absent)
    if live_lines:
        line = live_lines[min(live_lines)]
        g.remove_line(line)
        snapshot = {n.id: g.degree(n) for n in g.nodes()}
        g.remove_line(line)
    assert {n.id: g.degree(n) for n in g.nodes()} == snapshot


@pytest.mark.parametrize("seed", SEEDS)
def test_allocator_bookkeeping_is_bounded(seed):
    g, live_lines = random_graph(seed)
    # pylint: disable=protected-access
    for ids in (g._line_ids, g._node_ids):
        assert len(ids._released) == len(set(ids._released))
        assert set(ids._released) == ids._in_released
        assert all(i < ids._floor for i in ids._released)
    assert len(g._line_ids) == len(live_lines)


def test_line_churn_keeps_allocator_bounded():
    g = WeightedUndirectedMultigraph()
    a, b = Node(0), Node(1)
    first = g.new_line(a, b)
    g.set_weighted_line(first)
    g.set_weighted_line(g.new_line(a, b))
    g.new_line(a, b)
    g.remove_line(first)

    for _ in range(1000):
        line = g.new_line(a, b)
        g.set_weighted_line(line)
        g.remove_line(line)

    # pylint: disable=protected-access
    assert len(g._line_ids._released) <= 1
    assert g.number_of_lines() == 1
    assert g.new_line(a, b).id == 0
