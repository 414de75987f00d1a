import pytest

from escalona.conflict import (
    build_precedence_graph,
    has_cycle,
    is_conflict_serializable,
)
from escalona.operation import parse_operations, transaction_ids

CYCLIC = parse_operations("1 1 R X\n2 2 R X\n3 2 W X\n4 1 W X\n5 2 C -\n6 1 C -\n")
SERIAL = parse_operations("1 1 R X\n2 1 W X\n3 1 C -\n4 2 R X\n5 2 W X\n6 2 C -\n")


def test_serial_graph_has_single_edge():
    graph = build_precedence_graph(SERIAL, transaction_ids(SERIAL))
    assert graph == [[False, True], [False, False]]


def test_cyclic_graph_has_both_edges():
    graph = build_precedence_graph(CYCLIC, [1, 2])
    assert graph[0][1] and graph[1][0]
    assert has_cycle(graph)


def test_graph_follows_ids_order():
    forward = build_precedence_graph(SERIAL, [1, 2])
    backward = build_precedence_graph(SERIAL, [2, 1])
    assert backward == [list(reversed(row)) for row in reversed(forward)]


def test_reads_do_not_conflict():
    ops = parse_operations("1 1 R X\n2 2 R X\n3 1 C -\n4 2 C -\n")
    graph = build_precedence_graph(ops, [1, 2])
    assert graph == [[False, False], [False, False]]
    assert has_cycle(graph) is False


def test_different_attributes_do_not_conflict():
    ops = parse_operations("1 1 W X\n2 2 W Y\n3 1 C -\n4 2 C -\n")
    graph = build_precedence_graph(ops, [1, 2])
    assert graph == [[False, False], [False, False]]
    assert is_conflict_serializable(ops) is True


def test_unknown_transaction_raises():
    with pytest.raises(ValueError):
        build_precedence_graph(CYCLIC, [1])


@pytest.mark.parametrize(
    "graph, expected",
    [
        ([], False),
        ([[False]], False),
        ([[True]], True),
        ([[False, True, False], [False, False, True], [False, False, False]], False),
        ([[False, True, False], [False, False, True], [True, False, False]], True),
    ],
)
def test_has_cycle(graph, expected):
    assert has_cycle(graph) is expected


def test_is_conflict_serializable():
    assert is_conflict_serializable(SERIAL) is True
    assert is_conflict_serializable(CYCLIC) is False