"""Conflict serializability through the precedence graph."""

from __future__ import annotations

from collections.abc import Sequence

from .operation import READ, WRITE, Operation, transaction_ids

_CONFLICTING = {(WRITE, WRITE), (WRITE, READ), (READ, WRITE)}

_UNSEEN, _ACTIVE, _DONE = 0, 1, 2


def build_precedence_graph(
    operations: Sequence[Operation], ids: Sequence[int]
) -> list[list[bool]]:
    """Adjacency matrix over ``ids``: an edge i->j when an operation of i
    conflicts with a later-arriving operation of j on the same attribute."""
    index: dict[int, int] = {}
    for position, tid in enumerate(ids):
        index.setdefault(tid, position)
    size = len(ids)
    graph = [[False] * size for _ in range(size)]
    for first_pos, first in enumerate(operations):
        for second_pos, second in enumerate(operations):
            if (
                first_pos == second_pos
                or first.transaction == second.transaction
                or first.attribute != second.attribute
                or (first.action, second.action) not in _CONFLICTING
                or first.arrival >= second.arrival
            ):
                continue
            try:
                graph[index[first.transaction]][index[second.transaction]] = True
            except KeyError as exc:
                raise ValueError(f"transaction {exc.args[0]} is not among the ids") from None
    return graph


def has_cycle(graph: Sequence[Sequence[bool]]) -> bool:
    """Whether the directed graph given as an adjacency matrix has a cycle."""
    state = [_UNSEEN] * len(graph)

    def visit(vertex: int) -> bool:
        state[vertex] = _ACTIVE
        for neighbour, edge in enumerate(graph[vertex]):
            if not edge:
                continue
            if state[neighbour] == _ACTIVE:
                return True
            if state[neighbour] == _UNSEEN and visit(neighbour):
                return True
        state[vertex] = _DONE
        return False

    return any(state[v] == _UNSEEN and visit(v) for v in range(len(graph)))


def is_conflict_serializable(operations: Sequence[Operation]) -> bool:
    """Whether the schedule's precedence graph is acyclic."""
    operations = list(operations)
    ids = transaction_ids(operations)
    return not has_cycle(build_precedence_graph(operations, ids))