"""View equivalence of a schedule against its serial orderings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import chain, permutations

from .operation import Operation


@dataclass(frozen=True)
class ReadFrom:
    """A read of ``attribute`` by ``reader`` that sees the value from ``writer``."""

    writer: int
    reader: int
    attribute: str


def serial_view(operations: Sequence[Operation], order: Sequence[int]) -> list[Operation]:
    """The schedule run serially, transaction by transaction in ``order``."""
    return [op for tid in order for op in operations if op.transaction == tid]


def final_writes(operations: Sequence[Operation]) -> dict[str, int]:
    """Map each written attribute to the transaction that writes it last."""
    return {op.attribute: op.transaction for op in operations if op.is_write}


def reads_from(operations: Sequence[Operation]) -> list[ReadFrom]:
    """Read-from relations of each read, in schedule order.

    The writer is the nearest write of the same attribute looking backwards;
    the search wraps around past the start of the schedule.
    """
    relations = []
    for position, op in enumerate(operations):
        if not op.is_read:
            continue
        candidates = chain(
            reversed(operations[:position]), reversed(operations[position + 1 :])
        )
        writer = next(
            (c for c in candidates if c.is_write and c.attribute == op.attribute), None
        )
        if writer is not None:
            relations.append(ReadFrom(writer.transaction, op.transaction, op.attribute))
    return relations


def views_equivalent(original: Sequence[Operation], view: Sequence[Operation]) -> bool:
    """Whether ``view`` has the original's final writes and read-from relations."""
    view_writes = final_writes(view)
    if any(view_writes.get(attr) != tid for attr, tid in final_writes(original).items()):
        return False
    return reads_from(original) == reads_from(view)


def is_view_serializable(operations: Sequence[Operation], ids: Sequence[int]) -> bool:
    """Whether some serial ordering of ``ids`` is view equivalent to the schedule."""
    operations = list(operations)
    if not ids:
        return False
    return any(
        views_equivalent(operations, serial_view(operations, order))
        for order in permutations(ids)
    )