"""Schedule operations, their textual form and how a stream splits into schedules."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

READ = "R"
WRITE = "W"
COMMIT = "C"

# Two integers followed by two single non-blank characters, as in "1 2 R X".
# The look-aheads stop an integer from being split across two fields.
_RECORD = re.compile(r"\s*([+-]?\d+)(?!\d)\s*([+-]?\d+)(?!\d)\s*(\S)\s*(\S)")


@dataclass(frozen=True)
class Operation:
    """One step of a schedule: a read, write or commit by a transaction."""

    arrival: int
    transaction: int
    action: str
    attribute: str

    @property
    def is_read(self) -> bool:
        return self.action == READ

    @property
    def is_write(self) -> bool:
        return self.action == WRITE

    @property
    def is_commit(self) -> bool:
        return self.action == COMMIT


def parse_operations(text: str) -> list[Operation]:
    """Parse operations until the first record that does not fit the format."""
    operations = []
    position = 0
    while (match := _RECORD.match(text, position)) is not None:
        arrival, transaction, action, attribute = match.groups()
        operations.append(Operation(int(arrival), int(transaction), action, attribute))
        position = match.end()
    return operations


def split_schedules(operations: Iterable[Operation]) -> Iterator[list[Operation]]:
    """Yield schedules, each closed once its commits match its transactions.

    Operations left over after the last complete schedule are dropped.
    """
    current: list[Operation] = []
    seen: set[int] = set()
    commits = 0
    for operation in operations:
        current.append(operation)
        seen.add(operation.transaction)
        if operation.is_commit:
            commits += 1
        if commits == len(seen):
            yield current
            current, seen, commits = [], set(), 0


def transaction_ids(operations: Iterable[Operation]) -> list[int]:
    """Distinct transaction ids in order of first appearance."""
    return list(dict.fromkeys(operation.transaction for operation in operations))