"""Command that reads schedules from standard input and reports on each."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .conflict import build_precedence_graph, has_cycle
from .operation import Operation, parse_operations, split_schedules, transaction_ids
from .view import is_view_serializable


@dataclass(frozen=True)
class ScheduleReport:
    """Outcome of analysing one schedule."""

    number: int
    transactions: tuple[int, ...]
    conflict_serializable: bool
    view_serializable: bool

    def format(self) -> str:
        ids = ",".join(str(tid) for tid in self.transactions)
        conflict = "SS" if self.conflict_serializable else "NS"
        view = "SV" if self.view_serializable else "NV"
        return f"{self.number} {ids} {conflict} {view}"


def analyze(number: int, operations: Iterable[Operation]) -> ScheduleReport:
    """Check one schedule for conflict and view serializability."""
    operations = list(operations)
    ids = transaction_ids(operations)
    graph = build_precedence_graph(operations, ids)
    return ScheduleReport(
        number=number,
        transactions=tuple(sorted(ids)),
        conflict_serializable=not has_cycle(graph),
        view_serializable=is_view_serializable(operations, ids),
    )


def run(text: str) -> list[ScheduleReport]:
    """Analyse every complete schedule in ``text``, numbered from 1."""
    schedules = split_schedules(parse_operations(text))
    return [analyze(number, schedule) for number, schedule in enumerate(schedules, start=1)]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="escalona",
        description="Report conflict and view serializability of schedules read from stdin.",
    )
    parser.parse_args(argv)
    for report in run(sys.stdin.read()):
        print(report.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())