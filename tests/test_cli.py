import io

from escalona.cli import ScheduleReport, analyze, main, run
from escalona.operation import parse_operations

EXAMPLE = """\
1 1 R X
2 2 R X
3 2 W X
4 1 W X
5 2 C -
6 1 C -
7 3 R X
8 3 R Y
9 4 R X
10 3 W Y
11 4 C -
12 3 C -
"""


def test_report_format():
    report = ScheduleReport(1, (1, 2), False, False)
    assert report.format() == "1 1,2 NS NV"


def test_run_example():
    assert [r.format() for r in run(EXAMPLE)] == ["1 1,2 NS NV", "2 3,4 SS SV"]


def test_analyze_sorts_transactions():
    ops = parse_operations("1 5 R X\n2 2 W Y\n3 5 C -\n4 2 C -\n")
    report = analyze(9, ops)
    assert report.number == 9
    assert report.transactions == tuple(sorted({op.transaction for op in ops}))
    assert report.conflict_serializable and report.view_serializable


def test_incomplete_schedule_is_not_reported():
    assert run("1 1 R X\n2 2 W X\n3 1 C -\n") == []


def test_main_prints_reports(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE))
    assert main([]) == 0
    expected = "".join(report.format() + "\n" for report in run(EXAMPLE))
    assert capsys.readouterr().out == expected


def test_main_with_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out == ""