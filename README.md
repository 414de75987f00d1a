# escalona

`escalona` reads a history of transaction operations and splits it into
schedules. For each schedule it reports two things. The first is whether the
schedule is conflict serializable. The second is whether the schedule is view
equivalent to some serial schedule.

## Input

The input is a sequence of records. Each record holds four fields separated
by whitespace:

```
<arrival time> <transaction id> <operation> <attribute>
```

- `arrival time`: an integer. Records are expected in order of this field.
- `transaction id`: an integer that identifies the transaction.
- `operation`: `R` (read), `W` (write) or `C` (commit).
- `attribute`: a single non-blank character that names the item read or
  written. Commit records carry one as well, usually `-`.

Parsing stops at the first record that does not fit this format.

A schedule ends when the number of commits in it equals the number of
distinct transactions seen in it. The next record starts a new schedule.
If the input ends before the last schedule is complete, those operations are
dropped and nothing is reported for them.

## Output

The command prints one line per schedule:

```
<schedule number> <sorted transaction ids> <SS|NS> <SV|NV>
```

- The schedules are numbered from 1.
- `SS`: the precedence graph has no cycle, so the schedule is conflict
  serializable. `NS`: the graph has a cycle.
- `SV`: some serial order of the transactions is view equivalent to the
  schedule. `NV`: no serial order is.

## Usage

Install the package, then pipe a history into the command:

```
$ escalona < history.txt
```

The command takes no options other than `-h`/`--help`.

For example, with this input:

```
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
```

the output is:

```
1 1,2 NS NV
2 3,4 SS SV
```

## Library use

The same checks are available from Python:

```python
from escalona.operation import parse_operations, split_schedules
from escalona.cli import analyze, run

with open("history.txt") as handle:
    text = handle.read()

operations = parse_operations(text)
for number, schedule in enumerate(split_schedules(operations), start=1):
    print(analyze(number, schedule).format())

for report in run(text):
    print(report.number, report.conflict_serializable, report.view_serializable)
```

### `escalona.operation`

- `Operation` is a frozen dataclass with the fields `arrival`, `transaction`,
  `action` and `attribute`. It also has the properties `is_read`, `is_write`
  and `is_commit`.
- `parse_operations(text)` returns the list of operations in `text`.
- `split_schedules(operations)` yields each complete schedule as a list.
- `transaction_ids(operations)` returns the distinct transaction ids, in the
  order in which each first appears.

### `escalona.conflict`

- `build_precedence_graph(operations, ids)` returns a boolean adjacency
  matrix over `ids`. There is an edge from i to j when an operation of i
  conflicts with a later-arriving operation of j on the same attribute. Two
  operations conflict when they are write/write, write/read or read/write.
  It raises `ValueError` if an operation's transaction is not in `ids`.
- `has_cycle(graph)` reports whether the graph has a cycle. It uses a
  depth-first search.
- `is_conflict_serializable(operations)` combines the two functions above.

### `escalona.view`

- `serial_view(operations, order)` returns the schedule with its
  transactions run one after another in `order`.
- `final_writes(operations)` maps each written attribute to the transaction
  that writes it last.
- `reads_from(operations)` lists a `ReadFrom(writer, reader, attribute)` for
  each read. The writer is the nearest earlier write of the same attribute.
  If no earlier write exists, the search wraps around to the end of the
  schedule. Reads of an attribute that is never written are left out.
- `views_equivalent(original, view)` is true when both schedules have the
  same read-from list and `view` has every final write of `original`.
- `is_view_serializable(operations, ids)` tries each permutation of `ids`
  with `views_equivalent`. It returns `False` when `ids` is empty.

### `escalona.cli`

- `ScheduleReport` holds `number`, `transactions` (sorted),
  `conflict_serializable` and `view_serializable`. Its `format()` method
  returns the output line.
- `analyze(number, operations)` checks one schedule and returns its report.
- `run(text)` parses `text` and returns the list of reports.
- `main(argv=None)` is the `escalona` command. It reads standard input and
  prints one line per report.

## Running the tests

```
pip install -e ".[test]"
pytest
```