# minitasks

A console menu of ten small, self-contained tasks. Each one is a plain sort,
filter or aggregation run over a fixed demonstration data set, and prints its
results in Russian:

1. Financial transactions: totals and statistics by category and date range
2. Circus scheduling: assigning artists to acts by skills, stamina and act limits
3. Electron energy analysis: counting energies below, above or within a band
4. Parade column: ordering cars by type, sub-type and year
5. Music festival programme: ordering artists by genre, era and popularity
6. Student score normalisation: percentage and flat bonus, clamped to limits
7. Sensor data correction: replacing out-of-range readings with a marker
8. Event log cleaning: dropping old or unimportant entries
9. Animal acts: picking the top-rated acts
10. Patient queue: ordering patients by procedure and MRI date

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
minitasks
```

Enter a task number to run it, `0` to quit. A line that is not a number is
reported and the menu is shown again. After each task, press Enter to return
to the menu; end of input also ends the program.

To run tasks directly, without the menu, pass their numbers to `main`:

```python
from minitasks.cli import main

main(["3", "8"])  # run the electron energy and log cleaning tasks
```

An unknown number is reported as an invalid task. `task_name(number)` gives a
task's menu label, and `format_menu()` the full menu text.

### Library use

Every task lives in its own module with a `run_demo()` function that prints
the demonstration, next to the functions it is built on:

| Module         | Main functions                                              |
|----------------|-------------------------------------------------------------|
| `transactions` | `sum_transactions`, `category_statistics`                   |
| `circus`       | `has_required_skills`, `form_cast`, `format_artists`, `format_program` |
| `energy`       | `count_below`, `count_above`, `count_in_range`, `format_energies` |
| `parade`       | `organize_parade`                                           |
| `festival`     | `schedule_artists`                                          |
| `scores`       | `normalized_report`                                         |
| `sensors`      | `correct_readings`, `format_readings`                       |
| `logs`         | `parse_timestamp`, `clean_log`, `format_log`                |
| `animals`      | `select_top_acts`, `format_selection`                       |
| `patients`     | `procedure_from_label`, `form_queue`, `format_queue`        |

The sorting and cleaning functions (`form_cast`, `organize_parade`,
`schedule_artists`, `correct_readings`, `clean_log`, `form_queue`) change the
list they are given; `select_top_acts` returns a new list, best first.

```python
from minitasks.energy import count_in_range

count_in_range([-1.5, 0.2, 0.9, 2.0], 0.0, 1.1)  # 2
```

```python
from minitasks.scores import NormalizationParams, normalized_report

for line in normalized_report({"Анна": 85}, NormalizationParams(0.10, 5)):
    print(line)
```

`clean_log` reports unparsable timestamps through the standard `logging`
module.

## What it does not do

The tasks work only on their built-in data sets. There is no way to load
transactions, schedules, journals or other data from files, and nothing is
saved.

## Tests

```
pip install .[test]
pytest
```