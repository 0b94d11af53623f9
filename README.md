# gradebook

gradebook keeps student records in a plain text file and works out each
student's average with the lowest score dropped.

## Installation

```
pip install .
```

## Using the menu

```
gradebook
```

This starts an interactive menu that reads its answers from standard input.
By default it works with `student.dat` and `averages.dat` in the current
directory. Other files can be named:

```
gradebook --data class.dat --averages class-averages.dat
```

The menu:

```
==== Student Records Menu ====
1. Add a new student record
2. Remove an existing student record
3. Display all records
4. Search for a student record by ID
5. Export results to disk file
6. Quit
```

- **Add** asks for the first name, last name, ID, the number of tests and
  each score. The number of tests must be greater than zero and no score may
  be negative; the menu asks again until the answer is acceptable.
- **Remove** deletes every record that has the ID you give.
- **Display** prints the number of students, then every record in a table
  of name, ID and scores.
- **Search** prints the first record that has the ID you give.
- **Export** writes the averages file. Each line holds a student ID and that
  student's average to one decimal place, with the lowest score dropped.
  A student with only one test gets an average of `0.0`.

An invalid menu choice is asked for again. If the data file does not exist
when you remove or display records, the menu prints `File error.` and exits
with status 1. The menu ends when you choose Quit or when input runs out.

## Record format

Each line of the data file holds one student:

```
Last,First,ID,NumTests,score1,score2,...,
```

Blank lines are skipped.

## Using it from Python

```python
from gradebook.records import add_student, load_students, export_averages

add_student("student.dat", "Jane", "Doe", 1001, [90, 80, 70])
for student in load_students("student.dat"):
    print(student.name, student.student_id, student.scores, student.dropped_average())
export_averages("student.dat", "averages.dat")
```

`gradebook.records` provides:

- `Student` — a frozen record with `name` (`"Last,First"`), `student_id`,
  `scores`, `num_tests` and `dropped_average()`.
- `parse_line`, `count_students`, `load_students`, `add_student`,
  `remove_student` (returns whether the ID was found), `find_student`
  (returns the record or `None`) and `export_averages` (returns the
  `(id, average)` pairs written).
- `format_table` and `format_student`, which render records as text.
- `find_minimum`, the smallest of some values, or `0` when there are none.

Reading a missing data file or a malformed record raises `RecordError`.
`add_student` raises `ValueError` when there are no scores or a score is
negative.

The menu itself is `gradebook.cli.run_menu(lines, output, data_path,
averages_path)`, which takes any iterable of input lines and a text stream
for output.

## Running the tests

```
pip install .[test]
pytest
```