"""Student score records kept in a comma-separated data file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

NUM_TESTS = 5

StrPath = str | os.PathLike


class RecordError(Exception):
    """Raised when the data file is missing or a record cannot be read."""


def find_minimum(values: Iterable[int]) -> int:
    """Return the smallest value, or 0 when there are none."""
    return min(values, default=0)


@dataclass(frozen=True)
class Student:
    """One student's record: "Last,First" name, ID and test scores."""

    name: str
    student_id: int
    scores: tuple[int, ...] = ()

    @property
    def num_tests(self) -> int:
        return len(self.scores)

    def dropped_average(self) -> float:
        """Average of the scores with the lowest one dropped; 0.0 for one test or fewer."""
        if len(self.scores) <= 1:
            return 0.0
        return (sum(self.scores) - find_minimum(self.scores)) / (len(self.scores) - 1)

    def to_line(self) -> str:
        """Serialise the record in the layout used when the file is rewritten."""
        joined = ",".join(str(score) for score in self.scores)
        return f"{self.name},{self.student_id},{self.num_tests},{joined},"


def _to_int(text: str, line: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise RecordError(f"malformed record: {line!r}") from None


def parse_line(line: str) -> Student:
    """Parse one data line of the form Last,First,ID,N,score1,...,scoreN,"""
    text = line.rstrip("\r\n")
    fields = text.split(",")
    if len(fields) < 4:
        raise RecordError(f"malformed record: {text!r}")
    last, first, id_text, count_text, *rest = fields
    student_id = _to_int(id_text, text)
    count = _to_int(count_text, text)
    if count < 0:
        raise RecordError(f"negative test count in record: {text!r}")
    if len(rest) < count:
        raise RecordError(f"Error reading test scores for student {last},{first}")
    scores = tuple(_to_int(field, text) for field in rest[:count])
    return Student(f"{last},{first}", student_id, scores)


def _data_lines(path: StrPath) -> Iterator[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                stripped = line.rstrip("\n")
                if stripped:
                    yield stripped
    except FileNotFoundError:
        raise RecordError("File error.") from None


def count_students(path: StrPath) -> int:
    """Count the non-empty lines of the data file."""
    return sum(1 for _ in _data_lines(path))


def load_students(path: StrPath) -> list[Student]:
    """Read every record in the data file, skipping blank lines."""
    return [parse_line(line) for line in _data_lines(path)]


def add_student(
    path: StrPath,
    first_name: str,
    last_name: str,
    student_id: int,
    scores: Sequence[int],
) -> Student:
    """Append a new record to the data file and return it."""
    scores = tuple(scores)
    if not scores:
        raise ValueError("Number of tests must be greater than 0.")
    if any(score < 0 for score in scores):
        raise ValueError("Test score must be non-negative.")
    record = f"{last_name},{first_name},{student_id},{len(scores)},"
    record += "".join(f"{score}," for score in scores)
    with open(path, "a", encoding="utf-8") as handle:
        handle.write("\n" + record)
    return Student(f"{last_name},{first_name}", student_id, scores)


def remove_student(path: StrPath, student_id: int) -> bool:
    """Remove every record with the given ID; return whether any was found."""
    students = load_students(path)
    if not any(student.student_id == student_id for student in students):
        return False
    with open(path, "w", encoding="utf-8") as handle:
        for student in students:
            if student.student_id != student_id:
                handle.write(student.to_line() + "\n")
    return True


def find_student(path: StrPath, student_id: int) -> Student | None:
    """Return the first record with the given ID, or None."""
    for line in _data_lines(path):
        student = parse_line(line)
        if student.student_id == student_id:
            return student
    return None


def format_table(students: Iterable[Student]) -> str:
    """Render all records as a table with a header line."""
    lines = [f"{'Name':<30}{'ID':>12}   Scores"]
    for student in students:
        scores = "".join(f"{score:>5}" for score in student.scores)
        lines.append(f"{student.name:<30}{student.student_id:>12}{scores}")
    return "\n".join(lines) + "\n"


def format_student(student: Student) -> str:
    """Render a single record as a left-aligned line."""
    scores = "".join(f"{score:<5}" for score in student.scores)
    return f"{student.name:<30}{student.student_id:<15}{scores}"


def export_averages(source: StrPath, destination: StrPath) -> list[tuple[int, float]]:
    """Write "ID average" lines, lowest score dropped, and return the pairs written."""
    students = load_students(source)
    results = [(student.student_id, student.dropped_average()) for student in students]
    with open(destination, "w", encoding="utf-8") as handle:
        for student_id, average in results:
            handle.write(f"{student_id} {average:.1f}\n")
    return results