"""Interactive menu for managing student records."""

from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from typing import Callable, Iterable, Iterator, TextIO

from gradebook.records import (
    RecordError,
    add_student,
    count_students,
    export_averages,
    find_student,
    format_student,
    format_table,
    load_students,
    remove_student,
)

MENU_TEXT = (
    "\n==== Student Records Menu ====\n"
    "1. Add a new student record\n"
    "2. Remove an existing student record\n"
    "3. Display all records\n"
    "4. Search for a student record by ID\n"
    "5. Export results to disk file\n"
    "6. Quit\n"
)


class Menu(IntEnum):
    ADD = 1
    REMOVE = 2
    DISPLAY = 3
    SEARCH = 4
    RESULTS = 5
    QUIT = 6


class _EndOfInput(Exception):
    pass


class _FileMissing(Exception):
    pass


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


class _Session:
    def __init__(self, lines, output, data_path, averages_path):
        self.tokens = _tokens(lines)
        self.output = output
        self.data_path = data_path
        self.averages_path = averages_path

    def say(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def word(self) -> str:
        token = next(self.tokens, None)
        if token is None:
            raise _EndOfInput
        return token

    def number(self, prompt: str, retry: str, accept: Callable[[int], bool] = lambda _: True) -> int:
        self.say(prompt)
        while True:
            try:
                value = int(self.word())
            except ValueError:
                value = None
            if value is not None and accept(value):
                return value
            self.say(retry)

    def report_count(self) -> None:
        try:
            count = count_students(self.data_path)
        except RecordError:
            raise _FileMissing from None
        self.say(f"Number of students = {count}\n")

    def add(self) -> None:
        self.say("Enter student first name: ")
        first = self.word()
        self.say("Enter the student's last name: ")
        last = self.word()
        student_id = self.number("Enter student ID: ", "Enter student ID: ")
        count = self.number(
            "Enter number of tests taken: ",
            "Number of tests must be greater than 0. Enter again: ",
            lambda n: n > 0,
        )
        scores = [
            self.number(
                f"Enter score for test {index}: ",
                "Test score must be non-negative. Enter again: ",
                lambda s: s >= 0,
            )
            for index in range(1, count + 1)
        ]
        try:
            add_student(self.data_path, first, last, student_id, scores)
        except OSError:
            self.say("Error opening student.dat file.\n")
            return
        self.say("Student added successfully!\n")

    def remove(self) -> None:
        student_id = self.number("Enter student ID to remove: ", "Enter student ID to remove: ")
        self.report_count()
        try:
            removed = remove_student(self.data_path, student_id)
        except RecordError as error:
            self.say(f"{error}\n")
            return
        self.say("Student removed successfully!\n" if removed else "Student ID not found.\n")

    def display(self) -> None:
        self.report_count()
        try:
            students = load_students(self.data_path)
        except RecordError as error:
            self.say(f"{error}\n")
            return
        self.say(format_table(students))

    def search(self) -> None:
        student_id = self.number("Enter student ID to search: ", "Enter student ID to search: ")
        try:
            student = find_student(self.data_path, student_id)
        except RecordError as error:
            message = "Error opening student.dat file." if str(error) == "File error." else str(error)
            self.say(f"{message}\n")
            return
        if student is None:
            self.say("Student ID not found.\n")
        else:
            self.say(format_student(student) + "\n")

    def results(self) -> None:
        try:
            count = count_students(self.data_path)
        except RecordError:
            self.say("Error opening student.dat file.\n")
            return
        self.say(f"Number of students = {count}\n")
        try:
            export_averages(self.data_path, self.averages_path)
        except OSError:
            self.say("Error opening averages.dat file.\n")
        except RecordError as error:
            self.say(f"{error}\n")


def run_menu(lines: Iterable[str], output: TextIO, data_path, averages_path) -> int:
    """Run the menu loop over the given input lines; return the exit status."""
    session = _Session(lines, output, data_path, averages_path)
    actions = {
        Menu.ADD: session.add,
        Menu.REMOVE: session.remove,
        Menu.DISPLAY: session.display,
        Menu.SEARCH: session.search,
        Menu.RESULTS: session.results,
    }
    try:
        while True:
            session.say(MENU_TEXT)
            choice = Menu(
                session.number(
                    "Enter your choice: ",
                    "Invalid input. Please enter a number between 1 and 6: ",
                    lambda n: 1 <= n <= 6,
                )
            )
            if choice is Menu.QUIT:
                session.say("Exiting program. Goodbye!\n")
                return 0
            actions[choice]()
    except _EndOfInput:
        return 0
    except _FileMissing:
        session.say("File error.\n")
        return 1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Manage student test records.")
    parser.add_argument("--data", default="student.dat", help="student data file")
    parser.add_argument("--averages", default="averages.dat", help="file for exported averages")
    args = parser.parse_args(argv)
    return run_menu(sys.stdin, sys.stdout, args.data, args.averages)


if __name__ == "__main__":
    sys.exit(main())