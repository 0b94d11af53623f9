import io

from gradebook.cli import Menu, run_menu
from gradebook.records import load_students, Student


def run(tmp_path, lines):
    out = io.StringIO()
    status = run_menu(lines, out, tmp_path / "student.dat", tmp_path / "averages.dat")
    return status, out.getvalue()


def test_menu_values_drive_run_menu(tmp_path):
    choices = list(Menu)
    assert [m.value for m in choices] == [1, 2, 3, 4, 5, 6]
    status, text = run(tmp_path, [str(choices[-1].value)])
    assert status == 0
    assert text.endswith("Exiting program. Goodbye!\n")


def test_quit(tmp_path):
    status, text = run(tmp_path, ["6"])
    assert status == 0
    assert text.endswith("Exiting program. Goodbye!\n")


def test_invalid_choice_reprompts(tmp_path):
    status, text = run(tmp_path, ["9 x", "6"])
    assert text.count("Invalid input. Please enter a number between 1 and 6: ") == 2
    assert "Exiting program. Goodbye!" in text


def test_add_with_validation(tmp_path):
    status, text = run(tmp_path, ["1", "Ada Lovelace 42", "0 2", "-5 90 80", "6"])
    assert "Number of tests must be greater than 0. Enter again: " in text
    assert "Test score must be non-negative. Enter again: " in text
    assert "Student added successfully!" in text
    assert load_students(tmp_path / "student.dat") == [Student("Lovelace,Ada", 42, (90, 80))]


def test_search_and_remove(tmp_path):
    lines = ["1 Ada Lovelace 42 2 90 80", "4 42", "2 42", "4 42", "6"]
    status, text = run(tmp_path, lines)
    assert "Lovelace,Ada" in text
    assert "Number of students = 1" in text
    assert "Student removed successfully!" in text
    assert "Student ID not found." in text
    assert load_students(tmp_path / "student.dat") == []


def test_display_missing_file_exits(tmp_path):
    status, text = run(tmp_path, ["3", "6"])
    assert status == 1
    assert text.endswith("File error.\n")


def test_export(tmp_path):
    status, text = run(tmp_path, ["1 Alan Turing 7 3 60 80 80", "5", "6"])
    assert status == 0
    assert (tmp_path / "averages.dat").read_text() == "7 80.0\n"


def test_display_lists_students(tmp_path):
    status, text = run(tmp_path, ["1 Ada Lovelace 42 2 90 80", "3", "6"])
    assert "Number of students = 1" in text
    assert "Lovelace,Ada" in text
    assert "Scores" in text