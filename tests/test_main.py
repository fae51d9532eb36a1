"""
tests/test_main.py

Tests for the console menu loop.
Requires 'pytest' to run.
"""
import pytest
import main


def scripted_input(answers):
    """Returns an input() replacement that replays answers, then hits EOF."""
    remaining = list(answers)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input


@pytest.fixture
def course_file(tmp_path):
    path = tmp_path / "courses.csv"
    path.write_text(
        "CSCI200,Data Structures,CSCI101\n"
        "CSCI101,Introduction to Programming in C++,CSCI100\n"
        "CSCI100,Introduction to Computer Science\n"
    )
    return str(path)


def test_load_list_and_show_course(course_file, capsys):
    main.main(scripted_input(["4", course_file, "2", "3", "csci200", "9"]))
    out = capsys.readouterr().out

    assert f"Success: Data loaded from {course_file}" in out
    assert out.index("CSCI100: Introduction to Computer Science") < out.index("CSCI200: Data Structures")
    assert "CSCI200, Data Structures\nPrerequisites: CSCI101" in out
    assert out.rstrip().endswith("Goodbye.")


def test_errors_are_reported_and_loop_continues(tmp_path, capsys):
    missing = str(tmp_path / "missing.csv")
    main.main(scripted_input(["2", "4", missing, "7", "9"]))
    out = capsys.readouterr().out

    assert "SYSTEM ERROR: No data loaded." in out
    assert f"SYSTEM ERROR: Could not open file: {missing}" in out
    assert "Invalid selection." in out
    assert "Goodbye." in out


def test_unknown_course(course_file, capsys):
    main.main(scripted_input(["4", course_file, "3", "CSCI999"]))
    out = capsys.readouterr().out

    assert "SYSTEM ERROR: Course not found." in out
    assert "Goodbye." in out


def test_default_database_option(tmp_path, monkeypatch, capsys, course_file):
    import build_database

    db_path = str(tmp_path / "ABCU.db")
    assert build_database.main([course_file, db_path]) == 0
    monkeypatch.setattr(main, "DEFAULT_DATABASE_FILE", db_path)

    main.main(scripted_input(["5", "3", "CSCI101", "6", "9"]))
    out = capsys.readouterr().out

    assert f"Success: Data loaded from {db_path}" in out
    assert "Prerequisites: CSCI100" in out
    assert "Validation FAILED:" not in out
    assert "Validation PASSED" in out


def test_unreadable_files_do_not_end_loop(tmp_path, capsys):
    latin1 = tmp_path / "latin1.csv"
    latin1.write_bytes(b"CSCI100,Introducci\xf3n\n")
    directory = str(tmp_path)

    main.main(scripted_input(["4", directory, "4", str(latin1), "2", "9"]))
    out = capsys.readouterr().out

    assert f"SYSTEM ERROR: Could not open file: {directory}" in out
    assert f"SYSTEM ERROR: Could not open file: {latin1}" in out
    assert "SYSTEM ERROR: No data loaded." in out
    assert out.rstrip().endswith("Goodbye.")
