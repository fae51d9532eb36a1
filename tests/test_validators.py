"""
tests/test_validators.py

Unit tests for the post-load catalog checks.
Requires 'pytest' to run.
"""
import pytest
from advising.hash_table import CourseHashTable
from advising.models import Course
from advising.errors import StateError
from advising.validators import (
    validate_catalog,
    _check_duplicate_codes,
    _check_unknown_prerequisites,
    _check_self_prerequisites,
)


def make_table(courses) -> CourseHashTable:
    table = CourseHashTable()
    table.load(courses)
    return table


def test_clean_catalog_passes(capsys):
    table = make_table([
        Course("CSCI100", "Introduction to Computer Science"),
        Course("CSCI101", "Programming", ["csci100"]),
    ])

    assert validate_catalog(table) is True
    assert "Validation PASSED" in capsys.readouterr().out


def test_duplicate_codes_reported():
    table = make_table([
        Course("CSCI100", "Intro"),
        Course("csci100", "Intro again"),
        Course("CSCI101", "Programming"),
    ])

    assert _check_duplicate_codes(table) == [
        "Duplicate Code: CSCI100 appears 2 times (first entry is used)"
    ]


def test_unknown_prerequisites_reported():
    table = make_table([
        Course("CSCI300", "Algorithms", ["CSCI200", "MATH201"]),
        Course("MATH201", "Discrete Mathematics"),
    ])

    assert _check_unknown_prerequisites(table) == [
        "Unknown Prerequisite: CSCI300 requires CSCI200"
    ]


def test_self_prerequisite_reported():
    table = make_table([Course("CSCI400", "Capstone", ["csci400"])])
    assert _check_self_prerequisites(table) == ["Self Prerequisite: CSCI400 lists itself"]


def test_failed_report_does_not_change_table(capsys):
    table = make_table([
        Course("CSCI300", "Algorithms", ["CSCI200"]),
        Course("CSCI300", "Algorithms (dup)"),
    ])

    assert validate_catalog(table) is False
    out = capsys.readouterr().out
    assert "Found 1 duplicate course codes." in out
    assert "Found 1 unknown prerequisites." in out
    assert table.list_keys_sorted() == ["CSCI300", "CSCI300"]


def test_requires_loaded_table():
    with pytest.raises(StateError):
        validate_catalog(CourseHashTable())
