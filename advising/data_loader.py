"""
advising/data_loader.py

Reads course records from CSV files, Excel workbooks and SQLite databases.
Every loader returns a complete list of Course objects or raises a single
LoadError naming the line (or row) that could not be read.
"""

import csv
import os
import sqlite3
from typing import List, Sequence
import pandas as pd
from .models import Course
from .errors import LoadError, ValidationError
from . import utils

COURSE_QUERY = "SELECT code, title, prerequisites FROM courses ORDER BY rowid;"


def _parse_fields(fields: Sequence[str]) -> Course:
    """
    Builds a Course from positional fields: code, title, then any number of
    prerequisite codes. Empty prerequisite fields are ignored.
    """
    if len(fields) < 2:
        raise ValidationError("Malformed line in file.")

    code = fields[0].strip()
    title = fields[1].strip()
    prereqs = [p.strip() for p in fields[2:] if p.strip()]

    return Course(code=code, title=title, prerequisites=prereqs)


def load_courses_from_csv(filepath: str) -> List[Course]:
    """
    Reads a headerless course file where each line is
    `code,title[,prereq1,prereq2,...]`. Blank lines are skipped.
    """
    print(f"Loading courses from {filepath}...")

    if not os.path.exists(filepath):
        raise LoadError(f"Could not open file: {filepath}", source=filepath)

    courses: List[Course] = []
    try:
        with open(filepath, mode='r', encoding='utf-8-sig', newline='') as f:
            reader = csv.reader(f)
            for fields in reader:
                line_number = reader.line_num
                if not any(field.strip() for field in fields):
                    continue
                try:
                    courses.append(_parse_fields(fields))
                except ValidationError as e:
                    raise LoadError(f"Error on line {line_number}: {e}",
                                    source=filepath, line_number=line_number) from e
    except (OSError, UnicodeDecodeError) as e:
        # Directories, unreadable files and non UTF-8 text.
        raise LoadError(f"Could not open file: {filepath}", source=filepath) from e

    print(f"Successfully loaded {len(courses)} courses.")
    return courses


def _cell_text(value) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def load_courses_from_excel(filepath: str) -> List[Course]:
    """
    Reads the first worksheet of a workbook using the same positional
    layout as the CSV format (no header row).
    """
    print(f"Loading courses from {filepath}...")

    if not os.path.exists(filepath):
        raise LoadError(f"Could not open file: {filepath}", source=filepath)

    try:
        df = pd.read_excel(filepath, header=None, dtype=str)
    except Exception as e:
        raise LoadError(f"Could not read workbook: {filepath} ({e})", source=filepath) from e

    courses: List[Course] = []
    for index, row in df.iterrows():
        line_number = index + 1
        fields = [_cell_text(v) for v in row.tolist()]
        # Trailing empty cells come from wider rows elsewhere in the sheet.
        while fields and not fields[-1]:
            fields.pop()
        if not fields:
            continue
        try:
            courses.append(_parse_fields(fields))
        except ValidationError as e:
            raise LoadError(f"Error on line {line_number}: {e}",
                            source=filepath, line_number=line_number) from e

    print(f"Successfully loaded {len(courses)} courses.")
    return courses


def load_courses_from_database(db_path: str) -> List[Course]:
    """
    Reads every row of the `courses` table. The prerequisites column holds a
    comma-separated list of codes (or NULL).
    """
    print(f"Loading courses from database {db_path}...")

    # sqlite3.connect would silently create a missing file.
    if not os.path.exists(db_path):
        raise LoadError(f"Could not open database: {db_path}", source=db_path)

    try:
        conn = sqlite3.connect(db_path)
    except sqlite3.Error as e:
        raise LoadError(f"Could not open database: {db_path}", source=db_path) from e

    try:
        rows = conn.execute(COURSE_QUERY).fetchall()
    except sqlite3.Error as e:
        raise LoadError("Failed to query database.", source=db_path) from e
    finally:
        conn.close()

    courses: List[Course] = []
    for row_number, (code, title, prereq_str) in enumerate(rows, start=1):
        try:
            courses.append(Course(
                code=_cell_text(code),
                title=_cell_text(title),
                prerequisites=utils.split_prerequisites(prereq_str)
            ))
        except ValidationError as e:
            raise LoadError(f"Error on row {row_number}: {e}",
                            source=db_path, line_number=row_number) from e

    print(f"Successfully loaded {len(courses)} courses.")
    return courses


def load_courses(filepath: str) -> List[Course]:
    """Picks a loader from the file extension. Unknown extensions are read as CSV."""
    ext = os.path.splitext(filepath)[1].lower()
    if ext in utils.EXCEL_EXTENSIONS:
        return load_courses_from_excel(filepath)
    if ext in utils.DATABASE_EXTENSIONS:
        return load_courses_from_database(filepath)
    return load_courses_from_csv(filepath)


def write_courses_to_database(db_path: str, courses: List[Course],
                              replace: bool = True) -> int:
    """
    Creates (or recreates) the `courses` table and inserts every course.
    Returns the number of rows written.
    """
    directory = os.path.dirname(db_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    conn = sqlite3.connect(db_path)
    try:
        with conn:
            if replace:
                conn.execute("DROP TABLE IF EXISTS courses;")
            conn.execute(
                "CREATE TABLE IF NOT EXISTS courses ("
                "code TEXT NOT NULL, "
                "title TEXT NOT NULL, "
                "prerequisites TEXT)"
            )
            conn.executemany(
                "INSERT INTO courses (code, title, prerequisites) VALUES (?, ?, ?);",
                [(c.code, c.title, utils.join_prerequisites(c.prerequisites)) for c in courses]
            )
    finally:
        conn.close()

    print(f"Wrote {len(courses)} courses to {db_path}.")
    return len(courses)
