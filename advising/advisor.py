"""
advising/advisor.py

Query layer used by the console: loads a source into the course table and
turns table results into display text.
"""

from typing import List, Optional
from .models import Course
from .hash_table import CourseHashTable
from .data_loader import load_courses, load_courses_from_database
from . import utils


class AdvisingAssistant:
    """
    Owns one CourseHashTable. Sources are read in full before the table is
    touched, so a file that fails to parse leaves the current data in place.
    """

    def __init__(self, table: Optional[CourseHashTable] = None):
        self.table = table if table is not None else CourseHashTable()

    @property
    def is_loaded(self) -> bool:
        return self.table.is_loaded

    def load(self, filepath: str) -> int:
        """Loads a CSV, Excel or SQLite source chosen by file extension."""
        courses = load_courses(filepath)
        self.table.load(courses)
        return len(courses)

    def load_database(self, db_path: str) -> int:
        courses = load_courses_from_database(db_path)
        self.table.load(courses)
        return len(courses)

    def course_list(self) -> List[Course]:
        """Courses in ascending code order, re-resolved through the table."""
        return [self.table.lookup(code) for code in self.table.list_keys_sorted()]

    def get_course(self, code: str) -> Course:
        return self.table.lookup(code.strip())

    @staticmethod
    def format_course_line(course: Course) -> str:
        return f"{course.code}: {course.title}"

    @staticmethod
    def format_course_details(course: Course) -> str:
        if course.has_prerequisites():
            prereq_str = ", ".join(course.prerequisites)
        else:
            prereq_str = utils.NO_PREREQS_TEXT
        return f"{course.code}, {course.title}\nPrerequisites: {prereq_str}"
