"""
build_database.py

Builds the SQLite course database read by menu option 5 from a course CSV.
Run: python build_database.py [course_csv] [database_file]
"""

import sys
from advising.data_loader import load_courses_from_csv, write_courses_to_database
from advising.errors import AdvisingError
from main import DEFAULT_COURSE_FILE, DEFAULT_DATABASE_FILE


def build_database(csv_path: str = DEFAULT_COURSE_FILE,
                   db_path: str = DEFAULT_DATABASE_FILE) -> int:
    courses = load_courses_from_csv(csv_path)
    return write_courses_to_database(db_path, courses)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    csv_path = args[0] if len(args) > 0 else DEFAULT_COURSE_FILE
    db_path = args[1] if len(args) > 1 else DEFAULT_DATABASE_FILE

    try:
        build_database(csv_path, db_path)
    except AdvisingError as e:
        print(f"Fatal Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
