"""
advising/validators.py

Post-load catalog checks. Problems found here are reported, never fixed:
duplicate codes and dangling prerequisites are legal table contents.
"""

from typing import List
from collections import Counter
from .hash_table import CourseHashTable
from .errors import NotFoundError
from . import utils


def validate_catalog(table: CourseHashTable) -> bool:
    """
    Runs all catalog checks and prints a report.
    """
    print("\n--- RUNNING CATALOG VALIDATION ---")

    duplicate_codes = _check_duplicate_codes(table)
    unknown_prereqs = _check_unknown_prerequisites(table)
    self_prereqs = _check_self_prerequisites(table)

    if not duplicate_codes and not unknown_prereqs and not self_prereqs:
        print("Validation PASSED: Every course code is unique and every prerequisite exists.")
        return True
    else:
        print("Validation FAILED:")
        if duplicate_codes:
            print(f"  Found {len(duplicate_codes)} duplicate course codes.")
            for c in duplicate_codes: print(f"    - {c}")
        if unknown_prereqs:
            print(f"  Found {len(unknown_prereqs)} unknown prerequisites.")
            for c in unknown_prereqs: print(f"    - {c}")
        if self_prereqs:
            print(f"  Found {len(self_prereqs)} self-referencing prerequisites.")
            for c in self_prereqs: print(f"    - {c}")
        return False


def _unique_sorted_codes(table: CourseHashTable) -> List[str]:
    codes = []
    for code in table.list_keys_sorted():
        if not codes or codes[-1] != code:
            codes.append(code)
    return codes


def _check_duplicate_codes(table: CourseHashTable) -> List[str]:
    """
    Codes inserted more than once. Only the first entry is reachable by lookup.
    """
    counts = Counter(table.list_keys_sorted())
    return [
        f"Duplicate Code: {code} appears {count} times (first entry is used)"
        for code, count in sorted(counts.items()) if count > 1
    ]


def _check_unknown_prerequisites(table: CourseHashTable) -> List[str]:
    problems = []
    for code in _unique_sorted_codes(table):
        course = table.lookup(code)
        for prereq in course.prerequisites:
            try:
                table.lookup(prereq)
            except NotFoundError:
                problems.append(f"Unknown Prerequisite: {code} requires {prereq}")
    return problems


def _check_self_prerequisites(table: CourseHashTable) -> List[str]:
    problems = []
    for code in _unique_sorted_codes(table):
        course = table.lookup(code)
        if any(utils.normalize_code(p) == code for p in course.prerequisites):
            problems.append(f"Self Prerequisite: {code} lists itself")
    return problems
