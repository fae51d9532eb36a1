"""
advising/utils.py
"""
from typing import List, Sequence

# --- Hash Table Constants ---
HASH_TABLE_SIZE: int = 17          # Prime bucket count
HASH_MULTIPLIER: int = 31          # Polynomial rolling hash base
HASH_MASK: int = 0xFFFFFFFF        # Unsigned 32-bit wraparound

# --- Source Format Constants ---
PREREQ_SEPARATOR: str = ","
NO_PREREQS_TEXT: str = "None"

EXCEL_EXTENSIONS: List[str] = [".xlsx", ".xlsm"]
DATABASE_EXTENSIONS: List[str] = [".db", ".sqlite", ".sqlite3"]


def normalize_code(code: str) -> str:
    """Returns the canonical (upper case) form of a course code."""
    return code.upper()


def split_prerequisites(prereq_str) -> List[str]:
    """Splits a comma-separated prerequisite string, dropping empty parts."""
    if not prereq_str:
        return []
    return [p.strip() for p in str(prereq_str).split(PREREQ_SEPARATOR) if p.strip()]


def join_prerequisites(prereqs: Sequence[str]) -> str:
    return PREREQ_SEPARATOR.join(prereqs)
