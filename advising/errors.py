"""
advising/errors.py

Error kinds raised by the course table and the loaders.
"""
from typing import Optional


class AdvisingError(Exception):
    """Base class for every error the advising package raises."""


class ValidationError(AdvisingError):
    """A course record is missing its code or title."""


class StateError(AdvisingError):
    """A query was made before course data was loaded."""


class NotFoundError(AdvisingError):
    """No course with the requested code exists in the table."""

    def __init__(self, code: str, message: str = "Course not found."):
        super().__init__(message)
        self.code = code


class LoadError(AdvisingError):
    """
    A source could not be read into course records.
    line_number is 1-based and None when the whole source failed
    (missing file, unreadable database).
    """

    def __init__(self, message: str, source: str = "", line_number: Optional[int] = None):
        super().__init__(message)
        self.source = source
        self.line_number = line_number
