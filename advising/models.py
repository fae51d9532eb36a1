"""
advising/models.py
"""

from typing import Tuple
from dataclasses import dataclass, field
from .errors import ValidationError


@dataclass(frozen=True)
class Course:
    """
    Represents a single course in the catalog.
    The code is kept as given; the table canonicalizes it when storing.
    """
    code: str
    title: str
    prerequisites: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validates required fields and freezes the prerequisite list."""
        if not self.code or not self.code.strip() or not self.title or not self.title.strip():
            raise ValidationError("Invalid Course Data: Code or Title is missing.")
        # Lists from the loaders become tuples so the record stays immutable.
        object.__setattr__(self, "prerequisites", tuple(self.prerequisites))

    def has_prerequisites(self) -> bool:
        return len(self.prerequisites) > 0
