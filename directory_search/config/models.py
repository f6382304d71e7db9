"""Data and configuration models for the directory search engine."""

from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple
from enum import Enum

from directory_search.config.rules import DEFAULT_FIELDS, FieldRule

# Minimum best-field score for a record to be kept
DEFAULT_THRESHOLD = 0.3

def _text(value: Any) -> str:
    return value if isinstance(value, str) else ''

class MatchTier(str, Enum):
    """Tier of the similarity cascade that decided a score."""
    EXACT = "exact"
    SUBSTRING = "substring"
    PREFIX = "prefix"
    SUBSEQUENCE = "subsequence"
    EDIT_DISTANCE = "edit_distance"
    NO_MATCH = "no_match"

@dataclass(frozen=True)
class Employee:
    """A single employee row of the directory."""
    id: Any
    first_name: str = ''
    last_name: str = ''
    email: str = ''
    role: str = ''
    department: str = ''
    status: str = ''  # Active, On Leave, Inactive

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Employee':
        """
        Build an employee from a loaded row, filling missing text fields.

        Args:
            data: Mapping with the employee keys

        Returns:
            Employee: The employee record
        """
        return cls(
            id=data.get('id'),
            first_name=_text(data.get('first_name')),
            last_name=_text(data.get('last_name')),
            email=_text(data.get('email')),
            role=_text(data.get('role')),
            department=_text(data.get('department')),
            status=_text(data.get('status'))
        )

@dataclass(frozen=True)
class ScoredRecord:
    """A record paired with its best field score during ranking."""
    record: Any
    score: float
    position: int
    matched_field: str = ''

@dataclass(frozen=True)
class RankerConfig:
    """Configuration for ranking records against a query."""
    threshold: float = DEFAULT_THRESHOLD
    fields: Tuple[FieldRule, ...] = field(default=DEFAULT_FIELDS)
    preprocess_method: str = 'text'

    def __post_init__(self):
        """Validate threshold and freeze the field rules."""
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(
                f"Threshold must be between 0 and 1, got {self.threshold}"
            )
        object.__setattr__(self, 'fields', tuple(self.fields))
        if not self.fields:
            raise ValueError("At least one field rule is required")
