"""Field selection rules for scoring records."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Sequence

class FieldRule(ABC):
    """Base class for the matchable fields of a record."""

    @property
    @abstractmethod
    def label(self) -> str:
        """Name reported when this field gives a record its best score."""
        pass

    @abstractmethod
    def extract(self, record: Any, preprocess: Callable[[Any], str]) -> str:
        """
        Extract the matchable text of this field from a record.

        Args:
            record: Object with attributes or a mapping with keys
            preprocess: Function turning a raw field value into text

        Returns:
            str: Text to compare against the query
        """
        pass

def _lookup(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)

class AttributeField(FieldRule):
    """Match a single named attribute or mapping key."""

    def __init__(self, name: str):
        self.name = name

    @property
    def label(self) -> str:
        return self.name

    def extract(self, record: Any, preprocess: Callable[[Any], str]) -> str:
        return preprocess(_lookup(record, self.name))

    def __repr__(self) -> str:
        return f"AttributeField({self.name!r})"

class CompositeField(FieldRule):
    """Match several fields joined into one string, e.g. a full name."""

    def __init__(self, names: Sequence[str], separator: str = ' '):
        self.names = tuple(names)
        self.separator = separator

    @property
    def label(self) -> str:
        return '+'.join(self.names)

    def extract(self, record: Any, preprocess: Callable[[Any], str]) -> str:
        return self.separator.join(
            preprocess(_lookup(record, name)) for name in self.names
        )

    def __repr__(self) -> str:
        return f"CompositeField({self.names!r}, separator={self.separator!r})"

# Only "first last" is synthesized, never "last, first"
DEFAULT_FIELDS = (
    AttributeField('first_name'),
    AttributeField('last_name'),
    AttributeField('email'),
    AttributeField('role'),
    AttributeField('department'),
    AttributeField('status'),
    CompositeField(('first_name', 'last_name')),
)
