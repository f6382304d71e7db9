"""
Directory Search
================

Fuzzy filtering and relevance ranking for an employee directory.

A query is compared against every matchable field of a record with a tiered
string similarity (exact, substring, prefix, ordered subsequence, edit
distance). Records are kept when their best field score reaches the
threshold and are returned best first.

Key Features:
- Case-insensitive tiered similarity scoring
- Composite "first last" name matching
- Stable relevance ordering with a configurable threshold
- Tolerant of missing or malformed field values
- Ranking of plain records, mappings or DataFrame rows
"""

from directory_search.core.ranker import RecordRanker, rank
from directory_search.core.similarity import StringSimilarity, score

from directory_search.config.models import (
    Employee,
    MatchTier,
    RankerConfig,
    ScoredRecord
)
from directory_search.config.rules import (
    AttributeField,
    CompositeField,
    DEFAULT_FIELDS,
    FieldRule
)

__version__ = "1.0.0"
