"""Relevance ranking of directory records against a free-text query."""

from typing import Any, List, Optional, Sequence
import logging
import pandas as pd

from directory_search.core.preprocessor import registry
from directory_search.core.similarity import StringSimilarity
from directory_search.config.models import RankerConfig, ScoredRecord

class RecordRanker:
    """
    Filters and orders records by their best field similarity to a query.
    """

    def __init__(
        self,
        config: Optional[RankerConfig] = None,
        similarity: Optional[StringSimilarity] = None
    ):
        """
        Initialize the record ranker.

        Args:
            config: Threshold, matched fields and preprocessing method
            similarity: String similarity scorer to use per field
        """
        self.config = config or RankerConfig()
        self.similarity = similarity or StringSimilarity()
        self.preprocessor = registry.create(self.config.preprocess_method)

        self._initialize_logging()

    def _initialize_logging(self) -> None:
        """Setup logging configuration."""
        self.logger = logging.getLogger(__name__)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter(
                    '%(asctime)s - %(levelname)s - %(message)s'
                )
            )
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    @staticmethod
    def _normalize_query(query: Any) -> str:
        """Trim the query; anything that is not a string counts as empty."""
        return query.strip() if isinstance(query, str) else ''

    def score_record(self, record: Any, query: str, position: int = 0) -> ScoredRecord:
        """
        Calculate the best field score of a record.

        Args:
            record: Record to score
            query: Trimmed, non-empty query
            position: Index of the record in its input sequence

        Returns:
            ScoredRecord: Record with its best score and matching field
        """
        best_score = 0.0
        best_field = ''

        for rule in self.config.fields:
            value = rule.extract(record, self.preprocessor.process)
            field_score = self.similarity.score(query, value)
            if field_score > best_score:
                best_score = field_score
                best_field = rule.label

        return ScoredRecord(
            record=record,
            score=best_score,
            position=position,
            matched_field=best_field
        )

    def score_records(self, records: Sequence[Any], query: str) -> List[ScoredRecord]:
        """
        Score, filter and order records, keeping their scores.

        An empty query keeps every record in input order with a score of 1.

        Args:
            records: Records to search
            query: Raw query text

        Returns:
            List[ScoredRecord]: Records above the threshold, best first
        """
        term = self._normalize_query(query)
        if not term:
            return [
                ScoredRecord(record=record, score=1.0, position=idx)
                for idx, record in enumerate(records)
            ]

        scored = [
            self.score_record(record, term, idx)
            for idx, record in enumerate(records)
        ]
        kept = [s for s in scored if s.score >= self.config.threshold]

        # sorted() is stable, so ties keep input order
        kept = sorted(kept, key=lambda s: s.score, reverse=True)

        self.logger.debug(
            f"Query {term!r} matched {len(kept)} of {len(scored)} records"
        )
        return kept

    def rank(self, records: Sequence[Any], query: str) -> List[Any]:
        """
        Filter records by query and order them by relevance.

        Args:
            records: Records to search
            query: Raw query text

        Returns:
            List[Any]: Matching records, most relevant first; all records
                in original order when the query is blank
        """
        if not self._normalize_query(query):
            return list(records)

        return [s.record for s in self.score_records(records, query)]

    def rank_dataframe(self, df: pd.DataFrame, query: str) -> pd.DataFrame:
        """
        Rank the rows of a DataFrame whose columns carry the field names.

        Args:
            df: DataFrame of records
            query: Raw query text

        Returns:
            pd.DataFrame: Matching rows, most relevant first, original index kept
        """
        if not self._normalize_query(query):
            return df.copy()

        rows = df.to_dict('records')
        positions = [s.position for s in self.score_records(rows, query)]
        return df.iloc[positions]


_default_ranker: Optional[RecordRanker] = None

def rank(records: Sequence[Any], query: str) -> List[Any]:
    """Rank records against query with the default configuration."""
    global _default_ranker
    if _default_ranker is None:
        _default_ranker = RecordRanker()
    return _default_ranker.rank(records, query)
