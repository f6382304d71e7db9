"""Tiered string similarity used to match queries against field values."""

from typing import Tuple
import Levenshtein

from directory_search.config.models import MatchTier


class StringSimilarity:
    """
    Scores a query against a target string with an ordered cascade of tiers.

    The first tier that fires decides the score:
    exact match, substring, prefix in either direction, ordered
    subsequence, and finally a Levenshtein-based similarity.
    """

    # Tier scores
    EXACT_SCORE = 1.0
    SUBSTRING_SCORE = 0.9
    PREFIX_SCORE = 0.85

    # Subsequence scores land in (SUBSEQUENCE_BASE, SUBSEQUENCE_BASE + SUBSEQUENCE_SPAN]
    SUBSEQUENCE_BASE = 0.5
    SUBSEQUENCE_SPAN = 0.3

    # Edit distance similarity must exceed this to count
    EDIT_MIN_SIMILARITY = 0.4
    EDIT_MULTIPLIER = 0.7

    def match(self, query: str, target: str) -> Tuple[float, MatchTier]:
        """
        Calculate the similarity score and the tier that produced it.

        Args:
            query: Search text
            target: Field text to match against

        Returns:
            Tuple[float, MatchTier]: Score between 0 and 1 and the deciding tier
        """
        search = query.lower()
        text = target.lower()

        if text == search:
            return self.EXACT_SCORE, MatchTier.EXACT

        if search in text:
            return self.SUBSTRING_SCORE, MatchTier.SUBSTRING

        if text.startswith(search) or search.startswith(text):
            return self.PREFIX_SCORE, MatchTier.PREFIX

        subsequence_score = self._subsequence_score(search, text)
        if subsequence_score > 0:
            return (
                self.SUBSEQUENCE_BASE + subsequence_score * self.SUBSEQUENCE_SPAN,
                MatchTier.SUBSEQUENCE
            )

        similarity = self._edit_similarity(search, text)
        if similarity > self.EDIT_MIN_SIMILARITY:
            return similarity * self.EDIT_MULTIPLIER, MatchTier.EDIT_DISTANCE

        return 0.0, MatchTier.NO_MATCH

    def score(self, query: str, target: str) -> float:
        """Calculate the similarity score between query and target."""
        return self.match(query, target)[0]

    @staticmethod
    def _subsequence_score(search: str, text: str) -> float:
        """
        Score how well search occurs in text as an ordered subsequence.

        Returns 0 when some character of search cannot be found in order.
        """
        search_index = 0
        consecutive = 0
        max_consecutive = 0

        for char in text:
            if search_index >= len(search):
                break
            if char == search[search_index]:
                search_index += 1
                consecutive += 1
                max_consecutive = max(max_consecutive, consecutive)
            else:
                consecutive = 0

        if search_index < len(search) or not text:
            return 0.0

        base_score = search_index / len(text)
        consecutive_bonus = max_consecutive / len(search)
        return (base_score + consecutive_bonus) / 2

    @staticmethod
    def _edit_similarity(search: str, text: str) -> float:
        """Normalized Levenshtein similarity, 0 when both strings are empty."""
        max_len = max(len(search), len(text))
        if max_len == 0:
            return 0.0
        return 1 - (Levenshtein.distance(search, text) / max_len)


_default_similarity = StringSimilarity()

def score(query: str, target: str) -> float:
    """Score query against target with the default tier constants."""
    return _default_similarity.score(query, target)
