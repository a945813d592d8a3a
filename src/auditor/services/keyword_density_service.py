import logging
import re
from typing import Optional

from auditor.dom.document import MarkupDocument

logger = logging.getLogger(__name__)


class KeywordDensityCalculator:
    """
    Measures how often a keyword occurs in the visible body text of a page.

    Matching is case-insensitive and whole-word. The keyword is always taken
    literally: regex metacharacters are escaped before the pattern is built,
    and the word boundaries are added around it structurally.
    """

    @staticmethod
    def _keyword_pattern(keyword: str) -> re.Pattern:
        # (?<!\w)/(?!\w) behave like \b for word-character keywords, and keep
        # working for keywords that start or end with a symbol (e.g. 'c++').
        return re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)", re.IGNORECASE)

    def occurrences(self, document: MarkupDocument, keyword: Optional[str]) -> int:
        """Number of non-overlapping whole-word matches of the keyword in the body text."""
        text = document.body_text()
        keyword = (keyword or "").strip()
        if not text or not keyword:
            return 0
        return len(self._keyword_pattern(keyword).findall(text))

    def density(self, document: MarkupDocument, keyword: Optional[str]) -> float:
        """
        Keyword density as a percentage rounded to 2 decimals:
        occurrences / total words * 100.

        Empty body text or an empty keyword yields 0.
        """
        text = document.body_text()
        keyword = (keyword or "").strip()
        if not text or not keyword:
            return 0.0

        total_words = len(text.split())
        hits = self.occurrences(document, keyword)
        density = round(hits / total_words * 100, 2)

        logger.debug("Keyword '%s': %d hits in %d words (%.2f%%)", keyword, hits, total_words, density)
        return density
