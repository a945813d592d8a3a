import logging
from typing import Dict, Optional

from auditor.dom.core import InvalidInputError
from auditor.dom.document import MarkupDocument
from auditor.dom.engine import DiagnosticEngine
from auditor.model import PageAnalysis
from auditor.services.keyword_density_service import KeywordDensityCalculator

logger = logging.getLogger(__name__)


def _parse(raw_markup: Optional[str]) -> MarkupDocument:
    if raw_markup is not None and not isinstance(raw_markup, str):
        raise InvalidInputError(f"markup must be a str, got {type(raw_markup).__name__}")
    return MarkupDocument(raw_markup)


def evaluate_diagnostics(raw_markup: Optional[str], url: str) -> Dict[str, str]:
    """Parses the markup and returns its FindingSet (key -> remediation message)."""
    return DiagnosticEngine().evaluate(_parse(raw_markup), url)


def compute_keyword_density(raw_markup: Optional[str], keyword: Optional[str]) -> float:
    """Parses the markup and returns the keyword density percentage (0 for empty text or keyword)."""
    return KeywordDensityCalculator().density(_parse(raw_markup), keyword)


class AuditController:
    """
    Orchestrates a single-page analysis: parses the markup once and runs
    both the diagnostic checks and the keyword density measurement on it.
    """

    def __init__(self, engine: Optional[DiagnosticEngine] = None,
                 calculator: Optional[KeywordDensityCalculator] = None):
        self.engine = engine or DiagnosticEngine()
        self.calculator = calculator or KeywordDensityCalculator()

    def analyze_page(self, raw_markup: Optional[str], url: str, keyword: Optional[str] = None) -> PageAnalysis:
        """
        Runs the full analysis for one page.

        Args:
            raw_markup (Optional[str]): The fetched page markup. None/'' is an empty page.
            url (str): The URL the markup was fetched from.
            keyword (Optional[str]): Term to measure density for; skipped when empty.

        Returns:
            PageAnalysis: FindingSet, detailed findings, density and content metrics.
        """
        document = _parse(raw_markup)
        details = self.engine.run_checks(document, url)

        analysis = PageAnalysis(
            url=url,
            findings={f.key: f.message for f in details},
            details=details,
            word_count=document.word_count(),
            raw_length=document.raw_length(),
            serialized_length=document.serialized_length(),
            text_ratio=document.text_ratio(),
        )

        if keyword:
            analysis.keyword = keyword
            analysis.keyword_density = self.calculator.density(document, keyword)

        logger.info("Analysed %s: %d findings (%d critical)", url, len(details), analysis.critical_count)
        return analysis


def analyze_page(raw_markup: Optional[str], url: str, keyword: Optional[str] = None) -> PageAnalysis:
    return AuditController().analyze_page(raw_markup, url, keyword)
