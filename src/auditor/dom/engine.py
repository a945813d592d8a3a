# src/auditor/dom/engine.py
import logging
from typing import Dict, List, Optional

from .core import Finding, InvalidInputError, RuleLimits
from .document import MarkupDocument
from .registry import CheckRegistry
from seo_probe.core.managers.config_manager import config_manager

logger = logging.getLogger(__name__)


def limits_from_config() -> RuleLimits:
    """Builds the check thresholds from the 'rules' section of settings.json."""
    defaults = RuleLimits()
    markers = config_manager.get_nested("rules.scripts.third_party_markers", defaults.third_party_markers)
    return RuleLimits(
        title_min=config_manager.get_nested("rules.title.min", defaults.title_min),
        title_max=config_manager.get_nested("rules.title.max", defaults.title_max),
        meta_desc_min=config_manager.get_nested("rules.meta_description.min", defaults.meta_desc_min),
        meta_desc_max=config_manager.get_nested("rules.meta_description.max", defaults.meta_desc_max),
        min_internal_links=config_manager.get_nested("rules.links.min_internal", defaults.min_internal_links),
        min_external_links=config_manager.get_nested("rules.links.min_external", defaults.min_external_links),
        min_words=config_manager.get_nested("rules.content.min_words", defaults.min_words),
        min_font_size_px=config_manager.get_nested("rules.font.min_size_px", defaults.min_font_size_px),
        third_party_markers=tuple(markers),
    )


class DiagnosticEngine:
    """
    Runs the ordered battery of diagnostic checks against one document.

    Each check is a pure function of (document, url, limits) returning at
    most one Finding. The engine folds the results into a FindingSet: an
    insertion-ordered mapping of finding key to remediation message.
    """

    def __init__(self, limits: Optional[RuleLimits] = None):
        """Discovers the available checks and resolves the thresholds (settings.json when not given)."""
        CheckRegistry.discover()
        self.checks = CheckRegistry.get_all_checks()
        self.limits = limits if limits is not None else limits_from_config()

        missing = CheckRegistry.get_missing_keys()
        if missing:
            logger.warning("No check registered for finding keys: %s", ", ".join(sorted(missing)))

    @staticmethod
    def _validate(document: MarkupDocument, url: str) -> None:
        if not isinstance(document, MarkupDocument):
            raise InvalidInputError(f"document must be a MarkupDocument, got {type(document).__name__}")
        if not isinstance(url, str):
            raise InvalidInputError(f"url must be a str, got {type(url).__name__}")

    def run_checks(self, document: MarkupDocument, url: str) -> List[Finding]:
        """
        Runs every check and returns the findings (with severity and category)
        in canonical order.

        Raises:
            InvalidInputError: if document or url has the wrong type.
        """
        self._validate(document, url)

        findings = []
        for check in self.checks:
            result = check(document, url, self.limits)
            if result is not None:
                findings.append(result)

        logger.debug("%d of %d checks reported a finding for %s", len(findings), len(self.checks), url)
        return findings

    def evaluate(self, document: MarkupDocument, url: str) -> Dict[str, str]:
        """Returns the FindingSet (key -> message) for one document and its URL."""
        return {finding.key: finding.message for finding in self.run_checks(document, url)}

    def possible_keys(self) -> List[str]:
        return [check.finding_key for check in self.checks]
