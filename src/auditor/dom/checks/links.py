from typing import Optional

from ..core import CheckDefinition, Finding, RuleLimits, audit_spec
from ..document import MarkupDocument


# --- AUDIT RULES ---


@audit_spec(key="internalLinks")
def check_internal_links(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    """Root-relative anchors count as internal links."""
    if doc.count('a[href^="/"]') < limits.min_internal_links:
        return Finding(
            key="internalLinks",
            message="Consider adding more internal links to improve navigation and SEO.",
            severity="INFO", category="LINKS"
        )
    return None


@audit_spec(key="externalLinks")
def check_external_links(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    if doc.count('a[href^="http"]') < limits.min_external_links:
        return Finding(
            key="externalLinks",
            message="Consider adding more external links to reputable sites.",
            severity="INFO", category="LINKS"
        )
    return None


# --- DEFINITION ---
DEFINITION = CheckDefinition(
    group="LINKS",
    checks=[check_internal_links, check_external_links]
)
