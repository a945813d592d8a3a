"""
Static advisories. There is no computable signal for these on a single page,
so they are always part of the result.
"""
from typing import Optional

from ..core import CheckDefinition, Finding, RuleLimits, audit_spec
from ..document import MarkupDocument


@audit_spec(key="performance")
def advise_performance(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    return Finding(
        key="performance",
        message="Optimize page speed: compress images, minify CSS and JavaScript, and enable browser caching.",
        severity="INFO", category="ADVISORY"
    )


@audit_spec(key="titleUniqueness")
def advise_title_uniqueness(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    return Finding(
        key="titleUniqueness",
        message="Make sure this title is unique across the site. Duplicate titles compete with each other.",
        severity="INFO", category="ADVISORY"
    )


@audit_spec(key="mobileFriendly")
def advise_mobile_friendly(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    return Finding(
        key="mobileFriendly",
        message="Verify the page is mobile-friendly: responsive layout, readable text and adequately sized tap targets.",
        severity="INFO", category="ADVISORY"
    )


DEFINITION = CheckDefinition(
    group="ADVISORY",
    checks=[advise_performance, advise_title_uniqueness, advise_mobile_friendly]
)
