from typing import Callable, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict


# Canonical display order of finding keys. Engine output follows this order.
FINDING_KEYS: Tuple[str, ...] = (
    "title",
    "metaDescription",
    "canonical",
    "viewport",
    "structuredData",
    "h1",
    "headings",
    "images",
    "internalLinks",
    "externalLinks",
    "ogTags",
    "wordCount",
    "robotsMeta",
    "favicon",
    "hreflang",
    "urlStructure",
    "https",
    "twitterCard",
    "fontSize",
    "lazyLoading",
    "thirdPartyScripts",
    "performance",
    "titleUniqueness",
    "mobileFriendly",
)


class InvalidInputError(TypeError):
    """Raised at the API boundary when markup, document or URL has the wrong type."""


class Finding(BaseModel):
    """
    A single SEO observation produced by one check.
    Only `key` and `message` make up the FindingSet; severity and category
    are carried along for reporting.
    """
    model_config = ConfigDict(frozen=True)

    key: str
    message: str
    severity: str = "WARNING"  # 'CRITICAL', 'WARNING', 'INFO'
    category: str = "CONTENT"  # e.g. 'HEAD', 'CONTENT', 'LINKS', 'SOCIAL', 'TECHNICAL', 'ADVISORY'


class RuleLimits(BaseModel):
    """Thresholds used by the diagnostic checks."""
    model_config = ConfigDict(frozen=True)

    title_min: int = 10
    title_max: int = 60
    meta_desc_min: int = 50
    meta_desc_max: int = 160
    min_internal_links: int = 5
    min_external_links: int = 2
    min_words: int = 300
    min_font_size_px: float = 14
    third_party_markers: Tuple[str, ...] = ("facebook", "twitter", "ads")


# (document, url, limits) -> Optional[Finding]
CheckFunc = Callable[..., Optional[Finding]]


def audit_spec(key: str):
    """
    Decorator to declare which finding key a check function may return.
    Facilitates auto-discovery and ordering by the CheckRegistry.
    """
    def decorator(func):
        func.finding_key = key
        return func
    return decorator


class CheckDefinition:
    """
    Configuration object grouping related checks under one category.
    """

    def __init__(self, group: str, checks: Optional[List[CheckFunc]] = None):
        self.group = group
        self.checks = checks or []

        keys: Set[str] = set()
        for check in self.checks:
            if not hasattr(check, "finding_key"):
                raise ValueError(f"Check {check.__name__} in group '{group}' has no @audit_spec key")
            keys.add(check.finding_key)

        self.keys = sorted(keys)
