import re
from typing import Optional
from urllib.parse import urlparse

from ..core import CheckDefinition, Finding, RuleLimits, audit_spec
from ..document import MarkupDocument

# Anything but letters, digits, slashes and hyphens makes a path 'unclean'
_UNCLEAN_PATH_CHAR = re.compile(r"[^A-Za-z0-9/\-]")


# --- AUDIT RULES ---


@audit_spec(key="urlStructure")
def check_url_structure(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    """
    Checks SEO best practices for URL structure.
    Only the path and query are judged; scheme and host always contain ':' and '.'.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        # Unparseable input is judged as a whole
        parsed = None

    path = parsed.path if parsed else url
    has_query = bool(parsed.query) if parsed else False

    if _UNCLEAN_PATH_CHAR.search(path) or has_query:
        return Finding(
            key="urlStructure",
            message="URL is not clean. Use lowercase words separated by hyphens and avoid "
                    "underscores, special characters and query parameters.",
            severity="INFO", category="TECHNICAL"
        )
    return None


@audit_spec(key="https")
def check_https(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    if not url.startswith("https://"):
        return Finding(
            key="https",
            message="The page is not served over HTTPS. Switch to HTTPS, it is a ranking signal "
                    "and protects visitors.",
            severity="CRITICAL", category="TECHNICAL"
        )
    return None


@audit_spec(key="thirdPartyScripts")
def check_third_party_scripts(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    flagged = [
        src for src in doc.attributes_of("script[src]", "src")
        if any(marker.lower() in src.lower() for marker in limits.third_party_markers)
    ]
    if flagged:
        return Finding(
            key="thirdPartyScripts",
            message=f"{len(flagged)} third-party scripts detected (e.g. {flagged[0]}). "
                    f"Defer or remove them to reduce their impact on load time.",
            severity="WARNING", category="TECHNICAL"
        )
    return None


# --- DEFINITION ---
DEFINITION = CheckDefinition(
    group="TECHNICAL",
    checks=[check_url_structure, check_https, check_third_party_scripts]
)
