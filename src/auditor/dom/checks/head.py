from typing import Optional

from ..core import CheckDefinition, Finding, RuleLimits, audit_spec
from ..document import MarkupDocument


# --- AUDIT RULES ---


@audit_spec(key="title")
def check_title(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    """Validates the presence and length of the <title> tag."""
    title = doc.text_of("title:not(svg title)")
    if not title:
        return Finding(
            key="title",
            message="Missing title tag. Add a unique, descriptive title.",
            severity="CRITICAL", category="HEAD"
        )
    if not limits.title_min <= len(title) <= limits.title_max:
        return Finding(
            key="title",
            message=(
                f"Title should be between {limits.title_min} and {limits.title_max} characters "
                f"(currently {len(title)})."
            ),
            severity="WARNING", category="HEAD"
        )
    return None


@audit_spec(key="metaDescription")
def check_meta_desc(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    """Validates the presence and length of the meta description."""
    content = (doc.attribute_of('meta[name="description" i]', "content") or "").strip()
    if not content:
        return Finding(
            key="metaDescription",
            message="Missing meta description. Add a concise summary.",
            severity="WARNING", category="HEAD"
        )
    if not limits.meta_desc_min <= len(content) <= limits.meta_desc_max:
        return Finding(
            key="metaDescription",
            message=(
                f"Meta description should be between {limits.meta_desc_min} and "
                f"{limits.meta_desc_max} characters (currently {len(content)})."
            ),
            severity="INFO", category="HEAD"
        )
    return None


@audit_spec(key="canonical")
def check_canonical(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    """Ensures a canonical URL is defined to prevent duplicate content issues."""
    href = doc.attribute_of('link[rel~="canonical" i]', "href")
    if not href or not href.strip():
        return Finding(
            key="canonical",
            message="Missing canonical link. Add <link rel=\"canonical\"> pointing to the preferred URL.",
            severity="WARNING", category="HEAD"
        )
    return None


@audit_spec(key="viewport")
def check_viewport(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    if doc.count('meta[name="viewport" i]') == 0:
        return Finding(
            key="viewport",
            message="Missing viewport meta tag. Add <meta name=\"viewport\" content=\"width=device-width, "
                    "initial-scale=1\"> for mobile rendering.",
            severity="CRITICAL", category="HEAD"
        )
    return None


@audit_spec(key="robotsMeta")
def check_robots_meta(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    if doc.count('meta[name="robots" i]') == 0:
        return Finding(
            key="robotsMeta",
            message="Missing robots meta tag. Declare indexing directives, e.g. <meta name=\"robots\" "
                    "content=\"index, follow\">.",
            severity="INFO", category="HEAD"
        )
    return None


@audit_spec(key="favicon")
def check_favicon(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    # rel~=icon covers both rel="icon" and rel="shortcut icon"
    hrefs = [h for h in doc.attributes_of('link[rel~="icon" i]', "href") if h.strip()]
    if not hrefs:
        return Finding(
            key="favicon",
            message="Missing favicon. Add <link rel=\"icon\"> so browsers and search results can show the site icon.",
            severity="INFO", category="HEAD"
        )
    return None


@audit_spec(key="hreflang")
def check_hreflang(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    if doc.count('link[rel~="alternate" i][hreflang]') < 1:
        return Finding(
            key="hreflang",
            message="No hreflang alternates found. Add <link rel=\"alternate\" hreflang=\"...\"> "
                    "for language or regional versions of this page.",
            severity="INFO", category="HEAD"
        )
    return None


# --- DEFINITION ---
DEFINITION = CheckDefinition(
    group="HEAD",
    checks=[check_title, check_meta_desc, check_canonical, check_viewport,
            check_robots_meta, check_favicon, check_hreflang]
)
