from typing import Optional

from ..core import CheckDefinition, Finding, RuleLimits, audit_spec
from ..document import MarkupDocument


# --- AUDIT RULES ---


@audit_spec(key="h1")
def check_h1(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    """The first <h1> must exist and carry text."""
    if not doc.text_of("h1"):
        return Finding(
            key="h1",
            message="Missing H1 tag. Add a primary heading (H1) to the page.",
            severity="CRITICAL", category="CONTENT"
        )
    return None


@audit_spec(key="headings")
def check_headings(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    if doc.count("h2") == 0:
        return Finding(
            key="headings",
            message="No H2 headings found. Structure the content with subheadings (H2-H6).",
            severity="WARNING", category="CONTENT"
        )
    return None


@audit_spec(key="images")
def check_alt_text(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    # A missing alt and an empty alt are counted alike
    missing = doc.count_without_attribute("img", "alt")
    if missing > 0:
        return Finding(
            key="images",
            message=f"{missing} images are missing alt attributes. "
                    f"Add descriptive alt text for accessibility.",
            severity="WARNING", category="CONTENT"
        )
    return None


@audit_spec(key="wordCount")
def check_word_count(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    words = doc.word_count()
    if words < limits.min_words:
        return Finding(
            key="wordCount",
            message=f"Thin content: the page has {words} words. "
                    f"Aim for at least {limits.min_words} words of useful text.",
            severity="WARNING", category="CONTENT"
        )
    return None


@audit_spec(key="fontSize")
def check_font_size(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    """Only a declared px size is judged; pages without one pass."""
    size = doc.declared_font_size()
    if size is not None and size < limits.min_font_size_px:
        return Finding(
            key="fontSize",
            message=f"Body font size is {size:g}px. Use at least {limits.min_font_size_px:g}px for legibility "
                    f"on mobile devices.",
            severity="INFO", category="CONTENT"
        )
    return None


@audit_spec(key="lazyLoading")
def check_lazy_loading(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    if doc.count('img[loading="lazy" i]') < 1:
        return Finding(
            key="lazyLoading",
            message="No lazy-loaded images found. Add loading=\"lazy\" to images below the fold.",
            severity="INFO", category="CONTENT"
        )
    return None


# --- DEFINITION ---
DEFINITION = CheckDefinition(
    group="CONTENT",
    checks=[check_h1, check_headings, check_alt_text, check_word_count, check_font_size, check_lazy_loading]
)
