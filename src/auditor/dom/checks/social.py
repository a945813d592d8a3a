from typing import Optional

from ..core import CheckDefinition, Finding, RuleLimits, audit_spec
from ..document import MarkupDocument


@audit_spec(key="structuredData")
def check_structured_data(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    """Either a non-empty JSON-LD block or microdata (itemprop) satisfies this rule."""
    has_json_ld = any(body.strip() for body in doc.raw_texts_of('script[type="application/ld+json" i]'))
    if not has_json_ld and doc.count("[itemprop]") == 0:
        return Finding(
            key="structuredData",
            message="No structured data found. Add schema.org markup (JSON-LD or microdata) "
                    "to qualify for rich results.",
            severity="WARNING", category="SOCIAL"
        )
    return None


@audit_spec(key="ogTags")
def check_open_graph(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    if doc.count('meta[property="og:title" i]') == 0:
        return Finding(
            key="ogTags",
            message="Missing Open Graph tags. Add og:title, og:description and og:image for social sharing.",
            severity="INFO", category="SOCIAL"
        )
    return None


@audit_spec(key="twitterCard")
def check_twitter_card(doc: MarkupDocument, url: str, limits: RuleLimits) -> Optional[Finding]:
    if doc.count('meta[name="twitter:card" i]') == 0:
        return Finding(
            key="twitterCard",
            message="Missing Twitter card. Add <meta name=\"twitter:card\"> to control how links render on X/Twitter.",
            severity="INFO", category="SOCIAL"
        )
    return None


DEFINITION = CheckDefinition(
    group="SOCIAL",
    checks=[check_structured_data, check_open_graph, check_twitter_card]
)
