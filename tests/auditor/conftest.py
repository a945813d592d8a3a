# tests/auditor/conftest.py
import pytest

from auditor.dom.core import RuleLimits
from auditor.dom.engine import DiagnosticEngine

FILLER_TEXT = " ".join(["lorem"] * 320)


def build_page(
        title="A well sized page title",
        description="x" * 100,
        head_extra="",
        body_extra="",
        h1="Main heading",
        include_filler=True,
):
    """Builds a page that passes every computed check unless overridden."""
    title_tag = f"<title>{title}</title>" if title is not None else ""
    desc_tag = f'<meta name="description" content="{description}">' if description is not None else ""
    h1_tag = f"<h1>{h1}</h1>" if h1 is not None else ""
    internal = "".join(f'<a href="/section-{i}">Section {i}</a>' for i in range(5))
    filler = f"<p>{FILLER_TEXT}</p>" if include_filler else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  {title_tag}
  {desc_tag}
  <link rel="canonical" href="https://example.com/clean-page">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <meta name="robots" content="index, follow">
  <meta property="og:title" content="Example">
  <meta name="twitter:card" content="summary">
  <link rel="icon" href="/favicon.ico">
  <link rel="alternate" hreflang="nl" href="https://example.com/nl/clean-page">
  <script type="application/ld+json">{{"@context": "https://schema.org", "@type": "Article"}}</script>
  {head_extra}
</head>
<body>
  {h1_tag}
  <h2>Sub heading</h2>
  <img src="/hero.png" alt="Hero image" loading="lazy">
  {internal}
  <a href="https://example.org/">Example org</a>
  <a href="http://example.net/">Example net</a>
  {filler}
  {body_extra}
</body>
</html>"""


@pytest.fixture
def good_page():
    return build_page()


@pytest.fixture
def engine():
    """Een engine met de standaard drempelwaarden, los van settings.json."""
    return DiagnosticEngine(limits=RuleLimits())


@pytest.fixture
def page_builder():
    return build_page
