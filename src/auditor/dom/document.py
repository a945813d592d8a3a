# src/auditor/dom/document.py
import logging
import re
from typing import Iterator, List, Optional

from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString

logger = logging.getLogger(__name__)

# Elements whose contents never render as page text
INVISIBLE_TAGS = ("script", "style", "noscript", "template")

_WHITESPACE = re.compile(r"\s+")
_BODY_RULE = re.compile(r"(?:^|[\s},;])body\s*(?:,[^{]*)?\{([^}]*)\}", re.IGNORECASE)
_FONT_SIZE_PX = re.compile(r"font-size\s*:\s*([0-9]*\.?[0-9]+)\s*px", re.IGNORECASE)


def collapse_whitespace(text: str) -> str:
    """Collapses whitespace runs into a single space and trims the result."""
    return _WHITESPACE.sub(" ", text).strip()


def _attr_value(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    # Multi-valued attributes (class, rel) come back as lists
    if isinstance(value, list):
        return " ".join(value)
    return value


class MarkupDocument:
    """
    Parse-once, read-only view of a single page's markup.

    The raw string is parsed permissively with 'html.parser': unknown or
    unbalanced tags are recovered, never rejected. Every query is a pure read
    over the parse tree; nothing mutates it after construction.
    """

    def __init__(self, html: Optional[str]):
        self._raw = html or ""
        # Basic cleanup of potentially dirty HTML (e.g., BOM)
        clean_html = self._raw.replace('\ufeff', '').strip()
        self._soup = BeautifulSoup(clean_html, 'html.parser')
        self._body_text: Optional[str] = None

    # --- Element queries ---

    def text_of(self, selector: str) -> str:
        """Whitespace-collapsed text of the first match, or '' if nothing matches."""
        tag = self._soup.select_one(selector)
        if tag is None:
            return ""
        return collapse_whitespace(tag.get_text(" "))

    def attribute_of(self, selector: str, name: str) -> Optional[str]:
        """
        Attribute value of the first match.

        Returns None when nothing matches or the element lacks the attribute,
        and '' when the attribute is present but empty.
        """
        tag = self._soup.select_one(selector)
        if tag is None:
            return None
        return _attr_value(tag, name)

    def attributes_of(self, selector: str, name: str) -> List[str]:
        """Values of the given attribute for every match that carries it."""
        values = []
        for tag in self._soup.select(selector):
            value = _attr_value(tag, name)
            if value is not None:
                values.append(value)
        return values

    def raw_texts_of(self, selector: str) -> List[str]:
        """Unmodified string content of every match (script and style bodies)."""
        return [tag.get_text() for tag in self._soup.select(selector)]

    def count(self, selector: str) -> int:
        return len(self._soup.select(selector))

    def count_without_attribute(self, selector: str, name: str) -> int:
        """Counts matches that lack the attribute or carry it empty."""
        missing = 0
        for tag in self._soup.select(selector):
            value = _attr_value(tag, name)
            if value is None or not value.strip():
                missing += 1
        return missing

    # --- Content ---

    def _visible_strings(self, root: Tag) -> Iterator[str]:
        for string in root.find_all(string=True):
            # Comments, doctypes, CDATA and processing instructions
            if isinstance(string, PreformattedString) or not isinstance(string, NavigableString):
                continue
            names = [parent.name for parent in string.parents]
            if any(name in INVISIBLE_TAGS for name in names):
                continue
            # Document metadata; an inline <svg><title> stays part of the body
            if "head" in names or ("title" in names and "svg" not in names):
                continue
            yield string

    def body_text(self) -> str:
        """
        Visible text of the document body, whitespace collapsed and trimmed.

        'html.parser' does not relocate stray content the way browsers do:
        text after </body>, or a page without any <body>, ends up outside the
        body element. The whole tree is therefore walked with the <head>
        subtree left out.
        """
        if self._body_text is None:
            self._body_text = collapse_whitespace(" ".join(self._visible_strings(self._soup)))
        return self._body_text

    def word_count(self) -> int:
        """Whitespace-separated tokens of the body text; empty text counts as 0 words."""
        return len(self.body_text().split())

    def declared_font_size(self) -> Optional[float]:
        """
        Body font-size in px, taken from an inline style on <body> or from a
        `body { ... }` rule inside a <style> element. None if not declared in px.
        """
        body = self._soup.body
        if body is not None:
            match = _FONT_SIZE_PX.search(_attr_value(body, "style") or "")
            if match:
                return float(match.group(1))

        for css in self.raw_texts_of("style"):
            for rule in _BODY_RULE.finditer(css):
                match = _FONT_SIZE_PX.search(rule.group(1))
                if match:
                    return float(match.group(1))
        return None

    # --- Sizes ---

    def raw_length(self) -> int:
        return len(self._raw)

    def serialized_length(self) -> int:
        return len(str(self._soup))

    def text_ratio(self) -> float:
        """Visible text length as a percentage of the raw markup length."""
        if not self._raw:
            return 0.0
        return round(len(self.body_text()) / len(self._raw) * 100, 2)
