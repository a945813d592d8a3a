# src/fetcher/utils/url_utils.py
import logging
import re

logger = logging.getLogger(__name__)

# Scheme, dotted host with a TLD, optional path without whitespace
PAGE_URL_PATTERN = re.compile(r"^(https?://)[\w.-]+(?:\.[a-z]{2,})+(/\S*)?$", re.IGNORECASE)


class UrlUtils:
    """A collection of static methods for validating page URLs."""

    @staticmethod
    def is_valid_page_url(url: str) -> bool:
        """Checks that the URL is an absolute http(s) URL with a real host name."""
        if not isinstance(url, str):
            return False
        return bool(PAGE_URL_PATTERN.match(url.strip()))

    @staticmethod
    def uses_https(url: str) -> bool:
        return url.startswith("https://")
