from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from auditor.controllers.audit_controller import AuditController
from fetcher.services.page_fetcher_service import fetch_page_content
from fetcher.utils.url_utils import UrlUtils
from seo_probe.core.managers.config_manager import config_manager
from seo_probe.core.services.report_service import format_report, report_payload, to_json
from seo_probe.core.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

SILENCED_LOGGERS = {"aiohttp": "WARNING", "asyncio": "WARNING"}


def _page_url(value: str) -> str:
    if not UrlUtils.is_valid_page_url(value):
        raise argparse.ArgumentTypeError(
            "Invalid URL format. Please provide a valid URL starting with http:// or https://"
        )
    return value.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seo-probe",
        description="Fetch a single page and report actionable SEO diagnostics."
    )
    parser.add_argument("-u", "--url", required=True, type=_page_url, help="URL of the page to analyze")
    parser.add_argument("-k", "--keyword", default="", help="Keyword to check for density")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--timeout", type=float, default=None, help="Fetch timeout in seconds")
    parser.add_argument("--log-level", default=None, help="Override debug.level from settings.json")
    return parser


def run(url: str, keyword: str = "", as_json: bool = False) -> int:
    """Fetches the page, runs the analysis and prints the report. Returns an exit code."""
    print(f"Fetching content from: {url}", file=sys.stderr)
    page = fetch_page_content(url)
    if page is None:
        print("Failed to fetch page content.", file=sys.stderr)
        return 1

    try:
        analysis = AuditController().analyze_page(page.text, url, keyword or None)
    except Exception as e:
        logger.error("Error occurred during SEO analysis of %s: %s", url, e, exc_info=True)
        return 1

    if as_json:
        print(to_json(report_payload(analysis, page.load_time_ms)))
    else:
        print(format_report(analysis, page.load_time_ms))
    return 0


def apply_overrides(args: argparse.Namespace) -> None:
    """Writes command-line overrides into the in-memory configuration."""
    if args.timeout is not None:
        config_manager.set_nested("fetcher.timeout", args.timeout)
    if args.log_level:
        config_manager.set_nested("debug.level", args.log_level.upper())


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    apply_overrides(args)

    level = config_manager.get_nested("debug.level", "WARNING")
    configure_logger(level, silenced_loggers=SILENCED_LOGGERS)

    return run(args.url, args.keyword, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
