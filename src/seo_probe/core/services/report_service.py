import json
from typing import Any, Dict, Optional

from auditor.model import PageAnalysis


def format_report(analysis: PageAnalysis, load_time_ms: Optional[float] = None) -> str:
    """
    Renders a page analysis as plain text: one 'KEY: message' line per finding,
    followed by the keyword density when one was measured.
    """
    header = f"SEO Suggestions for {analysis.url}"
    if load_time_ms is not None:
        header += f" (Page Load Time: {load_time_ms:.0f} ms)"

    lines = [header + ":", ""]
    for key, message in analysis.findings.items():
        lines.append(f"{key.upper()}: {message}")

    if analysis.keyword:
        lines.append("")
        lines.append(f'Keyword Density for "{analysis.keyword}": {analysis.keyword_density:.2f}%')

    return "\n".join(lines)


def report_payload(analysis: PageAnalysis, load_time_ms: Optional[float] = None) -> Dict[str, Any]:
    """Machine-readable report; the 'findings' object keeps the FindingSet order."""
    payload = analysis.model_dump(mode="json")
    payload["load_time_ms"] = load_time_ms
    return payload


def to_json(data: Any, indent: int = 2, ensure_ascii: bool = False) -> str:
    """
    Convert Python object to JSON string.

    Args:
        data: Python object (dict, list, etc.)
        indent: Indentation level for pretty-printing (default: 2)
        ensure_ascii: If True, escape non-ASCII chars (default: False)

    Returns:
        str: JSON string
    """
    return json.dumps(data, ensure_ascii=ensure_ascii, indent=indent)
