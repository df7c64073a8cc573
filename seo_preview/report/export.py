from __future__ import annotations

import csv
import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Iterable

logger = logging.getLogger(__name__)

ISSUE_FIELDNAMES = ['url', 'severity', 'priority', 'field', 'message', 'category']


def report_filename(domain: str, output_format: str, prefix: str = "seo_report") -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_domain_name = (domain or "page").replace(".", "_").replace(":", "_")
    return f"{prefix}_{safe_domain_name}_{timestamp}.{output_format}"


def format_text_report(report: Dict[str, Any]) -> str:
    analysis = report.get("analysis", {})
    band = report.get("score_band", {})
    lines = [
        f"URL Analyzed: {report.get('target_url')}",
        f"Timestamp: {report.get('analysis_timestamp')}",
        f"Score: {analysis.get('score')} ({band.get('description', '')})",
        "",
        "Metadata:",
    ]
    for name, value in report.get("metadata", {}).items():
        if isinstance(value, list):
            value = ", ".join(value)
        lines.append(f"  {name}: {value or '(not found)'}")
    lines.append("")
    lines.append("Issues:")
    for issue in analysis.get("issues", []) or []:
        lines.append(f"  [{issue['severity']}] {issue['message']} ({issue['field']})")
    if not analysis.get("issues"):
        lines.append("  None")
    lines.append("")
    lines.append("Recommendations:")
    for rec in analysis.get("recommendations", []) or []:
        lines.append(f"  - {rec}")
    if not analysis.get("recommendations"):
        lines.append("  None")
    return "\n".join(lines) + "\n"


def save_report(report: Dict[str, Any], output_format: str = "json", directory: str = "reports") -> str:
    """Writes the report to ``directory`` and returns the file path."""
    os.makedirs(directory, exist_ok=True)
    filename = os.path.join(directory, report_filename(report.get("domain", ""), output_format))
    with open(filename, "w", encoding="utf-8") as f:
        if output_format == "json":
            json.dump(report, f, indent=4)
        else:
            f.write(format_text_report(report))
    logger.info("Report saved to %s", filename)
    return filename


def export_issues_csv(path: str, url: str, issues: Iterable[Dict[str, Any]]):
    with open(path, 'w', newline='', encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=ISSUE_FIELDNAMES)
        w.writeheader()
        for i in issues:
            w.writerow({
                'url': url,
                'severity': i.get('severity'),
                'priority': i.get('priority'),
                'field': i.get('field'),
                'message': i.get('message'),
                'category': i.get('category'),
            })
