# app.py
import argparse
import copy
import json
import logging
import os
from datetime import datetime
from urllib.parse import urlparse

from flask import Flask, request, jsonify

from seo_preview.base_module import is_valid_url
from seo_preview.errors import FetchError, InvalidURLError
from seo_preview.extraction import MetadataExtractor
from seo_preview.scoring import ScoringModule
from seo_preview.models import sort_for_display
from seo_preview.report import categorize, build_previews, describe_issue, recommendation_details, score_band, PRIORITY_LABELS
from seo_preview.report.categories import SMO_FIELDS
from seo_preview.report.export import save_report, export_issues_csv

logger = logging.getLogger("seo_preview")

DEFAULT_CONFIG = {
    "MetadataExtractor": {},
    "ScoringModule": {
        "title_min_length": 30, "title_max_length": 60,
        "desc_min_length": 120, "desc_max_length": 160,
        "error_penalty": 15, "warning_penalty": 5, "info_penalty": 0,
    },
    "Global": {
        "request_timeout": 15,
        "http_retries_total": 0,
        "access_paths": [
            "",
            "https://api.allorigins.win/raw?url=",
            "https://cors-anywhere.herokuapp.com/",
            "https://api.codetabs.com/v1/proxy?quest=",
        ],
    },
}

app = Flask(__name__)
# Configuration used by the API; replaced by run_cli when --config is given
flask_app_config = copy.deepcopy(DEFAULT_CONFIG)


def merge_config(base, overrides):
    """Shallow merge per section: dict sections are updated, anything else replaced."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path):
    current_config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return current_config
    try:
        with open(path, 'r') as f:
            current_config = merge_config(current_config, json.load(f))
        logger.info("Loaded custom configuration from %s", path)
    except FileNotFoundError:
        logger.warning("Config file %s not found. Using default settings.", path)
    except json.JSONDecodeError:
        logger.warning("Error decoding JSON from %s. Using default settings.", path)
    return current_config


class SEOAnalyzer:
    def __init__(self, url, output_format="json", config=None):
        self.config = config if config else copy.deepcopy(DEFAULT_CONFIG)
        if not is_valid_url(url):
            raise InvalidURLError()
        self.url = url
        self.domain = urlparse(self.url).netloc
        self.report = {}
        self.output_format = output_format
        self.modules = []

    def module_config(self, name):
        cfg = dict(self.config.get(name, {}))
        cfg["Global"] = self.config.get("Global", {})
        return cfg

    def register_module(self, module_instance):
        self.modules.append(module_instance)

    def run_analysis(self, target_url=None, html=None):
        """
        Fetch (unless html is given), extract, score and build the presentation views.

        Raises:
            InvalidURLError: target_url is not an absolute http(s) URL.
            FetchError: the page could not be retrieved.
        """
        if target_url is not None:
            if not is_valid_url(target_url):
                raise InvalidURLError()
            self.url = target_url
            self.domain = urlparse(self.url).netloc
        self.modules = []

        extractor = MetadataExtractor(config=self.module_config("MetadataExtractor"))
        scoring = ScoringModule(config=self.module_config("ScoringModule"))
        self.register_module(extractor)
        self.register_module(scoring)

        logger.info("Starting SEO analysis for: %s", self.url)
        attributes = {}
        attributes.update(extractor.analyze(self.url, html=html))
        attributes.update(scoring.analyze(self.url, full_report_data=attributes))

        record = attributes["MetadataExtractor"]["record"]
        result = attributes["ScoringModule"]["result"]
        band = score_band(result.score)

        self.report = {
            "analysis_timestamp": datetime.now().isoformat(),
            "target_url": self.url,
            "domain": self.domain,
            "metadata": record.to_dict(),
            "analysis": result.to_dict(),
            "summary": {
                "errors": result.error_count,
                "warnings": result.warning_count,
                "recommendations": len(result.recommendations),
            },
            "score_band": {"label": band.label, "description": band.description},
            "issue_cards": [
                {
                    **issue.to_dict(),
                    "priority": PRIORITY_LABELS.get(issue.severity),
                    "details": describe_issue(issue),
                    "category": "SMO" if issue.field in SMO_FIELDS else "SEO",
                }
                for issue in sort_for_display(result.issues)
            ],
            "recommendation_details": [
                {"recommendation": rec, "details": recommendation_details(rec)}
                for rec in result.recommendations
            ],
            "categories": categorize(record, result).to_dict(),
            "previews": {name: p.to_dict() for name, p in build_previews(record, self.url).items()},
        }
        logger.info("SEO analysis complete: score=%s", result.score)
        return self.report

    def save_report_to_file(self, directory="reports"):
        try:
            return save_report(self.report, self.output_format, directory)
        except IOError as e:
            logger.error("Error saving report: %s", e)
            return None


# --- Flask Routes ---
@app.route('/health', methods=['GET'])
def health_endpoint():
    return jsonify({"status": "ok"})


@app.route('/analyze', methods=['POST', 'GET'])
def analyze_endpoint():
    if request.method == 'GET':
        data = request.args
    else:
        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            return jsonify({"error": "Invalid JSON payload"}), 400

    url_to_analyze = data.get('url')
    if not url_to_analyze:
        return jsonify({"error": "URL parameter is required"}), 400
    if not isinstance(url_to_analyze, str):
        return jsonify({"error": "URL parameter must be a string"}), 400
    html = data.get('html')
    if html is not None and not isinstance(html, str):
        return jsonify({"error": "html parameter must be a string"}), 400

    try:
        analyzer_instance = SEOAnalyzer(url=url_to_analyze, config=copy.deepcopy(flask_app_config))
        return jsonify(analyzer_instance.run_analysis(html=html))
    except InvalidURLError as e:
        return jsonify(e.to_dict()), 400
    except FetchError as e:
        return jsonify(e.to_dict()), 502


def print_summary(report):
    analysis = report["analysis"]
    print("\n--- Analysis Summary ---")
    print(f"URL Analyzed: {report['target_url']}")
    print(f"Timestamp: {report['analysis_timestamp']}")
    print(f"Overall SEO Score: {analysis['score']} - {report['score_band']['description']}")
    summary = report["summary"]
    print(f"{summary['errors']} Errors, {summary['warnings']} Warnings, {summary['recommendations']} Recommendations")
    for card in report["issue_cards"]:
        print(f"  [{card['priority']}] {card['message']} (field: {card['field']})")
    for rec in analysis["recommendations"]:
        print(f"  * {rec}")


def run_cli(argv=None):
    parser = argparse.ArgumentParser(description="SEO metadata analyzer and share preview generator")
    parser.add_argument("url", nargs='?', default=None, help="The URL to analyze (omit to run in API/server mode).")
    parser.add_argument("--html", type=str, default=None, help="Analyze a local HTML file instead of fetching; the URL is used as its base.")
    parser.add_argument("--output", choices=["json", "txt"], default="json", help="Output format for the report.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--export-csv", type=str, default=None, help="Directory to export issues.csv into.")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds (overrides config).")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host for API mode.")
    parser.add_argument("--port", type=int, default=5000, help="Port for API mode.")
    parser.add_argument("--debug", action="store_true", help="Verbose logging.")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    global flask_app_config
    current_config = load_config(args.config)
    if args.timeout is not None:
        current_config.setdefault("Global", {})["request_timeout"] = args.timeout
    flask_app_config = copy.deepcopy(current_config)

    if not args.url:
        logger.info("Starting Flask server on http://%s:%s/ (API mode)", args.host, args.port)
        app.run(host=args.host, port=args.port, debug=False)
        return 0

    html = None
    if args.html:
        with open(args.html, 'rb') as f:
            html = f.read()

    try:
        analyzer = SEOAnalyzer(args.url, output_format=args.output, config=current_config)
        report = analyzer.run_analysis(html=html)
    except FetchError as e:
        print(f"Error: {e.message}")
        return 1

    print_summary(report)
    path = analyzer.save_report_to_file()
    if path:
        print(f"Report saved to {path}")
    if args.export_csv:
        os.makedirs(args.export_csv, exist_ok=True)
        csv_path = os.path.join(args.export_csv, "issues.csv")
        export_issues_csv(csv_path, report["target_url"], report["issue_cards"])
        print(f"Issues exported to {csv_path}")
    return 0


def main():
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()
