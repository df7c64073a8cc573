from ..models import Issue

DEFAULT_RULES = {
    "title_min_length": 30,
    "title_max_length": 60,
    "desc_min_length": 120,
    "desc_max_length": 160,
    "error_penalty": 15,
    "warning_penalty": 5,
    "info_penalty": 0,
}

OPEN_GRAPH_FIELDS = ("og_title", "og_description", "og_image")
TWITTER_CARD_FIELDS = ("twitter_card", "twitter_title", "twitter_description", "twitter_image")

OPEN_GRAPH_RECOMMENDATION = "Add Open Graph meta tags for better social media sharing"
TWITTER_CARD_RECOMMENDATION = "Add Twitter Card meta tags for better Twitter sharing"


def _add_issue(findings, severity, message, field):
    findings["issues"].append(Issue(severity=severity, message=message, field=field))


def check_title(record, findings, rules):
    if not record.title:
        _add_issue(findings, "error", "Missing title tag", "title")
    elif not rules["title_min_length"] <= len(record.title) <= rules["title_max_length"]:
        _add_issue(
            findings, "warning",
            f"Title length should be between {rules['title_min_length']}-{rules['title_max_length']} characters",
            "title",
        )


def check_description(record, findings, rules):
    if not record.description:
        _add_issue(findings, "error", "Missing meta description", "description")
    elif not rules["desc_min_length"] <= len(record.description) <= rules["desc_max_length"]:
        _add_issue(
            findings, "warning",
            f"Description length should be between {rules['desc_min_length']}-{rules['desc_max_length']} characters",
            "description",
        )


def check_keywords(record, findings, rules):
    if not record.keywords:
        _add_issue(findings, "warning", "Missing meta keywords", "keywords")


def check_open_graph(record, findings, rules):
    # One issue for the whole set, attributed to og_title.
    if not all(getattr(record, name) for name in OPEN_GRAPH_FIELDS):
        _add_issue(findings, "warning", "Missing Open Graph meta tags", "og_title")
        findings["recommendations"].append(OPEN_GRAPH_RECOMMENDATION)


def check_twitter_card(record, findings, rules):
    if not all(getattr(record, name) for name in TWITTER_CARD_FIELDS):
        _add_issue(findings, "warning", "Missing Twitter Card meta tags", "twitter_card")
        findings["recommendations"].append(TWITTER_CARD_RECOMMENDATION)


# Evaluation order decides the order of issues and recommendations.
RULES = (
    check_title,
    check_description,
    check_keywords,
    check_open_graph,
    check_twitter_card,
)
