"""Read-only presentation views over a metadata record and its analysis."""

from .categories import categorize, SEO_FIELDS, SMO_FIELDS
from .descriptions import describe_issue, recommendation_details, score_band, PRIORITY_LABELS
from .previews import build_previews
