from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..models import AnalysisResult, Issue, MetadataRecord

SEO_FIELDS: Tuple[str, ...] = (
    "title", "description", "keywords", "canonical", "robots",
    "viewport", "charset", "language", "author", "favicon",
)
SMO_FIELDS: Tuple[str, ...] = (
    "og_title", "og_description", "og_image",
    "twitter_card", "twitter_title", "twitter_description", "twitter_image",
)
SMO_TOPICS = ("open graph", "twitter card")


@dataclass(frozen=True)
class CategoryBucket:
    name: str
    fields: Tuple[str, ...]
    issues: Tuple[Issue, ...]
    recommendations: Tuple[str, ...]
    passed_checks: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "fields": list(self.fields),
            "issues": [issue.to_dict() for issue in self.issues],
            "recommendations": list(self.recommendations),
            "passed_checks": self.passed_checks,
            "total_checks": len(self.fields),
        }


@dataclass(frozen=True)
class CategorizedReport:
    seo: CategoryBucket
    smo: CategoryBucket

    def to_dict(self) -> Dict[str, Any]:
        return {"seo": self.seo.to_dict(), "smo": self.smo.to_dict()}


def has_value(value) -> bool:
    """Blank strings and empty sequences count as missing."""
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def is_smo_recommendation(text: str) -> bool:
    low = text.lower()
    return any(topic in low for topic in SMO_TOPICS)


def _bucket(name, bucket_fields, record, issues, recommendations) -> CategoryBucket:
    flagged = {issue.field for issue in issues}
    passed = sum(
        1 for f in bucket_fields
        if has_value(getattr(record, f)) and f not in flagged
    )
    return CategoryBucket(
        name=name,
        fields=bucket_fields,
        issues=tuple(issues),
        recommendations=tuple(recommendations),
        passed_checks=passed,
    )


def categorize(record: MetadataRecord, result: AnalysisResult) -> CategorizedReport:
    """Splits issues and recommendations into the SEO and SMO views, keeping their order."""
    seo_issues = [i for i in result.issues if i.field in SEO_FIELDS]
    smo_issues = [i for i in result.issues if i.field in SMO_FIELDS]
    smo_recs = [r for r in result.recommendations if is_smo_recommendation(r)]
    seo_recs = [r for r in result.recommendations if not is_smo_recommendation(r)]
    return CategorizedReport(
        seo=_bucket("SEO", SEO_FIELDS, record, seo_issues, seo_recs),
        smo=_bucket("SMO", SMO_FIELDS, record, smo_issues, smo_recs),
    )
