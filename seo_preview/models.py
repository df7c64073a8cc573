from __future__ import annotations

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Iterable, List, Mapping, Tuple


def split_keywords(raw: str) -> Tuple[str, ...]:
    """Splits a comma-separated keywords string, dropping blank pieces."""
    if not raw:
        return ()
    return tuple(piece.strip() for piece in raw.split(",") if piece.strip())


@dataclass(frozen=True)
class MetadataRecord:
    """Flat record of the metadata fields pulled from one HTML document.

    Every field is always present. An absent tag is an empty string, and
    absent keywords are an empty tuple.
    """

    title: str = ""
    description: str = ""
    keywords: Tuple[str, ...] = ()
    og_title: str = ""
    og_description: str = ""
    og_image: str = ""
    twitter_card: str = ""
    twitter_title: str = ""
    twitter_description: str = ""
    twitter_image: str = ""
    canonical: str = ""
    robots: str = ""
    viewport: str = ""
    charset: str = ""
    language: str = ""
    author: str = ""
    favicon: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["keywords"] = list(self.keywords)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MetadataRecord":
        values: Dict[str, Any] = {}
        for name in RECORD_FIELDS:
            value = data.get(name)
            if name == "keywords":
                if isinstance(value, str):
                    values[name] = split_keywords(value)
                else:
                    values[name] = tuple(str(k) for k in (value or ()))
            else:
                values[name] = "" if value is None else str(value)
        return cls(**values)


RECORD_FIELDS: Tuple[str, ...] = tuple(f.name for f in fields(MetadataRecord))

SEVERITY_ORDER = {"error": 0, "warning": 1, "info": 2}


@dataclass(frozen=True)
class Issue:
    severity: str  # error | warning | info
    message: str
    field: str  # one of RECORD_FIELDS

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def sort_for_display(issues: Iterable[Issue]) -> List[Issue]:
    """Orders issues by severity (errors first), keeping evaluation order within a severity."""
    return sorted(issues, key=lambda issue: SEVERITY_ORDER.get(issue.severity, len(SEVERITY_ORDER)))


@dataclass(frozen=True)
class AnalysisResult:
    score: int
    issues: Tuple[Issue, ...] = ()
    recommendations: Tuple[str, ...] = ()

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.severity == "warning")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": [issue.to_dict() for issue in self.issues],
            "recommendations": list(self.recommendations),
        }
