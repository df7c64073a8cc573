"""Single-page metadata extraction, scoring and share previews."""

from .extraction import extract
from .scoring import analyze
from .models import MetadataRecord, Issue, AnalysisResult

__version__ = "0.1.0"
