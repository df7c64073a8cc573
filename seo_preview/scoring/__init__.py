"""Rule-based scoring of extracted metadata."""

from .analyzer import analyze, ScoringModule
from .rules import DEFAULT_RULES
from .util import calculate_score
