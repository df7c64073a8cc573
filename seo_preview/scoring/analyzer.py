from ..base_module import SEOModule
from ..models import AnalysisResult, MetadataRecord
from .rules import DEFAULT_RULES, RULES
from .util import calculate_score


def resolve_rules(config=None) -> dict:
    rules = dict(DEFAULT_RULES)
    for key, value in (config or {}).items():
        if key in rules:
            rules[key] = value
    return rules


def analyze(record: MetadataRecord, config: dict = None) -> AnalysisResult:
    """
    Scores a metadata record against the fixed rule set.

    Pure and deterministic: the same record always gives the same result.

    Args:
        record (MetadataRecord): Output of the extractor.
        config (dict, optional): Overrides for the length bounds and penalties
            in ``DEFAULT_RULES``.

    Returns:
        AnalysisResult: Score, issues and recommendations in evaluation order.
    """
    rules = resolve_rules(config)
    findings = {"issues": [], "recommendations": []}
    for rule in RULES:
        rule(record, findings, rules)
    return AnalysisResult(
        score=calculate_score(findings["issues"], rules),
        issues=tuple(findings["issues"]),
        recommendations=tuple(findings["recommendations"]),
    )


class ScoringModule(SEOModule):
    def __init__(self, config=None):
        super().__init__(config=config)
        self.rules = resolve_rules(self.config)

    def analyze(self, url: str, full_report_data: dict = None) -> dict:
        extraction = (full_report_data or {}).get("MetadataExtractor", {})
        record = extraction.get("record")
        if record is None:
            return {self.module_name: {"scoring_status": "error", "error_message": "No metadata record."}}
        result = analyze(record, self.rules)
        return {self.module_name: {"scoring_status": "completed", "result": result}}
