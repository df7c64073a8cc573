def calculate_score(issues, rules):
    """100 minus a fixed penalty per issue severity, clamped to 0-100."""
    penalties = {
        "error": rules.get("error_penalty", 15),
        "warning": rules.get("warning_penalty", 5),
        "info": rules.get("info_penalty", 0),
    }
    score = 100
    for issue in issues:
        score -= penalties.get(issue.severity, 0)
    return max(0, min(100, score))
