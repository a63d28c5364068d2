from app.analytics.stats import clamp, round_decimal, round_half_up

SENTIMENT_WEIGHT = 0.4
ISSUE_WEIGHT = 0.3
ALERT_WEIGHT = 0.3

# Highest tier first; each bound is inclusive.
SUCCESS_LEVELS = (
    (90, "exceptional"),
    (75, "successful"),
    (60, "satisfactory"),
    (40, "mixed"),
    (25, "challenging"),
)
LOWEST_SUCCESS_LEVEL = "problematic"


def success_level(overall_score: int) -> str:
    for floor, level in SUCCESS_LEVELS:
        if overall_score >= floor:
            return level
    return LOWEST_SUCCESS_LEVEL


def compute_overall_score(net_sentiment_score: float, issue_resolution_rate: float, alert_resolution_rate: float) -> int:
    sentiment_score = clamp(50 + net_sentiment_score * 50)
    issue_score = clamp(issue_resolution_rate)
    alert_score = clamp(alert_resolution_rate)
    return round_half_up(
        sentiment_score * SENTIMENT_WEIGHT
        + issue_score * ISSUE_WEIGHT
        + alert_score * ALERT_WEIGHT
    )


def primary_source(source_counts: dict[str, int]) -> str:
    """Busiest feedback channel; the first one seen wins a tie."""
    source, best = "direct", 0
    for name, count in source_counts.items():
        if count > best:
            source, best = name, count
    return source


def generate_executive_summary(feedback: dict, alerts: dict, issues: dict) -> dict:
    """Headline numbers plus the composite success score."""
    overall_score = compute_overall_score(
        feedback["net_sentiment_score"], issues["resolution_rate"], alerts["resolution_rate"],
    )
    percentages = feedback["sentiment_percentages"]

    return {
        "overall_score": overall_score,
        "success_level": success_level(overall_score),
        "feedback_total": feedback["total"],
        "top_issue_type": feedback["top_issues"][0]["issue"] if feedback["top_issues"] else "none",
        "primary_sentiment": "positive" if percentages["positive"] > percentages["negative"] else "negative",
        "sentiment_ratio": f"{round_half_up(percentages['positive'])}/{round_half_up(percentages['negative'])}",
        "net_sentiment_score": feedback["net_sentiment_score"],
        "primary_source": primary_source(feedback["source_counts"]),
        "alerts_total": alerts["total"],
        "alerts_resolution_rate": round_decimal(alerts["resolution_rate"], 1),
        "average_alert_response_time": alerts["average_response_time_minutes"],
        "issues_total": issues["total"],
        "issues_resolution_rate": round_decimal(issues["resolution_rate"], 1),
        "unresolved_issues_count": issues["unresolved_count"],
    }
