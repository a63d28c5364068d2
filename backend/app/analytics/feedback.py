"""Feedback aggregation: sentiment mix, channels, reported issues and standout examples."""

from collections.abc import Iterable

from app.analytics.stats import percentage, ranked_counts, round_decimal
from app.analytics.topk import BoundedTopK
from app.events.models import Feedback

SENTIMENTS = ("positive", "neutral", "negative")
TOP_EXAMPLES = 5
TOP_ISSUES = 5


def _example(item: Feedback, score: float, with_issue: bool = False) -> dict:
    example = {
        "id": str(item.id),
        "text": item.text,
        "source": item.source,
        "score": score,
        "created_at": item.created_at,
    }
    if with_issue:
        example["issue_type"] = item.issue_type
    return example


def analyze_feedback(feedback: Iterable[Feedback]) -> dict:
    sentiment_counts = {s: 0 for s in SENTIMENTS}
    source_counts: dict[str, int] = {}
    issue_types: dict[str, int] = {}
    most_positive: BoundedTopK[dict] = BoundedTopK(TOP_EXAMPLES, prefer_higher=True)
    most_negative: BoundedTopK[dict] = BoundedTopK(TOP_EXAMPLES, prefer_higher=False)

    total = 0
    total_sentiment_score = 0.0

    for item in feedback:
        total += 1
        score = item.sentiment_score or 0.0
        sentiment_counts[item.sentiment] += 1
        total_sentiment_score += score

        source_counts[item.source] = source_counts.get(item.source, 0) + 1

        if item.sentiment == "positive":
            most_positive.offer(score, _example(item, score))
        elif item.sentiment == "negative":
            if item.issue_type:
                issue_types[item.issue_type] = issue_types.get(item.issue_type, 0) + 1
            most_negative.offer(score, _example(item, score, with_issue=True))

    sentiment_percentages = {s: percentage(c, total) for s, c in sentiment_counts.items()}
    source_percentages = {s: percentage(c, total) for s, c in source_counts.items()}

    # Issue shares are relative to negative feedback only
    negative_total = sentiment_counts["negative"]
    issue_percentages = {i: percentage(c, negative_total) for i, c in issue_types.items()}

    average_sentiment_score = total_sentiment_score / total if total > 0 else 0.0
    net_sentiment_score = round_decimal(
        (sentiment_percentages["positive"] - sentiment_percentages["negative"]) / 100, 2,
    )

    return {
        "total": total,
        "sentiment_counts": sentiment_counts,
        "sentiment_percentages": sentiment_percentages,
        "source_counts": source_counts,
        "source_percentages": source_percentages,
        "issue_types": issue_types,
        "issue_percentages": issue_percentages,
        "top_issues": ranked_counts(issue_types, "issue", negative_total, limit=TOP_ISSUES),
        "top_positive_feedback": most_positive.ranked(),
        "top_negative_feedback": most_negative.ranked(),
        "average_sentiment_score": average_sentiment_score,
        "net_sentiment_score": net_sentiment_score,
    }
