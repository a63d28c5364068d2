"""Improvement recommendations for the next edition of an event.

The dominant negative-feedback issue type picks a template from
``ISSUE_TEMPLATES``; new issue categories are added there. The remaining
rules are threshold checks on the aggregates and each contributes at most one
recommendation. Nothing is deduplicated or capped.
"""

from dataclasses import dataclass

ALERT_RESOLUTION_TARGET = 70
SLOW_RESPONSE_MINUTES = 30
SLOW_RESPONSE_MIN_ALERTS = 5
NEGATIVE_SHARE_LIMIT = 30
FEEDBACK_PER_DAY_TARGET = 10
MIN_FEEDBACK_CHANNELS = 3
POSITIVE_SHARE_TO_REINFORCE = 60


@dataclass(frozen=True)
class IssueTemplate:
    area: str
    title: str
    description: str
    # Share of negative feedback above which the fix is high priority; None means always high.
    high_priority_above: float | None = 30

    def priority(self, share: float) -> str:
        if self.high_priority_above is None or share > self.high_priority_above:
            return "high"
        return "medium"

    def build(self, issue: dict) -> dict:
        return {
            "area": self.area,
            "title": self.title.format(issue=issue["issue"]),
            "description": self.description.format(issue=issue["issue"]),
            "priority": self.priority(issue["percentage"]),
        }


ISSUE_TEMPLATES: dict[str, IssueTemplate] = {
    "queue": IssueTemplate(
        "Logistics",
        "Improve Queue Management",
        "Reduce waiting times by adding more entry points, implementing timed entry tickets, "
        "or using digital queues with mobile notifications.",
    ),
    "audio": IssueTemplate(
        "Technical",
        "Enhance Audio Setup",
        "Invest in better audio equipment, perform more thorough sound checks, and consider "
        "acoustic treatments for venues with echo problems.",
    ),
    "video": IssueTemplate(
        "Technical",
        "Improve Visual Displays",
        "Use higher brightness projectors, larger screens, or multiple displays to ensure "
        "visibility from all areas.",
    ),
    "crowding": IssueTemplate(
        "Venue",
        "Address Space Management",
        "Consider larger venues, reduce ticket sales, or improve space utilization with "
        "better layout design.",
    ),
    "amenities": IssueTemplate(
        "Services",
        "Enhance Attendee Amenities",
        "Improve food/beverage options, add more restroom facilities, or enhance seating "
        "comfort based on specific complaints.",
    ),
    "content": IssueTemplate(
        "Programming",
        "Refine Event Content",
        "More carefully curate speakers, add more interactive elements, or diversify session "
        "formats to improve engagement.",
    ),
    "temperature": IssueTemplate(
        "Venue",
        "Improve Climate Control",
        "Better manage venue temperature settings and consider seasonal factors when planning "
        "future events.",
        high_priority_above=25,
    ),
    "safety": IssueTemplate(
        "Security",
        "Enhance Safety Measures",
        "Review and improve security protocols, emergency procedures, and staff training for "
        "safety situations.",
        high_priority_above=None,
    ),
}

GENERIC_ISSUE_TEMPLATE = IssueTemplate(
    "General",
    "Address {issue} Issues",
    "Review feedback related to {issue} and develop specific improvements for future events.",
    high_priority_above=25,
)

# Checked in order against the top positive feedback; the first hit names the strength.
STRENGTH_KEYWORDS = (
    ("content and speakers", ("speaker", "presentation", "content")),
    ("food and beverage service", ("food", "drink", "refreshment")),
    ("staff service and friendliness", ("staff", "friendly", "helpful")),
    ("venue selection", ("venue", "location", "facility")),
)
DEFAULT_STRENGTH = "overall experience"


def _recommendation(area: str, title: str, description: str, priority: str) -> dict:
    return {"area": area, "title": title, "description": description, "priority": priority}


def infer_strength(top_positive_feedback: list[dict]) -> str:
    text = " ".join(item["text"] for item in top_positive_feedback).lower()
    for area, keywords in STRENGTH_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return area
    return DEFAULT_STRENGTH


def generate_recommendations(feedback: dict, alerts: dict, issues: dict, sentiment: dict) -> list[dict]:
    recommendations = []
    percentages = feedback["sentiment_percentages"]

    if feedback["top_issues"]:
        top_issue = feedback["top_issues"][0]
        template = ISSUE_TEMPLATES.get(top_issue["issue"], GENERIC_ISSUE_TEMPLATE)
        recommendations.append(template.build(top_issue))

    if alerts["resolution_rate"] < ALERT_RESOLUTION_TARGET:
        recommendations.append(_recommendation(
            "Operations",
            "Improve Alert Response System",
            "Enhance staff training on alert management, implement clearer escalation procedures, "
            "and ensure adequate staffing for issue resolution.",
            "high",
        ))

    average_response = alerts["average_response_time_minutes"]
    if average_response > SLOW_RESPONSE_MINUTES and alerts["total"] > SLOW_RESPONSE_MIN_ALERTS:
        recommendations.append(_recommendation(
            "Operations",
            "Decrease Alert Response Time",
            f"Current average response time of {average_response} minutes should be reduced by "
            "implementing rapid response teams and improving alert notification systems.",
            "medium",
        ))

    if percentages["negative"] > NEGATIVE_SHARE_LIMIT:
        recommendations.append(_recommendation(
            "Customer Experience",
            "Address Negative Sentiment Patterns",
            "Conduct deeper analysis of negative feedback, identifying specific pain points and "
            "developing targeted improvements.",
            "high",
        ))

    feedback_per_day = feedback["total"] / max(sentiment["event_day_count"], 1)
    if feedback["total"] > 0 and feedback_per_day < FEEDBACK_PER_DAY_TARGET:
        recommendations.append(_recommendation(
            "Feedback Collection",
            "Increase Feedback Collection",
            "Implement more aggressive feedback collection through prominent QR codes, email "
            "follow-ups, and incentives for providing feedback.",
            "medium",
        ))

    if len(feedback["source_percentages"]) < MIN_FEEDBACK_CHANNELS:
        recommendations.append(_recommendation(
            "Monitoring",
            "Diversify Feedback Channels",
            "Expand monitoring across more platforms including social media, event app, email "
            "surveys, and on-site kiosks to capture a wider range of attendee sentiment.",
            "medium",
        ))

    if percentages["positive"] > POSITIVE_SHARE_TO_REINFORCE:
        strength = infer_strength(feedback["top_positive_feedback"])
        recommendations.append(_recommendation(
            "Strengths",
            "Build on Positive Elements",
            f"Maintain and enhance the {strength}, which received notably positive feedback.",
            "medium",
        ))

    return recommendations
