from datetime import datetime

from pydantic import BaseModel


class EventSummary(BaseModel):
    id: str
    name: str
    description: str
    start_date: datetime
    end_date: datetime
    location: str


class SentimentMix(BaseModel):
    positive: float
    neutral: float
    negative: float


class SentimentCounts(BaseModel):
    positive: int
    neutral: int
    negative: int


class RankedIssue(BaseModel):
    issue: str
    count: int
    percentage: float


class FeedbackExample(BaseModel):
    id: str
    text: str
    source: str
    score: float
    created_at: datetime
    issue_type: str | None = None


class FeedbackAnalysis(BaseModel):
    total: int
    sentiment_counts: SentimentCounts
    sentiment_percentages: SentimentMix
    source_counts: dict[str, int]
    source_percentages: dict[str, float]
    issue_types: dict[str, int]
    issue_percentages: dict[str, float]
    top_issues: list[RankedIssue]
    top_positive_feedback: list[FeedbackExample]
    top_negative_feedback: list[FeedbackExample]
    average_sentiment_score: float
    net_sentiment_score: float


class RankedCategory(BaseModel):
    category: str
    count: int
    percentage: float


class AlertDay(BaseModel):
    date: str
    count: int
    resolved: int
    by_type: dict[str, int]
    by_severity: dict[str, int]


class AlertAnalysis(BaseModel):
    total: int
    type_counts: dict[str, int]
    severity_counts: dict[str, int]
    category_counts: dict[str, int]
    status_counts: dict[str, int]
    top_categories: list[RankedCategory]
    resolution_rate: float
    average_response_time_minutes: int
    critical_response_time_minutes: int
    timeline: list[AlertDay]


class RankedIssueType(BaseModel):
    type: str
    count: int
    percentage: float


class RankedLocation(BaseModel):
    location: str
    count: int
    percentage: float


class IssueAnalysis(BaseModel):
    total: int
    type_counts: dict[str, int]
    severity_counts: dict[str, int]
    status_counts: dict[str, int]
    location_counts: dict[str, int]
    top_issue_types: list[RankedIssueType]
    top_locations: list[RankedLocation]
    resolution_rate: float
    average_resolution_time_minutes: int
    unresolved_count: int


class SentimentPeriod(BaseModel):
    timestamp: datetime
    positive: int
    neutral: int
    negative: int
    total: int
    sentiment: SentimentMix


class DailyVolume(BaseModel):
    date: str
    total: int
    positive: int
    neutral: int
    negative: int


class SentimentChange(BaseModel):
    from_period: datetime
    to_period: datetime
    change_pct: float
    direction: str  # negative, positive


class SentimentTrends(BaseModel):
    hourly: list[SentimentPeriod]
    daily: list[SentimentPeriod]
    daily_volume: list[DailyVolume]
    peak_volume_period: SentimentPeriod | None
    peak_negative_period: SentimentPeriod | None
    peak_positive_period: SentimentPeriod | None
    sentiment_changes: list[SentimentChange]
    event_day_count: int


class ExecutiveSummary(BaseModel):
    overall_score: int
    success_level: str
    feedback_total: int
    top_issue_type: str
    primary_sentiment: str
    sentiment_ratio: str
    net_sentiment_score: float
    primary_source: str
    alerts_total: int
    alerts_resolution_rate: float
    average_alert_response_time: int
    issues_total: int
    issues_resolution_rate: float
    unresolved_issues_count: int


class Insight(BaseModel):
    type: str  # positive, negative, warning, info, neutral
    title: str
    content: str


class Recommendation(BaseModel):
    area: str
    title: str
    description: str
    priority: str  # high, medium, low


class PostEventReport(BaseModel):
    event: EventSummary
    report_generated_at: datetime
    event_status: str  # completed, active
    summary: ExecutiveSummary
    feedback: FeedbackAnalysis
    alerts: AlertAnalysis
    issues: IssueAnalysis
    sentiment: SentimentTrends
    insights: list[Insight]
    recommendations: list[Recommendation]


class ReportInsights(BaseModel):
    event: EventSummary
    insights: list[Insight]


class ReportRecommendations(BaseModel):
    event: EventSummary
    recommendations: list[Recommendation]


class ReportAvailability(BaseModel):
    available: bool
    event_ended: bool
    near_end: bool
    days_remaining: int
    end_date: datetime
