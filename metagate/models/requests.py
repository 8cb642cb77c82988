"""metagate — Request Models.

Typed query and body shapes, one per endpoint family. FastAPI validates every
model bound to a request and reports all failures together; ``field_violations``
flattens them into ``{field, message}`` entries.
"""

import json
from datetime import datetime
from typing import Annotated, Any, Dict, Iterable, List, Literal, Mapping, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from metagate.core.errors import FieldViolation

DEFAULT_LIMIT = 25
MAX_LIMIT = 100

PAGE_METRICS = (
    "page_impressions",
    "page_impressions_unique",
    "page_posts_impressions",
    "page_fan_adds",
    "page_fan_removes",
    "page_views_total",
    "page_engaged_users",
    "page_consumptions",
    "page_negative_feedback",
    "page_positive_feedback_by_type",
    "page_fans_online",
    "page_fan_adds_by_paid_non_paid_unique",
)
DEFAULT_PAGE_METRIC = "page_impressions"

INSTAGRAM_METRICS = (
    "impressions",
    "reach",
    "profile_views",
    "follower_count",
    "email_contacts",
    "get_directions_clicks",
    "phone_call_clicks",
    "text_message_clicks",
    "website_clicks",
)
DEFAULT_INSTAGRAM_METRIC = "impressions"

MEDIA_METRICS = (
    "impressions",
    "reach",
    "engagement",
    "saved",
    "video_views",
    "exits",
    "replies",
)
DEFAULT_MEDIA_METRICS = "impressions,reach,engagement,saved"

PagePeriod = Literal["day", "week", "days_28"]
InstagramPeriod = Literal["day", "week", "month", "year", "lifetime"]
InsightLevel = Literal["ad", "adset", "campaign", "account"]


def split_csv(value: Optional[str]) -> List[str]:
    """Split a comma-separated list, dropping blanks."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _check_iso_date(value: str) -> str:
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError("must be a valid ISO 8601 date") from None
    return value


IsoDate = Annotated[str, AfterValidator(_check_iso_date)]


def _one_of(allowed: Iterable[str]):
    allowed = tuple(allowed)

    def check(value: str) -> str:
        if value not in allowed:
            raise ValueError(f"must be one of [{', '.join(allowed)}]")
        return value

    return check


PageMetric = Annotated[str, AfterValidator(_one_of(PAGE_METRICS))]
InstagramMetric = Annotated[str, AfterValidator(_one_of(INSTAGRAM_METRICS))]


# ── Value types ──


class TimeRange(BaseModel):
    """A since/until pair bounding an insights query."""

    since: IsoDate
    until: IsoDate

    def to_param(self) -> str:
        """Graph API ``time_range`` parameter."""
        return json.dumps({"since": self.since, "until": self.until})


# ── Query models ──


class LimitQuery(BaseModel):
    """``?limit=`` on list endpoints."""

    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)


class DateWindowQuery(BaseModel):
    """``?since=&until=``; the pair applies only when both are given."""

    since: Optional[IsoDate] = None
    until: Optional[IsoDate] = None

    @property
    def window(self) -> Optional[TimeRange]:
        if self.since and self.until:
            return TimeRange(since=self.since, until=self.until)
        return None


class PageInsightsQuery(DateWindowQuery):
    metric: PageMetric = DEFAULT_PAGE_METRIC
    period: PagePeriod = "day"


class InstagramInsightsQuery(DateWindowQuery):
    metric: InstagramMetric = DEFAULT_INSTAGRAM_METRIC
    period: InstagramPeriod = "day"


class MediaInsightsQuery(BaseModel):
    metric: str = DEFAULT_MEDIA_METRICS

    @field_validator("metric")
    @classmethod
    def _check_metrics(cls, value: str) -> str:
        metrics = split_csv(value)
        if not metrics:
            raise ValueError("must name at least one metric")
        unknown = [m for m in metrics if m not in MEDIA_METRICS]
        if unknown:
            raise ValueError(
                f"unknown metric(s) {', '.join(unknown)}; "
                f"must be among [{', '.join(MEDIA_METRICS)}]"
            )
        return ",".join(metrics)


class HashtagSearchQuery(BaseModel):
    hashtag: str = Field(min_length=1)


class BreakdownQuery(DateWindowQuery):
    """Campaign / ad set insights: time window plus breakdown dimensions."""

    breakdowns: Optional[str] = None

    @property
    def breakdown_list(self) -> List[str]:
        return split_csv(self.breakdowns)


class AdInsightsQuery(BreakdownQuery):
    """Account-level ads insights.

    ``timeRange`` is a JSON object and takes precedence over ``since``/``until``.
    """

    model_config = ConfigDict(populate_by_name=True)

    level: InsightLevel = "ad"
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    time_range: Optional[str] = Field(None, alias="timeRange")

    @field_validator("time_range")
    @classmethod
    def _check_time_range(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            TimeRange.model_validate_json(value)
        except PydanticValidationError:
            raise ValueError("Invalid timeRange format") from None
        return value

    @property
    def window(self) -> Optional[TimeRange]:
        if self.time_range:
            return TimeRange.model_validate_json(self.time_range)
        return super().window


# ── Body models ──


class ReachEstimateBody(BaseModel):
    targeting_spec: Dict[str, Any]
    optimization_goal: str


class DeliveryEstimateBody(ReachEstimateBody):
    billing_event: str
    bid_amount: float


class TokenExchangeBody(BaseModel):
    short_lived_token: str = Field(min_length=1)


# ── Violations ──

_LOCATIONS = {"path", "query", "body", "header", "cookie"}


def field_violations(errors: Iterable[Mapping[str, Any]]) -> List[FieldViolation]:
    """Flatten FastAPI/pydantic error dicts into field violations."""
    violations = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATIONS:
            loc = loc[1:]
        violations.append(
            FieldViolation(field=".".join(loc) or "request", message=err.get("msg", ""))
        )
    return violations
