"""metagate — Parameter declarations shared by the routers."""

from typing import Annotated

from fastapi import Path, Query

from metagate.models.requests import (
    AdInsightsQuery,
    BreakdownQuery,
    DateWindowQuery,
    HashtagSearchQuery,
    InstagramInsightsQuery,
    LimitQuery,
    MediaInsightsQuery,
    PageInsightsQuery,
)

ResourceId = Annotated[str, Path(min_length=1)]

LimitParams = Annotated[LimitQuery, Query()]
DateWindowParams = Annotated[DateWindowQuery, Query()]
BreakdownParams = Annotated[BreakdownQuery, Query()]
PageInsightsParams = Annotated[PageInsightsQuery, Query()]
InstagramInsightsParams = Annotated[InstagramInsightsQuery, Query()]
MediaInsightsParams = Annotated[MediaInsightsQuery, Query()]
HashtagSearchParams = Annotated[HashtagSearchQuery, Query()]
AdInsightsParams = Annotated[AdInsightsQuery, Query()]
