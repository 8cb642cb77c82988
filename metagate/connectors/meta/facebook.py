"""metagate — Facebook Page forwarder.

Each method issues exactly one Graph API call and returns the page of results
as received, paging cursors included.
"""

from typing import Any, Dict, Optional

from metagate.connectors.meta import fields
from metagate.connectors.meta.client import GraphClient
from metagate.connectors.meta.forwarding import operation, resolve_id
from metagate.models.requests import DEFAULT_LIMIT, DEFAULT_PAGE_METRIC, TimeRange


class FacebookPages:
    """Typed operations over a Facebook Page."""

    def __init__(self, client: GraphClient, default_page_id: str = ""):
        self.client = client
        self.default_page_id = default_page_id

    def _page(self, page_id: Optional[str]) -> str:
        return resolve_id(page_id, self.default_page_id, "page_id")

    async def _edge(
        self, page_id: Optional[str], edge: str, projection: str, limit: Optional[int]
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._page(page_id)}/{edge}", {"fields": projection, "limit": limit}
        )

    @operation("get page info")
    async def get_page_info(self, page_id: Optional[str] = None) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._page(page_id)}", {"fields": fields.PAGE_FIELDS}
        )

    @operation("get page posts")
    async def get_posts(
        self, page_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._edge(page_id, "posts", fields.PAGE_POST_FIELDS, limit)

    @operation("get public page posts")
    async def get_public_posts(
        self, page_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        """Posts with only the fields readable without page-level permissions."""
        return await self._edge(page_id, "posts", fields.PAGE_PUBLIC_POST_FIELDS, limit)

    @operation("get page insights")
    async def get_insights(
        self,
        page_id: Optional[str] = None,
        metric: str = DEFAULT_PAGE_METRIC,
        period: str = "day",
        time_range: Optional[TimeRange] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {"metric": metric, "period": period}
        if time_range:
            params["since"] = time_range.since
            params["until"] = time_range.until
        return await self.client.get(f"/{self._page(page_id)}/insights", params)

    @operation("get page followers")
    async def get_followers(
        self, page_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._edge(page_id, "followers", fields.PAGE_FOLLOWER_FIELDS, limit)

    @operation("get page events")
    async def get_events(
        self, page_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._edge(page_id, "events", fields.PAGE_EVENT_FIELDS, limit)

    @operation("get page photos")
    async def get_photos(
        self, page_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._edge(page_id, "photos", fields.PAGE_PHOTO_FIELDS, limit)

    @operation("get page videos")
    async def get_videos(
        self, page_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._edge(page_id, "videos", fields.PAGE_VIDEO_FIELDS, limit)

    @operation("get page reviews")
    async def get_reviews(
        self, page_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._edge(page_id, "ratings", fields.PAGE_REVIEW_FIELDS, limit)

    @operation("get page conversations")
    async def get_conversations(
        self, page_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._edge(
            page_id, "conversations", fields.PAGE_CONVERSATION_FIELDS, limit
        )

    @operation("get page leads")
    async def get_leads(
        self, page_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._edge(page_id, "leads", fields.PAGE_LEAD_FIELDS, limit)

    @operation("get page tabs")
    async def get_tabs(self, page_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._edge(page_id, "tabs", fields.PAGE_TAB_FIELDS, None)

    @operation("get page roles")
    async def get_roles(self, page_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._edge(page_id, "roles", fields.PAGE_ROLE_FIELDS, None)
