"""metagate — Instagram business account forwarder."""

from typing import Any, Dict, Optional

from metagate.connectors.meta import fields
from metagate.connectors.meta.client import GraphClient
from metagate.connectors.meta.forwarding import operation, resolve_id
from metagate.models.requests import (
    DEFAULT_INSTAGRAM_METRIC,
    DEFAULT_LIMIT,
    DEFAULT_MEDIA_METRICS,
    TimeRange,
)

FOLLOW_LIMIT = 100


class InstagramAccounts:
    """Typed operations over an Instagram business account and its media."""

    def __init__(self, client: GraphClient, default_account_id: str = ""):
        self.client = client
        self.default_account_id = default_account_id

    def _account(self, account_id: Optional[str]) -> str:
        return resolve_id(account_id, self.default_account_id, "account_id")

    async def _media(
        self,
        account_id: Optional[str],
        projection: str,
        media_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._account(account_id)}/media",
            {"fields": projection, "media_type": media_type, "limit": limit},
        )

    @operation("get Instagram business account info")
    async def get_account_info(self, account_id: Optional[str] = None) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._account(account_id)}", {"fields": fields.IG_ACCOUNT_FIELDS}
        )

    @operation("get Instagram media")
    async def get_media(
        self, account_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._media(account_id, fields.IG_MEDIA_FIELDS, limit=limit)

    @operation("get Instagram stories")
    async def get_stories(self, account_id: Optional[str] = None) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._account(account_id)}/stories", {"fields": fields.IG_STORY_FIELDS}
        )

    @operation("get Instagram insights")
    async def get_insights(
        self,
        account_id: Optional[str] = None,
        metric: str = DEFAULT_INSTAGRAM_METRIC,
        period: str = "day",
        time_range: Optional[TimeRange] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {"metric": metric, "period": period}
        if time_range:
            params["since"] = time_range.since
            params["until"] = time_range.until
        return await self.client.get(f"/{self._account(account_id)}/insights", params)

    @operation("get media insights")
    async def get_media_insights(
        self, media_id: str, metric: str = DEFAULT_MEDIA_METRICS
    ) -> Dict[str, Any]:
        return await self.client.get(f"/{media_id}/insights", {"metric": metric})

    @operation("get Instagram comments")
    async def get_comments(self, media_id: str, limit: int = DEFAULT_LIMIT) -> Dict[str, Any]:
        return await self.client.get(
            f"/{media_id}/comments", {"fields": fields.IG_COMMENT_FIELDS, "limit": limit}
        )

    @operation("get Instagram mentions")
    async def get_mentions(
        self, account_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._account(account_id)}/tags",
            {"fields": fields.IG_TAGGED_MEDIA_FIELDS, "limit": limit},
        )

    # ── Hashtags ──
    # Hashtag lookups are made on behalf of the default business account.

    @operation("search Instagram hashtag")
    async def search_hashtag(self, hashtag: str) -> Dict[str, Any]:
        return await self.client.get(
            "/ig_hashtag_search", {"user_id": self._account(None), "q": hashtag}
        )

    @operation("get top media for hashtag")
    async def get_hashtag_top_media(
        self, hashtag_id: str, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{hashtag_id}/top_media",
            {
                "user_id": self._account(None),
                "fields": fields.IG_TAGGED_MEDIA_FIELDS,
                "limit": limit,
            },
        )

    @operation("get recent media for hashtag")
    async def get_hashtag_recent_media(
        self, hashtag_id: str, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{hashtag_id}/recent_media",
            {
                "user_id": self._account(None),
                "fields": fields.IG_TAGGED_MEDIA_FIELDS,
                "limit": limit,
            },
        )

    # ── Media by type ──

    @operation("get Instagram live media")
    async def get_live_media(self, account_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._media(account_id, fields.IG_LIVE_MEDIA_FIELDS, media_type="LIVE")

    @operation("get Instagram reels")
    async def get_reels(
        self, account_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._media(
            account_id, fields.IG_REEL_FIELDS, media_type="REELS", limit=limit
        )

    @operation("get Instagram carousel albums")
    async def get_carousel_albums(
        self, account_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._media(
            account_id, fields.IG_CAROUSEL_FIELDS, media_type="CAROUSEL_ALBUM", limit=limit
        )

    # ── Audience ──

    @operation("get Instagram followers")
    async def get_followers(
        self, account_id: Optional[str] = None, limit: int = FOLLOW_LIMIT
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._account(account_id)}/followers",
            {"fields": fields.IG_USER_FIELDS, "limit": limit},
        )

    @operation("get Instagram following")
    async def get_following(
        self, account_id: Optional[str] = None, limit: int = FOLLOW_LIMIT
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._account(account_id)}/follows",
            {"fields": fields.IG_USER_FIELDS, "limit": limit},
        )
