"""metagate — Instagram Routes."""

from fastapi import APIRouter

from metagate.api.params import (
    HashtagSearchParams,
    InstagramInsightsParams,
    LimitParams,
    MediaInsightsParams,
    ResourceId,
)
from metagate.dependencies import InstagramDep
from metagate.models.responses import Envelope, ok

router = APIRouter(prefix="/api/instagram", tags=["Instagram"])


# ── Business account ──


@router.get("/account", response_model=Envelope)
async def get_default_account(instagram: InstagramDep):
    """Business account info for the configured default account."""
    return ok(await instagram.get_account_info())


@router.get("/account/{account_id}", response_model=Envelope)
async def get_account(account_id: ResourceId, instagram: InstagramDep):
    return ok(await instagram.get_account_info(account_id))


@router.get("/account/{account_id}/media", response_model=Envelope)
async def get_media(account_id: ResourceId, query: LimitParams, instagram: InstagramDep):
    return ok(await instagram.get_media(account_id, query.limit))


@router.get("/account/{account_id}/stories", response_model=Envelope)
async def get_stories(account_id: ResourceId, instagram: InstagramDep):
    return ok(await instagram.get_stories(account_id))


@router.get("/account/{account_id}/insights", response_model=Envelope)
async def get_account_insights(
    account_id: ResourceId, query: InstagramInsightsParams, instagram: InstagramDep
):
    return ok(
        await instagram.get_insights(account_id, query.metric, query.period, query.window)
    )


@router.get("/account/{account_id}/mentions", response_model=Envelope)
async def get_mentions(account_id: ResourceId, query: LimitParams, instagram: InstagramDep):
    return ok(await instagram.get_mentions(account_id, query.limit))


@router.get("/account/{account_id}/live-media", response_model=Envelope)
async def get_live_media(account_id: ResourceId, instagram: InstagramDep):
    return ok(await instagram.get_live_media(account_id))


@router.get("/account/{account_id}/reels", response_model=Envelope)
async def get_reels(account_id: ResourceId, query: LimitParams, instagram: InstagramDep):
    return ok(await instagram.get_reels(account_id, query.limit))


@router.get("/account/{account_id}/carousels", response_model=Envelope)
async def get_carousels(account_id: ResourceId, query: LimitParams, instagram: InstagramDep):
    return ok(await instagram.get_carousel_albums(account_id, query.limit))


@router.get("/account/{account_id}/followers", response_model=Envelope)
async def get_followers(account_id: ResourceId, query: LimitParams, instagram: InstagramDep):
    return ok(await instagram.get_followers(account_id, query.limit))


@router.get("/account/{account_id}/following", response_model=Envelope)
async def get_following(account_id: ResourceId, query: LimitParams, instagram: InstagramDep):
    return ok(await instagram.get_following(account_id, query.limit))


# ── Media ──


@router.get("/media/{media_id}/insights", response_model=Envelope)
async def get_media_insights(
    media_id: ResourceId, query: MediaInsightsParams, instagram: InstagramDep
):
    """Insights for one media object; ``metric`` is a comma-separated list."""
    return ok(await instagram.get_media_insights(media_id, query.metric))


@router.get("/media/{media_id}/comments", response_model=Envelope)
async def get_comments(media_id: ResourceId, query: LimitParams, instagram: InstagramDep):
    return ok(await instagram.get_comments(media_id, query.limit))


# ── Hashtags ──


@router.get("/hashtag/search", response_model=Envelope)
async def search_hashtag(query: HashtagSearchParams, instagram: InstagramDep):
    return ok(await instagram.search_hashtag(query.hashtag))


@router.get("/hashtag/{hashtag_id}/top-media", response_model=Envelope)
async def get_hashtag_top_media(
    hashtag_id: ResourceId, query: LimitParams, instagram: InstagramDep
):
    return ok(await instagram.get_hashtag_top_media(hashtag_id, query.limit))


@router.get("/hashtag/{hashtag_id}/recent-media", response_model=Envelope)
async def get_hashtag_recent_media(
    hashtag_id: ResourceId, query: LimitParams, instagram: InstagramDep
):
    return ok(await instagram.get_hashtag_recent_media(hashtag_id, query.limit))
