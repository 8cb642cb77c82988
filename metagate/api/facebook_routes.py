"""metagate — Facebook Page Routes."""

from fastapi import APIRouter

from metagate.api.params import LimitParams, PageInsightsParams, ResourceId
from metagate.dependencies import FacebookDep
from metagate.models.responses import Envelope, ok

router = APIRouter(prefix="/api/facebook", tags=["Facebook"])


@router.get("/page", response_model=Envelope)
async def get_default_page(facebook: FacebookDep):
    """Page info for the configured default page."""
    return ok(await facebook.get_page_info())


@router.get("/page/{page_id}", response_model=Envelope)
async def get_page(page_id: ResourceId, facebook: FacebookDep):
    return ok(await facebook.get_page_info(page_id))


@router.get("/page/{page_id}/posts", response_model=Envelope)
async def get_page_posts(page_id: ResourceId, query: LimitParams, facebook: FacebookDep):
    return ok(await facebook.get_posts(page_id, query.limit))


@router.get("/page/{page_id}/public-posts", response_model=Envelope)
async def get_public_page_posts(
    page_id: ResourceId, query: LimitParams, facebook: FacebookDep
):
    return ok(await facebook.get_public_posts(page_id, query.limit))


@router.get("/page/{page_id}/insights", response_model=Envelope)
async def get_page_insights(
    page_id: ResourceId, query: PageInsightsParams, facebook: FacebookDep
):
    """Page insights for one metric and period.

    ``since``/``until`` are applied only as a pair.
    """
    return ok(
        await facebook.get_insights(page_id, query.metric, query.period, query.window)
    )


@router.get("/page/{page_id}/followers", response_model=Envelope)
async def get_page_followers(
    page_id: ResourceId, query: LimitParams, facebook: FacebookDep
):
    return ok(await facebook.get_followers(page_id, query.limit))


@router.get("/page/{page_id}/events", response_model=Envelope)
async def get_page_events(page_id: ResourceId, query: LimitParams, facebook: FacebookDep):
    return ok(await facebook.get_events(page_id, query.limit))


@router.get("/page/{page_id}/photos", response_model=Envelope)
async def get_page_photos(page_id: ResourceId, query: LimitParams, facebook: FacebookDep):
    return ok(await facebook.get_photos(page_id, query.limit))


@router.get("/page/{page_id}/videos", response_model=Envelope)
async def get_page_videos(page_id: ResourceId, query: LimitParams, facebook: FacebookDep):
    return ok(await facebook.get_videos(page_id, query.limit))


@router.get("/page/{page_id}/reviews", response_model=Envelope)
async def get_page_reviews(page_id: ResourceId, query: LimitParams, facebook: FacebookDep):
    return ok(await facebook.get_reviews(page_id, query.limit))


@router.get("/page/{page_id}/conversations", response_model=Envelope)
async def get_page_conversations(
    page_id: ResourceId, query: LimitParams, facebook: FacebookDep
):
    return ok(await facebook.get_conversations(page_id, query.limit))


@router.get("/page/{page_id}/leads", response_model=Envelope)
async def get_page_leads(page_id: ResourceId, query: LimitParams, facebook: FacebookDep):
    return ok(await facebook.get_leads(page_id, query.limit))


@router.get("/page/{page_id}/tabs", response_model=Envelope)
async def get_page_tabs(page_id: ResourceId, facebook: FacebookDep):
    return ok(await facebook.get_tabs(page_id))


@router.get("/page/{page_id}/roles", response_model=Envelope)
async def get_page_roles(page_id: ResourceId, facebook: FacebookDep):
    return ok(await facebook.get_roles(page_id))
