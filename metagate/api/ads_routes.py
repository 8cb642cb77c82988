"""metagate — Ads Routes."""

from fastapi import APIRouter

from metagate.api.params import (
    AdInsightsParams,
    BreakdownParams,
    DateWindowParams,
    LimitParams,
    ResourceId,
)
from metagate.dependencies import AdsDep
from metagate.models.requests import DeliveryEstimateBody, ReachEstimateBody
from metagate.models.responses import Envelope, ok

router = APIRouter(prefix="/api/ads", tags=["Ads"])


# ── Account structure ──


@router.get("/account", response_model=Envelope)
async def get_default_account(ads: AdsDep):
    """Ad account info for the configured default account."""
    return ok(await ads.get_account_info())


@router.get("/account/{account_id}", response_model=Envelope)
async def get_account(account_id: ResourceId, ads: AdsDep):
    return ok(await ads.get_account_info(account_id))


@router.get("/account/{account_id}/campaigns", response_model=Envelope)
async def get_campaigns(account_id: ResourceId, query: LimitParams, ads: AdsDep):
    return ok(await ads.get_campaigns(account_id, query.limit))


@router.get("/account/{account_id}/adsets", response_model=Envelope)
async def get_ad_sets(account_id: ResourceId, query: LimitParams, ads: AdsDep):
    return ok(await ads.get_ad_sets(account_id, query.limit))


@router.get("/account/{account_id}/ads", response_model=Envelope)
async def get_ads(account_id: ResourceId, query: LimitParams, ads: AdsDep):
    return ok(await ads.get_ads(account_id, query.limit))


# ── Insights ──


@router.get("/account/{account_id}/insights", response_model=Envelope)
async def get_account_insights(account_id: ResourceId, query: AdInsightsParams, ads: AdsDep):
    """Account insights at ``level``, sliced by ``breakdowns``.

    The window comes from ``timeRange`` (JSON) or the ``since``/``until`` pair.
    """
    return ok(
        await ads.get_insights(
            account_id,
            level=query.level,
            breakdowns=query.breakdown_list,
            time_range=query.window,
            limit=query.limit,
        )
    )


@router.get("/campaign/{campaign_id}/insights", response_model=Envelope)
async def get_campaign_insights(
    campaign_id: ResourceId, query: BreakdownParams, ads: AdsDep
):
    return ok(
        await ads.get_campaign_insights(campaign_id, query.window, query.breakdown_list)
    )


@router.get("/adset/{ad_set_id}/insights", response_model=Envelope)
async def get_ad_set_insights(ad_set_id: ResourceId, query: BreakdownParams, ads: AdsDep):
    return ok(await ads.get_ad_set_insights(ad_set_id, query.window, query.breakdown_list))


@router.get("/account/{account_id}/spend", response_model=Envelope)
async def get_spend(account_id: ResourceId, query: DateWindowParams, ads: AdsDep):
    return ok(await ads.get_spend(account_id, query.window))


# ── Assets ──


@router.get("/account/{account_id}/creatives", response_model=Envelope)
async def get_creatives(account_id: ResourceId, query: LimitParams, ads: AdsDep):
    return ok(await ads.get_creatives(account_id, query.limit))


@router.get("/account/{account_id}/audiences", response_model=Envelope)
async def get_audiences(account_id: ResourceId, query: LimitParams, ads: AdsDep):
    return ok(await ads.get_audiences(account_id, query.limit))


@router.get("/account/{account_id}/pixels", response_model=Envelope)
async def get_pixels(account_id: ResourceId, query: LimitParams, ads: AdsDep):
    return ok(await ads.get_pixels(account_id, query.limit))


@router.get("/pixel/{pixel_id}/events", response_model=Envelope)
async def get_pixel_events(pixel_id: ResourceId, query: LimitParams, ads: AdsDep):
    return ok(await ads.get_pixel_events(pixel_id, query.limit))


# ── Estimates ──


@router.post("/account/{account_id}/delivery-estimate", response_model=Envelope)
async def get_delivery_estimate(
    account_id: ResourceId, body: DeliveryEstimateBody, ads: AdsDep
):
    return ok(
        await ads.get_delivery_estimate(
            account_id,
            body.targeting_spec,
            body.optimization_goal,
            body.billing_event,
            body.bid_amount,
        )
    )


@router.post("/account/{account_id}/reach-estimate", response_model=Envelope)
async def get_reach_estimate(account_id: ResourceId, body: ReachEstimateBody, ads: AdsDep):
    return ok(
        await ads.get_reach_estimate(account_id, body.targeting_spec, body.optimization_goal)
    )


# ── Administration ──


@router.get("/account/{account_id}/permissions", response_model=Envelope)
async def get_permissions(account_id: ResourceId, ads: AdsDep):
    return ok(await ads.get_permissions(account_id))


@router.get("/account/{account_id}/billing", response_model=Envelope)
async def get_billing(account_id: ResourceId, ads: AdsDep):
    return ok(await ads.get_billing(account_id))
