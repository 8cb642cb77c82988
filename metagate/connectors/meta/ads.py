"""metagate — Ads forwarder.

Ad account edges live under ``act_<account id>``; campaign, ad set and pixel
edges are addressed by their own node id.
"""

from typing import Any, Dict, Optional, Sequence

from metagate.connectors.meta import fields
from metagate.connectors.meta.client import GraphClient
from metagate.connectors.meta.forwarding import operation, resolve_id
from metagate.models.requests import DEFAULT_LIMIT, TimeRange

ACCOUNT_PREFIX = "act_"


def ad_account_node(account_id: str) -> str:
    """``act_<id>`` for a bare account id; prefixed ids pass through."""
    if account_id.startswith(ACCOUNT_PREFIX):
        return account_id
    return f"{ACCOUNT_PREFIX}{account_id}"


def _insight_params(
    projection: str,
    time_range: Optional[TimeRange],
    breakdowns: Sequence[str] = (),
) -> Dict[str, Any]:
    params: Dict[str, Any] = {"fields": projection}
    if breakdowns:
        params["breakdowns"] = ",".join(breakdowns)
    if time_range:
        params["time_range"] = time_range.to_param()
    return params


class AdAccounts:
    """Typed operations over an ad account and its campaigns."""

    def __init__(self, client: GraphClient, default_account_id: str = ""):
        self.client = client
        self.default_account_id = default_account_id

    def _account(self, account_id: Optional[str]) -> str:
        return ad_account_node(resolve_id(account_id, self.default_account_id, "account_id"))

    async def _list(
        self, account_id: Optional[str], edge: str, projection: str, limit: Optional[int]
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._account(account_id)}/{edge}", {"fields": projection, "limit": limit}
        )

    @operation("get ad account info")
    async def get_account_info(self, account_id: Optional[str] = None) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._account(account_id)}", {"fields": fields.AD_ACCOUNT_FIELDS}
        )

    @operation("get campaigns")
    async def get_campaigns(
        self, account_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._list(account_id, "campaigns", fields.CAMPAIGN_FIELDS, limit)

    @operation("get ad sets")
    async def get_ad_sets(
        self, account_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._list(account_id, "adsets", fields.ADSET_FIELDS, limit)

    @operation("get ads")
    async def get_ads(
        self, account_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._list(account_id, "ads", fields.AD_FIELDS, limit)

    # ── Insights ──

    @operation("get ad insights")
    async def get_insights(
        self,
        account_id: Optional[str] = None,
        level: str = "ad",
        breakdowns: Sequence[str] = (),
        time_range: Optional[TimeRange] = None,
        limit: int = DEFAULT_LIMIT,
    ) -> Dict[str, Any]:
        params = _insight_params(fields.ACCOUNT_INSIGHT_FIELDS, time_range, breakdowns)
        params["level"] = level
        params["limit"] = limit
        return await self.client.get(f"/{self._account(account_id)}/insights", params)

    @operation("get campaign insights")
    async def get_campaign_insights(
        self,
        campaign_id: str,
        time_range: Optional[TimeRange] = None,
        breakdowns: Sequence[str] = (),
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{campaign_id}/insights",
            _insight_params(fields.OBJECT_INSIGHT_FIELDS, time_range, breakdowns),
        )

    @operation("get ad set insights")
    async def get_ad_set_insights(
        self,
        ad_set_id: str,
        time_range: Optional[TimeRange] = None,
        breakdowns: Sequence[str] = (),
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{ad_set_id}/insights",
            _insight_params(fields.OBJECT_INSIGHT_FIELDS, time_range, breakdowns),
        )

    @operation("get account spend")
    async def get_spend(
        self, account_id: Optional[str] = None, time_range: Optional[TimeRange] = None
    ) -> Dict[str, Any]:
        return await self.client.get(
            f"/{self._account(account_id)}/insights",
            _insight_params(fields.SPEND_FIELDS, time_range),
        )

    # ── Assets ──

    @operation("get creatives")
    async def get_creatives(
        self, account_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._list(account_id, "adcreatives", fields.CREATIVE_FIELDS, limit)

    @operation("get audiences")
    async def get_audiences(
        self, account_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._list(account_id, "customaudiences", fields.AUDIENCE_FIELDS, limit)

    @operation("get pixels")
    async def get_pixels(
        self, account_id: Optional[str] = None, limit: int = DEFAULT_LIMIT
    ) -> Dict[str, Any]:
        return await self._list(account_id, "adaccount_pixels", fields.PIXEL_FIELDS, limit)

    @operation("get pixel events")
    async def get_pixel_events(self, pixel_id: str, limit: int = DEFAULT_LIMIT) -> Dict[str, Any]:
        return await self.client.get(
            f"/{pixel_id}/events", {"fields": fields.PIXEL_EVENT_FIELDS, "limit": limit}
        )

    # ── Estimates ──
    # The targeting spec is forwarded unmodified.

    @operation("get delivery estimates")
    async def get_delivery_estimate(
        self,
        account_id: Optional[str],
        targeting_spec: Dict[str, Any],
        optimization_goal: str,
        billing_event: str,
        bid_amount: float,
    ) -> Dict[str, Any]:
        return await self.client.post(
            f"/{self._account(account_id)}/delivery_estimate",
            {
                "targeting_spec": targeting_spec,
                "optimization_goal": optimization_goal,
                "billing_event": billing_event,
                "bid_amount": bid_amount,
            },
        )

    @operation("get reach estimates")
    async def get_reach_estimate(
        self,
        account_id: Optional[str],
        targeting_spec: Dict[str, Any],
        optimization_goal: str,
    ) -> Dict[str, Any]:
        return await self.client.post(
            f"/{self._account(account_id)}/reach_estimate",
            {"targeting_spec": targeting_spec, "optimization_goal": optimization_goal},
        )

    # ── Administration ──

    @operation("get account permissions")
    async def get_permissions(self, account_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._list(account_id, "users", fields.ACCOUNT_USER_FIELDS, None)

    @operation("get account billing")
    async def get_billing(self, account_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._list(account_id, "billing", fields.BILLING_FIELDS, None)
