"""Tests for the domain forwarders against a mocked client."""

import json
import logging
from unittest.mock import AsyncMock

import pytest

from metagate.connectors.meta import fields
from metagate.connectors.meta.account import GraphAccount
from metagate.connectors.meta.ads import AdAccounts, ad_account_node
from metagate.connectors.meta.facebook import FacebookPages
from metagate.connectors.meta.instagram import InstagramAccounts
from metagate.core.errors import InternalError, UpstreamError, ValidationError
from metagate.models.requests import TimeRange


@pytest.fixture
def mock_client() -> AsyncMock:
    client = AsyncMock()
    client.get.return_value = {"data": []}
    client.post.return_value = {"data": {}}
    return client


class TestFacebookPages:
    @pytest.mark.asyncio
    async def test_default_page_used_when_omitted(self, mock_client):
        pages = FacebookPages(mock_client, default_page_id="999")

        await pages.get_page_info()

        mock_client.get.assert_awaited_once_with("/999", {"fields": fields.PAGE_FIELDS})

    @pytest.mark.asyncio
    async def test_missing_default_is_validation_error(self, mock_client):
        pages = FacebookPages(mock_client)

        with pytest.raises(ValidationError) as exc_info:
            await pages.get_page_info()

        assert exc_info.value.violations[0].field == "page_id"
        mock_client.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_posts_projection_and_limit(self, mock_client):
        pages = FacebookPages(mock_client)

        await pages.get_posts("42", limit=10)

        mock_client.get.assert_awaited_once_with(
            "/42/posts", {"fields": fields.PAGE_POST_FIELDS, "limit": 10}
        )

    @pytest.mark.asyncio
    async def test_reviews_map_to_ratings_edge(self, mock_client):
        await FacebookPages(mock_client).get_reviews("42")

        assert mock_client.get.await_args.args[0] == "/42/ratings"

    @pytest.mark.asyncio
    async def test_insights_with_time_range(self, mock_client):
        pages = FacebookPages(mock_client)

        await pages.get_insights(
            "42", "page_fan_adds", "week", TimeRange(since="2024-01-01", until="2024-01-31")
        )

        mock_client.get.assert_awaited_once_with(
            "/42/insights",
            {
                "metric": "page_fan_adds",
                "period": "week",
                "since": "2024-01-01",
                "until": "2024-01-31",
            },
        )

    @pytest.mark.asyncio
    async def test_insights_without_time_range(self, mock_client):
        await FacebookPages(mock_client).get_insights("42")

        params = mock_client.get.await_args.args[1]
        assert "since" not in params and "until" not in params

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_reraised(self, mock_client, caplog):
        mock_client.get.side_effect = UpstreamError(400, "Unsupported get request")
        pages = FacebookPages(mock_client)

        with caplog.at_level(logging.ERROR, logger="metagate"):
            with pytest.raises(UpstreamError):
                await pages.get_events("42")

        record = next(r for r in caplog.records if r.name == "metagate.meta.forwarders")
        assert record.operation == "get page events"
        assert "Unsupported get request" in record.getMessage()


class TestInstagramAccounts:
    @pytest.mark.asyncio
    async def test_reels_filter_by_media_type(self, mock_client):
        await InstagramAccounts(mock_client).get_reels("17841", limit=5)

        mock_client.get.assert_awaited_once_with(
            "/17841/media",
            {"fields": fields.IG_REEL_FIELDS, "media_type": "REELS", "limit": 5},
        )

    @pytest.mark.asyncio
    async def test_hashtag_search_uses_default_account(self, mock_client):
        await InstagramAccounts(mock_client, default_account_id="17841").search_hashtag("coffee")

        mock_client.get.assert_awaited_once_with(
            "/ig_hashtag_search", {"user_id": "17841", "q": "coffee"}
        )

    @pytest.mark.asyncio
    async def test_mentions_use_tags_edge(self, mock_client):
        await InstagramAccounts(mock_client).get_mentions("17841")

        assert mock_client.get.await_args.args[0] == "/17841/tags"

    @pytest.mark.asyncio
    async def test_media_insights(self, mock_client):
        await InstagramAccounts(mock_client).get_media_insights("m1", "reach,saved")

        mock_client.get.assert_awaited_once_with("/m1/insights", {"metric": "reach,saved"})


class TestAdAccounts:
    def test_account_node_prefix(self):
        assert ad_account_node("123") == "act_123"
        assert ad_account_node("act_123") == "act_123"

    @pytest.mark.asyncio
    async def test_campaigns_under_act_prefix(self, mock_client):
        await AdAccounts(mock_client).get_campaigns("123", limit=50)

        mock_client.get.assert_awaited_once_with(
            "/act_123/campaigns", {"fields": fields.CAMPAIGN_FIELDS, "limit": 50}
        )

    @pytest.mark.asyncio
    async def test_account_insights_params(self, mock_client):
        await AdAccounts(mock_client).get_insights(
            "123",
            level="campaign",
            breakdowns=["age", "gender"],
            time_range=TimeRange(since="2024-01-01", until="2024-01-31"),
            limit=10,
        )

        path, params = mock_client.get.await_args.args
        assert path == "/act_123/insights"
        assert params["level"] == "campaign"
        assert params["breakdowns"] == "age,gender"
        assert json.loads(params["time_range"]) == {"since": "2024-01-01", "until": "2024-01-31"}
        assert params["limit"] == 10

    @pytest.mark.asyncio
    async def test_campaign_insights_without_filters(self, mock_client):
        await AdAccounts(mock_client).get_campaign_insights("c1")

        mock_client.get.assert_awaited_once_with(
            "/c1/insights", {"fields": fields.OBJECT_INSIGHT_FIELDS}
        )

    @pytest.mark.asyncio
    async def test_delivery_estimate_forwards_targeting_unmodified(self, mock_client):
        spec = {"geo_locations": {"countries": ["US"]}, "age_min": 21}

        await AdAccounts(mock_client, default_account_id="123").get_delivery_estimate(
            None, spec, "REACH", "IMPRESSIONS", 150
        )

        mock_client.post.assert_awaited_once_with(
            "/act_123/delivery_estimate",
            {
                "targeting_spec": spec,
                "optimization_goal": "REACH",
                "billing_event": "IMPRESSIONS",
                "bid_amount": 150,
            },
        )

    @pytest.mark.asyncio
    async def test_permissions_have_no_limit(self, mock_client):
        await AdAccounts(mock_client).get_permissions("123")

        mock_client.get.assert_awaited_once_with(
            "/act_123/users", {"fields": fields.ACCOUNT_USER_FIELDS, "limit": None}
        )


class TestGraphAccount:
    @pytest.mark.asyncio
    async def test_validate_token_returns_payload_unchanged(self, mock_client):
        debug = {
            "data": {
                "is_valid": True,
                "expires_at": 1700000000,
                "scopes": ["ads_read"],
                "app_id": "app-1",
                "user_id": "99",
                "type": "USER",
            }
        }
        mock_client.get.return_value = debug

        result = await GraphAccount(mock_client, access_token="tok").validate_token()

        mock_client.get.assert_awaited_once_with("/debug_token", {"input_token": "tok"})
        assert result == debug

    @pytest.mark.asyncio
    async def test_exchange_requires_app_credentials(self, mock_client):
        with pytest.raises(InternalError) as exc_info:
            await GraphAccount(mock_client, app_id="app-1").exchange_token("short")

        assert exc_info.value.status_code == 500
        mock_client.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_app_info_requires_app_id(self, mock_client):
        with pytest.raises(InternalError):
            await GraphAccount(mock_client).get_app_info()

    @pytest.mark.asyncio
    async def test_exchange_token(self, mock_client):
        account = GraphAccount(mock_client, app_id="app-1", app_secret="s3cret")

        await account.exchange_token("short")

        path, params = mock_client.get.await_args.args
        assert path == "/oauth/access_token"
        assert params["grant_type"] == "fb_exchange_token"
        assert params["fb_exchange_token"] == "short"
