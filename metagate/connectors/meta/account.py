"""metagate — Graph account forwarder: token, app and user lookups."""

from typing import Any, Dict, Optional

from metagate.connectors.meta import fields
from metagate.connectors.meta.client import GraphClient
from metagate.connectors.meta.forwarding import operation
from metagate.core.errors import InternalError


class GraphAccount:
    """Operations on the credentials themselves rather than on a resource."""

    def __init__(
        self,
        client: GraphClient,
        access_token: str = "",
        app_id: str = "",
        app_secret: str = "",
    ):
        self.client = client
        self.access_token = access_token
        self.app_id = app_id
        self.app_secret = app_secret

    # ── Token Validation ──

    @operation("validate access token")
    async def validate_token(self, token: Optional[str] = None) -> Dict[str, Any]:
        """Debug the configured (or given) access token."""
        return await self.client.get(
            "/debug_token", {"input_token": token or self.access_token}
        )

    @operation("exchange for long-lived token")
    async def exchange_token(self, short_lived_token: str) -> Dict[str, Any]:
        if not (self.app_id and self.app_secret):
            raise InternalError("Token exchange requires META_APP_ID and META_APP_SECRET")
        return await self.client.get(
            "/oauth/access_token",
            {
                "grant_type": "fb_exchange_token",
                "client_id": self.app_id,
                "client_secret": self.app_secret,
                "fb_exchange_token": short_lived_token,
            },
        )

    # ── App / User Info ──

    @operation("get app info")
    async def get_app_info(self) -> Dict[str, Any]:
        if not self.app_id:
            raise InternalError("META_APP_ID is not configured")
        return await self.client.get(f"/{self.app_id}", {"fields": fields.APP_FIELDS})

    @operation("get user info")
    async def get_user_info(self, user_id: str = "me") -> Dict[str, Any]:
        return await self.client.get(f"/{user_id}", {"fields": fields.USER_FIELDS})

    @operation("get user accounts")
    async def get_user_accounts(self, user_id: str = "me") -> Dict[str, Any]:
        return await self.client.get(
            f"/{user_id}/accounts", {"fields": fields.USER_ACCOUNT_FIELDS}
        )
