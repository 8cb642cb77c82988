"""metagate — Shared Dependencies.

Forwarders are built once at startup and stored on ``app.state``; route
handlers receive them through ``Depends()``.
"""

from dataclasses import dataclass
from typing import Annotated, List, Optional

import httpx
from fastapi import Depends, Request

from metagate.config import Settings
from metagate.connectors.meta.account import GraphAccount
from metagate.connectors.meta.ads import AdAccounts
from metagate.connectors.meta.client import MetaClient
from metagate.connectors.meta.facebook import FacebookPages
from metagate.connectors.meta.instagram import InstagramAccounts


@dataclass
class Forwarders:
    facebook: FacebookPages
    instagram: InstagramAccounts
    ads: AdAccounts
    account: GraphAccount
    clients: List[MetaClient]

    async def close(self) -> None:
        for client in self.clients:
            await client.close()


def build_forwarders(
    settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
) -> Forwarders:
    """Wire one client per access token into the forwarders."""
    client = MetaClient(
        settings.meta_access_token,
        settings.graph_url,
        timeout=settings.request_timeout,
        transport=transport,
    )
    clients = [client]
    instagram_client = client
    if settings.instagram_token != settings.meta_access_token:
        instagram_client = MetaClient(
            settings.instagram_token,
            settings.graph_url,
            timeout=settings.request_timeout,
            transport=transport,
        )
        clients.append(instagram_client)

    return Forwarders(
        facebook=FacebookPages(client, settings.meta_account_id),
        instagram=InstagramAccounts(
            instagram_client, settings.default_instagram_account_id
        ),
        ads=AdAccounts(client, settings.meta_account_id),
        account=GraphAccount(
            client,
            access_token=settings.meta_access_token,
            app_id=settings.meta_app_id,
            app_secret=settings.meta_app_secret,
        ),
        clients=clients,
    )


def get_forwarders(request: Request) -> Forwarders:
    return request.app.state.forwarders


def get_facebook(request: Request) -> FacebookPages:
    return get_forwarders(request).facebook


def get_instagram(request: Request) -> InstagramAccounts:
    return get_forwarders(request).instagram


def get_ads(request: Request) -> AdAccounts:
    return get_forwarders(request).ads


def get_graph_account(request: Request) -> GraphAccount:
    return get_forwarders(request).account


# Type aliases for dependency injection
FacebookDep = Annotated[FacebookPages, Depends(get_facebook)]
InstagramDep = Annotated[InstagramAccounts, Depends(get_instagram)]
AdsDep = Annotated[AdAccounts, Depends(get_ads)]
GraphAccountDep = Annotated[GraphAccount, Depends(get_graph_account)]
