"""metagate — Graph Account Routes."""

from fastapi import APIRouter

from metagate.dependencies import GraphAccountDep
from metagate.models.requests import TokenExchangeBody
from metagate.models.responses import Envelope, ok

router = APIRouter(prefix="/api/meta", tags=["Meta"])


@router.get("/validate-token", response_model=Envelope)
async def validate_token(account: GraphAccountDep):
    """Check if the configured access token is valid.

    Returns validity status, expiration, and granted scopes.
    """
    return ok(await account.validate_token())


@router.get("/app", response_model=Envelope)
async def get_app_info(account: GraphAccountDep):
    return ok(await account.get_app_info())


@router.get("/me", response_model=Envelope)
async def get_user_info(account: GraphAccountDep):
    return ok(await account.get_user_info())


@router.get("/me/accounts", response_model=Envelope)
async def get_user_accounts(account: GraphAccountDep):
    """Pages and apps the token's user manages."""
    return ok(await account.get_user_accounts())


@router.post("/exchange-token", response_model=Envelope)
async def exchange_token(body: TokenExchangeBody, account: GraphAccountDep):
    """Swap a short-lived user token for a long-lived one."""
    return ok(await account.exchange_token(body.short_lived_token))
