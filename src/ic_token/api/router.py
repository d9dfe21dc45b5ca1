"""ic_token REST API — read-only views over ICRC-1 ledgers."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.ic_account.domain.models import parse_subaccount_hex
from src.ic_account.domain.principal import Principal
from src.ic_common.errors import AppError
from src.ic_common.response import ApiResponse, success_response
from src.ic_token.application.schemas import (
    AccountIdResponse,
    BalanceResponse,
    TokenInfoResponse,
    WellKnownTokensResponse,
)
from src.ic_token.application.service import TokenBalanceService
from src.ic_token.domain.registry import well_known_ledgers

router = APIRouter(tags=["tokens"])

SubaccountQuery = Annotated[str | None, Query(description="32-byte subaccount as 64 hex chars")]


def get_token_service(request: Request) -> TokenBalanceService:
    """FastAPI dependency: the service bound by create_app()."""
    return request.app.state.token_service


def _stamp(resp: ApiResponse, request: Request) -> ApiResponse:
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/accounts/{principal}/account-id")
async def get_account_id(
    principal: str,
    service: Annotated[TokenBalanceService, Depends(get_token_service)],
    request: Request,
    subaccount: SubaccountQuery = None,
) -> ApiResponse:
    owner = Principal.from_text(principal)
    sub = parse_subaccount_hex(subaccount)
    data = AccountIdResponse(
        principal=owner.to_text(),
        subaccount=sub.hex() if sub is not None else None,
        account_id=service.generate_account_id(owner, sub),
    )
    return _stamp(success_response(data), request)


@router.get("/tokens/well-known")
async def list_well_known_tokens(
    service: Annotated[TokenBalanceService, Depends(get_token_service)],
    request: Request,
) -> ApiResponse:
    network = service.network.network
    data = WellKnownTokensResponse(
        network=network.value,
        ledgers=well_known_ledgers(network, service.settings),
    )
    return _stamp(success_response(data), request)


@router.get("/tokens/{token_id}")
async def get_token_info(
    token_id: str,
    service: Annotated[TokenBalanceService, Depends(get_token_service)],
    request: Request,
) -> ApiResponse:
    metadata = await service.get_token_info(token_id)
    return _stamp(success_response(TokenInfoResponse.from_metadata(token_id, metadata)), request)


@router.get("/tokens/{token_id}/balance/{principal}")
async def get_balance(
    token_id: str,
    principal: str,
    service: Annotated[TokenBalanceService, Depends(get_token_service)],
    request: Request,
    subaccount: SubaccountQuery = None,
) -> ApiResponse:
    owner = Principal.from_text(principal)
    sub = parse_subaccount_hex(subaccount)
    result = await service.query_formatted_balance(token_id, owner, sub)
    if result.value is None:
        # 2001 = RemoteQueryError; the message already names the token and cause
        raise AppError(2001, result.error or "", 502)
    data = BalanceResponse.from_formatted(owner.to_text(), sub, result.value)
    return _stamp(success_response(data), request)
