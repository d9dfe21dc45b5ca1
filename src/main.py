"""FastAPI application factory.

The ledger transport (an ICRC-1 agent) is owned by the embedding
application and passed in:

    app = create_app(ledger=MyIcrcAgent(...))
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.ic_common.errors import AppError
from src.ic_common.request_log import RequestLogMiddleware
from src.ic_common.response import app_error_response
from src.ic_token.api.router import router as token_router
from src.ic_token.application.service import TokenBalanceService
from src.ic_token.domain.cache import TokenMetadataCache
from src.ic_token.domain.ledger import LedgerClientProtocol

API_VERSION = "0.1.0"


def create_app(
    ledger: LedgerClientProtocol,
    network: str | None = None,
    cache: TokenMetadataCache | None = None,
) -> FastAPI:
    # Invalid DFX_NETWORK raises here, before the app exists
    service = TokenBalanceService(ledger, cache=cache, network=network)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Startup: trust local root key if needed."""
        await service.prepare()
        yield

    app = FastAPI(
        title=settings.APP_NAME,
        version=API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.token_service = service

    app.add_middleware(RequestLogMiddleware)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        resp = app_error_response(exc)
        resp.request_id = getattr(request.state, "request_id", resp.request_id)
        return JSONResponse(
            status_code=exc.http_status,
            content=resp.model_dump(),
        )

    app.include_router(token_router, prefix="/api/v1")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {
            "status": "ok",
            "version": API_VERSION,
            "network": service.network.network.value,
        }

    return app
