import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .error import AuthFlowError, ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_auth_flow_error(request: Request, exc: AuthFlowError):
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Auth flow error: {exc.base_error.code}")
    else:
        logger.info(f"Auth flow rejected: {exc.base_error.code} {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.base_error.message},
    )


def create_app(ApplicationConfig) -> FastAPI:
    from primeauth.adapter.services.session_sweeper import run_session_sweeper
    from primeauth.api.routes import (
        activity,
        admin,
        app_users,
        applications,
        blacklist,
        health_check,
        licenses,
        sessions,
        v1,
        webhooks,
    )
    from primeauth.depends import AsyncSessionLocal, webhook_notifier

    end_user_prefix = f"{ApplicationConfig.API_PREFIX}/v1"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        stop = asyncio.Event()
        sweeper = None
        if ApplicationConfig.ENABLE_SESSION_SWEEPER:
            sweeper = asyncio.create_task(
                run_session_sweeper(
                    AsyncSessionLocal, ApplicationConfig.SESSION_SWEEP_INTERVAL_SECONDS, stop
                )
            )
            logger.info("Session sweeper started")
        yield
        stop.set()
        if sweeper is not None:
            await sweeper
        await webhook_notifier.drain()

    app = FastAPI(title="PrimeAuth", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    async def handle_validation_error(request: Request, exc: RequestValidationError):
        if request.url.path.startswith(end_user_prefix):
            return v1.invalid_request_response()
        return await request_validation_exception_handler(request, exc)

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(v1.router, prefix=end_user_prefix)
    app.include_router(applications.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(licenses.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(app_users.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(activity.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(sessions.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(blacklist.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(webhooks.router, prefix=ApplicationConfig.API_PREFIX)
    app.include_router(admin.router, prefix=ApplicationConfig.API_PREFIX)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(AuthFlowError, handle_auth_flow_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    return app
