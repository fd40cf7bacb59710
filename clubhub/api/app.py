import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.base_error.code, "message": exc.base_error.message}
    logger.warning("Client error on %s %s: %s", request.method, request.url.path, error_dict)
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.base_error.code, "message": "Internal server error"}
    logger.error("Server error on %s %s: %s", request.method, request.url.path, exc.base_error.message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


def create_app(ApplicationConfig) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.CREATE_TABLES_ON_STARTUP:
            import clubhub.domain.entities  # noqa: F401  registers the tables
            from clubhub.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables ensured")
        yield

    app = FastAPI(title="Club Hub API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from clubhub.api.routes import (
        announcements,
        auth,
        core_events,
        dashboard,
        health,
        leaderboard,
        member_events,
        members,
        teams,
        tournaments,
    )

    prefix = ApplicationConfig.API_PREFIX
    app.include_router(health.router, prefix=prefix, tags=["Health"])
    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(members.router, prefix=prefix)
    app.include_router(core_events.router, prefix=prefix)
    app.include_router(member_events.router, prefix=prefix)
    app.include_router(teams.router, prefix=prefix)
    app.include_router(announcements.router, prefix=prefix)
    app.include_router(leaderboard.router, prefix=prefix)
    app.include_router(tournaments.router, prefix=prefix)
    app.include_router(dashboard.router, prefix=prefix)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)

    return app
