"""
points_bank/app.py

FastAPI application factory for the points-bank service.

This module wires together:
- Logging configuration (rotating file under LOG_DIR)
- CORS and request logging middleware
- The store (async engine + session factory), kept on app.state
- Routers for members (register/login/me) and transfers (transfer/history/search)
- OpenAPI docs at /swagger and /swagger/doc.json
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request

from points_bank import __version__
from points_bank.api import transfers_router, users_router
from points_bank.api.errors import register_exception_handlers
from points_bank.config import Settings, get_settings
from points_bank.db.session import build_engine, build_session_factory, create_schema
from points_bank.logging_config import get_logger, setup_logging

logger = get_logger("points_bank")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_dir)

    app = FastAPI(
        title="LBK Points Transfer API",
        description="API for LBK member points transfer system",
        version=__version__,
        docs_url="/swagger",
        openapi_url="/swagger/doc.json",
        redoc_url=None,
    )

    engine = build_engine(settings.database_url, echo=settings.db_echo)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # CORS (open for demo clients)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Lightweight request logger; bodies are not logged since they carry passwords.
        """
        logger.info(
            "HTTP %s %s from %s",
            request.method,
            request.url.path,
            request.client.host if request.client else "?",
        )
        response = await call_next(request)
        logger.info("HTTP %s %s -> %s", request.method, request.url.path, response.status_code)
        return response

    @app.get("/")
    async def root():
        return {"message": "Hello World"}

    @app.get("/health")
    async def health():
        """
        Simple health check endpoint.
        """
        return {"status": "healthy"}

    register_exception_handlers(app)
    app.include_router(users_router)
    app.include_router(transfers_router)

    @app.on_event("startup")
    async def on_startup():
        await create_schema(engine)
        logger.info("Points-bank starting up database=%s", engine.url.render_as_string(hide_password=True))

    @app.on_event("shutdown")
    async def on_shutdown():
        await engine.dispose()
        logger.info("Points-bank shutting down")

    return app
