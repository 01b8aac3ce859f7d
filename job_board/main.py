import os
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .auth import CredentialVerifier, SessionRegistry, StaticCredentialVerifier
from .config import Settings, get_settings
from .db import init_db, make_engine, make_session_factory
from .intake import AdminIntake
from .logging_config import configure_logging, get_logger
from .routers import admin as admin_router
from .routers import auth as auth_router
from .routers import jobs as jobs_router
from .scheduler import AutoRefresher
from .store import FileJobStore, JobStore, SqlJobStore

logger = get_logger(__name__)


def build_store(settings: Settings) -> JobStore:
    if settings.STORE_BACKEND == "database":
        engine = make_engine(settings.DATABASE_URL)
        # create tables on startup (development convenience); no migrations
        init_db(engine)
        return SqlJobStore(make_session_factory(engine))
    return FileJobStore(settings.DATA_DIR)


def create_app(
    settings: Optional[Settings] = None,
    *,
    store: Optional[JobStore] = None,
    verifier: Optional[CredentialVerifier] = None,
    transport: Optional[httpx.BaseTransport] = None,
    start_scheduler: bool = True,
) -> FastAPI:
    """Build the API with one store, intake and scheduler per process."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME, version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.store = store or build_store(settings)
    app.state.verifier = verifier or StaticCredentialVerifier(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    app.state.sessions = SessionRegistry()
    app.state.intake = AdminIntake(
        app.state.store, fetch_timeout=settings.FETCH_TIMEOUT_SECONDS, transport=transport
    )
    app.state.refresher = AutoRefresher(app.state.intake)

    app.include_router(jobs_router.router)
    app.include_router(auth_router.router)
    app.include_router(admin_router.router)

    @app.on_event("startup")
    def _on_startup():
        logger.info("store backend=%s", type(app.state.store).__name__)
        if not start_scheduler:
            return
        try:
            app.state.refresher.start()
        except Exception as e:
            # do not crash app if scheduling fails
            logger.error("Failed to start scheduler: %s", e)

    @app.on_event("shutdown")
    def _on_shutdown():
        app.state.refresher.shutdown()

    @app.get("/health")
    def health():
        return {"ok": True, "env": settings.APP_ENV}

    return app


def run():
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        create_app(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
