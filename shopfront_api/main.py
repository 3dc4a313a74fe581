import asyncio
import logging
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shopfront_api.addresses import router as addresses_router
from shopfront_api.auth import router as auth_router
from shopfront_api.core.config import Settings
from shopfront_api.core.context import AppContext
from shopfront_api.core.errors import register_exception_handlers
from shopfront_api.core.logging import setup_logging
from shopfront_api.coupons import router as coupons_router
from shopfront_api.lifecycle import job as lifecycle_job
from shopfront_api.newsletter import router as newsletter_router
from shopfront_api.users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    context: AppContext = app.state.context
    # Open the DB pool once per process.
    await context.database.connect()
    sweep_task = lifecycle_job.start(context) if context.settings.sweep_enabled else None
    logger.info("startup_complete sweep_enabled=%s", sweep_task is not None)
    try:
        yield
    finally:
        if sweep_task is not None:
            sweep_task.cancel()
            with suppress(asyncio.CancelledError):
                await sweep_task
        await context.database.close()
        logger.info("shutdown_complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    app = FastAPI(title="shopfront-api", lifespan=lifespan)
    app.state.context = AppContext.from_settings(settings)

    # Only the storefront's own origin may call this API from a browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    register_exception_handlers(app)

    app.include_router(auth_router.router, tags=["auth"])
    app.include_router(users_router.router, tags=["users"])
    app.include_router(addresses_router.router, tags=["addresses"])
    app.include_router(newsletter_router.router, tags=["newsletter"])
    app.include_router(coupons_router.router, tags=["coupons"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


def run() -> None:
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
