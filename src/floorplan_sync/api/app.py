"""FastAPI front door: manual POST /sync and an optional interval schedule."""

import logging
from contextlib import asynccontextmanager
from typing import Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from floorplan_sync.config import Settings
from floorplan_sync.pipeline import sync_all

logger = logging.getLogger(__name__)

SettingsFactory = Callable[[], Settings]

INFO_TEXT = "Entrata-Webflow sync service. POST to /sync to trigger manually."


def run_scheduled_sync(settings_factory: SettingsFactory = Settings.from_env) -> None:
    """
    Scheduled entry point. Fire-and-forget: failures are logged, never raised,
    so the scheduler keeps running.
    """
    logger.info("Starting scheduled Entrata -> Webflow sync")
    try:
        sync_all(settings_factory())
    except Exception:
        logger.exception("Scheduled sync failed")


def start_scheduler(
    interval_minutes: float,
    settings_factory: SettingsFactory = Settings.from_env,
) -> BackgroundScheduler:
    """Run the sync every `interval_minutes` in a background thread."""
    scheduler = BackgroundScheduler()
    scheduler.add_job(
        run_scheduled_sync,
        "interval",
        minutes=interval_minutes,
        args=[settings_factory],
        max_instances=1,
        coalesce=True,
    )
    scheduler.start()
    logger.info("Scheduled sync every %s minute(s)", interval_minutes)
    return scheduler


def create_app(
    settings_factory: SettingsFactory = Settings.from_env,
    *,
    schedule_minutes: Optional[float] = None,
) -> FastAPI:
    """
    Build the app. Settings are loaded per request so each run sees current
    configuration. With `schedule_minutes` an interval job runs for the
    lifetime of the app.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        scheduler = start_scheduler(schedule_minutes, settings_factory) if schedule_minutes else None
        try:
            yield
        finally:
            if scheduler is not None:
                scheduler.shutdown(wait=False)

    app = FastAPI(title="floorplan-sync", lifespan=lifespan)

    @app.post("/sync", response_class=PlainTextResponse)
    def trigger_sync() -> PlainTextResponse:
        try:
            sync_all(settings_factory())
        except Exception as e:
            logger.error("Sync failed: %s", e)
            return PlainTextResponse(f"Sync failed: {e}", status_code=500)
        return PlainTextResponse("Sync completed successfully", status_code=200)

    @app.api_route(
        "/{path:path}",
        methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        response_class=PlainTextResponse,
    )
    def info(path: str) -> PlainTextResponse:
        return PlainTextResponse(INFO_TEXT, status_code=200)

    return app
