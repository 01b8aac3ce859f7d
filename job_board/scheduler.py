from __future__ import annotations

from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .errors import JobBoardError
from .intake import AdminIntake
from .logging_config import get_logger
from .schemas import BoardSettings

logger = get_logger(__name__)

REFRESH_JOB_ID = "csv_refresh"


class AutoRefresher:
    """Periodic fetch-merge-save of the configured CSV source.

    Ticks never overlap: APScheduler runs at most one instance and folds
    missed runs into one, and the intake skips a refresh already in flight.
    """

    def __init__(self, intake: AdminIntake, scheduler: Optional[BackgroundScheduler] = None):
        self.intake = intake
        self.scheduler = scheduler or BackgroundScheduler()

    def start(self):
        if not self.scheduler.running:
            self.scheduler.start()
        self.apply(self.intake.store.get_settings())

    def shutdown(self):
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)

    def apply(self, settings: BoardSettings):
        """(Re)schedule or cancel the refresh job to match ``settings``."""
        if self.scheduler.get_job(REFRESH_JOB_ID) is not None:
            self.scheduler.remove_job(REFRESH_JOB_ID)
        if not settings.auto_refresh_enabled:
            logger.info("auto-refresh disabled")
            return
        seconds = settings.auto_refresh_ms / 1000.0
        self.scheduler.add_job(
            self.tick,
            IntervalTrigger(seconds=seconds),
            id=REFRESH_JOB_ID,
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        logger.info("Scheduled CSV refresh for url=%s interval=%ss", settings.csv_source_url, seconds)

    def tick(self):
        # settings are re-read each tick so a changed URL takes effect
        try:
            summary = self.intake.refresh_from_source(actor="scheduler")
        except JobBoardError as e:
            logger.error("scheduled csv refresh failed: %s", e)
            return None
        return summary
