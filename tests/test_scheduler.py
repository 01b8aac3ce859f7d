"""
Tests for the auto-refresh scheduler wiring.

The BackgroundScheduler is never started here; jobs stay pending, which is
enough to check what would run and how often.
"""

from datetime import timedelta

import pytest
from apscheduler.schedulers.background import BackgroundScheduler
from pydantic import ValidationError

from job_board.intake import AdminIntake
from job_board.scheduler import REFRESH_JOB_ID, AutoRefresher
from job_board.schemas import MAX_AUTO_REFRESH_MS, BoardSettings

SOURCE_URL = "https://docs.example.com/pub?output=csv"


@pytest.fixture
def refresher(file_store, csv_transport):
    return AutoRefresher(AdminIntake(file_store, transport=csv_transport), BackgroundScheduler())


class TestApply:
    def test_interval_schedules_refresh(self, refresher):
        refresher.apply(BoardSettings(csv_source_url=SOURCE_URL, auto_refresh_ms=90000))

        job = refresher.scheduler.get_job(REFRESH_JOB_ID)
        assert job is not None
        assert job.trigger.interval == timedelta(seconds=90)
        assert job.max_instances == 1
        assert job.coalesce is True

    @pytest.mark.parametrize("settings", [
        BoardSettings(csv_source_url=SOURCE_URL),
        BoardSettings(csv_source_url=SOURCE_URL, auto_refresh_ms=0),
        BoardSettings(auto_refresh_ms=60000),
    ])
    def test_disabled_settings_cancel_refresh(self, refresher, settings):
        refresher.apply(BoardSettings(csv_source_url=SOURCE_URL, auto_refresh_ms=60000))

        refresher.apply(settings)

        assert refresher.scheduler.get_job(REFRESH_JOB_ID) is None

    def test_reapply_replaces_interval(self, refresher):
        refresher.apply(BoardSettings(csv_source_url=SOURCE_URL, auto_refresh_ms=60000))
        refresher.apply(BoardSettings(csv_source_url=SOURCE_URL, auto_refresh_ms=120000))

        jobs = refresher.scheduler.get_jobs()
        assert len(jobs) == 1
        assert jobs[0].trigger.interval == timedelta(minutes=2)


    def test_longest_allowed_interval_schedules(self, refresher):
        refresher.apply(BoardSettings(csv_source_url=SOURCE_URL, auto_refresh_ms=MAX_AUTO_REFRESH_MS))

        assert refresher.scheduler.get_job(REFRESH_JOB_ID).trigger.interval == timedelta(days=366)

    def test_interval_beyond_limit_is_rejected(self):
        with pytest.raises(ValidationError):
            BoardSettings(csv_source_url=SOURCE_URL, auto_refresh_ms=MAX_AUTO_REFRESH_MS + 1)


class TestTick:
    def test_tick_refreshes_from_saved_settings(self, refresher, file_store):
        file_store.save_settings(BoardSettings(csv_source_url=SOURCE_URL, auto_refresh_ms=60000))

        summary = refresher.tick()

        assert summary.parsed == 2

    def test_tick_swallows_remote_failures(self, file_store, failing_transport):
        file_store.save_settings(BoardSettings(csv_source_url=SOURCE_URL, auto_refresh_ms=60000))
        refresher = AutoRefresher(AdminIntake(file_store, transport=failing_transport), BackgroundScheduler())

        assert refresher.tick() is None
