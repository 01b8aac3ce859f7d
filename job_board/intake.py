"""Admin intake: manual entry, pasted CSV and remote CSV refresh.

Every path ends in the same load -> merge -> save cycle against the
injected store; cycles are serialized so two admins (or an admin and the
scheduler) cannot interleave partial merges inside one process.
"""
from __future__ import annotations

import threading
import time
from datetime import datetime, timezone
from typing import Callable, List, Optional

import httpx

from .errors import ValidationFailure
from .ingest import parse_csv
from .logging_config import get_logger
from .merge import merge_jobs
from .schemas import BoardSettings, ImportSummary, Job, ManualJobForm
from .sources import fetch_csv
from .store import JobStore

logger = get_logger(__name__)

MANUAL_REQUIRED = ("title", "company", "location", "experience", "description")


def _clean(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip()
    return value or None


def _clean_list(values: Optional[List[str]]) -> List[str]:
    return [v.strip() for v in values or [] if v and v.strip()]


class AdminIntake:
    def __init__(
        self,
        store: JobStore,
        *,
        fetch_timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.fetch_timeout = fetch_timeout
        self.transport = transport
        self.clock = clock
        self._write_lock = threading.Lock()
        self._refresh_lock = threading.Lock()

    def _merge_and_save(self, incoming: List[Job], actor: Optional[str]) -> int:
        with self._write_lock:
            merged = merge_jobs(self.store.load_jobs(), incoming)
            self.store.save_jobs(merged, actor=actor)
        return len(merged)

    def build_manual_job(self, form: ManualJobForm) -> Job:
        missing = [name for name in MANUAL_REQUIRED if not (getattr(form, name) or "").strip()]
        if missing:
            raise ValidationFailure("Please fill required fields", missing=missing)
        benefits = _clean_list(form.benefits)
        now = self.clock()
        return Job(
            id=str(int(now * 1_000_000)),
            title=form.title.strip(),
            company=form.company.strip(),
            location=form.location.strip(),
            experience=form.experience.strip(),
            salary=_clean(form.salary),
            date_posted=datetime.fromtimestamp(now, tz=timezone.utc),
            job_type=form.job_type,
            description=form.description.strip(),
            requirements=_clean_list(form.requirements),
            responsibilities=_clean_list(form.responsibilities),
            benefits=benefits or None,
            contact_email=_clean(form.contact_email),
            contact_whatsapp=_clean(form.contact_whatsapp),
            company_logo=_clean(form.company_logo),
        )

    def add_manual(self, form: ManualJobForm, *, actor: Optional[str] = None) -> Job:
        job = self.build_manual_job(form)
        self._merge_and_save([job], actor)
        logger.info("manual job added id=%s by=%s", job.id, actor or "-")
        return job

    def import_csv(self, text: str, *, actor: Optional[str] = None, source: str = "csv") -> ImportSummary:
        incoming = parse_csv(text, clock=self.clock)
        if not incoming:
            raise ValidationFailure("No valid rows found")
        total = self._merge_and_save(incoming, actor)
        logger.info("csv import source=%s parsed=%d total=%d", source, len(incoming), total)
        return ImportSummary(source=source, parsed=len(incoming), total=total)

    def refresh_from_source(
        self, settings: Optional[BoardSettings] = None, *, actor: Optional[str] = None
    ) -> ImportSummary:
        """Fetch the configured CSV source and merge it into the collection.

        A refresh already running makes this call a no-op reported with
        ``skipped=True``. Fetch failures propagate as RemoteCallFailure.
        """
        settings = settings or self.store.get_settings()
        url = settings.csv_source_url
        if not url:
            return ImportSummary(source="", parsed=0)
        if not self._refresh_lock.acquire(blocking=False):
            logger.info("refresh already in flight, skipping url=%s", url)
            return ImportSummary(source=url, skipped=True)
        try:
            text = fetch_csv(url, timeout=self.fetch_timeout, transport=self.transport)
            incoming = parse_csv(text, clock=self.clock)
            if not incoming:
                logger.info("csv source url=%s yielded no valid rows", url)
                return ImportSummary(source=url, parsed=0)
            total = self._merge_and_save(incoming, actor)
        finally:
            self._refresh_lock.release()
        logger.info("refreshed from url=%s parsed=%d total=%d", url, len(incoming), total)
        return ImportSummary(source=url, parsed=len(incoming), total=total)
