"""Persistence adapters for the job collection and board settings.

Two backends share the ``JobStore`` contract:

* ``FileJobStore`` keeps two JSON documents in a data directory.
* ``SqlJobStore`` keeps rows in a relational database via SQLAlchemy.

Reads are fail-soft (seed data / default settings); writes replace the
whole collection and raise on failure.
"""
from __future__ import annotations

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .errors import ConstraintViolation, RemoteCallFailure, StorageUnavailable
from .logging_config import get_logger
from .models import BoardSettingsORM, JobORM
from .schemas import BoardSettings, Job
from .seed import seed_jobs

logger = get_logger(__name__)


def revive_jobs(raw_items: Iterable[Any]) -> List[Job]:
    """Validate stored items one by one, dropping the ones that don't fit."""
    jobs: List[Job] = []
    for raw in raw_items:
        try:
            jobs.append(Job.model_validate(raw))
        except ValidationError as e:
            logger.warning("dropping unreadable stored job: %s", e.errors()[0].get("msg", e))
    return jobs


class JobStore(ABC):
    @abstractmethod
    def load_jobs(self) -> List[Job]:
        """Saved collection, or the seed collection. Never raises."""

    @abstractmethod
    def save_jobs(self, jobs: List[Job], *, actor: Optional[str] = None) -> None:
        """Replace the whole saved collection."""

    @abstractmethod
    def get_settings(self) -> BoardSettings:
        """Saved settings, or empty settings. Never raises."""

    @abstractmethod
    def save_settings(self, settings: BoardSettings) -> None:
        pass


class FileJobStore(JobStore):
    JOBS_KEY = "jobs.v1"
    SETTINGS_KEY = "settings.v1"

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _read(self, key: str) -> Any:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise StorageUnavailable(f"cannot read {path.name}: {e}") from e

    def _write(self, key: str, value: Any) -> None:
        path = self._path(key)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(value, f, ensure_ascii=False)
                os.replace(tmp, path)
            except BaseException:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise
        except OSError as e:
            raise StorageUnavailable(f"cannot write {path.name}: {e}") from e

    def load_jobs(self) -> List[Job]:
        try:
            raw = self._read(self.JOBS_KEY)
        except StorageUnavailable as e:
            logger.warning("job store unreadable, serving seed data: %s", e)
            return seed_jobs()
        if not isinstance(raw, list):
            if raw is not None:
                logger.warning("job store holds %s, serving seed data", type(raw).__name__)
            return seed_jobs()
        return revive_jobs(raw) or seed_jobs()

    def save_jobs(self, jobs: List[Job], *, actor: Optional[str] = None) -> None:
        self._write(self.JOBS_KEY, [job.to_json() for job in jobs])
        logger.info("saved %d jobs to %s", len(jobs), self._path(self.JOBS_KEY))

    def get_settings(self) -> BoardSettings:
        try:
            raw = self._read(self.SETTINGS_KEY)
            if isinstance(raw, dict):
                return BoardSettings.model_validate(raw)
        except (StorageUnavailable, ValidationError) as e:
            logger.warning("settings unreadable, using defaults: %s", e)
        return BoardSettings()

    def save_settings(self, settings: BoardSettings) -> None:
        self._write(self.SETTINGS_KEY, settings.model_dump(mode="json", by_alias=True, exclude_none=True))


def _job_to_row(job: Job, created_by: Optional[str]) -> dict:
    return {
        "id": job.id,
        "title": job.title,
        "company": job.company,
        "location": job.location,
        "experience": job.experience,
        "salary": job.salary,
        "date_posted": job.date_posted,
        "job_type": job.job_type.value,
        "description": job.description,
        "requirements": list(job.requirements),
        "responsibilities": list(job.responsibilities),
        "benefits": list(job.benefits) if job.benefits is not None else None,
        "contact_email": job.contact_email,
        "contact_whatsapp": job.contact_whatsapp,
        "company_logo": job.company_logo,
        "created_by": created_by,
    }


def _row_to_dict(r: JobORM) -> dict:
    return {
        "id": r.id,
        "title": r.title,
        "company": r.company,
        "location": r.location,
        "experience": r.experience,
        "salary": r.salary,
        "date_posted": r.date_posted,
        "job_type": r.job_type,
        "description": r.description,
        "requirements": r.requirements or [],
        "responsibilities": r.responsibilities or [],
        "benefits": r.benefits,
        "contact_email": r.contact_email,
        "contact_whatsapp": r.contact_whatsapp,
        "company_logo": r.company_logo,
    }


class SqlJobStore(JobStore):
    """Relational backend; every call is a fallible round trip."""

    SETTINGS_ROW_ID = 1

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def select_all(self) -> List[Job]:
        try:
            with self._session_factory() as session:
                rows = session.execute(select(JobORM).order_by(JobORM.date_posted.desc())).scalars().all()
                raw = [_row_to_dict(r) for r in rows]
        except SQLAlchemyError as e:
            raise RemoteCallFailure(f"select jobs failed: {e}") from e
        return revive_jobs(raw)

    def insert_one(self, job: Job, *, actor: Optional[str] = None) -> None:
        self.insert_many([job], actor=actor)

    def insert_many(self, jobs: List[Job], *, actor: Optional[str] = None) -> int:
        if not jobs:
            return 0
        try:
            with self._session_factory.begin() as session:
                session.add_all([JobORM(**_job_to_row(job, actor)) for job in jobs])
        except IntegrityError as e:
            raise ConstraintViolation(f"insert rejected: {e.orig}") from e
        except SQLAlchemyError as e:
            raise RemoteCallFailure(f"insert failed: {e}") from e
        logger.info("inserted %d jobs", len(jobs))
        return len(jobs)

    def load_jobs(self) -> List[Job]:
        try:
            jobs = self.select_all()
        except RemoteCallFailure as e:
            logger.warning("job table unavailable, serving seed data: %s", e)
            return seed_jobs()
        return jobs or seed_jobs()

    def save_jobs(self, jobs: List[Job], *, actor: Optional[str] = None) -> None:
        try:
            with self._session_factory.begin() as session:
                owners = dict(session.execute(select(JobORM.id, JobORM.created_by)).all())
                session.execute(delete(JobORM))
                session.add_all(
                    [JobORM(**_job_to_row(job, owners[job.id] if job.id in owners else actor)) for job in jobs]
                )
        except IntegrityError as e:
            raise ConstraintViolation(f"save rejected: {e.orig}") from e
        except SQLAlchemyError as e:
            raise RemoteCallFailure(f"save failed: {e}") from e
        logger.info("saved %d jobs to database", len(jobs))

    def get_settings(self) -> BoardSettings:
        try:
            with self._session_factory() as session:
                row = session.get(BoardSettingsORM, self.SETTINGS_ROW_ID)
                payload = dict(row.payload or {}) if row is not None else None
            if payload is not None:
                return BoardSettings.model_validate(payload)
        except (SQLAlchemyError, ValidationError) as e:
            logger.warning("settings unreadable, using defaults: %s", e)
        return BoardSettings()

    def save_settings(self, settings: BoardSettings) -> None:
        payload = settings.model_dump(mode="json", by_alias=True, exclude_none=True)
        try:
            with self._session_factory.begin() as session:
                session.merge(BoardSettingsORM(id=self.SETTINGS_ROW_ID, payload=payload))
        except SQLAlchemyError as e:
            raise RemoteCallFailure(f"save settings failed: {e}") from e
