"""Filter engine applied to the in-memory job collection on every read."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from .schemas import Facets, FilterCriteria, Job, JobType, as_utc

# label -> max whole days since posting
DATE_BUCKETS: dict[str, int] = {
    "Last 24 hours": 1,
    "Last 3 days": 3,
    "Last 7 days": 7,
    "Last 30 days": 30,
}

_DAY = timedelta(days=1)


def days_since(posted: datetime, now: datetime) -> int:
    return (as_utc(now) - posted) // _DAY


def _matches_date(job: Job, bucket: str, now: datetime) -> bool:
    if not bucket:
        return True
    max_days = DATE_BUCKETS.get(bucket)
    if max_days is None:
        # unknown label fails open
        return True
    return days_since(job.date_posted, now) <= max_days


def _matches_search(job: Job, query: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    return (
        needle in job.title.lower()
        or needle in job.company.lower()
        or needle in job.description.lower()
    )


def matches(job: Job, criteria: FilterCriteria, *, now: Optional[datetime] = None) -> bool:
    """True when the job satisfies every non-empty predicate in ``criteria``.

    The location test is a case-sensitive substring check.
    """
    if criteria.location and criteria.location not in job.location:
        return False
    if criteria.job_type and job.job_type.value != criteria.job_type:
        return False
    if criteria.experience_level and job.experience != criteria.experience_level:
        return False
    if not _matches_search(job, criteria.search_query):
        return False
    return _matches_date(job, criteria.date_posted, now or datetime.now(timezone.utc))


def filter_jobs(
    jobs: Iterable[Job], criteria: FilterCriteria, *, now: Optional[datetime] = None
) -> list[Job]:
    now = now or datetime.now(timezone.utc)
    return [job for job in jobs if matches(job, criteria, now=now)]


def facets(jobs: Iterable[Job]) -> Facets:
    """Distinct values present in the collection, for filter pickers."""
    jobs = list(jobs)
    present_types = {j.job_type for j in jobs}
    return Facets(
        locations=sorted({j.location for j in jobs}),
        job_types=[t.value for t in JobType if t in present_types],
        experience_levels=sorted({j.experience for j in jobs}),
        date_posted=list(DATE_BUCKETS),
    )
