from typing import Iterable, List

from .schemas import Job


def merge_jobs(existing: Iterable[Job], incoming: Iterable[Job]) -> List[Job]:
    """Union two job sets keyed by id, newest first.

    Incoming records replace existing ones with the same id regardless of
    their dates. Ties on ``date_posted`` keep first-seen order.
    """
    by_id: dict[str, Job] = {}
    for job in existing:
        by_id[job.id] = job
    for job in incoming:
        by_id[job.id] = job
    # sorted() with reverse=True is still stable
    return sorted(by_id.values(), key=lambda j: j.date_posted, reverse=True)
