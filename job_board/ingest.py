"""CSV ingestion: turn pasted/uploaded/fetched text into Job records.

Expected header names (case-insensitive)::

    id, title, company, location, experience, salary, datePosted, jobType,
    description, requirements, responsibilities, benefits, contactEmail,
    contactWhatsApp, companyLogo

List columns (requirements, responsibilities, benefits) use ``|`` as the
inner separator. Fields may be wrapped in double quotes to carry a comma.
"""
from __future__ import annotations

import csv
import re
import time
from datetime import datetime
from typing import Callable, Optional

from pydantic import ValidationError

from .errors import MalformedInput
from .logging_config import get_logger
from .schemas import Job, JobType, as_utc

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("title", "company", "location", "experience", "datePosted", "jobType", "description")
LIST_SEPARATOR = "|"
BOM = "\ufeff"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def parse_date(value: str) -> datetime:
    """Parse an ISO-8601 date or date-time; date-only and naive values are UTC."""
    text = (value or "").strip()
    if not text:
        raise MalformedInput("empty date")
    # Z suffix as an explicit UTC offset
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(text))
    except (ValueError, OverflowError) as e:
        raise MalformedInput(f"invalid date {value!r}") from e


def split_list(value: str) -> list[str]:
    return [part.strip() for part in value.split(LIST_SEPARATOR) if part.strip()]


def synthesize_id(line_index: int, clock: Optional[Callable[[], float]] = None) -> str:
    now = (clock or time.time)()
    return f"{int(now * 1_000_000)}-{line_index}"


def _split_lines(text: str) -> list[str]:
    # only CR, LF and CRLF end a line; other separators stay inside the value
    return [line for line in _LINE_BREAK.split(text or "") if line.strip()]


def _split_cells(line: str) -> list[str]:
    # one line at a time so an unbalanced quote cannot swallow the next row
    try:
        return next(csv.reader([line], strict=True))
    except csv.Error as e:
        raise MalformedInput(f"unreadable row: {e}") from e


class _Row:
    """Header-aware accessor over one split data line."""

    def __init__(self, header: dict[str, int], cells: list[str]):
        self._header = header
        self._cells = cells

    def get(self, name: str) -> str:
        i = self._header.get(name.lower())
        if i is None or i >= len(self._cells):
            return ""
        return self._cells[i].strip()


def _row_to_job(row: _Row, line_index: int, clock: Optional[Callable[[], float]]) -> Job:
    missing = [name for name in REQUIRED_COLUMNS if not row.get(name)]
    if missing:
        raise MalformedInput(f"missing {', '.join(missing)}")

    try:
        job_type = JobType.parse(row.get("jobType"))
    except ValueError as e:
        raise MalformedInput(str(e)) from e

    benefits = row.get("benefits")
    try:
        return Job(
            id=row.get("id") or synthesize_id(line_index, clock),
            title=row.get("title"),
            company=row.get("company"),
            location=row.get("location"),
            experience=row.get("experience"),
            salary=row.get("salary") or None,
            date_posted=parse_date(row.get("datePosted")),
            job_type=job_type,
            description=row.get("description"),
            requirements=split_list(row.get("requirements")),
            responsibilities=split_list(row.get("responsibilities")),
            benefits=split_list(benefits) if benefits else None,
            contact_email=row.get("contactEmail") or None,
            contact_whatsapp=row.get("contactWhatsApp") or None,
            company_logo=row.get("companyLogo") or None,
        )
    except ValidationError as e:
        raise MalformedInput(str(e)) from e


def parse_csv(text: str, *, clock: Optional[Callable[[], float]] = None) -> list[Job]:
    """Parse CSV text into Jobs, in source order, skipping invalid rows.

    Never raises: rows that are missing a required value, carry an
    unparseable ``datePosted`` or an unknown ``jobType`` are dropped and
    logged at DEBUG.
    """
    if text and text.startswith(BOM):
        text = text[len(BOM):]
    lines = _split_lines(text)
    if len(lines) < 2:
        return []

    header: dict[str, int] = {}
    try:
        header_cells = _split_cells(lines[0])
    except MalformedInput as e:
        logger.warning("csv header unreadable: %s", e)
        return []
    for i, name in enumerate(header_cells):
        # first occurrence wins for repeated names
        header.setdefault(name.strip().lower(), i)

    jobs: list[Job] = []
    for line_index, line in enumerate(lines[1:], start=1):
        try:
            jobs.append(_row_to_job(_Row(header, _split_cells(line)), line_index, clock))
        except MalformedInput as e:
            logger.debug("csv line %d skipped: %s", line_index, e)
    logger.info("csv ingest parsed=%d rows=%d", len(jobs), len(lines) - 1)
    return jobs
