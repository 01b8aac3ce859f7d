"""
Shared fixtures for job board tests.

Jobs are built with ``make_job`` so each test only spells out the fields
it cares about.
"""

from datetime import datetime, timezone

import httpx
import pytest

from job_board.db import init_db, make_engine, make_session_factory
from job_board.schemas import Job, JobType
from job_board.store import FileJobStore, SqlJobStore

NOW = datetime(2025, 11, 1, 12, 0, tzinfo=timezone.utc)

SAMPLE_CSV = (
    "id,title,company,location,experience,datePosted,jobType,description,requirements,benefits,salary\n"
    "a1,Frontend Developer,TechCorp,Bangalore,3-5 years,2025-10-26,Full-time,Build UIs,React|TS| ,Health Insurance,\n"
    "a2,Broken Row,StartupXYZ,Delhi,0-1 years,not-a-date,Internship,Learn things,,,\n"
    "a3,Data Intern,DataCo,Pune,0-1 years,2025-10-28T09:30:00Z,Internship,Crunch numbers,,,\n"
)


@pytest.fixture
def make_job():
    """Factory for Job records with sensible defaults."""

    def _make(**overrides):
        fields = {
            "id": "job-1",
            "title": "Backend Developer",
            "company": "DataFlow Technologies",
            "location": "Chennai, India",
            "experience": "2-5 years",
            "date_posted": NOW,
            "job_type": JobType.FULL_TIME,
            "description": "Build scalable APIs.",
        }
        fields.update(overrides)
        return Job(**fields)

    return _make


@pytest.fixture
def file_store(tmp_path):
    return FileJobStore(tmp_path / "data")


@pytest.fixture
def sql_engine():
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(sql_engine):
    return SqlJobStore(make_session_factory(sql_engine))


@pytest.fixture
def csv_transport():
    """MockTransport serving SAMPLE_CSV at any URL."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, text=SAMPLE_CSV, headers={"content-type": "text/csv"})

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport


@pytest.fixture
def failing_transport():
    return httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def sample_csv():
    """Three rows; the middle one has a malformed date."""
    return SAMPLE_CSV
