from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class JobType(str, Enum):
    FULL_TIME = "Full-time"
    INTERNSHIP = "Internship"
    CONTRACT = "Contract"
    PART_TIME = "Part-time"

    @classmethod
    def parse(cls, value: str) -> "JobType":
        """Case-insensitive lookup by label; raises ValueError for unknown labels."""
        wanted = (value or "").strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise ValueError(f"unknown job type: {value!r}")


def as_utc(value: datetime) -> datetime:
    # naive values (SQLite, date-only CSV cells) are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Job(CamelModel):
    """A single job posting.

    Instances are treated as immutable values: updates are full replacements
    keyed by ``id``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    title: str
    company: str
    location: str
    experience: str
    salary: Optional[str] = None
    date_posted: datetime
    job_type: JobType
    description: str
    requirements: List[str] = Field(default_factory=list)
    responsibilities: List[str] = Field(default_factory=list)
    benefits: Optional[List[str]] = None
    contact_email: Optional[str] = None
    contact_whatsapp: Optional[str] = Field(default=None, alias="contactWhatsApp")
    company_logo: Optional[str] = None

    @field_validator("date_posted")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return as_utc(v)

    def to_json(self) -> dict:
        """camelCase JSON-ready dict with unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class FilterCriteria(CamelModel):
    """Conjunctive filter set; an empty field places no constraint."""

    location: str = ""
    job_type: str = ""
    experience_level: str = ""
    date_posted: str = ""
    search_query: str = ""


# one year
MAX_AUTO_REFRESH_MS = 366 * 24 * 60 * 60 * 1000


class BoardSettings(CamelModel):
    csv_source_url: Optional[str] = None
    # 0 or None disables auto-refresh
    auto_refresh_ms: Optional[int] = Field(default=None, le=MAX_AUTO_REFRESH_MS)

    @property
    def auto_refresh_enabled(self) -> bool:
        return bool(self.csv_source_url) and bool(self.auto_refresh_ms) and self.auto_refresh_ms > 0


class ManualJobForm(CamelModel):
    title: str = ""
    company: str = ""
    location: str = ""
    experience: str = ""
    salary: str = ""
    job_type: JobType = JobType.FULL_TIME
    description: str = ""
    contact_email: str = ""
    contact_whatsapp: str = Field(default="", alias="contactWhatsApp")
    company_logo: str = ""
    requirements: List[str] = Field(default_factory=list)
    responsibilities: List[str] = Field(default_factory=list)
    benefits: Optional[List[str]] = None


class CsvImportRequest(BaseModel):
    csv: str


class ImportSummary(BaseModel):
    source: str
    parsed: int = 0
    total: Optional[int] = None
    skipped: bool = False


class JobListResponse(BaseModel):
    count: int
    total: int
    items: List[dict]


class Facets(CamelModel):
    locations: List[str]
    job_types: List[str]
    experience_levels: List[str]
    date_posted: List[str]


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    token: str
    email: str


__all__ = [
    "JobType",
    "Job",
    "FilterCriteria",
    "BoardSettings",
    "ManualJobForm",
    "CsvImportRequest",
    "ImportSummary",
    "JobListResponse",
    "Facets",
    "LoginRequest",
    "LoginResponse",
    "as_utc",
    "MAX_AUTO_REFRESH_MS",
]
