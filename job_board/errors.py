"""Error taxonomy shared by ingestion, persistence and intake.

Routers map these onto HTTP status codes; nothing here is fatal to the
process.
"""


class JobBoardError(Exception):
    """Base class for all job board errors."""


class MalformedInput(JobBoardError):
    """A CSV row or value that cannot be turned into a Job."""


class StorageUnavailable(JobBoardError):
    """The persistence backend could not be read or written."""


class RemoteCallFailure(JobBoardError):
    """A network fetch or database call failed."""


class ConstraintViolation(RemoteCallFailure):
    """The database rejected a write (e.g. duplicate job id)."""


class ValidationFailure(JobBoardError):
    """Admin input was rejected before any write happened."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.missing = list(missing or [])
