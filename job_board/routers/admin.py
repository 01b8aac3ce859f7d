from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from ..deps import get_intake, get_refresher, get_store, require_admin
from ..errors import ConstraintViolation, RemoteCallFailure, StorageUnavailable, ValidationFailure
from ..intake import AdminIntake
from ..logging_config import get_logger
from ..scheduler import AutoRefresher
from ..schemas import BoardSettings, CsvImportRequest, ImportSummary, ManualJobForm
from ..store import JobStore

router = APIRouter(prefix="/admin", tags=["admin"])
logger = get_logger(__name__)


def _http_error(e: Exception) -> HTTPException:
    if isinstance(e, ValidationFailure):
        return HTTPException(
            status_code=422,
            detail={"message": e.message, "missing": e.missing},
        )
    if isinstance(e, ConstraintViolation):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if isinstance(e, RemoteCallFailure):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


@router.post("/jobs", status_code=status.HTTP_201_CREATED)
def add_job(
    form: ManualJobForm,
    actor: str = Depends(require_admin),
    intake: AdminIntake = Depends(get_intake),
):
    try:
        job = intake.add_manual(form, actor=actor)
    except (ValidationFailure, RemoteCallFailure, StorageUnavailable) as e:
        raise _http_error(e)
    return job.to_json()


@router.post("/import", response_model=ImportSummary)
def import_csv(
    req: CsvImportRequest,
    actor: str = Depends(require_admin),
    intake: AdminIntake = Depends(get_intake),
):
    try:
        return intake.import_csv(req.csv, actor=actor)
    except (ValidationFailure, RemoteCallFailure, StorageUnavailable) as e:
        raise _http_error(e)


@router.post("/import/file", response_model=ImportSummary)
def import_csv_file(
    file: UploadFile = File(...),
    actor: str = Depends(require_admin),
    intake: AdminIntake = Depends(get_intake),
):
    """Import an uploaded CSV file; a UTF-8 byte order mark is dropped."""
    try:
        text = file.file.read().decode("utf-8-sig")
    except UnicodeDecodeError:
        raise _http_error(ValidationFailure("File is not UTF-8 text"))
    try:
        return intake.import_csv(text, actor=actor, source=file.filename or "upload")
    except (ValidationFailure, RemoteCallFailure, StorageUnavailable) as e:
        raise _http_error(e)


@router.get("/settings", response_model=BoardSettings, dependencies=[Depends(require_admin)])
def read_settings(store: JobStore = Depends(get_store)):
    return store.get_settings()


@router.put("/settings", response_model=BoardSettings, dependencies=[Depends(require_admin)])
def update_settings(
    settings: BoardSettings,
    store: JobStore = Depends(get_store),
    refresher: AutoRefresher = Depends(get_refresher),
):
    try:
        store.save_settings(settings)
    except (RemoteCallFailure, StorageUnavailable) as e:
        raise _http_error(e)
    refresher.apply(settings)
    return settings


@router.post("/refresh", response_model=ImportSummary)
def refresh_now(
    actor: str = Depends(require_admin),
    intake: AdminIntake = Depends(get_intake),
):
    try:
        return intake.refresh_from_source(actor=actor)
    except (RemoteCallFailure, StorageUnavailable) as e:
        logger.warning("manual refresh failed: %s", e)
        raise _http_error(e)
