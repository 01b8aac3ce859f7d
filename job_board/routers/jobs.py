from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_store
from ..filters import facets, filter_jobs
from ..schemas import Facets, FilterCriteria, JobListResponse
from ..store import JobStore

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=JobListResponse)
def list_jobs(
    location: str = Query("", description="substring of the job location (case-sensitive)"),
    job_type: str = Query("", alias="jobType"),
    experience_level: str = Query("", alias="experienceLevel"),
    date_posted: str = Query("", alias="datePosted", description="e.g. 'Last 7 days'"),
    q: str = Query("", description="search in title, company and description"),
    store: JobStore = Depends(get_store),
):
    criteria = FilterCriteria(
        location=location,
        job_type=job_type,
        experience_level=experience_level,
        date_posted=date_posted,
        search_query=q,
    )
    jobs = store.load_jobs()
    rows = filter_jobs(jobs, criteria)
    return JobListResponse(count=len(rows), total=len(jobs), items=[j.to_json() for j in rows])


@router.get("/facets", response_model=Facets, response_model_by_alias=True)
def job_facets(store: JobStore = Depends(get_store)):
    return facets(store.load_jobs())


@router.get("/{job_id}")
def get_job(job_id: str, store: JobStore = Depends(get_store)):
    for job in store.load_jobs():
        if job.id == job_id:
            return job.to_json()
    raise HTTPException(status_code=404, detail=f"job {job_id} not found")
