"""
Job search endpoint - remote listings matching a title and skills
"""
from fastapi import APIRouter, HTTPException, Query, status

from resumelab.app.services.job_fetcher import fetch_jobs

router = APIRouter()


@router.get("")
def search_jobs(
    title: str = Query("", description="Job title, e.g. the feedback's jobTitleMatch"),
    skills: list[str] = Query(default=[]),
):
    """Up to 10 remote jobs. An upstream failure yields an empty list, not an error."""
    if not title.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Please provide a job title.")
    jobs = fetch_jobs(title.strip(), [s.strip() for s in skills if s.strip()])
    return {"success": True, "jobs": [j.model_dump() for j in jobs]}
