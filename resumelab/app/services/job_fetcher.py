"""
Remote job search against the public Remotive API.
Maps listings into a small, frontend-friendly shape. Failures never propagate: the
caller gets an empty list and the error is logged.
"""
from __future__ import annotations

from typing import Iterable, Optional

import httpx
from pydantic import BaseModel

from resumelab.app.core.config import settings
from resumelab.app.core.logging_config import get_logger

logger = get_logger("services.job_fetcher")

PLATFORM = "Remotive"


class JobListing(BaseModel):
    title: str
    company: str
    location: str
    url: str
    platform: str = PLATFORM


def _to_listing(job: dict) -> JobListing:
    return JobListing(
        title=str(job.get("title") or ""),
        company=str(job.get("company_name") or ""),
        location=str(job.get("candidate_required_location") or "Remote"),
        url=str(job.get("url") or ""),
    )


def fetch_jobs(
    job_title: str,
    skills: Iterable[str] = (),
    client: Optional[httpx.Client] = None,
) -> list[JobListing]:
    """Search remote jobs by title plus skills. Returns at most jobs_result_limit listings."""
    query = " ".join([job_title, *skills]).strip()
    owns_client = client is None
    if owns_client:
        client = httpx.Client(timeout=settings.http_request_timeout, follow_redirects=True)
    try:
        resp = client.get(settings.jobs_api_url, params={"search": query})
        resp.raise_for_status()
        jobs = resp.json().get("jobs") or []
        if not isinstance(jobs, list):
            raise ValueError(f"unexpected jobs payload type {type(jobs).__name__}")
        listings = [_to_listing(j) for j in jobs[: settings.jobs_result_limit] if isinstance(j, dict)]
    except (httpx.HTTPError, ValueError, AttributeError) as e:
        logger.warning("Job fetch failed query=%r: %s", query, e)
        return []
    finally:
        if owns_client:
            client.close()
    logger.info("Fetched %d jobs query=%r", len(listings), query)
    return listings
