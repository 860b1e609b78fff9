"""
FastAPI application entry point
"""
import time
import traceback
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resumelab.app.api.v1 import documents, jobs, resume
from resumelab.app.core.config import settings
from resumelab.app.core.logging_config import get_logger, setup_logging

setup_logging()
logger = get_logger("main")

_STARTED_AT = time.monotonic()

# Initialize FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="Resume feedback, generation and document export API",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(resume.router, prefix="/api/resume", tags=["resume"])
app.include_router(documents.router, prefix="/api", tags=["documents"])
app.include_router(jobs.router, prefix="/api/jobs", tags=["jobs"])

# Uploads are stored here only while a request is being processed
Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Error bodies use the frontend's {success, error} shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and query params get the same envelope, with pydantic's error list."""
    logger.info("Invalid request on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": "Invalid request data",
            "details": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    content = {"success": False, "error": "Internal server error", "message": str(exc)}
    if settings.environment == "development":
        content["details"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=500, content=content)


@app.get("/")
def read_root():
    """Root endpoint"""
    return {"message": f"{settings.app_name} API", "version": settings.app_version}


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "groqApi": "configured" if settings.groq_api_key else "missing",
        "environment": settings.environment,
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
    }


if __name__ == "__main__":
    import uvicorn
    logger.info("Server running on port %s", settings.port)
    logger.info("Groq API: %s", "Ready" if settings.groq_api_key else "NOT CONFIGURED")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
