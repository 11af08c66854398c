import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from resume_scorer.api.routes.score import router as score_router
from resume_scorer.config import settings

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(
    title="Resume Scorer",
    description="Deterministic resume scoring service that rates PDF/DOCX/TXT resumes on a 100-point rubric with itemized feedback and recommendations",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(score_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "resume-scorer", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok", "version": settings.app_version}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Resume Scorer API",
        version=settings.app_version,
        description="Rule-based resume scoring API: structure, technical skills, work experience, education and formatting",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
