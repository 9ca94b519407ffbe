from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from feasibility.config import settings
from feasibility.api.routes import router

app = FastAPI(
    title="Modular Feasibility Scoring",
    description=(
        "Feasibility scores for prospective multifamily projects. "
        "Generates reproducible scores for new projects, reference scores "
        "for curated sample projects, and heuristic assessments of drafts."
    ),
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Return API info."""
    return {
        "name": "Modular Feasibility Scoring",
        "version": "1.0.0",
        "endpoints": {
            "api_docs": "/docs",
            "health": "/health",
            "project_scores": "GET /api/v1/projects/{project_id}/scores?name=...",
            "scores": "POST /api/v1/scores",
            "assessments": "POST /api/v1/assessments",
            "sample_projects": "GET /api/v1/sample-projects",
        },
    }


@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}


def run():
    """Serve the API with uvicorn (``feasibility-api`` console script)."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port,
                log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
