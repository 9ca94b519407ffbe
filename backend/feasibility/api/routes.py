"""Feasibility score endpoints: generated scores, draft assessments, sample projects."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from feasibility.models.schemas import (
    FeasibilityAssessment,
    ProjectInput,
    SampleProject,
    SampleProjectScores,
    ScoreRequest,
    ScoreSet,
)
from feasibility.scoring.heuristics import assess_project
from feasibility.scoring.sample_projects import (
    SAMPLE_PROJECTS,
    get_cost_breakdowns,
    get_sample_project,
)
from feasibility.scoring.scores import calculate_project_scores, is_sample_project, score_band

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["scores"])


def _score(project_id: int, name: str, stored_overall_score: Optional[str]) -> ScoreSet:
    if is_sample_project(name):
        logger.debug("Project %s (%r) is a sample project, using reference scores",
                     project_id, name)
    return calculate_project_scores(project_id, name, stored_overall_score)


def _sample_entry(project_id: int, project: SampleProject) -> SampleProjectScores:
    scores = calculate_project_scores(project_id, project.name, project.overall_score)
    return SampleProjectScores(
        project=project,
        scores=scores,
        band=score_band(scores.overall),
        cost_breakdowns=get_cost_breakdowns(project.name),
    )


# ──────────────────────────────────────────────────────────────────
# ENDPOINTS
# ──────────────────────────────────────────────────────────────────

@router.get("/projects/{project_id}/scores", response_model=ScoreSet)
async def get_project_scores(
    project_id: int,
    name: str = Query(..., description="Project name as stored"),
    stored_overall_score: Optional[str] = Query(None),
):
    """Feasibility scores for a project.

    Curated sample projects echo ``stored_overall_score``; every other project
    gets reproducible scores derived from its id.
    """
    return _score(project_id, name, stored_overall_score)


@router.post("/scores", response_model=ScoreSet)
async def compute_scores(req: ScoreRequest):
    return _score(req.project_id, req.project_name, req.stored_overall_score)


@router.post("/assessments", response_model=FeasibilityAssessment)
async def create_assessment(project: ProjectInput):
    """Heuristic assessment of a project draft (scores, cost, schedule)."""
    assessment = assess_project(project)
    logger.info(
        "Assessed %s draft: %d units, %d floors, overall %s",
        project.project_type, project.total_units, project.target_floors,
        assessment.overall_score,
    )
    return assessment


@router.get("/sample-projects", response_model=list[SampleProjectScores])
async def list_sample_projects():
    return [_sample_entry(i, p) for i, p in enumerate(SAMPLE_PROJECTS, 1)]


@router.get("/sample-projects/{name}", response_model=SampleProjectScores)
async def get_sample_project_scores(name: str):
    """One sample project with its displayed scores; 404 for unknown names."""
    project = get_sample_project(name)
    if project is None:
        raise HTTPException(status_code=404, detail=f"Unknown sample project: {name}")
    return _sample_entry(SAMPLE_PROJECTS.index(project) + 1, project)
