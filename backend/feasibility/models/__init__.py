from __future__ import annotations

from feasibility.models.schemas import (
    IndividualScores,
    ScoreSet,
    ScoreRequest,
    ProjectInput,
    FeasibilityAssessment,
    SampleProject,
)

__all__ = [
    "IndividualScores",
    "ScoreSet",
    "ScoreRequest",
    "ProjectInput",
    "FeasibilityAssessment",
    "SampleProject",
]
