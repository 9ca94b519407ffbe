from __future__ import annotations

from feasibility.scoring.scores import (
    calculate_project_scores,
    generate_deterministic_score,
    is_sample_project,
    score_band,
)
from feasibility.scoring.heuristics import assess_project

__all__ = [
    "calculate_project_scores",
    "generate_deterministic_score",
    "is_sample_project",
    "score_band",
    "assess_project",
]
