"""
Deterministic feasibility scores for projects without curated data.

New projects get plausible-looking scores derived from their id: the id seeds
a mulberry32 stream, six draws become the category scores, and a fixed
weighting gives the overall score.  The four curated sample projects skip
generation and always show their reference scores.

Scores are one-decimal strings so that display precision is controlled here
rather than by each renderer.
"""

from __future__ import annotations

from typing import Optional

from feasibility.models.schemas import IndividualScores, ScoreSet
from feasibility.scoring.formatting import format_score, parse_score
from feasibility.scoring.prng import stream_for_project


SAMPLE_PROJECT_NAMES: frozenset[str] = frozenset({
    "Serenity Village",
    "Mountain View Apartments",
    "University Housing Complex",
    "Workforce Commons",
})

SAMPLE_DEFAULT_SCORE = "4.0"

# Draw order and weight per category.  Weights sum to 1.00.
CATEGORY_WEIGHTS: tuple[tuple[str, float], ...] = (
    ("zoning", 0.2),
    ("massing", 0.15),
    ("sustainability", 0.2),
    ("cost", 0.2),
    ("logistics", 0.15),
    ("build_time", 0.1),
)

SCORE_FLOOR = 4.4
SCORE_SPAN = 0.6


def is_sample_project(project_name: str) -> bool:
    """Exact, case-sensitive match against the curated sample names."""
    return project_name in SAMPLE_PROJECT_NAMES


def _scale(draw: float) -> str:
    return format_score(draw * SCORE_SPAN + SCORE_FLOOR)


def generate_deterministic_score(project_id: int) -> str:
    """Single score for a project: the first draw of its stream."""
    return _scale(stream_for_project(project_id).next_float())


def weighted_overall(individual: IndividualScores) -> str:
    """Weighted overall score from already-rounded category strings.

    Summed left to right over the parsed one-decimal strings, not the raw draws.
    """
    total = sum(
        float(getattr(individual, category)) * weight
        for category, weight in CATEGORY_WEIGHTS
    )
    return format_score(total)


def _sample_scores(stored_overall_score: Optional[str]) -> ScoreSet:
    fixed = {category: SAMPLE_DEFAULT_SCORE for category, _ in CATEGORY_WEIGHTS}
    return ScoreSet(
        overall=stored_overall_score or SAMPLE_DEFAULT_SCORE,
        individual=IndividualScores(**fixed),
    )


def calculate_project_scores(
    project_id: int,
    project_name: str,
    stored_overall_score: Optional[str] = None,
) -> ScoreSet:
    """Feasibility score set for a project.

    Sample projects return ``stored_overall_score`` (or "4.0") with every
    category at "4.0".  Any other project gets six seeded draws in
    ``CATEGORY_WEIGHTS`` order, each scaled into [4.4, 5.0) before rounding.
    """
    if is_sample_project(project_name):
        return _sample_scores(stored_overall_score)

    rng = stream_for_project(project_id)
    scores = {category: _scale(rng.next_float()) for category, _ in CATEGORY_WEIGHTS}
    individual = IndividualScores(**scores)

    return ScoreSet(overall=weighted_overall(individual), individual=individual)


def score_band(score: Optional[str]) -> str:
    """Display band for a score: green (>= 4), mustard (>= 3), red otherwise."""
    value = parse_score(score)
    if value >= 4:
        return "green"
    if value >= 3:
        return "mustard"
    return "red"
