from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class IndividualScores(BaseModel):
    """Per-category feasibility scores, each a one-decimal string."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    zoning: str
    massing: str
    sustainability: str
    cost: str
    logistics: str
    build_time: str = Field(alias="buildTime")


class ScoreSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: str
    individual: IndividualScores


class ScoreRequest(BaseModel):
    project_id: int
    project_name: str
    stored_overall_score: Optional[str] = None


class ProjectInput(BaseModel):
    """Project draft fields used by the heuristic assessment."""
    project_type: str = "market"  # affordable, senior, workforce, student, market
    studio_units: int = Field(0, ge=0)
    one_bed_units: int = Field(0, ge=0)
    two_bed_units: int = Field(0, ge=0)
    three_bed_units: int = Field(0, ge=0)
    target_floors: int = Field(1, ge=1)

    @property
    def total_units(self) -> int:
        return (self.studio_units + self.one_bed_units
                + self.two_bed_units + self.three_bed_units)


class CategoryAssessment(BaseModel):
    score: str
    justification: str


class CostEstimate(BaseModel):
    modular_total_cost: float
    modular_cost_per_unit: float
    site_built_total_cost: float
    site_built_cost_per_unit: float
    cost_savings_percent: str


class TimelineEstimate(BaseModel):
    modular_timeline_months: int
    site_built_timeline_months: int
    time_savings_months: int


class FeasibilityAssessment(BaseModel):
    zoning: CategoryAssessment
    massing: CategoryAssessment
    cost: CategoryAssessment
    sustainability: CategoryAssessment
    logistics: CategoryAssessment
    build_time: CategoryAssessment
    overall_score: str
    costs: CostEstimate
    timeline: TimelineEstimate
    factory_location: str
    zoning_district: str
    density_bonus_eligible: bool


class CostBreakdown(BaseModel):
    """One MasterFormat division of a modular vs. site-built cost comparison."""
    category: str  # e.g. "03 Concrete"
    category_code: str
    site_built_cost: float
    modular_gc_cost: float
    modular_fab_cost: float
    modular_total_cost: float


class SampleProject(BaseModel):
    """Curated reference project shown alongside a developer's own projects."""
    name: str
    address: str
    project_type: str
    target_floors: int
    studio_units: int = 0
    one_bed_units: int = 0
    two_bed_units: int = 0
    three_bed_units: int = 0
    target_parking_spaces: int = 0
    building_dimensions: Optional[str] = None
    construction_type: Optional[str] = None

    # Hand-set category scores with their written rationale
    zoning: CategoryAssessment
    massing: CategoryAssessment
    cost: CategoryAssessment
    sustainability: CategoryAssessment
    logistics: CategoryAssessment
    build_time: CategoryAssessment
    overall_score: str

    modular_total_cost: float
    modular_cost_per_sf: float
    modular_cost_per_unit: float
    site_built_total_cost: float
    site_built_cost_per_sf: float
    site_built_cost_per_unit: float
    cost_savings_percent: float

    modular_timeline_months: int
    site_built_timeline_months: int
    time_savings_months: int

    zoning_district: Optional[str] = None
    density_bonus_eligible: bool = False
    required_waivers: Optional[str] = None

    factory_location: Optional[str] = None
    transportation_notes: Optional[str] = None
    staging_notes: Optional[str] = None

    @property
    def reference_scores(self) -> IndividualScores:
        return IndividualScores(
            zoning=self.zoning.score,
            massing=self.massing.score,
            sustainability=self.sustainability.score,
            cost=self.cost.score,
            logistics=self.logistics.score,
            build_time=self.build_time.score,
        )


class SampleProjectScores(BaseModel):
    project: SampleProject
    scores: ScoreSet
    band: str
    cost_breakdowns: list[CostBreakdown] = []
