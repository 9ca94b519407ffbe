"""Tests for the curated sample project catalog."""

from feasibility.scoring.sample_projects import (
    SAMPLE_COST_BREAKDOWNS,
    SAMPLE_PROJECTS,
    division_code,
    get_cost_breakdowns,
    get_sample_project,
)
from feasibility.scoring.scores import SAMPLE_PROJECT_NAMES, calculate_project_scores


class TestCatalog:
    def test_names_match_allow_list(self):
        assert {p.name for p in SAMPLE_PROJECTS} == SAMPLE_PROJECT_NAMES

    def test_lookup(self):
        p = get_sample_project("Serenity Village")
        assert p is not None
        assert p.address == "5224 Chestnut Road, Olivehurst, CA"
        assert p.overall_score == "4.4"
        assert p.massing.score == "5.0"

    def test_lookup_unknown(self):
        assert get_sample_project("Harbor Lofts") is None

    def test_lookup_case_sensitive(self):
        assert get_sample_project("workforce commons") is None

    def test_site_built_costs_exceed_modular(self):
        for p in SAMPLE_PROJECTS:
            assert p.site_built_total_cost > p.modular_total_cost
            assert p.site_built_timeline_months > p.modular_timeline_months

    def test_displayed_scores_echo_catalog_overall(self):
        for i, p in enumerate(SAMPLE_PROJECTS, 1):
            scores = calculate_project_scores(i, p.name, p.overall_score)
            assert scores.overall == p.overall_score
            assert scores.individual.zoning == "4.0"


class TestCuratedDetail:
    def test_every_category_has_justification(self):
        for p in SAMPLE_PROJECTS:
            for category in (p.zoning, p.massing, p.cost, p.sustainability,
                             p.logistics, p.build_time):
                assert category.justification

    def test_serenity_village_text(self):
        p = get_sample_project("Serenity Village")
        assert p.cost.justification == (
            "$10.8M ($411/sf; $451K/unit). Prevailing Wage: 1.2% savings over site-built. "
            "Score of 4/5 since modular is cheaper than site-built."
        )
        assert p.required_waivers == (
            "Concession for Open Space Reduction. Concessions can be used to lower "
            "parking requirement."
        )
        assert p.staging_notes.startswith("Large open site, with no visible restrictions")
        assert p.density_bonus_eligible is True

    def test_per_unit_and_per_sf_figures(self):
        p = get_sample_project("Workforce Commons")
        assert p.modular_cost_per_sf == 448
        assert p.modular_cost_per_unit == 541_373
        assert p.site_built_cost_per_sf == 469
        assert p.site_built_cost_per_unit == 589_924
        assert p.required_waivers.startswith("None required.")

    def test_time_savings_consistent(self):
        for p in SAMPLE_PROJECTS:
            assert p.time_savings_months == (
                p.site_built_timeline_months - p.modular_timeline_months
            )

    def test_reference_scores_view(self):
        p = get_sample_project("University Housing Complex")
        scores = p.reference_scores
        assert scores.cost == "3.8"
        assert scores.build_time == "4.5"

    def test_density_bonus_flags(self):
        flags = {p.name: p.density_bonus_eligible for p in SAMPLE_PROJECTS}
        assert flags == {
            "Serenity Village": True,
            "Mountain View Apartments": False,
            "University Housing Complex": False,
            "Workforce Commons": True,
        }


class TestCostBreakdowns:
    def test_serenity_village_divisions(self):
        rows = get_cost_breakdowns("Serenity Village")
        assert [r.category for r in rows] == [
            "03 Concrete",
            "06 Wood & Plastics",
            "07 Thermal & Moisture",
            "22 Plumbing",
            "26 Electrical",
        ]
        concrete = rows[0]
        assert concrete.site_built_cost == 407_021
        assert concrete.modular_gc_cost == 285_136
        assert concrete.modular_fab_cost == 164_393
        assert concrete.modular_total_cost == 449_528

    def test_modular_total_is_gc_plus_fab(self):
        for rows in SAMPLE_COST_BREAKDOWNS.values():
            for r in rows:
                assert abs(r.modular_gc_cost + r.modular_fab_cost - r.modular_total_cost) <= 1

    def test_no_breakdown_published(self):
        assert get_cost_breakdowns("Workforce Commons") == []

    def test_returns_copy(self):
        get_cost_breakdowns("Serenity Village").clear()
        assert len(get_cost_breakdowns("Serenity Village")) == 5

    def test_division_code(self):
        assert division_code("03 - Concrete") == "03"
        assert division_code("03 Concrete") == "03 Concrete"
