#!/usr/bin/env python3
"""
Print feasibility score sets for a range of project ids.

Useful for checking that generated scores match what the web client shows
for existing projects.  Can run against a live API or import the scoring
package directly.

Usage:
    # Direct import (no server needed):
    python3 scripts/print_scores.py 1 2 3

    # Against live API:
    python3 scripts/print_scores.py --api http://localhost:8000 1 2 3

    # Sample project with a stored overall score:
    python3 scripts/print_scores.py --name "Serenity Village" --stored 4.4 1
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys

# Add backend to path for direct import mode
SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.join(os.path.dirname(SCRIPT_DIR), "backend")
sys.path.insert(0, BACKEND_DIR)

CATEGORIES = ["zoning", "massing", "sustainability", "cost", "logistics", "buildTime"]


# ──────────────────────────────────────────────────────────────────
# DIRECT MODE
# ──────────────────────────────────────────────────────────────────

def run_direct(project_id: int, name: str, stored: str | None) -> dict:
    from feasibility.scoring.prng import create_seed
    from feasibility.scoring.scores import calculate_project_scores

    scores = calculate_project_scores(project_id, name, stored)
    result = scores.model_dump(by_alias=True)
    result["seed"] = create_seed(project_id)
    return result


# ──────────────────────────────────────────────────────────────────
# API MODE
# ──────────────────────────────────────────────────────────────────

async def run_api(project_id: int, name: str, stored: str | None, api_base: str) -> dict:
    import httpx
    params = {"name": name}
    if stored:
        params["stored_overall_score"] = stored
    async with httpx.AsyncClient(timeout=10) as client:
        resp = await client.get(f"{api_base}/api/v1/projects/{project_id}/scores", params=params)
        if resp.status_code != 200:
            return {"error": f"API returned {resp.status_code}: {resp.text[:500]}"}
        return resp.json()


def format_row(project_id: int, result: dict) -> str:
    if "error" in result:
        return f"  {project_id:>8}  ERROR: {result['error']}"
    individual = result["individual"]
    cells = "  ".join(f"{individual[c]:>5}" for c in CATEGORIES)
    seed = result.get("seed")
    seed_col = f"{seed:>11}" if seed is not None else f"{'-':>11}"
    return f"  {project_id:>8}  {seed_col}  {cells}  {result['overall']:>7}"


async def main():
    parser = argparse.ArgumentParser(description="Print deterministic feasibility scores")
    parser.add_argument("ids", nargs="+", type=int, help="Project ids")
    parser.add_argument("--name", default="New Project", help="Project name (default: %(default)s)")
    parser.add_argument("--stored", default=None, help="Stored overall score (sample projects)")
    parser.add_argument("--api", default=None, help="API base URL (e.g., http://localhost:8000)")
    args = parser.parse_args()

    print(f"\nMode: {'API' if args.api else 'Direct Import'}")
    print(f"Name: {args.name}\n")
    header = "  ".join(f"{c[:5]:>5}" for c in CATEGORIES)
    print(f"  {'id':>8}  {'seed':>11}  {header}  {'overall':>7}")

    for project_id in args.ids:
        if args.api:
            result = await run_api(project_id, args.name, args.stored, args.api)
        else:
            result = run_direct(project_id, args.name, args.stored)
        print(format_row(project_id, result))
    print()


if __name__ == "__main__":
    asyncio.run(main())
