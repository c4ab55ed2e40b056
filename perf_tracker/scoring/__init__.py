"""
scoring/ — Engagement & Performance Scoring Engine

Modules:
    utils.py             - Decimal utilities (clamp, half-up rounding)
    score_calculator.py  - Bounded performance score per subject
    tiering.py           - Score → Tier mapping and suggested actions
    catalog.py           - Event catalog CRUD with record propagation
    leaderboard.py       - Ranked scoring table and dashboard KPIs
"""

from perf_tracker.scoring.catalog import (
    add_event,
    delete_event,
    rename_event,
    update_event_points,
)
from perf_tracker.scoring.score_calculator import ScoreCalculator, ScoreResult, compute_score
from perf_tracker.scoring.tiering import rank_tier, suggested_action

__all__ = [
    "ScoreCalculator",
    "ScoreResult",
    "add_event",
    "compute_score",
    "delete_event",
    "rank_tier",
    "rename_event",
    "suggested_action",
    "update_event_points",
]
