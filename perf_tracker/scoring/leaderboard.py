"""
scoring/leaderboard.py

Engagement & performance leaderboard and the dashboard KPI cards
(top performer, average event attendance, inactivity alerts).
"""

from dataclasses import dataclass, field, asdict
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence

import pandas as pd

from perf_tracker.config import get_settings
from perf_tracker.models.enumerations import Tier
from perf_tracker.models.subject import ScoringConfig, Subject
from perf_tracker.scoring.score_calculator import ScoreCalculator
from perf_tracker.scoring.tiering import suggested_action
from perf_tracker.scoring.utils import Number, round_half_up

LEADERBOARD_COLUMNS = [
    "rank",
    "subject_id",
    "name",
    "score",
    "tier",
    "suggested_action",
    "attendance_rate",
    "events_attended",
    "inactivity_penalty",
]


@dataclass
class LeaderboardEntry:
    """One row of the scoring table."""
    rank: int
    subject_id: str
    name: Optional[str]
    score: float
    tier: Tier
    suggested_action: str
    attendance_rate: float   # % of records attended
    events_attended: int
    inactivity_penalty: float


@dataclass
class DashboardSummary:
    """KPI cards shown above the scoring table."""
    top_performer: Optional[LeaderboardEntry]
    average_attendance: float
    inactivity_alerts: int
    tier_counts: Dict[Tier, int] = field(default_factory=dict)


def attendance_rate(subject: Subject) -> float:
    """Percentage of the subject's records marked attended, one decimal."""
    if not subject.records:
        return 0.0
    attended = sum(1 for r in subject.records if r.attended)
    rate = Decimal(attended) * Decimal("100") / Decimal(len(subject.records))
    return float(round_half_up(rate))


def build_leaderboard(
    subjects: Sequence[Subject],
    event_catalog: Mapping[str, Number],
    config: ScoringConfig,
) -> List[LeaderboardEntry]:
    """
    Score every subject and order by score descending, then id.

    Ties share a rank and the next rank skips ("1, 1, 3").
    """
    calculator = ScoreCalculator()
    scored = []
    for subject in subjects:
        result = calculator.calculate(subject, event_catalog, config)
        scored.append((subject, result))

    scored.sort(key=lambda pair: (-pair[1].score, pair[0].id))

    entries: List[LeaderboardEntry] = []
    previous_score = None
    rank = 0
    for position, (subject, result) in enumerate(scored, start=1):
        if result.score != previous_score:
            rank = position
            previous_score = result.score
        entries.append(
            LeaderboardEntry(
                rank=rank,
                subject_id=subject.id,
                name=subject.name,
                score=float(result.score),
                tier=result.tier,
                suggested_action=suggested_action(result.tier),
                attendance_rate=attendance_rate(subject),
                events_attended=result.attended_count,
                inactivity_penalty=subject.inactivity_penalty,
            )
        )
    return entries


def summarize(
    subjects: Sequence[Subject],
    event_catalog: Mapping[str, Number],
    config: ScoringConfig,
    inactivity_alert_threshold: Optional[float] = None,
) -> DashboardSummary:
    """
    Compute the dashboard KPIs for the current state.

    The alert threshold defaults to Settings.INACTIVITY_ALERT_THRESHOLD.
    """
    if inactivity_alert_threshold is None:
        inactivity_alert_threshold = get_settings().INACTIVITY_ALERT_THRESHOLD
    entries = build_leaderboard(subjects, event_catalog, config)

    if subjects:
        total_rate = sum(Decimal(str(attendance_rate(s))) for s in subjects)
        average = float(round_half_up(total_rate / Decimal(len(subjects))))
    else:
        average = 0.0

    tier_counts = {tier: 0 for tier in Tier}
    for entry in entries:
        tier_counts[entry.tier] += 1

    return DashboardSummary(
        top_performer=entries[0] if entries else None,
        average_attendance=average,
        inactivity_alerts=sum(
            1 for s in subjects if s.inactivity_penalty >= inactivity_alert_threshold
        ),
        tier_counts=tier_counts,
    )


def leaderboard_frame(entries: Sequence[LeaderboardEntry]) -> pd.DataFrame:
    """Tabular view of a leaderboard for the presentation layer."""
    rows = []
    for entry in entries:
        row = asdict(entry)
        row["tier"] = entry.tier.value
        rows.append(row)
    return pd.DataFrame(rows, columns=LEADERBOARD_COLUMNS)
