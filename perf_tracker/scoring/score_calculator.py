# perf_tracker/scoring/score_calculator.py
"""
Performance Score Calculator
----------------------------
Computes a bounded performance score for one subject from its base score,
attended events and inactivity penalty, under the two global multipliers.

Formula:
    raw_event_points = Σ catalog[event_name]   over attended records
    weighted_events  = raw_event_points × event_weight
    weighted_penalty = inactivity_penalty × penalty_weight
    score = round_half_up(clamp(base_score + weighted_events − weighted_penalty, 0, 100), 1)

Event points are resolved against the catalog at call time. A record whose
event is no longer in the catalog contributes 0.
"""
import structlog
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Mapping, Tuple

from perf_tracker.models.enumerations import Tier
from perf_tracker.models.subject import ScoringConfig, Subject
from perf_tracker.scoring.tiering import rank_tier
from perf_tracker.scoring.utils import Number, clamp, round_half_up, to_decimal

logger = structlog.get_logger(__name__)


@dataclass
class ScoreResult:
    """Output of ScoreCalculator.calculate()."""
    subject_id: str
    score: Decimal               # Final score in [0, 100], one decimal
    tier: Tier
    raw_event_points: Decimal    # Σ base points of attended, known events
    weighted_events: Decimal     # raw_event_points × event_weight
    weighted_penalty: Decimal    # inactivity_penalty × penalty_weight
    total: Decimal               # Unclamped, unrounded sum
    attended_count: int = 0
    missed_count: int = 0
    unknown_events: List[str] = field(default_factory=list)


def _raw_event_points(subject: Subject, event_catalog: Mapping[str, Number]) -> Decimal:
    points = Decimal("0")
    for record in subject.records:
        if not record.attended:
            continue
        base_points = event_catalog.get(record.event_name)
        if base_points is not None:
            points += to_decimal(base_points)
    return points


def _total(
    subject: Subject,
    raw_event_points: Decimal,
    config: ScoringConfig,
) -> Tuple[Decimal, Decimal, Decimal]:
    weighted_events = raw_event_points * to_decimal(config.event_weight)
    weighted_penalty = to_decimal(subject.inactivity_penalty) * to_decimal(config.penalty_weight)
    total = to_decimal(subject.base_score) + weighted_events - weighted_penalty
    return weighted_events, weighted_penalty, total


def compute_score(
    subject: Subject,
    event_catalog: Mapping[str, Number],
    config: ScoringConfig,
) -> float:
    """
    Score a subject. Pure and deterministic; never raises for unknown events.

    Examples:
        >>> from perf_tracker.models.subject import AttendanceRecord
        >>> subject = Subject(id="EMP-3321", base_score=78, inactivity_penalty=2,
        ...     records=[AttendanceRecord(event_name="Design Crit", attended=True)])
        >>> compute_score(subject, {"Design Crit": 4}, ScoringConfig())
        80.0
    """
    raw = _raw_event_points(subject, event_catalog)
    _, _, total = _total(subject, raw, config)
    return float(round_half_up(clamp(total)))


class ScoreCalculator:
    """Calculate a subject's score with the full audit breakdown."""

    def calculate(
        self,
        subject: Subject,
        event_catalog: Mapping[str, Number],
        config: ScoringConfig,
    ) -> ScoreResult:
        """
        Args:
            subject: Subject with base score, penalty and attendance records.
            event_catalog: Mapping of event name → base points.
            config: Global event and penalty multipliers.

        Returns:
            ScoreResult with the score, its tier and every intermediate term.
        """
        attended = [r for r in subject.records if r.attended]
        unknown = sorted({r.event_name for r in attended if r.event_name not in event_catalog})

        raw = _raw_event_points(subject, event_catalog)
        weighted_events, weighted_penalty, total = _total(subject, raw, config)
        score = round_half_up(clamp(total))
        tier = rank_tier(score)

        logger.debug(
            "score_calculated",
            subject_id=subject.id,
            base_score=subject.base_score,
            raw_event_points=float(raw),
            event_weight=config.event_weight,
            weighted_events=float(weighted_events),
            inactivity_penalty=subject.inactivity_penalty,
            penalty_weight=config.penalty_weight,
            weighted_penalty=float(weighted_penalty),
            total=float(total),
            score=float(score),
            tier=tier.value,
            unknown_events=unknown,
        )

        return ScoreResult(
            subject_id=subject.id,
            score=score,
            tier=tier,
            raw_event_points=raw,
            weighted_events=weighted_events,
            weighted_penalty=weighted_penalty,
            total=total,
            attended_count=len(attended),
            missed_count=len(subject.records) - len(attended),
            unknown_events=unknown,
        )
