"""
session.py — Scoring session

Single logical owner of the event catalog, the subjects and the scoring
config for one dashboard session. Every mutation goes through here so the
catalog and the attendance records change together.

Not thread-safe: a multi-threaded host must hold one lock around each call.
"""

from typing import Dict, List, Optional

import structlog

from perf_tracker.config import Settings, get_settings
from perf_tracker.core.exceptions import NotFoundError
from perf_tracker.models.enumerations import Tier
from perf_tracker.models.subject import AttendanceRecord, ScoringConfig, Subject
from perf_tracker.scoring import catalog as catalog_ops
from perf_tracker.scoring.leaderboard import (
    DashboardSummary,
    LeaderboardEntry,
    build_leaderboard,
    summarize,
)
from perf_tracker.scoring.score_calculator import ScoreCalculator, ScoreResult, compute_score
from perf_tracker.scoring.tiering import rank_tier
from perf_tracker.seed import seed_catalog, seed_subjects

logger = structlog.get_logger(__name__)


class ScoringSession:
    """Catalog, subjects and config for one operator session."""

    def __init__(
        self,
        catalog: Optional[Dict[str, float]] = None,
        subjects: Optional[List[Subject]] = None,
        config: Optional[ScoringConfig] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.catalog: Dict[str, float] = catalog if catalog is not None else {}
        self.subjects: List[Subject] = subjects if subjects is not None else []
        self.config = config or ScoringConfig.from_settings(self.settings)

    @classmethod
    def from_seed(cls, settings: Optional[Settings] = None) -> "ScoringSession":
        return cls(catalog=seed_catalog(), subjects=seed_subjects(), settings=settings)

    # ------------------------------------------------------------------ #
    # Subjects                                                             #
    # ------------------------------------------------------------------ #

    def get_subject(self, subject_id: str) -> Subject:
        for subject in self.subjects:
            if subject.id == subject_id:
                return subject
        raise NotFoundError("Subject", subject_id)

    def add_subject(self, subject: Subject) -> None:
        if any(s.id == subject.id for s in self.subjects):
            raise ValueError(f"Subject '{subject.id}' already exists")
        self.subjects.append(subject)

    def add_record(
        self,
        subject_id: str,
        event_name: str,
        attended: bool,
        date: str = "",
    ) -> AttendanceRecord:
        """Append an attendance record; the event must be in the catalog."""
        subject = self.get_subject(subject_id)
        if event_name not in self.catalog:
            raise NotFoundError("Event", event_name)
        record = AttendanceRecord(event_name=event_name, attended=attended, date=date)
        subject.records.append(record)
        return record

    # ------------------------------------------------------------------ #
    # Catalog                                                              #
    # ------------------------------------------------------------------ #

    def add_event(self, name: str, base_points) -> None:
        catalog_ops.add_event(self.catalog, name, base_points)

    def rename_event(self, old_name: str, new_name: str) -> None:
        catalog_ops.rename_event(self.catalog, self.subjects, old_name, new_name)

    def delete_event(self, name: str) -> None:
        catalog_ops.delete_event(self.catalog, self.subjects, name)

    def update_event_points(self, name: str, new_points) -> None:
        catalog_ops.update_event_points(self.catalog, name, new_points)

    # ------------------------------------------------------------------ #
    # Config                                                               #
    # ------------------------------------------------------------------ #

    def set_weights(
        self,
        event_weight: Optional[float] = None,
        penalty_weight: Optional[float] = None,
    ) -> ScoringConfig:
        """
        Update the global multipliers within the operator ranges.

        Raises:
            ValueError: a weight falls outside its configured range.
        """
        updates = {}
        if event_weight is not None:
            low, high = self.settings.event_weight_range
            if not low <= event_weight <= high:
                raise ValueError(f"event_weight {event_weight} outside [{low}, {high}]")
            updates["event_weight"] = event_weight
        if penalty_weight is not None:
            low, high = self.settings.penalty_weight_range
            if not low <= penalty_weight <= high:
                raise ValueError(f"penalty_weight {penalty_weight} outside [{low}, {high}]")
            updates["penalty_weight"] = penalty_weight

        self.config = self.config.model_copy(update=updates)
        logger.info(
            "weights_updated",
            event_weight=self.config.event_weight,
            penalty_weight=self.config.penalty_weight,
        )
        return self.config

    # ------------------------------------------------------------------ #
    # Scoring                                                              #
    # ------------------------------------------------------------------ #

    def score(self, subject_id: str) -> float:
        return compute_score(self.get_subject(subject_id), self.catalog, self.config)

    def tier(self, subject_id: str) -> Tier:
        return rank_tier(self.score(subject_id))

    def breakdown(self, subject_id: str) -> ScoreResult:
        return ScoreCalculator().calculate(self.get_subject(subject_id), self.catalog, self.config)

    def leaderboard(self) -> List[LeaderboardEntry]:
        return build_leaderboard(self.subjects, self.catalog, self.config)

    def summary(self) -> DashboardSummary:
        return summarize(
            self.subjects,
            self.catalog,
            self.config,
            inactivity_alert_threshold=self.settings.INACTIVITY_ALERT_THRESHOLD,
        )
