# tests/test_session.py

"""
Scoring Session Tests - operator workflow over seeded state
"""

import pytest

from perf_tracker.core.exceptions import DuplicateEventError, NotFoundError
from perf_tracker.models.enumerations import Tier
from perf_tracker.models.subject import ScoringConfig, Subject
from perf_tracker.session import ScoringSession


class TestSessionSetup:

    def test_from_seed(self, session):
        assert len(session.subjects) == 5
        assert "Design Crit" in session.catalog
        assert session.config == ScoringConfig(event_weight=1.0, penalty_weight=1.0)

    def test_seed_sessions_do_not_share_state(self, settings):
        first = ScoringSession.from_seed(settings=settings)
        second = ScoringSession.from_seed(settings=settings)
        first.delete_event("Tech Talk")
        assert "Tech Talk" in second.catalog
        assert any(r.event_name == "Tech Talk" for r in second.subjects[0].records)

    def test_empty_session(self, settings):
        session = ScoringSession(settings=settings)
        assert session.catalog == {}
        assert session.subjects == []
        assert session.summary().top_performer is None


class TestSessionSubjects:

    def test_get_unknown_subject(self, session):
        with pytest.raises(NotFoundError) as exc_info:
            session.get_subject("EMP-0000")
        assert exc_info.value.entity_type == "Subject"

    def test_add_subject(self, session):
        session.add_subject(Subject(id="EMP-7001", name="Data Analyst", base_score=64))
        assert session.score("EMP-7001") == 64.0

    def test_add_duplicate_subject(self, session):
        with pytest.raises(ValueError):
            session.add_subject(Subject(id="EMP-9921", base_score=50))

    def test_add_record(self, session):
        session.add_record("EMP-4402", "Hackathon", True, "2026-10-02")
        assert session.score("EMP-4402") == 61.0
        assert session.tier("EMP-4402") == Tier.BRONZE

    def test_add_record_unknown_event(self, session):
        with pytest.raises(NotFoundError):
            session.add_record("EMP-4402", "Unknown Event", True)


class TestSessionCatalog:

    def test_scores_follow_catalog_edits(self, session):
        assert session.score("EMP-3321") == 85.0
        session.update_event_points("Design Crit", 9)
        assert session.score("EMP-3321") == 90.0
        assert session.tier("EMP-3321") == Tier.DIAMOND

    def test_rename_then_score(self, session):
        before = {s.id: session.score(s.id) for s in session.subjects}
        session.rename_event("Sprint Demo", "Sprint Review")
        after = {s.id: session.score(s.id) for s in session.subjects}
        assert before == after

    def test_add_duplicate_event(self, session):
        with pytest.raises(DuplicateEventError):
            session.add_event("Hackathon", 3)

    def test_delete_then_breakdown(self, session):
        session.delete_event("Hackathon")
        result = session.breakdown("EMP-9921")
        assert result.raw_event_points == 8
        assert float(result.score) == 88.0


class TestSessionWeights:

    def test_set_both_weights(self, session):
        config = session.set_weights(event_weight=2.0, penalty_weight=3.0)
        assert config.event_weight == 2.0
        assert config.penalty_weight == 3.0
        assert session.config is config

    def test_set_one_weight_keeps_other(self, session):
        session.set_weights(penalty_weight=2.0)
        assert session.config.event_weight == 1.0
        assert session.config.penalty_weight == 2.0

    def test_weights_apply_to_every_subject(self, session):
        session.set_weights(penalty_weight=3.0)
        assert session.score("EMP-4402") == 23.0
        assert session.score("EMP-5511") == 99.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"event_weight": 0.4},
            {"event_weight": 2.6},
            {"penalty_weight": 0.0},
            {"penalty_weight": 3.5},
        ],
    )
    def test_out_of_range_rejected(self, session, kwargs):
        with pytest.raises(ValueError):
            session.set_weights(**kwargs)
        assert session.config == ScoringConfig(event_weight=1.0, penalty_weight=1.0)

    def test_range_bounds_inclusive(self, session):
        session.set_weights(event_weight=0.5, penalty_weight=3.0)
        session.set_weights(event_weight=2.5, penalty_weight=0.5)
        assert session.config.event_weight == 2.5


class TestSessionLeaderboard:

    def test_leaderboard_and_summary(self, session):
        entries = session.leaderboard()
        assert entries[0].subject_id == "EMP-5511"
        summary = session.summary()
        assert summary.inactivity_alerts == 3
        assert summary.average_attendance == 76.0
