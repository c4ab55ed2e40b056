# tests/conftest.py

"""
Pytest Fixtures - Shared scoring data for engine, catalog and session tests

SEED DATA REFERENCE:
- Subjects: EMP-9921 Dev Team A, EMP-3321 Design Lead, EMP-1102 Backend Eng,
            EMP-4402 QA Specialist, EMP-5511 Product Mgr
- Events:   Design Crit (4), Accessibility Workshop (4), Sprint Demo (3),
            Hackathon (8), Tech Talk (2), Team Offsite (5), Code Review Clinic (3)
"""

import pytest
import structlog

from perf_tracker.config import Settings
from perf_tracker.models.subject import AttendanceRecord, ScoringConfig, Subject
from perf_tracker.seed import seed_catalog, seed_subjects
from perf_tracker.session import ScoringSession


# =============================================================================
# LOGGING
# =============================================================================

@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog.configure() a test performed."""
    yield
    structlog.reset_defaults()


# =============================================================================
# SETTINGS / CONFIG FIXTURES
# =============================================================================

@pytest.fixture
def settings():
    """Settings with explicit defaults, independent of the environment."""
    return Settings(
        DEFAULT_EVENT_WEIGHT=1.0,
        DEFAULT_PENALTY_WEIGHT=1.0,
        EVENT_WEIGHT_MIN=0.5,
        EVENT_WEIGHT_MAX=2.5,
        PENALTY_WEIGHT_MIN=0.5,
        PENALTY_WEIGHT_MAX=3.0,
        INACTIVITY_ALERT_THRESHOLD=0.01,
    )


@pytest.fixture
def unit_config():
    """Both multipliers at 1.0."""
    return ScoringConfig(event_weight=1.0, penalty_weight=1.0)


# =============================================================================
# SUBJECT / CATALOG FIXTURES
# =============================================================================

@pytest.fixture
def design_catalog():
    """Catalog from the Design Lead scenario."""
    return {"Design Crit": 4, "Accessibility Workshop": 4}


@pytest.fixture
def design_lead():
    """Base 78, penalty 2, attended Design Crit, missed Accessibility Workshop."""
    return Subject(
        id="EMP-3321",
        name="Design Lead",
        base_score=78,
        inactivity_penalty=2,
        records=[
            AttendanceRecord(event_name="Design Crit", attended=True, date="2026-08-21"),
            AttendanceRecord(event_name="Accessibility Workshop", attended=False, date="2026-08-26"),
        ],
    )


@pytest.fixture
def catalog():
    """Fresh copy of the seed catalog."""
    return seed_catalog()


@pytest.fixture
def subjects():
    """Fresh copies of the seed subjects."""
    return seed_subjects()


@pytest.fixture
def session(settings):
    """Seeded scoring session."""
    return ScoringSession.from_seed(settings=settings)
