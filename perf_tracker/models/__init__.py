from perf_tracker.models.enumerations import Tier
from perf_tracker.models.subject import (
    AttendanceRecord,
    EventDefinition,
    ScoringConfig,
    Subject,
)

__all__ = [
    "AttendanceRecord",
    "EventDefinition",
    "ScoringConfig",
    "Subject",
    "Tier",
]
