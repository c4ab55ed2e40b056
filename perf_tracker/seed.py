"""
seed.py — Demo state for the engagement & performance tracker.

Every call returns fresh objects so sessions never share mutable state.
"""

from typing import Dict, List, Tuple

from perf_tracker.models.subject import AttendanceRecord, Subject

SEED_EVENTS: Dict[str, float] = {
    "Design Crit": 4.0,
    "Accessibility Workshop": 4.0,
    "Sprint Demo": 3.0,
    "Hackathon": 8.0,
    "Tech Talk": 2.0,
    "Team Offsite": 5.0,
    "Code Review Clinic": 3.0,
}

# (id, name, base_score, inactivity_penalty, [(event, attended, date)])
_SEED_SUBJECTS: List[Tuple[str, str, float, float, List[Tuple[str, bool, str]]]] = [
    ("EMP-9921", "Dev Team A", 80.0, 0.0, [
        ("Hackathon", True, "2026-08-14"),
        ("Sprint Demo", True, "2026-08-28"),
        ("Tech Talk", True, "2026-09-03"),
        ("Code Review Clinic", True, "2026-09-10"),
        ("Team Offsite", False, "2026-09-18"),
    ]),
    ("EMP-3321", "Design Lead", 78.0, 2.0, [
        ("Design Crit", True, "2026-08-21"),
        ("Accessibility Workshop", False, "2026-08-26"),
        ("Sprint Demo", True, "2026-08-28"),
        ("Tech Talk", True, "2026-09-03"),
    ]),
    ("EMP-1102", "Backend Eng", 72.0, 5.0, [
        ("Code Review Clinic", True, "2026-08-12"),
        ("Hackathon", True, "2026-08-14"),
        ("Tech Talk", False, "2026-09-03"),
        ("Sprint Demo", True, "2026-09-11"),
    ]),
    ("EMP-4402", "QA Specialist", 62.0, 15.0, [
        ("Accessibility Workshop", True, "2026-08-26"),
        ("Sprint Demo", False, "2026-08-28"),
        ("Tech Talk", True, "2026-09-03"),
        ("Team Offsite", False, "2026-09-18"),
    ]),
    ("EMP-5511", "Product Mgr", 85.0, 0.0, [
        ("Sprint Demo", True, "2026-08-28"),
        ("Design Crit", True, "2026-09-04"),
        ("Team Offsite", True, "2026-09-18"),
        ("Tech Talk", True, "2026-09-24"),
    ]),
]


def seed_catalog() -> Dict[str, float]:
    return dict(SEED_EVENTS)


def seed_subjects() -> List[Subject]:
    return [
        Subject(
            id=subject_id,
            name=name,
            base_score=base_score,
            inactivity_penalty=penalty,
            records=[
                AttendanceRecord(event_name=event, attended=attended, date=date)
                for event, attended, date in records
            ],
        )
        for subject_id, name, base_score, penalty, records in _SEED_SUBJECTS
    ]
