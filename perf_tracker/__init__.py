"""Engagement & performance scoring for the HR dashboard."""

__version__ = "1.0.0"
