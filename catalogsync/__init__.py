"""Drift detection and synchronisation of catalog metric definitions and scorecards."""

__version__ = "0.1.0"
__all__ = [
    "compass",
    "drift",
    "metric_apply",
    "metric_models",
    "metric_queries",
    "metric_repository",
    "scorecard_apply",
    "scorecard_models",
    "scorecard_queries",
    "scorecard_repository",
]