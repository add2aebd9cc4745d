"""CVSS (Common Vulnerability Scoring System) scoring engine package"""

from .core.exceptions import (
    CVSSError,
    InvalidArgumentError,
    InvalidValueError,
    MissingMetricError,
    UnknownMetricError,
)
from .core.models import Metric, MetricGroup, ScoreResult, Severity
from .scoring.engine import ScoreEngine

__version__ = "1.0.0"
__author__ = "CVSS Engine Development Team"
__description__ = "Base, Temporal and Environmental CVSS scores from categorical metrics"

__all__ = [
    'ScoreEngine',
    'Metric',
    'MetricGroup',
    'ScoreResult',
    'Severity',
    'CVSSError',
    'InvalidArgumentError',
    'InvalidValueError',
    'MissingMetricError',
    'UnknownMetricError',
]
