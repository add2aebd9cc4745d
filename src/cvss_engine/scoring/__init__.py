"""CVSS scoring engine and metric tables"""

from .engine import ScoreEngine
from .severity import calculate_severity

__all__ = ['ScoreEngine', 'calculate_severity']
