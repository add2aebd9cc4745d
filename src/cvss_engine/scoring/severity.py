"""Qualitative severity rating for CVSS scores"""

from decimal import Decimal
from typing import Optional, Union

from ..core.models import Severity


def calculate_severity(score: Optional[Union[Decimal, float]]) -> Severity:
    """Calculate severity level from a CVSS score"""
    if not score or score < Decimal('0.1'):
        return Severity.NONE
    elif score < 4:
        return Severity.LOW
    elif score < 7:
        return Severity.MEDIUM
    elif score < 9:
        return Severity.HIGH
    else:
        return Severity.CRITICAL
