"""Errors raised by the CVSS scoring engine"""

from typing import Optional


class CVSSError(Exception):
    """Base class for all scoring engine errors"""


class InvalidArgumentError(CVSSError, TypeError):
    """Batch input is not a flat mapping of metric names to values"""


class UnknownMetricError(CVSSError, ValueError):
    """Metric name is not one of the recognized CVSS metrics"""

    def __init__(self, metric: str):
        self.metric = metric
        super().__init__(f"{metric} is not a valid metric")


class InvalidValueError(CVSSError, ValueError):
    """Value is not among the allowed values of a metric"""

    def __init__(self, metric: str, value: object):
        self.metric = metric
        self.value = value
        super().__init__(f"Invalid value '{value}' for {metric}")


class MissingMetricError(CVSSError):
    """A score was requested before all of its metrics were set"""

    def __init__(self, metric: str, tier: Optional[str] = None):
        self.metric = metric
        self.tier = tier
        if tier:
            message = f"You must set '{metric}' to calculate the {tier} CVSS score"
        else:
            message = f"You must set '{metric}'"
        super().__init__(message)
