"""Core data models for the CVSS scoring engine"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, Union

from .exceptions import UnknownMetricError


class Severity(Enum):
    """CVSS Severity Levels"""
    NONE = "NONE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class MetricGroup(Enum):
    """Score tier a metric contributes to"""
    BASE = "Base"
    TEMPORAL = "Temporal"
    ENVIRONMENTAL = "Environmental"


class Metric(str, Enum):
    """Recognized CVSS metric names"""
    # Base
    ACCESS_VECTOR = "AccessVector"
    ACCESS_COMPLEXITY = "AccessComplexity"
    AUTHENTICATION = "Authentication"
    CONFIDENTIALITY_IMPACT = "ConfidentialityImpact"
    INTEGRITY_IMPACT = "IntegrityImpact"
    AVAILABILITY_IMPACT = "AvailabilityImpact"
    IMPACT_BIAS = "ImpactBias"
    # Temporal
    EXPLOITABILITY = "Exploitability"
    REMEDIATION_LEVEL = "RemediationLevel"
    REPORT_CONFIDENCE = "ReportConfidence"
    # Environmental
    COLLATERAL_DAMAGE_POTENTIAL = "CollateralDamagePotential"
    TARGET_DISTRIBUTION = "TargetDistribution"

    def __str__(self) -> str:
        return self.value

    @property
    def group(self) -> MetricGroup:
        return _METRIC_GROUPS[self]

    @property
    def snake_name(self) -> str:
        """Attribute-style alias, e.g. ``access_vector``"""
        return self.name.lower()

    @classmethod
    def lookup(cls, name: Union[str, 'Metric']) -> 'Metric':
        """Resolve a canonical name, snake_case alias or member to a Metric"""
        if isinstance(name, cls):
            return name
        metric = _METRIC_ALIASES.get(name) if isinstance(name, str) else None
        if metric is None:
            raise UnknownMetricError(str(name))
        return metric

    @classmethod
    def in_group(cls, group: MetricGroup) -> List['Metric']:
        """Metrics of a group in table order"""
        return [metric for metric in cls if metric.group is group]


_METRIC_GROUPS = {
    Metric.ACCESS_VECTOR: MetricGroup.BASE,
    Metric.ACCESS_COMPLEXITY: MetricGroup.BASE,
    Metric.AUTHENTICATION: MetricGroup.BASE,
    Metric.CONFIDENTIALITY_IMPACT: MetricGroup.BASE,
    Metric.INTEGRITY_IMPACT: MetricGroup.BASE,
    Metric.AVAILABILITY_IMPACT: MetricGroup.BASE,
    Metric.IMPACT_BIAS: MetricGroup.BASE,
    Metric.EXPLOITABILITY: MetricGroup.TEMPORAL,
    Metric.REMEDIATION_LEVEL: MetricGroup.TEMPORAL,
    Metric.REPORT_CONFIDENCE: MetricGroup.TEMPORAL,
    Metric.COLLATERAL_DAMAGE_POTENTIAL: MetricGroup.ENVIRONMENTAL,
    Metric.TARGET_DISTRIBUTION: MetricGroup.ENVIRONMENTAL,
}

_METRIC_ALIASES: Dict[str, Metric] = {}
for _metric in Metric:
    _METRIC_ALIASES[_metric.value] = _metric
    _METRIC_ALIASES[_metric.snake_name] = _metric


@dataclass
class ScoreResult:
    """Container for the scores computed from one set of metrics"""
    label: Optional[str] = None
    metrics: Dict[str, str] = field(default_factory=dict)
    base_score: Optional[Decimal] = None
    temporal_score: Optional[Decimal] = None
    environmental_score: Optional[Decimal] = None
    severity: Severity = Severity.NONE
    error: Optional[str] = None

    @property
    def final_score(self) -> Optional[Decimal]:
        """Score of the highest tier that was computed"""
        for score in (self.environmental_score, self.temporal_score, self.base_score):
            if score is not None:
                return score
        return None
