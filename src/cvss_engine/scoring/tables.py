"""CVSS metric weight tables

Every metric maps its allowed (lower-case) values to the weight used by
the scoring formulas. The tables are read-only and shared by all engines.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from ..core.models import Metric, MetricGroup


def _weights(**values: str) -> Mapping[str, Decimal]:
    return MappingProxyType({
        name.replace('_', '-'): Decimal(weight) for name, weight in values.items()
    })


BASE_PARAMS: Mapping[Metric, Mapping[str, Decimal]] = MappingProxyType({
    Metric.ACCESS_VECTOR: _weights(remote='1.0', local='0.7'),
    Metric.ACCESS_COMPLEXITY: _weights(low='1.0', high='0.8'),
    Metric.AUTHENTICATION: _weights(required='0.6', not_required='1.0'),
    Metric.CONFIDENTIALITY_IMPACT: _weights(none='0', partial='0.7', complete='1.0'),
    Metric.INTEGRITY_IMPACT: _weights(none='0', partial='0.7', complete='1.0'),
    Metric.AVAILABILITY_IMPACT: _weights(none='0', partial='0.7', complete='1.0'),
    # Bias weights are not multiplied in; the chosen value selects the impact scaling
    Metric.IMPACT_BIAS: _weights(normal='1.0', confidentiality='1.0', integrity='1.0', availability='1.0'),
})

TEMPORAL_PARAMS: Mapping[Metric, Mapping[str, Decimal]] = MappingProxyType({
    Metric.EXPLOITABILITY: _weights(unproven='0.85', proof_of_concept='0.9', functional='0.95', high='1.0'),
    Metric.REMEDIATION_LEVEL: _weights(official_fix='0.87', temporary_fix='0.90', workaround='0.95', unavailable='1.00'),
    Metric.REPORT_CONFIDENCE: _weights(unconfirmed='0.9', uncorroborated='0.95', confirmed='1.00'),
})

ENVIRONMENTAL_PARAMS: Mapping[Metric, Mapping[str, Decimal]] = MappingProxyType({
    Metric.COLLATERAL_DAMAGE_POTENTIAL: _weights(none='0', low='0.1', medium='0.3', high='0.5'),
    Metric.TARGET_DISTRIBUTION: _weights(none='0', low='0.25', medium='0.75', high='1.0'),
})

ALL_PARAMS: Mapping[Metric, Mapping[str, Decimal]] = MappingProxyType({
    **BASE_PARAMS, **TEMPORAL_PARAMS, **ENVIRONMENTAL_PARAMS,
})

PARAMS_BY_GROUP: Mapping[MetricGroup, Mapping[Metric, Mapping[str, Decimal]]] = MappingProxyType({
    MetricGroup.BASE: BASE_PARAMS,
    MetricGroup.TEMPORAL: TEMPORAL_PARAMS,
    MetricGroup.ENVIRONMENTAL: ENVIRONMENTAL_PARAMS,
})

# Impact scaling selected by ImpactBias
BIASED_IMPACT_FACTOR = Decimal('0.5')
NORMAL_IMPACT_FACTOR = Decimal('0.333')
UNBIASED_IMPACT_FACTOR = Decimal('0.25')

IMPACT_METRICS = (
    Metric.CONFIDENTIALITY_IMPACT,
    Metric.INTEGRITY_IMPACT,
    Metric.AVAILABILITY_IMPACT,
)

EXPLOIT_METRICS = (
    Metric.ACCESS_VECTOR,
    Metric.ACCESS_COMPLEXITY,
    Metric.AUTHENTICATION,
)
