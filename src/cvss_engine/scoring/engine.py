"""CVSS Base, Temporal and Environmental scoring engine"""

import functools
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Dict, List, Mapping, Optional, Union

from ..core.exceptions import (
    InvalidArgumentError,
    InvalidValueError,
    MissingMetricError,
    UnknownMetricError,
)
from ..core.models import Metric, MetricGroup
from .tables import (
    ALL_PARAMS,
    BIASED_IMPACT_FACTOR,
    EXPLOIT_METRICS,
    IMPACT_METRICS,
    NORMAL_IMPACT_FACTOR,
    TEMPORAL_PARAMS,
    UNBIASED_IMPACT_FACTOR,
)

ONE_DECIMAL = Decimal('0.1')
MAX_SCORE = Decimal('10')

MetricName = Union[str, Metric]


def _round_score(score: Decimal) -> Decimal:
    """Round half-up to a single fractional digit"""
    return score.quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


class ScoreEngine:
    """Holds CVSS metric assignments and computes scores from them

    Every metric can be set through ``set()`` or through a named setter
    resolved from the metric table::

        engine = ScoreEngine()
        engine.AccessVector('Remote')
        engine.access_complexity('Low')
        engine.set('Authentication', 'Not-Required')

    Scores are recomputed on every call. The Temporal score is derived
    from the rounded Base score and the Environmental score from the
    rounded Temporal score, so each tier needs the metrics of the tiers
    below it as well.
    """

    def __init__(self, metrics: Optional[Mapping[str, str]] = None):
        self._metrics: Dict[Metric, str] = {}

        if metrics is not None:
            self.update_from_dict(metrics)

    def __getattr__(self, name: str) -> Callable[[str], str]:
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            metric = Metric.lookup(name)
        except UnknownMetricError:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            ) from None
        return functools.partial(self.set, metric)

    def __dir__(self):
        return sorted(set(super().__dir__()) | {metric.value for metric in Metric})

    def __repr__(self) -> str:
        assigned = ', '.join(f"{metric}={value}" for metric, value in self._metrics.items())
        return f"{type(self).__name__}({assigned})"

    def set(self, name: MetricName, value: str) -> str:
        """Validate and store a metric value, returning it normalized"""
        metric = Metric.lookup(name)

        if not isinstance(value, str):
            raise InvalidValueError(metric.value, value)

        normalized = value.lower()
        if normalized not in ALL_PARAMS[metric]:
            raise InvalidValueError(metric.value, normalized)

        self._metrics[metric] = normalized
        logging.debug(f"{metric} set to {normalized}")
        return normalized

    def update_from_dict(self, metrics: Mapping[str, str]) -> None:
        """Apply a mapping of metric names to values

        Entries are applied in iteration order. An invalid entry stops the
        update; entries applied before it are kept.
        """
        if not isinstance(metrics, Mapping):
            raise InvalidArgumentError('Parameter must be a mapping of metric names to values')

        for name, value in metrics.items():
            if not isinstance(name, (str, Metric)) or not isinstance(value, str):
                raise InvalidArgumentError(
                    f"Metric entries must map names to string values, got {name!r}: {value!r}"
                )

        for name, value in metrics.items():
            self.set(name, value)

    def get(self, name: MetricName) -> Optional[str]:
        """Current value of a metric, or None if it has not been set"""
        return self._metrics.get(Metric.lookup(name))

    @property
    def metrics(self) -> Dict[str, str]:
        """Copy of the current assignments keyed by canonical metric name"""
        return {metric.value: value for metric, value in self._metrics.items()}

    def missing_metrics(self, group: MetricGroup) -> List[Metric]:
        """Metrics of a group that have not been set, in table order"""
        return [metric for metric in Metric.in_group(group) if metric not in self._metrics]

    def is_complete(self, group: MetricGroup) -> bool:
        return not self.missing_metrics(group)

    def base_score(self) -> Decimal:
        """Calculate the Base CVSS score"""
        self._require(MetricGroup.BASE)

        score = MAX_SCORE
        for metric in EXPLOIT_METRICS:
            score *= self._weight(metric)

        # Impact weighting depends on which impact type ImpactBias favours
        bias = self._metrics[Metric.IMPACT_BIAS]
        impact = Decimal('0')
        for metric in IMPACT_METRICS:
            value = self._weight(metric)

            if f"{bias}impact" == metric.value.lower():
                value *= BIASED_IMPACT_FACTOR
            elif bias == 'normal':
                value *= NORMAL_IMPACT_FACTOR
            else:
                value *= UNBIASED_IMPACT_FACTOR

            impact += value
        score *= impact

        result = _round_score(score)
        logging.debug(f"Base score: {result} (unrounded {score})")
        return result

    def temporal_score(self) -> Decimal:
        """Calculate the Temporal CVSS score"""
        self._require(MetricGroup.TEMPORAL)

        score = self.base_score()
        for metric in TEMPORAL_PARAMS:
            score *= self._weight(metric)

        result = _round_score(score)
        logging.debug(f"Temporal score: {result} (unrounded {score})")
        return result

    def environmental_score(self) -> Decimal:
        """Calculate the Environmental CVSS score"""
        self._require(MetricGroup.ENVIRONMENTAL)

        temporal = self.temporal_score()
        collateral = self._weight(Metric.COLLATERAL_DAMAGE_POTENTIAL)
        distribution = self._weight(Metric.TARGET_DISTRIBUTION)

        score = (temporal + (MAX_SCORE - temporal) * collateral) * distribution

        result = _round_score(score)
        logging.debug(f"Environmental score: {result} (unrounded {score})")
        return result

    def _require(self, group: MetricGroup) -> None:
        missing = self.missing_metrics(group)
        if missing:
            raise MissingMetricError(missing[0].value, group.value)

    def _weight(self, metric: Metric) -> Decimal:
        return ALL_PARAMS[metric][self._metrics[metric]]
