"""Score processor turning metric sets into ScoreResult records"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from ..config.settings import CVSSConfig
from ..core.exceptions import CVSSError, InvalidArgumentError
from ..core.models import MetricGroup, ScoreResult
from ..scoring.engine import ScoreEngine
from ..scoring.severity import calculate_severity


class ScoreProcessor:
    """Computes every score tier a metric set is complete enough for"""

    def __init__(self, config: Optional[CVSSConfig] = None):
        self.config = config or CVSSConfig()

    def process_single(self, metrics: Mapping[str, str], label: Optional[str] = None) -> ScoreResult:
        """Score one metric set

        The Base score is always required. Temporal and Environmental
        scores are computed only when their own metric groups are set.
        """
        engine = ScoreEngine(metrics)
        result = ScoreResult(label=label, metrics=engine.metrics)

        result.base_score = engine.base_score()

        if engine.is_complete(MetricGroup.TEMPORAL):
            result.temporal_score = engine.temporal_score()

            if engine.is_complete(MetricGroup.ENVIRONMENTAL):
                result.environmental_score = engine.environmental_score()
        elif engine.is_complete(MetricGroup.ENVIRONMENTAL):
            logging.warning(
                f"{label or 'Metric set'}: environmental metrics ignored without temporal metrics"
            )

        result.severity = calculate_severity(result.final_score)
        logging.info(
            f"{label or 'Metric set'}: base={result.base_score} "
            f"temporal={result.temporal_score} environmental={result.environmental_score}"
        )
        return result

    def process_bulk(self, entries: List[Mapping[str, Any]]) -> List[ScoreResult]:
        """Score a list of ``{"id": ..., "metrics": {...}}`` entries"""
        logging.info(f"Starting bulk scoring of {len(entries)} metric sets")

        results = []
        for index, entry in enumerate(entries, 1):
            label = entry.get('id') if isinstance(entry, Mapping) else None
            label = label or f"entry-{index}"

            try:
                if not isinstance(entry, Mapping) or not isinstance(entry.get('metrics'), Mapping):
                    raise InvalidArgumentError(f"{label} has no 'metrics' mapping")
                results.append(self.process_single(entry['metrics'], label=label))
            except CVSSError as e:
                if self.config.stop_on_error:
                    raise
                logging.error(f"Failed to score {label}: {e}")
                results.append(ScoreResult(label=label, error=str(e)))

        failed = sum(1 for result in results if result.error)
        logging.info(f"Bulk scoring complete: {len(results)} results, {failed} failed")
        return results

    @staticmethod
    def load_entries(path: Union[str, Path]) -> List[Dict[str, Any]]:
        """Read metric sets from a JSON file

        The file holds a list of entries, a single entry, or a single flat
        mapping of metric names to values.
        """
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise InvalidArgumentError(f"{path} is not valid JSON: {e}") from e

        if isinstance(data, dict) and 'metrics' in data:
            return [data]
        if isinstance(data, dict):
            return [{'id': Path(path).stem, 'metrics': data}]
        if isinstance(data, list):
            return data
        raise InvalidArgumentError(f"{path} must contain a JSON object or a list of entries")
