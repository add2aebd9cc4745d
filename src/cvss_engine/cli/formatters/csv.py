"""CSV format output formatter"""

import csv
import io
from typing import List

from ...core.models import Metric, ScoreResult


class CSVFormatter:
    """CSV format output formatter"""

    @staticmethod
    def get_headers() -> List[str]:
        """Get CSV headers"""
        return (
            ['label', 'base_score', 'temporal_score', 'environmental_score', 'severity']
            + [metric.value for metric in Metric]
            + ['error']
        )

    @staticmethod
    def format_row(result: ScoreResult) -> List[str]:
        """Format single result as CSV row"""
        return (
            [
                result.label or '',
                str(result.base_score) if result.base_score is not None else '',
                str(result.temporal_score) if result.temporal_score is not None else '',
                str(result.environmental_score) if result.environmental_score is not None else '',
                result.severity.value,
            ]
            + [result.metrics.get(metric.value, '') for metric in Metric]
            + [(result.error or '').replace('\n', ' ')]
        )

    @staticmethod
    def format_single(result: ScoreResult) -> str:
        return CSVFormatter.format_bulk([result])

    @staticmethod
    def format_bulk(results: List[ScoreResult]) -> str:
        """Format results as CSV with a header row"""
        output_buffer = io.StringIO()
        writer = csv.writer(output_buffer, lineterminator='\n')
        writer.writerow(CSVFormatter.get_headers())
        for result in results:
            writer.writerow(CSVFormatter.format_row(result))
        return output_buffer.getvalue().strip()
