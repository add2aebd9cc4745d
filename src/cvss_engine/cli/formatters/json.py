"""JSON format output formatter"""

import json
from dataclasses import asdict
from typing import Any, Dict, List

from ...core.models import ScoreResult


class JSONFormatter:
    """JSON format output formatter"""

    @staticmethod
    def to_dict(result: ScoreResult) -> Dict[str, Any]:
        """Convert a result into JSON-serializable data"""
        data = asdict(result)

        # Decimal scores become plain numbers
        for key in ('base_score', 'temporal_score', 'environmental_score'):
            if data[key] is not None:
                data[key] = float(data[key])

        # Convert enum to string
        data['severity'] = result.severity.value

        return data

    @staticmethod
    def format_single(result: ScoreResult) -> str:
        """Format single result as JSON"""
        return json.dumps(JSONFormatter.to_dict(result), indent=2)

    @staticmethod
    def format_bulk(results: List[ScoreResult]) -> str:
        """Format multiple results as JSON array"""
        return json.dumps([JSONFormatter.to_dict(result) for result in results], indent=2)
