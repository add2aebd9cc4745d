"""Table format output formatter"""

from typing import List

from ...core.models import Metric, MetricGroup, ScoreResult


class TableFormatter:
    """Plain text table formatter"""

    @staticmethod
    def format_single(result: ScoreResult) -> str:
        """Format single result as clean table"""
        lines = []

        severity_text = result.severity.value if result.severity.value != "NONE" else "None"
        lines.append(f"[{result.label}] {severity_text}" if result.label else severity_text)
        lines.append("")

        if result.error:
            lines.append(f"ERROR: {result.error}")
            return "\n".join(lines)

        lines.append("SCORES:")
        lines.append(f"  Base:          {TableFormatter._score_text(result.base_score)}")
        lines.append(f"  Temporal:      {TableFormatter._score_text(result.temporal_score)}")
        lines.append(f"  Environmental: {TableFormatter._score_text(result.environmental_score)}")
        lines.append("")

        for group in MetricGroup:
            assigned = [metric for metric in Metric.in_group(group) if metric.value in result.metrics]
            if not assigned:
                continue
            lines.append(f"{group.value.upper()} METRICS:")
            width = max(len(metric.value) for metric in assigned)
            for metric in assigned:
                lines.append(f"  {metric.value.ljust(width)}  {result.metrics[metric.value]}")
            lines.append("")

        return "\n".join(lines).rstrip()

    @staticmethod
    def format_bulk(results: List[ScoreResult]) -> str:
        """Format bulk results as a one-line-per-entry summary"""
        if not results:
            return "No results to display"

        lines = []
        lines.append("CVSS SCORING RESULTS")
        lines.append("=" * 50)
        lines.append("")

        for result in results:
            if result.error:
                lines.append(f"[{result.label}] ERROR - {result.error}")
                continue

            details = [f"Base: {result.base_score}"]
            if result.temporal_score is not None:
                details.append(f"Temporal: {result.temporal_score}")
            if result.environmental_score is not None:
                details.append(f"Environmental: {result.environmental_score}")
            lines.append(f"[{result.label}] {result.severity.value}")
            lines.append(f"  {' | '.join(details)}")

        lines.append("")
        lines.append("-" * 50)
        lines.append(f"Showing {len(results)} metric sets")

        failed = sum(1 for r in results if r.error)
        if failed:
            lines.append(f"Failed: {failed}")
        critical_count = sum(1 for r in results if r.severity.value == "CRITICAL")
        high_count = sum(1 for r in results if r.severity.value == "HIGH")
        if critical_count:
            lines.append(f"Critical: {critical_count}")
        if high_count:
            lines.append(f"High: {high_count}")

        return "\n".join(lines)

    @staticmethod
    def _score_text(score) -> str:
        return f"{score}/10.0" if score is not None else "Not Calculated"
