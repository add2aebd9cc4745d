"""Output formatters for the CVSS CLI"""

from .table import TableFormatter
from .json import JSONFormatter
from .csv import CSVFormatter

__all__ = ['TableFormatter', 'JSONFormatter', 'CSVFormatter', 'get_formatter']


def get_formatter(format_name: str):
    """Formatter class for an output format name"""
    return {
        'table': TableFormatter,
        'json': JSONFormatter,
        'csv': CSVFormatter,
    }[format_name]
