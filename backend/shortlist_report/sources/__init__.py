"""
Data sources - resolve the inputs of a report run

Submodules:
- selection: vacancy lookup, candidate filtering, rater ranking
- api: REST API source (httpx)
- file: JSON/YAML export source
"""

from .api import ApiReportDataSource
from .file import FileReportDataSource
from .selection import ReportSelector

__all__ = [
    "ReportSelector",
    "ApiReportDataSource",
    "FileReportDataSource",
]
