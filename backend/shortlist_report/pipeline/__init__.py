"""
Pipeline module - report job execution

Submodules:
- executor: load data, lay out, save, record job outcome
"""

from .executor import ReportExecutor, StageEnum

__all__ = [
    "ReportExecutor",
    "StageEnum",
]
