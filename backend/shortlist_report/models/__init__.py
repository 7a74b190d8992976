"""
Data model layer - core data structures of the report system

Every module talks through these models:
- Vacancy / Candidate / Signatory / Rater: report inputs
- ReportContext: resolved inputs of one report run
- GenderStats: gender distribution summary
- ReportJob: report job status and lifecycle
"""

from .job import JobStatus, ReportJob
from .report import GenderCount, GenderStats, ReportContext
from .vacancy import (
    Candidate,
    CandidateStatus,
    GenderBucket,
    Rater,
    Signatory,
    Vacancy,
    VacancyScope,
)

__all__ = [
    "Vacancy",
    "Candidate",
    "CandidateStatus",
    "GenderBucket",
    "Signatory",
    "Rater",
    "VacancyScope",
    "ReportContext",
    "GenderStats",
    "GenderCount",
    "ReportJob",
    "JobStatus",
]
