"""
Report derivations - values computed from the report context

Responsibilities:
1. Partition candidate names into status buckets (section order fixed)
2. Compute the gender distribution over all candidates
3. Format the short/long generation timestamps

Depends on:
- report_spec.yaml: gender_aliases

Test points:
- test_status_buckets_keep_input_order
- test_gender_counts_sum_to_total
- test_percentage_one_decimal / test_percentage_zero_total
- test_timestamp_formats
"""

from __future__ import annotations

from collections import Counter
from datetime import datetime

from ..config import ReportSpec, load_spec
from ..models import CandidateStatus, GenderBucket, GenderStats, ReportContext

# Order of the status sections in the document
SECTION_ORDER = (
    CandidateStatus.LONG_LIST,
    CandidateStatus.FOR_REVIEW,
    CandidateStatus.DISQUALIFIED,
)


def short_timestamp(moment: datetime) -> str:
    """e.g. "Oct 6, 2026, 03:04 PM" """
    return f"{moment:%b} {moment.day}, {moment:%Y, %I:%M %p}"


def long_timestamp(moment: datetime) -> str:
    """e.g. "October 6, 2026, 03:04:05 PM" """
    return f"{moment:%B} {moment.day}, {moment:%Y, %I:%M:%S %p}"


class ReportDerivation:
    """Derived values of one report"""

    def __init__(self, spec: ReportSpec | None = None):
        self.spec = spec or load_spec()

    def status_buckets(self, ctx: ReportContext) -> dict[CandidateStatus, list[str]]:
        """Display names per status, in section order"""
        return {status: ctx.names_with_status(status) for status in SECTION_ORDER}

    def gender_stats(self, ctx: ReportContext) -> GenderStats:
        """Gender distribution over every candidate of the vacancy"""
        counts = Counter(self.spec.gender_bucket(c.gender) for c in ctx.candidates)
        return GenderStats(
            total=len(ctx.candidates),
            counts={bucket: counts.get(bucket, 0) for bucket in GenderBucket},
        )
