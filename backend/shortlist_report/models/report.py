"""
Report context - the only input of the layout engine

The layout engine consumes this structure and never talks to the data
sources directly.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, Field

from .vacancy import Candidate, CandidateStatus, GenderBucket, Signatory, Vacancy


class ReportContext(BaseModel):
    """Resolved inputs of one report run"""

    vacancy: Vacancy

    # Filtered to the vacancy and sorted by full name
    candidates: list[Candidate] = Field(default_factory=list)

    # Ranked upstream, printed in this order
    signatories: list[Signatory] = Field(default_factory=list)

    # Stamped when the build starts unless pinned by the caller;
    # footers reuse it on every page
    generated_at: datetime | None = None

    @property
    def item_number(self) -> str:
        return self.vacancy.item_number

    @property
    def artifact_name(self) -> str:
        return f"Summary_{self.vacancy.item_number}"

    def names_with_status(self, status: CandidateStatus) -> list[str]:
        """Display names of candidates in one status bucket, in input order"""
        return [c.display_name for c in self.candidates if c.status == status]


class GenderCount(BaseModel):
    """One line of the gender distribution"""
    bucket: GenderBucket
    count: int
    percentage: str


class GenderStats(BaseModel):
    """Gender distribution over all candidates of a report"""
    total: int = 0
    counts: dict[GenderBucket, int] = Field(default_factory=dict)

    def count(self, bucket: GenderBucket) -> int:
        return self.counts.get(bucket, 0)

    def percentage(self, bucket: GenderBucket) -> str:
        """Share of the total to one decimal place, "0" when there are no candidates

        Ties round half up (1 of 16 -> "6.3").
        """
        if self.total == 0:
            return "0"
        share = Decimal(self.count(bucket) * 100) / Decimal(self.total)
        return str(share.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    def line(self, bucket: GenderBucket) -> GenderCount:
        return GenderCount(bucket=bucket, count=self.count(bucket), percentage=self.percentage(bucket))
