"""
Derived value unit tests

Run: pytest backend/tests/unit/test_derivation.py -v
"""

from datetime import datetime

import pytest

from shortlist_report.layout.derivation import (
    SECTION_ORDER,
    ReportDerivation,
    long_timestamp,
    short_timestamp,
)
from shortlist_report.models import (
    Candidate,
    CandidateStatus,
    GenderBucket,
    ReportContext,
    Vacancy,
)


def _context(*candidates: Candidate) -> ReportContext:
    return ReportContext(vacancy=Vacancy(item_number="IT-001"), candidates=list(candidates))


class TestStatusBuckets:
    """Status partition"""

    @pytest.fixture
    def derivation(self, spec) -> ReportDerivation:
        return ReportDerivation(spec)

    def test_section_order(self, derivation: ReportDerivation, sample_context: ReportContext):
        buckets = derivation.status_buckets(sample_context)
        assert list(buckets) == list(SECTION_ORDER)

    def test_status_buckets_keep_input_order(self, derivation: ReportDerivation):
        ctx = _context(
            Candidate(full_name="Zoe", status=CandidateStatus.FOR_REVIEW),
            Candidate(full_name="Ana", status=CandidateStatus.LONG_LIST),
            Candidate(full_name="Ben", status=CandidateStatus.FOR_REVIEW),
            Candidate(full_name="Cid", status=CandidateStatus.GENERAL_LIST),
        )
        buckets = derivation.status_buckets(ctx)

        assert buckets[CandidateStatus.LONG_LIST] == ["Ana"]
        assert buckets[CandidateStatus.FOR_REVIEW] == ["Zoe", "Ben"]
        assert buckets[CandidateStatus.DISQUALIFIED] == []
        # General list candidates get no section
        assert CandidateStatus.GENERAL_LIST not in buckets

    def test_missing_name_shown_as_na(self, derivation: ReportDerivation):
        ctx = _context(Candidate(status=CandidateStatus.DISQUALIFIED))
        assert derivation.status_buckets(ctx)[CandidateStatus.DISQUALIFIED] == ["N/A"]


class TestGenderStats:
    """Gender distribution"""

    @pytest.fixture
    def derivation(self, spec) -> ReportDerivation:
        return ReportDerivation(spec)

    def test_scenario_counts(self, derivation: ReportDerivation, sample_context: ReportContext):
        stats = derivation.gender_stats(sample_context)

        assert stats.total == 5
        assert stats.count(GenderBucket.MALE) == 3
        assert stats.count(GenderBucket.FEMALE) == 2
        assert stats.count(GenderBucket.LGBTQI) == 0
        assert stats.percentage(GenderBucket.MALE) == "60.0"
        assert stats.percentage(GenderBucket.FEMALE) == "40.0"

    def test_gender_counts_sum_to_total(self, derivation: ReportDerivation):
        ctx = _context(
            Candidate(full_name="A", gender="Male"),
            Candidate(full_name="B", gender=None),
            Candidate(full_name="C", gender="prefer not to say"),
            Candidate(full_name="D", gender="lgbtqi+"),
        )
        stats = derivation.gender_stats(ctx)

        assert sum(stats.counts.values()) == stats.total == 4
        assert stats.count(GenderBucket.OTHER) == 2
        assert stats.count(GenderBucket.LGBTQI) == 1

    def test_percentage_one_decimal(self, derivation: ReportDerivation):
        ctx = _context(
            Candidate(full_name="A", gender="Male"),
            Candidate(full_name="B", gender="Female"),
            Candidate(full_name="C", gender="Female"),
        )
        stats = derivation.gender_stats(ctx)

        assert stats.percentage(GenderBucket.MALE) == "33.3"
        assert stats.percentage(GenderBucket.FEMALE) == "66.7"

    @pytest.mark.parametrize("males, total, expected", [
        (1, 16, ("6.3", "93.8")),
        (3, 16, ("18.8", "81.3")),
        (1, 80, ("1.3", "98.8")),
        (1, 8, ("12.5", "87.5")),
    ])
    def test_percentage_ties_round_half_up(self, derivation: ReportDerivation, males, total, expected):
        ctx = _context(*(
            Candidate(full_name=f"C{i}", gender="Male" if i < males else "Female")
            for i in range(total)
        ))
        stats = derivation.gender_stats(ctx)

        assert (stats.percentage(GenderBucket.MALE), stats.percentage(GenderBucket.FEMALE)) == expected

    def test_percentage_zero_total(self, derivation: ReportDerivation):
        stats = derivation.gender_stats(_context())

        assert stats.total == 0
        for bucket in GenderBucket:
            assert stats.count(bucket) == 0
            assert stats.percentage(bucket) == "0"


class TestTimestamps:
    """Generation timestamps"""

    def test_short_timestamp(self):
        assert short_timestamp(datetime(2026, 10, 6, 15, 4, 5)) == "Oct 6, 2026, 03:04 PM"

    def test_long_timestamp(self):
        assert long_timestamp(datetime(2026, 10, 6, 15, 4, 5)) == "October 6, 2026, 03:04:05 PM"

    def test_morning_hours(self):
        assert short_timestamp(datetime(2026, 1, 31, 0, 5)) == "Jan 31, 2026, 12:05 AM"
