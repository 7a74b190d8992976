"""
Report input selection - from raw collections to a ReportContext

Responsibilities:
1. Resolve the vacancy by exact item number
2. Keep the vacancy's candidates, sorted by full name (case-insensitive)
3. Keep raters whose assignment scope covers the vacancy, ordered by
   role rank then name

Depends on:
- report_spec.yaml: rater_role_order

Test points:
- test_vacancy_not_found
- test_candidates_filtered_and_sorted
- test_raters_scoped_and_ranked
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ValidationError

from ..config import ReportSpec, load_spec
from ..interfaces import DataLoadError, VacancyNotFoundError
from ..models import Candidate, Rater, ReportContext, Vacancy

LOAD_FAILED_MESSAGE = "FAILED TO LOAD REPORT DATA. PLEASE TRY AGAIN."


class ReportSelector:
    """Applies the report's filters and ordering to raw collections"""

    def __init__(self, spec: ReportSpec | None = None):
        self.spec = spec or load_spec()

    def select(
        self,
        item_number: str,
        vacancies: list[dict[str, Any]],
        candidates: list[dict[str, Any]],
        raters: list[dict[str, Any]] | None = None,
        generated_at: datetime | None = None,
    ) -> ReportContext:
        """Build the report context of one vacancy"""
        try:
            vacancy = self._find_vacancy(item_number, vacancies)
            selected = self.candidates_for(vacancy, candidates)
            signatories = [r.to_signatory() for r in self.raters_for(vacancy, raters or [])]
        except ValidationError as e:
            raise DataLoadError(LOAD_FAILED_MESSAGE) from e

        return ReportContext(
            vacancy=vacancy,
            candidates=selected,
            signatories=signatories,
            generated_at=generated_at,
        )

    def _find_vacancy(self, item_number: str, vacancies: list[dict[str, Any]]) -> Vacancy:
        for raw in vacancies:
            if raw.get("itemNumber", raw.get("item_number")) == item_number:
                return Vacancy.model_validate(raw)
        raise VacancyNotFoundError(item_number)

    def candidates_for(self, vacancy: Vacancy, candidates: list[dict[str, Any]]) -> list[Candidate]:
        """Candidates of the vacancy sorted by full name"""
        selected = [Candidate.model_validate(raw) for raw in candidates]
        selected = [c for c in selected if c.item_number == vacancy.item_number]
        return sorted(selected, key=lambda c: (c.full_name or "").casefold())

    def raters_for(self, vacancy: Vacancy, raters: list[dict[str, Any]]) -> list[Rater]:
        """Raters covering the vacancy, by role rank then name"""
        selected = [Rater.model_validate(raw) for raw in raters]
        selected = [r for r in selected if r.user_type == "rater" and r.covers(vacancy)]
        return sorted(selected, key=lambda r: (self.spec.role_rank(r.rater_type), (r.name or "").casefold()))
