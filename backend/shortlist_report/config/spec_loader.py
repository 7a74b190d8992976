"""
Report spec loader - reads config/report_spec.yaml

Responsibilities:
- Parse the YAML wording of the summary report into a typed model
- Provide gender alias and rater role tables
- Cache the loaded result

Usage:
    spec = SpecLoader.load()
    spec.section_title(CandidateStatus.LONG_LIST)
    spec.role_rank("Chairperson")
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from ..models import CandidateStatus, GenderBucket

DEFAULT_SPEC_PATH = Path(__file__).with_name("report_spec.yaml")


class SectionTitles(BaseModel):
    """Titles of the status sections"""
    long_list: str = "LONG LIST CANDIDATES:"
    for_review: str = "CANDIDATES FOR REVIEW:"
    disqualified: str = "DISQUALIFIED CANDIDATES:"


class ReportSpec(BaseModel):
    """Wording and lookup tables of the summary report"""
    schema_version: str = "1.0"

    header_lines: list[str] = Field(default_factory=lambda: [
        "DEPARTMENT OF ENVIRONMENT AND NATURAL RESOURCES (CALABARZON)",
        "REGIONAL HUMAN RESOURCE SELECTION AND PROMOTION BOARD",
    ])
    title: str = "SUMMARY OF THE DELIBERATION OF CANDIDATES FOR LONG LIST"
    sections: SectionTitles = Field(default_factory=SectionTitles)
    end_of_list: str = "*** END OF LIST ***"
    gender_title: str = "GENDER DISTRIBUTION:"
    certifying_clause: str = (
        "This certifies that the details contained herein have been "
        "thoroughly reviewed and validated."
    )
    noted_by: str = "Noted by:"

    # Raw gender value (case-insensitive) -> bucket
    gender_aliases: dict[str, GenderBucket] = Field(default_factory=lambda: {
        "male": GenderBucket.MALE,
        "male/lalaki": GenderBucket.MALE,
        "female": GenderBucket.FEMALE,
        "female/babae": GenderBucket.FEMALE,
        "lgbtqi+": GenderBucket.LGBTQI,
    })

    # Signatory order of the "Noted by" section
    rater_role_order: list[str] = Field(default_factory=lambda: [
        "Chairperson",
        "Vice-Chairperson",
        "End-User",
        "Regular Member",
        "DENREU",
        "Gender and Development",
    ])

    # === Convenience accessors ===

    def section_title(self, status: CandidateStatus) -> str:
        """Title of a status section"""
        return getattr(self.sections, status.value)

    def gender_bucket(self, gender: str | None) -> GenderBucket:
        """Normalize a raw gender value"""
        if not gender:
            return GenderBucket.OTHER
        return self.gender_aliases.get(gender.strip().lower(), GenderBucket.OTHER)

    def role_rank(self, rater_type: str | None) -> int:
        """Rank of a rater role; unknown roles sort last"""
        if rater_type in self.rater_role_order:
            return self.rater_role_order.index(rater_type)
        return len(self.rater_role_order)


class SpecLoader:
    """Report spec loader (cached)"""

    @classmethod
    @lru_cache(maxsize=4)
    def load(cls, spec_path: str | Path = DEFAULT_SPEC_PATH) -> ReportSpec:
        """Load and cache the report spec"""
        path = Path(spec_path)
        if not path.exists():
            raise FileNotFoundError(f"report spec not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        aliases = data.get("gender_aliases")
        if aliases:
            data["gender_aliases"] = {str(k).lower(): v for k, v in aliases.items()}

        return ReportSpec(**data)

    @classmethod
    def reload(cls, spec_path: str | Path = DEFAULT_SPEC_PATH) -> ReportSpec:
        """Force a reload (clears the cache)"""
        cls.load.cache_clear()
        return cls.load(spec_path)


# Convenience function
def load_spec(spec_path: str | Path = DEFAULT_SPEC_PATH) -> ReportSpec:
    """Load the report spec"""
    return SpecLoader.load(spec_path)
