"""
pytest configuration and shared fixtures

Usage:
    def test_something(fixed_surface, sample_context):
        ReportDocumentBuilder(fixed_surface).build(sample_context)
"""

from __future__ import annotations

import json
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Generator

import pytest

from shortlist_report.config import ReportSpec, RuntimeConfig, load_spec
from shortlist_report.layout import PageFlowController, PageGeometry, PdfSurface
from shortlist_report.models import (
    Candidate,
    CandidateStatus,
    ReportContext,
    Signatory,
    Vacancy,
)

LONG_LIST_NAMES = ["Alice Cruz", "Bob Dela Cruz", "Carlo Reyes", "Diana Santos", "Elmer Tan"]
GENERATED_AT = datetime(2026, 10, 16, 15, 4, 5)


class FixedWidthSurface(PdfSurface):
    """PdfSurface with predictable metrics: every glyph is half the font size wide"""

    def measure_width(self, text: str) -> float:
        return len(text) * self.get_font()[2] * 0.5

    def wrap_to_width(self, text: str, max_width: float) -> list[str]:
        words = text.split()
        if not words:
            return [""]
        lines = []
        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if self.measure_width(candidate) <= max_width:
                current = candidate
            else:
                lines.append(current)
                current = word
        lines.append(current)
        return lines


# ============================================================================
# Config fixtures
# ============================================================================

@pytest.fixture(scope="session")
def spec() -> ReportSpec:
    """Packaged report spec (session cached)"""
    return load_spec()


@pytest.fixture
def runtime_config() -> RuntimeConfig:
    return RuntimeConfig()


# ============================================================================
# Surface fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Temporary directory"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def geometry() -> PageGeometry:
    return PageGeometry()


@pytest.fixture
def surface(temp_dir: Path) -> PdfSurface:
    """reportlab surface writing into a temp dir"""
    return PdfSurface(output_dir=temp_dir)


@pytest.fixture
def fixed_surface(temp_dir: Path) -> FixedWidthSurface:
    """Surface with fixed-width metrics for exact wrap assertions"""
    return FixedWidthSurface(output_dir=temp_dir)


@pytest.fixture
def fixed_surface_factory(temp_dir: Path):
    """Fresh fixed-width surfaces sharing one output dir"""
    return lambda: FixedWidthSurface(output_dir=temp_dir)


@pytest.fixture
def flow(fixed_surface: FixedWidthSurface, geometry: PageGeometry) -> PageFlowController:
    return PageFlowController(fixed_surface, geometry)


# ============================================================================
# Data model fixtures
# ============================================================================

@pytest.fixture
def sample_vacancy() -> Vacancy:
    return Vacancy(
        item_number="IT-001",
        position="Information Technology Officer I",
        assignment="Regional Office",
        salary_grade=19,
    )


@pytest.fixture
def long_list_candidates() -> list[Candidate]:
    genders = ["Female", "Male", "Male", "FEMALE/BABAE", "MALE/LALAKI"]
    return [
        Candidate(full_name=name, status=CandidateStatus.LONG_LIST, gender=gender, item_number="IT-001")
        for name, gender in zip(LONG_LIST_NAMES, genders)
    ]


@pytest.fixture
def sample_signatories() -> list[Signatory]:
    return [
        Signatory(name="Ramon Aquino", position="Regional Executive Director", designation="Chairperson"),
        Signatory(name="Liza Mercado", position="Assistant Regional Director", designation="Vice-Chairperson"),
        Signatory(name="Paolo Garcia", position="Chief, Human Resource Section", designation="Regular Member"),
    ]


@pytest.fixture
def sample_context(
    sample_vacancy: Vacancy,
    long_list_candidates: list[Candidate],
    sample_signatories: list[Signatory],
) -> ReportContext:
    """IT-001 with five long-list candidates and three signatories"""
    return ReportContext(
        vacancy=sample_vacancy,
        candidates=long_list_candidates,
        signatories=sample_signatories,
        generated_at=GENERATED_AT,
    )


# ============================================================================
# Raw export fixtures
# ============================================================================

@pytest.fixture
def raw_export() -> dict:
    """Dashboard export as returned by the REST API"""
    return {
        "vacancies": [
            {"itemNumber": "IT-001", "position": "Information Technology Officer I",
             "assignment": "Regional Office", "salaryGrade": 19},
            {"itemNumber": "ENG-002", "position": "Engineer II", "assignment": "PENRO Laguna"},
        ],
        "candidates": [
            {"fullName": "elmer Tan", "itemNumber": "IT-001", "gender": "Male", "status": "long_list"},
            {"fullName": "Alice Cruz", "itemNumber": "IT-001", "gender": "Female", "status": "long_list"},
            {"fullName": "Carlo Reyes", "itemNumber": "IT-001", "gender": "MALE/LALAKI", "status": "for_review"},
            {"fullName": "Bob Dela Cruz", "itemNumber": "IT-001", "gender": "LGBTQI+", "status": "disqualified"},
            {"fullName": "Zed Other", "itemNumber": "ENG-002", "gender": "Male", "status": "long_list"},
        ],
        "users": [
            {"name": "Member Two", "userType": "rater", "raterType": "Regular Member",
             "position": "Planning Officer", "designation": "Member", "assignedVacancies": "all"},
            {"name": "Chair One", "userType": "rater", "raterType": "Chairperson",
             "position": "Regional Executive Director", "designation": "Chair", "assignedVacancies": "all"},
            {"name": "Out Of Scope", "userType": "rater", "raterType": "Vice-Chairperson",
             "assignedVacancies": "specific", "assignedItemNumbers": ["ENG-002"]},
            {"name": "End User", "userType": "rater", "raterType": "End-User",
             "assignedVacancies": "assignment", "assignedAssignment": "Regional Office"},
            {"name": "Secretariat", "userType": "secretariat", "assignedVacancies": "all"},
        ],
    }


@pytest.fixture
def export_file(temp_dir: Path, raw_export: dict) -> Path:
    path = temp_dir / "export.json"
    path.write_text(json.dumps(raw_export), encoding="utf-8")
    return path
