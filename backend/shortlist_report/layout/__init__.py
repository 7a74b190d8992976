"""
Layout engine - paginated summary report

Submodules:
- surface: reportlab-backed drawing surface
- flow: layout cursor and page-break control
- columns: two-column numbered lists
- signatories: "Noted by" signatory pairs
- derivation: status buckets, gender stats, timestamps
- builder: document orchestration and footer pass
"""

from .builder import BuildResult, ReportDocumentBuilder
from .columns import ListLayoutResult, TwoColumnListLayout
from .derivation import ReportDerivation
from .flow import LayoutCursor, PageFlowController, PageGeometry
from .signatories import SignatoryBlockLayout, SignatoryLayoutResult
from .surface import PdfSurface

__all__ = [
    "PdfSurface",
    "PageGeometry",
    "LayoutCursor",
    "PageFlowController",
    "TwoColumnListLayout",
    "ListLayoutResult",
    "SignatoryBlockLayout",
    "SignatoryLayoutResult",
    "ReportDerivation",
    "ReportDocumentBuilder",
    "BuildResult",
]
