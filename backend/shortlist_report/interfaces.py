"""
Module contracts - abstract interfaces between the report modules

Design rules:
1. Modules talk through these interfaces, not concrete implementations
2. Each interface has explicit input and output types
3. Implementations can be swapped for fakes in unit tests

Usage:
    from shortlist_report.interfaces import IDrawingSurface

    class MySurface(IDrawingSurface):
        def new_page(self) -> None:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ReportContext


# ============================================================================
# Drawing surface
# ============================================================================

class IDrawingSurface(ABC):
    """Abstract canvas the layout engine draws on

    Coordinates use a top-left origin: x grows to the right and y grows
    downward. The y of a text call is the baseline of its first line.
    """

    page_width: float
    page_height: float

    @abstractmethod
    def new_page(self) -> None:
        """Append a blank page and make it the drawing target"""
        ...

    @abstractmethod
    def current_page_index(self) -> int:
        """1-based index of the page currently being drawn on"""
        ...

    @abstractmethod
    def page_count(self) -> int:
        """Number of pages created so far"""
        ...

    @abstractmethod
    def select_page(self, index: int) -> None:
        """
        Revisit an existing page to overlay content

        Args:
            index: 1-based page index

        Raises:
            LayoutError: page does not exist
        """
        ...

    @abstractmethod
    def set_font(self, family: str, style: str, size: float) -> None:
        """Set the active font (style: normal/bold/italic/bolditalic)"""
        ...

    @abstractmethod
    def get_font(self) -> tuple[str, str, float]:
        """Active font as (family, style, size)"""
        ...

    @abstractmethod
    def measure_width(self, text: str) -> float:
        """Width of a string in points with the active font"""
        ...

    @abstractmethod
    def wrap_to_width(self, text: str, max_width: float) -> list[str]:
        """
        Wrap a string to a maximum width with the active font

        Returns:
            Wrapped line segments; an empty string yields one blank line
        """
        ...

    @abstractmethod
    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        align: str = "left",
        max_width: float | None = None,
    ) -> None:
        """Place text at (x, y); with max_width the text is wrapped first"""
        ...

    @abstractmethod
    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """Draw a straight line"""
        ...

    @abstractmethod
    def set_line_width(self, width: float) -> None:
        """Set stroke width for subsequent lines"""
        ...

    @abstractmethod
    def save(self, name: str) -> Path:
        """
        Emit the final artifact

        Args:
            name: artifact name without extension

        Returns:
            Path of the written file
        """
        ...


# ============================================================================
# Data sources
# ============================================================================

class IReportDataSource(ABC):
    """Resolves the inputs of one report run"""

    @abstractmethod
    def load(self, item_number: str) -> ReportContext:
        """
        Load vacancy, candidates and signatories for an item number

        Args:
            item_number: vacancy item number (exact match)

        Returns:
            Report context with candidates filtered and sorted, and
            signatories ranked

        Raises:
            DataLoadError: upstream fetch failed
            VacancyNotFoundError: no vacancy with this item number
        """
        ...


# ============================================================================
# Exceptions
# ============================================================================

class ShortlistReportError(Exception):
    """Base exception"""
    pass


class PreconditionError(ShortlistReportError):
    """Report inputs missing, raised before any drawing"""
    pass


class VacancyNotFoundError(PreconditionError):
    """Vacancy not found for the given item number"""

    def __init__(self, item_number: str):
        self.item_number = item_number
        super().__init__("VACANCY NOT FOUND FOR THE SPECIFIED ITEM NUMBER")


class DataLoadError(ShortlistReportError):
    """Upstream vacancy/candidate fetch failed"""
    pass


class LayoutError(ShortlistReportError):
    """Invalid layout input"""
    pass


class ReportGenerationError(ShortlistReportError):
    """Drawing failed during content or footer pass"""
    pass
