"""
Two-column numbered list - status section of the summary report

Responsibilities:
1. Draw the section title (never stranded at the bottom of a page)
2. Split the items into two columns of near-equal count
3. Number items globally (column 2 continues after column 1)
4. Wrap long items with continuation lines indented under the text
5. Close the list with a centered end-of-list marker

Split rule:
    half = ceil(count / 2)
    column 1 <- items[0:half], column 2 <- items[half:count]

Test points:
- test_numbering_is_global: 1..N, column 2 starts at half + 1
- test_wrapped_item_advances_own_column: wrapped item pushes only its column
- test_item_overflow_resets_both_columns: per-item break policy
- test_empty_list_rejected
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from ..interfaces import IDrawingSurface, LayoutError
from .flow import TITLE_LOOKAHEAD, LayoutCursor, PageFlowController


@dataclass
class NumberedEntry:
    """One drawn list item"""
    number: int
    text: str
    column: int
    page: int
    y: float
    lines: list[str] = field(default_factory=list)


@dataclass
class ListLayoutResult:
    """Offset for the next section plus what was drawn"""
    y: float
    entries: list[NumberedEntry] = field(default_factory=list)

    def column(self, index: int) -> list[NumberedEntry]:
        return [e for e in self.entries if e.column == index]


class TwoColumnListLayout:
    """Titled, globally numbered list balanced over two columns"""

    GUTTER = 30.0
    TITLE_FONT_SIZE = 13
    TITLE_GAP = 20.0
    ITEM_FONT_SIZE = 10
    LINE_HEIGHT_FACTOR = 1.2
    ITEM_GAP = 2.0
    END_MARKER_GAP = 10.0
    AFTER_LIST_GAP = 25.0

    def __init__(
        self,
        surface: IDrawingSurface,
        flow: PageFlowController,
        end_marker: str = "*** END OF LIST ***",
        font_family: str = "helvetica",
    ):
        self.surface = surface
        self.flow = flow
        self.geometry = flow.geometry
        self.end_marker = end_marker
        self.font_family = font_family

    @property
    def line_height(self) -> float:
        return self.ITEM_FONT_SIZE * self.LINE_HEIGHT_FACTOR

    @property
    def column_width(self) -> float:
        return self.geometry.column_width(self.GUTTER)

    def draw(
        self,
        title: str,
        items: list[str],
        y: float,
        bold_title: bool = True,
    ) -> ListLayoutResult:
        """Draw the list starting at y; returns the offset for the next section"""
        if not items:
            raise LayoutError(f"empty list passed to two-column layout: {title}")

        cursor = LayoutCursor(y, self.geometry)
        self.flow.ensure_room(cursor, TITLE_LOOKAHEAD)

        self.surface.set_font(self.font_family, "bold" if bold_title else "normal", self.TITLE_FONT_SIZE)
        self.surface.draw_text(title, self.geometry.margin, cursor.y)
        cursor.advance(self.TITLE_GAP)

        self.surface.set_font(self.font_family, "normal", self.ITEM_FONT_SIZE)
        left = LayoutCursor(cursor.y, self.geometry)
        right = LayoutCursor(cursor.y, self.geometry)
        left_x = self.geometry.margin
        right_x = self.geometry.margin + self.column_width + self.GUTTER

        half = math.ceil(len(items) / 2)
        entries = []
        for i in range(half):
            entries.append(self._draw_item(i, items[i], 1, left_x, left, right))
        for i in range(half, len(items)):
            entries.append(self._draw_item(i, items[i], 2, right_x, left, right))

        final_y = max(left.y, right.y) + self.END_MARKER_GAP
        self.surface.draw_text(self.end_marker, self.geometry.center_x, final_y, align="center")
        return ListLayoutResult(y=final_y + self.AFTER_LIST_GAP, entries=entries)

    def _draw_item(
        self,
        index: int,
        text: str,
        column_no: int,
        x: float,
        left: LayoutCursor,
        right: LayoutCursor,
    ) -> NumberedEntry:
        column = left if column_no == 1 else right
        if self.flow.ensure_column_room(column, left, right):
            self.surface.set_font(self.font_family, "normal", self.ITEM_FONT_SIZE)

        prefix = f"{index + 1}. "
        indent = self.surface.measure_width(prefix)
        lines = self.surface.wrap_to_width(text, self.column_width - indent)

        entry = NumberedEntry(
            number=index + 1,
            text=text,
            column=column_no,
            page=self.surface.current_page_index(),
            y=column.y,
            lines=lines,
        )

        self.surface.draw_text(f"{prefix}{lines[0]}", x, column.y)
        for line in lines[1:]:
            column.advance(self.line_height)
            self.surface.draw_text(line, x + indent, column.y)

        column.advance(self.line_height + self.ITEM_GAP)
        return entry
