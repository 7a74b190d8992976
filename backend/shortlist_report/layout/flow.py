"""
Layout cursor and page flow - vertical position tracking and page breaks

Responsibilities:
1. Track the vertical offset of one flow or column (LayoutCursor)
2. Predict overflow before a block is drawn
3. Insert page breaks and reset the cursors of the flow (PageFlowController)

Overflow rule:
    remaining = page_height - margin - y
    overflow  = required > remaining

Test points:
- test_remaining_height: remaining space arithmetic
- test_will_overflow_is_strict: equal height still fits
- test_ensure_room_breaks_page: new page + cursor reset on overflow
- test_reset_both_columns: a break from either column resets both
"""

from __future__ import annotations

from dataclasses import dataclass

from ..interfaces import IDrawingSurface

# Lookaheads (points) checked before drawing a block
TITLE_LOOKAHEAD = 60.0
ITEM_LOOKAHEAD = 80.0
FOOTER_CLEARANCE = 60.0

# Offsets below the top margin after a page break
COLUMN_TOP_OFFSET = 5.0
SECTION_TOP_OFFSET = 10.0


@dataclass(frozen=True)
class PageGeometry:
    """Fixed page size and margin in points"""
    width: float = 576.0
    height: float = 936.0
    margin: float = 50.0

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def center_x(self) -> float:
        return self.width / 2

    def column_width(self, gutter: float) -> float:
        """Width of one of two side-by-side columns"""
        return (self.content_width - gutter) / 2


@dataclass
class LayoutCursor:
    """Vertical drawing offset of one flow or column"""
    y: float
    geometry: PageGeometry

    def remaining_height(self) -> float:
        return self.geometry.height - self.geometry.margin - self.y

    def will_overflow(self, required_height: float) -> bool:
        return required_height > self.remaining_height()

    def advance(self, height: float) -> float:
        self.y += height
        return self.y

    def reset(self, y: float) -> None:
        self.y = y


class PageFlowController:
    """Decides page breaks for cursors drawing on one surface"""

    def __init__(self, surface: IDrawingSurface, geometry: PageGeometry):
        self.surface = surface
        self.geometry = geometry
        self.page_breaks = 0

    def top(self, offset: float) -> float:
        return self.geometry.margin + offset

    def break_page(self, *cursors: LayoutCursor, top_offset: float = COLUMN_TOP_OFFSET) -> None:
        """Start a new page and move every given cursor to its top"""
        self.surface.new_page()
        self.page_breaks += 1
        for cursor in cursors:
            cursor.reset(self.top(top_offset))

    def ensure_room(
        self,
        cursor: LayoutCursor,
        required_height: float,
        top_offset: float = COLUMN_TOP_OFFSET,
    ) -> bool:
        """
        Break the page if a block of required_height does not fit

        Returns:
            True when a page break was taken
        """
        if not cursor.will_overflow(required_height):
            return False
        self.break_page(cursor, top_offset=top_offset)
        return True

    def reset_both_columns(self, left: LayoutCursor, right: LayoutCursor) -> None:
        """Two-column break policy: both columns restart at the top of the new page

        Applied whichever column overflowed; the taller column's lead on the
        previous page is discarded so both columns stay aligned.
        """
        self.break_page(left, right, top_offset=COLUMN_TOP_OFFSET)

    def ensure_column_room(
        self,
        column: LayoutCursor,
        left: LayoutCursor,
        right: LayoutCursor,
        required_height: float = ITEM_LOOKAHEAD,
    ) -> bool:
        """Per-item check of one column of a two-column flow"""
        if not column.will_overflow(required_height):
            return False
        self.reset_both_columns(left, right)
        return True
