"""
Signatory blocks - "Noted by" pairs of the summary report

Responsibilities:
1. Measure each signatory block (name, wrapped position, wrapped designation)
   before drawing anything
2. Treat a pair of signatories as one unit for page breaks
3. Draw each block centered in its column

Block height:
    name_line + position_lines * 9.6 + 2 + designation_lines * 10.8

Test points:
- test_pair_count: ceil(M / 2) pairs, last pair half empty when M is odd
- test_pair_height_is_max_of_blocks
- test_pair_moves_to_new_page_whole: no name separated from its position
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..interfaces import IDrawingSurface
from ..models import Signatory
from .flow import FOOTER_CLEARANCE, SECTION_TOP_OFFSET, LayoutCursor, PageFlowController


@dataclass
class SignatoryBlock:
    """Measured block of one signatory"""
    signatory: Signatory
    position_lines: list[str]
    designation_lines: list[str]
    height: float

    @property
    def name(self) -> str:
        return self.signatory.name or "N/A"


@dataclass
class SignatoryPair:
    """One row of the "Noted by" section"""
    left: SignatoryBlock
    right: SignatoryBlock | None
    height: float
    page: int
    y: float


@dataclass
class SignatoryLayoutResult:
    y: float
    pairs: list[SignatoryPair] = field(default_factory=list)


class SignatoryBlockLayout:
    """Signatories drawn two per row, measured before drawn"""

    GUTTER = 40.0
    NAME_FONT_SIZE = 11
    POSITION_FONT_SIZE = 8
    DESIGNATION_FONT_SIZE = 9
    LINE_HEIGHT_FACTOR = 1.2
    NAME_TO_POSITION_GAP = 0.0
    POSITION_TO_DESIGNATION_GAP = 2.0
    PAIR_GAP = 40.0
    PAIR_CLEARANCE = 30.0

    def __init__(
        self,
        surface: IDrawingSurface,
        flow: PageFlowController,
        font_family: str = "helvetica",
    ):
        self.surface = surface
        self.flow = flow
        self.geometry = flow.geometry
        self.font_family = font_family

    @property
    def column_width(self) -> float:
        return self.geometry.column_width(self.GUTTER)

    @property
    def column_centers(self) -> tuple[float, float]:
        left = self.geometry.margin + self.column_width / 2
        right = self.geometry.margin + self.column_width + self.GUTTER + self.column_width / 2
        return left, right

    def line_height(self, font_size: float) -> float:
        return font_size * self.LINE_HEIGHT_FACTOR

    def measure(self, signatory: Signatory) -> SignatoryBlock:
        """Wrap position and designation and compute the block height"""
        self.surface.set_font(self.font_family, "normal", self.POSITION_FONT_SIZE)
        position_lines = self.surface.wrap_to_width(signatory.position or "", self.column_width)

        self.surface.set_font(self.font_family, "italic", self.DESIGNATION_FONT_SIZE)
        designation_lines = self.surface.wrap_to_width(signatory.designation or "", self.column_width)

        height = (
            self.line_height(self.NAME_FONT_SIZE)
            + self.NAME_TO_POSITION_GAP
            + len(position_lines) * self.line_height(self.POSITION_FONT_SIZE)
            + self.POSITION_TO_DESIGNATION_GAP
            + len(designation_lines) * self.line_height(self.DESIGNATION_FONT_SIZE)
        )
        return SignatoryBlock(signatory, position_lines, designation_lines, height)

    def draw(self, signatories: list[Signatory], y: float) -> SignatoryLayoutResult:
        """Draw signatories in pairs starting at y, in the given order"""
        cursor = LayoutCursor(y, self.geometry)
        result = SignatoryLayoutResult(y=y)

        for i in range(0, len(signatories), 2):
            blocks = [self.measure(s) for s in signatories[i:i + 2]]
            pair_height = max(block.height for block in blocks)

            self.flow.ensure_room(
                cursor,
                pair_height + self.PAIR_CLEARANCE + FOOTER_CLEARANCE,
                top_offset=SECTION_TOP_OFFSET,
            )

            for block, center_x in zip(blocks, self.column_centers):
                self._draw_block(block, center_x, cursor.y)

            result.pairs.append(SignatoryPair(
                left=blocks[0],
                right=blocks[1] if len(blocks) > 1 else None,
                height=pair_height,
                page=self.surface.current_page_index(),
                y=cursor.y,
            ))
            cursor.advance(pair_height + self.PAIR_GAP)

        result.y = cursor.y
        return result

    def _draw_block(self, block: SignatoryBlock, center_x: float, y: float) -> None:
        self.surface.set_font(self.font_family, "bold", self.NAME_FONT_SIZE)
        self.surface.draw_text(block.name, center_x, y, align="center", max_width=self.column_width)

        text_y = y + self.line_height(self.NAME_FONT_SIZE) + self.NAME_TO_POSITION_GAP
        self.surface.set_font(self.font_family, "normal", self.POSITION_FONT_SIZE)
        for line in block.position_lines:
            if line:
                self.surface.draw_text(line, center_x, text_y, align="center")
            text_y += self.line_height(self.POSITION_FONT_SIZE)

        text_y += self.POSITION_TO_DESIGNATION_GAP
        self.surface.set_font(self.font_family, "italic", self.DESIGNATION_FONT_SIZE)
        for line in block.designation_lines:
            if line:
                self.surface.draw_text(line, center_x, text_y, align="center")
            text_y += self.line_height(self.DESIGNATION_FONT_SIZE)

        self.surface.set_font(self.font_family, "normal", self.DESIGNATION_FONT_SIZE)
