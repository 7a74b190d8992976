"""
Report document builder - summary of the deliberation of candidates

Responsibilities:
1. Phase 1 (content): header, title, label block, status sections,
   gender distribution, certifying clause and signatories
2. Phase 2 (footer): revisit every page once the page count is final and
   stamp "Item | Generated" and "Page X of Y"
3. Emit the artifact Summary_<itemNumber>

Depends on:
- layout.columns / layout.signatories / layout.flow
- report_spec.yaml: wording of the document

Test points:
- test_sections_only_when_non_empty: empty buckets leave no title
- test_gender_block: counts, percentages, LGBTQI+ line omitted at zero
- test_footer_on_every_page: "Page i of N" with the final N
- test_footer_restores_font
- test_build_is_idempotent
- test_missing_context_aborts_before_drawing
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ..config import ReportSpec, load_spec
from ..interfaces import IDrawingSurface, PreconditionError, ReportGenerationError
from ..models import CandidateStatus, GenderBucket, GenderStats, ReportContext
from .columns import ListLayoutResult, TwoColumnListLayout
from .derivation import SECTION_ORDER, ReportDerivation, long_timestamp, short_timestamp
from .flow import FOOTER_CLEARANCE, SECTION_TOP_OFFSET, LayoutCursor, PageFlowController, PageGeometry
from .signatories import SignatoryBlockLayout, SignatoryLayoutResult

logger = logging.getLogger(__name__)

MISSING_DATA_MESSAGE = "MISSING VACANCY OR CANDIDATE DATA FOR REPORT GENERATION."
GENERATION_FAILED_MESSAGE = "FAILED TO GENERATE PDF REPORT. PLEASE TRY AGAIN."


@dataclass
class FooterText:
    page: int
    left: str
    right: str


@dataclass
class BuildResult:
    """What the builder drew"""
    page_count: int
    y: float
    sections: dict[CandidateStatus, ListLayoutResult] = field(default_factory=dict)
    gender: GenderStats | None = None
    signatories: SignatoryLayoutResult | None = None
    footers: list[FooterText] = field(default_factory=list)


class ReportDocumentBuilder:
    """Lays out the whole summary report on one drawing surface"""

    HEADER_TOP = 60.0
    HEADER_FONT_SIZES = (11, 10)
    TITLE_FONT_SIZE = 15
    LABEL_FONT_SIZE = 11
    TIMESTAMP_FONT_SIZE = 8
    SECTION_TITLE_FONT_SIZE = 13
    GENDER_FONT_SIZE = 11
    CLAUSE_FONT_SIZE = 9
    NOTED_BY_FONT_SIZE = 11
    FOOTER_FONT_SIZE = 8

    EMPTY_DISQUALIFIED_GAP = 20.0
    GENDER_BLOCK_HEIGHT = 100.0
    SIGNATORY_PAIR_ESTIMATE = 80.0
    SIGNATORY_SECTION_EXTRA = 50.0

    FOOTER_RULE_OFFSET = 30.0
    FOOTER_TEXT_OFFSET = 18.0
    FOOTER_RULE_WIDTH = 0.5

    def __init__(
        self,
        surface: IDrawingSurface,
        spec: ReportSpec | None = None,
        geometry: PageGeometry | None = None,
        font_family: str = "helvetica",
    ):
        self.surface = surface
        self.spec = spec or load_spec()
        self.geometry = geometry or PageGeometry(
            width=surface.page_width,
            height=surface.page_height,
        )
        self.font_family = font_family
        self.derivation = ReportDerivation(self.spec)
        self.flow = PageFlowController(surface, self.geometry)
        self.lists = TwoColumnListLayout(surface, self.flow, self.spec.end_of_list, font_family)
        self.signatory_layout = SignatoryBlockLayout(surface, self.flow, font_family)

    # === Entry points ===

    def generate(self, ctx: ReportContext | None) -> Path:
        """Build and save the report; drawing failures become ReportGenerationError"""
        self.check_preconditions(ctx)
        try:
            self.build(ctx)
            return self.surface.save(ctx.artifact_name)
        except Exception as e:
            logger.exception(f"failed to generate report: {ctx.item_number}")
            raise ReportGenerationError(GENERATION_FAILED_MESSAGE) from e

    def build(self, ctx: ReportContext | None) -> BuildResult:
        """Draw content, then stamp footers on every page"""
        self.check_preconditions(ctx)
        if ctx.generated_at is None:
            ctx.generated_at = datetime.now()
        result = self.draw_content(ctx)
        result.footers = self.stamp_footers(ctx)
        result.page_count = self.surface.page_count()
        return result

    @staticmethod
    def check_preconditions(ctx: ReportContext | None) -> None:
        if ctx is None or ctx.vacancy is None or ctx.candidates is None:
            raise PreconditionError(MISSING_DATA_MESSAGE)

    # === Phase 1: content ===

    def draw_content(self, ctx: ReportContext) -> BuildResult:
        y = self._draw_header(self.HEADER_TOP)
        y = self._draw_label_block(ctx, y)
        y = self._draw_generated_on(ctx, y)

        result = BuildResult(page_count=0, y=y)
        for status, names in self.derivation.status_buckets(ctx).items():
            if names:
                section = self.lists.draw(self.spec.section_title(status), names, y)
                result.sections[status] = section
                y = section.y
            elif status == CandidateStatus.DISQUALIFIED:
                y += self.EMPTY_DISQUALIFIED_GAP

        result.gender = self.derivation.gender_stats(ctx)
        y = self._draw_gender_block(result.gender, y)

        if ctx.signatories:
            y = self._draw_signatory_intro(len(ctx.signatories), y)
            result.signatories = self.signatory_layout.draw(ctx.signatories, y)
            y = result.signatories.y

        result.y = y
        result.page_count = self.surface.page_count()
        return result

    def _draw_header(self, y: float) -> float:
        lines = self.spec.header_lines
        for i, line in enumerate(lines):
            size = self.HEADER_FONT_SIZES[min(i, len(self.HEADER_FONT_SIZES) - 1)]
            self.surface.set_font(self.font_family, "bold", size)
            self.surface.draw_text(line, self.geometry.center_x, y, align="center")
            y += 25 if i == len(lines) - 1 else 15

        self.surface.set_font(self.font_family, "bold", self.TITLE_FONT_SIZE)
        self.surface.draw_text(self.spec.title, self.geometry.center_x, y, align="center")
        self.surface.set_font(self.font_family, "normal", self.TITLE_FONT_SIZE)
        return y + 30

    def _draw_label_block(self, ctx: ReportContext, y: float) -> float:
        """POSITION / ASSIGNMENT / ITEM with values aligned after the widest label"""
        vacancy = ctx.vacancy
        rows = [
            ("POSITION:", vacancy.position or "N/A"),
            ("ASSIGNMENT:", vacancy.assignment or "N/A"),
            ("ITEM:", vacancy.item_number),
        ]

        self.surface.set_font(self.font_family, "bold", self.LABEL_FONT_SIZE)
        label_width = max(self.surface.measure_width(label) for label, _ in rows)
        value_x = self.geometry.margin + label_width + 5

        for i, (label, value) in enumerate(rows):
            self.surface.set_font(self.font_family, "bold", self.LABEL_FONT_SIZE)
            self.surface.draw_text(label, self.geometry.margin, y)
            self.surface.set_font(self.font_family, "normal", self.LABEL_FONT_SIZE)
            self.surface.draw_text(value, value_x, y)
            y += 20 if i == len(rows) - 1 else 15
        return y

    def _draw_generated_on(self, ctx: ReportContext, y: float) -> float:
        self.surface.set_font(self.font_family, "normal", self.TIMESTAMP_FONT_SIZE)
        self.surface.draw_text(f"Generated on: {long_timestamp(ctx.generated_at)}", self.geometry.margin, y)
        return y + 30

    def _draw_gender_block(self, stats: GenderStats, y: float) -> float:
        cursor = LayoutCursor(y, self.geometry)
        self.flow.ensure_room(
            cursor,
            self.GENDER_BLOCK_HEIGHT + FOOTER_CLEARANCE,
            top_offset=SECTION_TOP_OFFSET,
        )

        self.surface.set_font(self.font_family, "bold", self.SECTION_TITLE_FONT_SIZE)
        self.surface.draw_text(self.spec.gender_title, self.geometry.margin, cursor.y)
        cursor.advance(20)

        self.surface.set_font(self.font_family, "normal", self.GENDER_FONT_SIZE)
        x = self.geometry.margin + 20
        for bucket in (GenderBucket.MALE, GenderBucket.FEMALE, GenderBucket.LGBTQI):
            line = stats.line(bucket)
            if bucket == GenderBucket.LGBTQI and line.count == 0:
                continue
            self.surface.draw_text(f"{bucket.value}: {line.count} ({line.percentage}%)", x, cursor.y)
            cursor.advance(15)

        self.surface.draw_text(f"Total: {stats.total}", x, cursor.y)
        return cursor.advance(30)

    def _draw_signatory_intro(self, signatory_count: int, y: float) -> float:
        """Certifying clause and "Noted by:" label"""
        cursor = LayoutCursor(y, self.geometry)
        estimate = (
            math.ceil(signatory_count / 2) * self.SIGNATORY_PAIR_ESTIMATE
            + self.SIGNATORY_SECTION_EXTRA
        )
        self.flow.ensure_room(cursor, estimate + FOOTER_CLEARANCE, top_offset=SECTION_TOP_OFFSET)

        self.surface.set_font(self.font_family, "normal", self.CLAUSE_FONT_SIZE)
        self.surface.draw_text(
            self.spec.certifying_clause,
            self.geometry.margin,
            cursor.y,
            max_width=self.geometry.content_width,
        )
        cursor.advance(25)

        self.surface.set_font(self.font_family, "normal", self.NOTED_BY_FONT_SIZE)
        self.surface.draw_text(self.spec.noted_by, self.geometry.margin, cursor.y)
        return cursor.advance(40)

    # === Phase 2: footers ===

    def stamp_footers(self, ctx: ReportContext) -> list[FooterText]:
        """Overlay the footer on every page; runs after all content pages exist"""
        total = self.surface.page_count()
        left = f"Item: {ctx.item_number} | Generated: {short_timestamp(ctx.generated_at)}"
        footers = []
        for index in range(1, total + 1):
            self.surface.select_page(index)
            footer = FooterText(page=index, left=left, right=f"Page {index} of {total}")
            self._draw_footer(footer)
            footers.append(footer)
        return footers

    def _draw_footer(self, footer: FooterText) -> None:
        family, style, size = self.surface.get_font()
        g = self.geometry

        self.surface.set_font(self.font_family, "normal", self.FOOTER_FONT_SIZE)
        self.surface.set_line_width(self.FOOTER_RULE_WIDTH)
        rule_y = g.height - self.FOOTER_RULE_OFFSET
        self.surface.draw_line(g.margin, rule_y, g.width - g.margin, rule_y)

        text_y = g.height - self.FOOTER_TEXT_OFFSET
        self.surface.draw_text(footer.left, g.margin, text_y)
        self.surface.draw_text(footer.right, g.width - g.margin, text_y, align="right")

        self.surface.set_font(family, style, size)
