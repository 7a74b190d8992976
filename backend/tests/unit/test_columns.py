"""
Two-column list layout unit tests

Run: pytest backend/tests/unit/test_columns.py -v
"""

import math

import pytest

from shortlist_report.interfaces import LayoutError
from shortlist_report.layout import PageFlowController, TwoColumnListLayout

LONG_LIST_NAMES = ["Alice Cruz", "Bob Dela Cruz", "Carlo Reyes", "Diana Santos", "Elmer Tan"]

# 8 ten-letter words wrap to three lines in a column (41 glyphs per line)
THREE_LINE_NAME = " ".join(["Abcdefghij"] * 8)


@pytest.fixture
def layout(fixed_surface, flow: PageFlowController) -> TwoColumnListLayout:
    return TwoColumnListLayout(fixed_surface, flow)


class TestNumbering:
    """Global numbering across columns"""

    @pytest.mark.parametrize("count", [1, 2, 5, 8, 11])
    def test_numbering_is_global(self, layout: TwoColumnListLayout, count: int):
        items = [f"Candidate {i:02d}" for i in range(count)]
        result = layout.draw("LONG LIST CANDIDATES:", items, 100)

        half = math.ceil(count / 2)
        assert [e.number for e in result.entries] == list(range(1, count + 1))
        assert len(result.column(1)) == half
        if count > 1:
            assert result.column(2)[0].number == half + 1

    def test_scenario_five_names(self, layout: TwoColumnListLayout, fixed_surface):
        layout.draw("LONG LIST CANDIDATES:", LONG_LIST_NAMES, 100)
        page = fixed_surface.pages[0]

        for text in ("1. Alice Cruz", "2. Bob Dela Cruz", "3. Carlo Reyes"):
            assert page.find(text).x == 50
        for text in ("4. Diana Santos", "5. Elmer Tan"):
            assert page.find(text).x == 50 + 223 + 30

        # Column 2 starts level with column 1
        assert page.find("4. Diana Santos").y == page.find("1. Alice Cruz").y

    def test_title_and_end_marker(self, layout: TwoColumnListLayout, fixed_surface):
        result = layout.draw("LONG LIST CANDIDATES:", LONG_LIST_NAMES, 100)
        page = fixed_surface.pages[0]

        assert page.find("LONG LIST CANDIDATES:").y == 100
        # items from 120; column 1 holds three items of 14pt
        marker = page.find("*** END OF LIST ***")
        assert marker.align == "center"
        assert marker.x == 288
        assert marker.y == pytest.approx(120 + 3 * 14 + 10)
        assert result.y == pytest.approx(marker.y + 25)

    def test_empty_list_rejected(self, layout: TwoColumnListLayout, fixed_surface):
        with pytest.raises(LayoutError):
            layout.draw("LONG LIST CANDIDATES:", [], 100)
        assert fixed_surface.pages[0].ops == []


class TestWrapping:
    """Wrapped items"""

    def test_wrapped_item_advances_own_column(self, layout: TwoColumnListLayout):
        items = [THREE_LINE_NAME, "Short Name", "Other", "Fourth"]
        result = layout.draw("LONG LIST CANDIDATES:", items, 100)
        first, second, third, fourth = result.entries

        assert len(first.lines) == 3
        assert second.y - first.y == pytest.approx(3 * 12 + 2)

        # Opposite column unaffected
        assert third.y == first.y
        assert fourth.y - third.y == pytest.approx(12 + 2)

    def test_continuation_lines_indented(self, layout: TwoColumnListLayout, fixed_surface):
        result = layout.draw("LONG LIST CANDIDATES:", [THREE_LINE_NAME, "Other"], 100)
        entry = result.entries[0]
        page = fixed_surface.pages[0]

        first = page.find(f"1. {entry.lines[0]}")
        assert first.x == 50
        continuation = [op for op in page.text_ops() if op.text == entry.lines[1]]
        # "1. " is three glyphs of 5pt
        assert continuation[0].x == 50 + 15
        assert continuation[0].y == pytest.approx(first.y + 12)


class TestPageBreaks:
    """Overflow handling"""

    def test_title_not_stranded(self, layout: TwoColumnListLayout, fixed_surface):
        layout.draw("LONG LIST CANDIDATES:", LONG_LIST_NAMES, 936 - 50 - 59)

        assert fixed_surface.page_count() == 2
        assert fixed_surface.pages[0].ops == []
        assert fixed_surface.pages[1].find("LONG LIST CANDIDATES:").y == 55

    def test_item_overflow_resets_both_columns(self, layout: TwoColumnListLayout, fixed_surface):
        items = [f"Candidate {i:03d}" for i in range(150)]
        result = layout.draw("LONG LIST CANDIDATES:", items, 100)
        entries = result.entries

        # Column 1: items start at 120, 14pt apart; item 51 is past the lookahead
        assert entries[49].page == 1
        assert entries[50].page == 2
        assert entries[50].y == 55

        # Column 2 begins at the top of the page column 1 broke onto
        assert entries[75].number == 76
        assert entries[75].page == 2
        assert entries[75].y == 55

        # Column 2's own break moves the rest to page 3
        assert entries[128].page == 2
        assert entries[129].page == 3
        assert entries[129].y == 55
        assert fixed_surface.page_count() == 3

        # Both cursors were reset by that break, so the marker follows column 2
        assert result.y == pytest.approx(55 + 21 * 14 + 10 + 25)

    def test_font_restored_after_break(self, layout: TwoColumnListLayout, fixed_surface):
        items = [f"Candidate {i:03d}" for i in range(120)]
        layout.draw("LONG LIST CANDIDATES:", items, 100)
        for page in fixed_surface.pages:
            for op in page.text_ops():
                if op.text[0].isdigit():
                    assert op.size == 10
