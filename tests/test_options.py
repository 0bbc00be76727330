"""
Unit tests for the option tables, keyword conversion and status summary.
"""

from models.options import (
    REASON_LABELS,
    ColorMode,
    MediaTracking,
    PrinterReason,
    PrinterState,
    Sides,
    SupplyColor,
    flags_from_keywords,
    flags_to_keywords,
    from_keyword,
    keyword,
    members_in,
)
from models.printer import Supply
from modules.status_view import reason_labels, state_keyword, status_summary, supply_bars


ALL_REASON_LABELS = [
    "Other", "Cover Open", "Tray Missing", "Out of Ink", "Low Ink",
    "Waste Tank Almost Full", "Waste Tank Full", "Media Empty", "Media Jam",
    "Media Low", "Media Needed", "Too Many Jobs", "Out of Toner", "Low Toner",
]


class TestKeywords:
    """Tests for keyword <-> enum conversion."""

    def test_keyword_uses_dashes(self):
        """Member names become lowercase dashed keywords."""
        assert keyword(ColorMode.AUTO_MONOCHROME) == "auto-monochrome"
        assert keyword(Sides.TWO_SIDED_LONG_EDGE) == "two-sided-long-edge"

    def test_from_keyword_known(self):
        assert from_keyword(ColorMode, "process-monochrome") == ColorMode.PROCESS_MONOCHROME
        assert from_keyword(MediaTracking, "gap") == MediaTracking.GAP

    def test_from_keyword_unknown_returns_none(self):
        """Unknown or empty keywords are not errors."""
        assert from_keyword(ColorMode, "sepia") is None
        assert from_keyword(ColorMode, "") is None

    def test_members_in_ascending_order(self):
        supported = ColorMode.MONOCHROME | ColorMode.AUTO | ColorMode.COLOR
        assert members_in(ColorMode, supported) == [
            ColorMode.AUTO, ColorMode.COLOR, ColorMode.MONOCHROME,
        ]

    def test_flags_keywords_both_ways(self):
        value = Sides.ONE_SIDED | Sides.TWO_SIDED_SHORT_EDGE
        keywords = flags_to_keywords(Sides, value)
        assert keywords == ["one-sided", "two-sided-short-edge"]
        assert flags_from_keywords(Sides, keywords + ["bogus"]) == value


class TestReasonLabels:
    """Tests for the printer-state-reasons table."""

    def test_table_order_matches_bit_order(self):
        labels = [REASON_LABELS[reason] for reason in members_in(PrinterReason, 0x3FFF)]
        assert labels == ALL_REASON_LABELS

    def test_every_single_bit(self):
        """Each bit alone maps to exactly its label."""
        for bit, label in enumerate(ALL_REASON_LABELS):
            assert reason_labels(1 << bit) == [label]

    def test_subset_follows_ascending_bits(self):
        reasons = PrinterReason.TONER_LOW | PrinterReason.OTHER | PrinterReason.MEDIA_JAM
        assert reason_labels(reasons) == ["Other", "Media Jam", "Low Toner"]

    def test_no_reasons(self):
        assert reason_labels(0) == []


class TestStatusSummary:
    """Tests for the one-line status summary."""

    def test_single_job_singular(self):
        assert status_summary(PrinterState.IDLE, 0, 1) == "Idle, 1 job"

    def test_plural_jobs(self):
        assert status_summary(PrinterState.PROCESSING, 0, 0) == "Printing, 0 jobs"
        assert status_summary(PrinterState.PROCESSING, 0, 3) == "Printing, 3 jobs"

    def test_reasons_appended(self):
        summary = status_summary(
            PrinterState.STOPPED,
            PrinterReason.MEDIA_EMPTY | PrinterReason.COVER_OPEN,
            2,
        )
        assert summary == "Stopped, 2 jobs, Cover Open, Media Empty"

    def test_state_keyword(self):
        assert state_keyword(PrinterState.PROCESSING) == "processing"


class TestSupplyBars:
    """Tests for supply level bars."""

    def test_bar_widths(self):
        bar = supply_bars([Supply("Black Toner", SupplyColor.BLACK, 80, "toner")])[0]
        assert bar.description == "Black Toner"
        assert bar.background == "#222"
        assert bar.filled_padding == 40.0
        assert bar.empty_padding == 10.0

    def test_no_color_uses_pattern(self):
        bar = supply_bars([Supply("Waste", SupplyColor.NO_COLOR, 0)])[0]
        assert bar.background.startswith("url(")
