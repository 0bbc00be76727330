"""
Unit tests for the per-source ready media chooser.
"""

from models.printer import MediaCol
from modules.media_chooser import CUSTOM_SIZE_LABEL, build_media_chooser, build_media_choosers


class TestBuildMediaChooser:
    """Tests for build_media_chooser()."""

    def test_custom_entry_first(self, label_options):
        chooser = build_media_chooser(label_options, 0)
        assert chooser.name == "ready0"
        assert chooser.title == "Main"
        assert chooser.sizes[0].value == "custom"
        assert chooser.sizes[0].label == CUSTOM_SIZE_LABEL
        assert [size.value for size in chooser.sizes[1:]] == [
            "na_index-4x6_4x6in",
            "na_5x7_5x7in",
            "oe_photo-l_3.5x5in",
            "om_small-photo_100x150mm",
        ]

    def test_standard_size_selected(self, label_options):
        chooser = build_media_chooser(label_options, 0)
        assert not chooser.sizes[0].selected
        assert chooser.sizes[1].selected
        assert not chooser.show_custom

    def test_custom_inputs_bounded_by_range(self, label_options):
        chooser = build_media_chooser(label_options, 0)
        assert chooser.custom_width.name == "ready0-custom-width"
        assert (chooser.custom_width.minimum, chooser.custom_width.maximum) == (0.75, 4.25)
        assert (chooser.custom_length.minimum, chooser.custom_length.maximum) == (0.25, 22.0)
        assert chooser.custom_width.value == 4.0
        assert chooser.custom_length.value == 6.0

    def test_unconfigured_source_selects_custom(self, label_options):
        chooser = build_media_chooser(label_options, 1)
        assert chooser.sizes[0].selected
        assert chooser.show_custom
        # Current size 0x0 is clamped up to the minimum
        assert chooser.custom_width.value == 0.75
        assert chooser.custom_length.value == 0.25

    def test_no_custom_range(self, office_options):
        office_options.media = ["iso_a4_210x297mm", "na_legal_8.5x14in"]
        chooser = build_media_chooser(office_options, 0)
        assert not chooser.has_custom
        assert chooser.custom_width is None
        # Current size is not listed, first standard size is selected
        assert chooser.sizes[0].value == "iso_a4_210x297mm"
        assert chooser.sizes[0].selected

    def test_borderless_checkbox(self, label_options, office_options):
        assert build_media_chooser(label_options, 0).borderless is True
        assert build_media_chooser(office_options, 0).borderless is False

        office_options.borderless = False
        assert build_media_chooser(office_options, 0).borderless is None

    def test_offsets_only_when_supported(self, label_options, office_options):
        chooser = build_media_chooser(label_options, 0)
        assert chooser.left_offset is None
        assert chooser.top_offset.name == "ready0-top-offset"
        assert (chooser.top_offset.minimum, chooser.top_offset.maximum) == (-15.0, 15.0)
        assert chooser.has_offsets

        assert not build_media_chooser(office_options, 0).has_offsets

    def test_tracking_only_when_supported(self, label_options, office_options):
        tracking = build_media_chooser(label_options, 0).tracking
        assert [choice.label for choice in tracking] == ["Continuous", "Gap", "Mark"]
        assert tracking[1].selected

        assert build_media_chooser(office_options, 0).tracking == []

    def test_types_always_listed(self, label_options):
        label_options.media_ready[0] = MediaCol(type="unlisted")
        types = build_media_chooser(label_options, 0).types
        assert [choice.label for choice in types] == [
            "Cut Labels", "Continuous Labels", "Continuous Paper",
        ]
        assert not any(choice.selected for choice in types)


class TestBuildMediaChoosers:
    """Tests for build_media_choosers()."""

    def test_manual_source_skipped(self, label_options):
        choosers = build_media_choosers(label_options)
        assert [chooser.name for chooser in choosers] == ["ready0", "ready1"]
