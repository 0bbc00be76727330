"""
Media Chooser

Builds the per-source ready-media editor of the media page: size selector
(with an optional "Custom Size" entry and its width/length inputs),
borderless checkbox, offset inputs, tracking selector and type selector.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from models.options import MediaTracking, keyword, members_in
from models.printer import MANUAL_SOURCE, DriverOptions, MediaCol
from .defaults_view import Choice
from .localize import localize_keyword
from .media_sizes import (
    CUSTOM_SIZE,
    decode_custom_range,
    find_custom_range,
    hmm_to_inches,
    standard_sizes,
)

CUSTOM_SIZE_LABEL = "Custom Size"


@dataclass(frozen=True)
class NumberInput:
    """Bounds and value of a numeric input, already in display units."""

    name: str
    minimum: float
    maximum: float
    value: float


@dataclass(frozen=True)
class MediaChooser:
    """Editor for the media loaded in one source."""

    name: str
    """Field name prefix, "ready<i>"."""

    title: str
    """Localized source name."""

    sizes: List[Choice]
    custom_width: Optional[NumberInput] = None
    custom_length: Optional[NumberInput] = None
    show_custom: bool = False
    """Custom inputs visible (the custom entry is selected)."""

    borderless: Optional[bool] = None
    """None when the driver has no borderless support, else checked state."""

    left_offset: Optional[NumberInput] = None
    top_offset: Optional[NumberInput] = None
    tracking: List[Choice] = field(default_factory=list)
    types: List[Choice] = field(default_factory=list)

    @property
    def has_custom(self) -> bool:
        return self.custom_width is not None

    @property
    def has_offsets(self) -> bool:
        return self.left_offset is not None or self.top_offset is not None


def _size_choices(options: DriverOptions, media: MediaCol, has_custom: bool) -> List[Choice]:
    sizes = standard_sizes(options.media)

    # Custom entry is selected unless the current size is a standard one
    selected = sizes.index(media.size_name) if media.size_name in sizes else None

    choices = []
    if has_custom:
        choices.append(Choice(CUSTOM_SIZE, CUSTOM_SIZE_LABEL, selected is None))
    elif selected is None and sizes:
        selected = 0

    for index, size in enumerate(sizes):
        choices.append(Choice(size, localize_keyword("media", size), index == selected))

    return choices


def _offset_input(name: str, supported, value: int) -> Optional[NumberInput]:
    if not supported[1]:
        return None
    return NumberInput(name, supported[0] / 100.0, supported[1] / 100.0, value / 100.0)


def build_media_chooser(options: DriverOptions, index: int) -> MediaChooser:
    """
    Build the editor for ``options.sources[index]``.

    The custom size entry is offered only when both a custom/roll minimum
    and maximum keyword are advertised; the width/length inputs are
    bounded by that range and pre-filled with the current size clamped
    into it.
    """
    source = options.sources[index]
    media = options.media_ready[index]
    name = f"ready{index}"

    min_size, max_size = find_custom_range(options.media)
    has_custom = bool(min_size and max_size)
    sizes = _size_choices(options, media, has_custom)

    custom_width = custom_length = None
    show_custom = False
    if has_custom:
        size_range = decode_custom_range(min_size, max_size)
        width, length = size_range.clamp(media.size_width, media.size_length)
        custom_width = NumberInput(
            f"{name}-custom-width",
            round(hmm_to_inches(size_range.min_width), 2),
            round(hmm_to_inches(size_range.max_width), 2),
            round(hmm_to_inches(width), 2),
        )
        custom_length = NumberInput(
            f"{name}-custom-length",
            round(hmm_to_inches(size_range.min_length), 2),
            round(hmm_to_inches(size_range.max_length), 2),
            round(hmm_to_inches(length), 2),
        )
        show_custom = sizes[0].selected

    tracking = []
    if options.tracking_supported:
        tracking = [
            Choice(keyword(mode), localize_keyword("media-tracking", keyword(mode)),
                   mode == media.tracking)
            for mode in members_in(MediaTracking, options.tracking_supported)
        ]

    types = [
        Choice(media_type, localize_keyword("media-type", media_type), media_type == media.type)
        for media_type in options.types
    ]

    return MediaChooser(
        name=name,
        title=localize_keyword("media-source", source),
        sizes=sizes,
        custom_width=custom_width,
        custom_length=custom_length,
        show_custom=show_custom,
        borderless=media.is_borderless if options.borderless else None,
        left_offset=_offset_input(f"{name}-left-offset", options.left_offset_supported,
                                  media.left_offset),
        top_offset=_offset_input(f"{name}-top-offset", options.top_offset_supported,
                                 media.top_offset),
        tracking=tracking,
        types=types,
    )


def build_media_choosers(options: DriverOptions) -> List[MediaChooser]:
    """One chooser per source, skipping the manual feed."""
    return [
        build_media_chooser(options, index)
        for index, source in enumerate(options.sources)
        if source != MANUAL_SOURCE
    ]
