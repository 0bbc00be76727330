"""
Printing Defaults Page Helpers

Builds the controls of the printing defaults page from a driver options
snapshot. Templates only loop over the returned choices; all decisions
about which options exist, which is selected and how they are labelled
are made here.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from models.options import (
    HIDDEN_COLOR_MODES,
    MONOCHROME_ONLY_SETS,
    ORIENTATION_GLYPHS,
    ORIENTATION_LABELS,
    ColorMode,
    Content,
    Orientation,
    Quality,
    Scaling,
    Sides,
    flag_members,
    keyword,
    members_in,
)
from models.printer import MANUAL_SOURCE, DriverOptions, MediaCol
from .form_mapper import SPEED_SCALE, format_resolution
from .localize import localize_keyword, localize_media

# Fixed label shown instead of color mode radios for B&W-only printers
MONOCHROME_ONLY_LABEL = "B&W"


@dataclass(frozen=True)
class Choice:
    """One option of a select or radio group."""

    value: str
    label: str
    selected: bool = False
    image: Optional[str] = None
    """Inline SVG (URL-encoded) for image radios."""


@dataclass(frozen=True)
class ColorModeControl:
    """Either a fixed label or a list of selectable color modes."""

    fixed_label: Optional[str] = None
    choices: List[Choice] = field(default_factory=list)


@dataclass(frozen=True)
class ResolutionControl:
    """Fixed text when only one resolution exists, else a select."""

    fixed_label: Optional[str] = None
    choices: List[Choice] = field(default_factory=list)


# =============================================================================
# MEDIA SOURCE
# =============================================================================

def show_source(media_ready: Sequence[MediaCol]) -> bool:
    """
    Whether media labels need the source name to be told apart.

    True when at least two sources hold media of the same non-zero size.
    """
    for index, media in enumerate(media_ready):
        if media.size_width <= 0:
            continue
        for other in media_ready[index + 1:]:
            if media.size_width == other.size_width and media.size_length == other.size_length:
                return True
    return False


def source_choices(options: DriverOptions) -> List[Choice]:
    """Default media choices, one per source except the manual feed."""
    include_source = show_source(options.media_ready)
    choices = []

    for source, media in zip(options.sources, options.media_ready):
        if source == MANUAL_SOURCE:
            continue
        choices.append(Choice(
            value=source,
            label=localize_media(media, include_source),
            selected=source == options.media_default.source,
        ))

    return choices


# =============================================================================
# RADIO GROUPS / SELECTS
# =============================================================================

def orientation_choices(options: DriverOptions) -> List[Choice]:
    return [
        Choice(
            value=str(int(orientation)),
            label=ORIENTATION_LABELS[orientation],
            selected=options.orient_default == orientation,
            image=ORIENTATION_GLYPHS[orientation],
        )
        for orientation in Orientation
    ]


def color_mode_control(options: DriverOptions) -> ColorModeControl:
    """
    Color mode control.

    B&W-only drivers (auto+monochrome, optionally auto-monochrome) get a
    fixed "B&W" label. Otherwise every supported mode except
    auto-monochrome is selectable.
    """
    if options.color_supported in MONOCHROME_ONLY_SETS:
        return ColorModeControl(fixed_label=MONOCHROME_ONLY_LABEL)

    choices = []
    for mode in members_in(ColorMode, options.color_supported):
        if mode & HIDDEN_COLOR_MODES:
            continue
        value = keyword(mode)
        choices.append(Choice(
            value=value,
            label=localize_keyword("print-color-mode", value),
            selected=mode == options.color_default,
        ))

    return ColorModeControl(choices=choices)


def show_sides(options: DriverOptions) -> bool:
    return bool(options.sides_supported) and options.sides_supported != Sides.ONE_SIDED


def sides_choices(options: DriverOptions) -> List[Choice]:
    return [
        Choice(keyword(sides), localize_keyword("sides", keyword(sides)),
               sides == options.sides_default)
        for sides in members_in(Sides, options.sides_supported)
    ]


def quality_choices(options: DriverOptions) -> List[Choice]:
    return [
        Choice(keyword(quality), localize_keyword("print-quality", keyword(quality)),
               quality == options.quality_default)
        for quality in Quality
    ]


def darkness_choices(options: DriverOptions) -> List[Choice]:
    """Darkness percentages, one per supported step (empty when unsupported)."""
    steps = options.darkness_supported
    if steps <= 0:
        return []
    if steps == 1:
        percents = [0]
    else:
        percents = [100 * step // (steps - 1) for step in range(steps)]

    return [
        Choice(str(percent), f"{percent}%", percent == options.darkness_configured)
        for percent in percents
    ]


def speed_choices(options: DriverOptions) -> List[Choice]:
    """
    Speed choices: "Auto" (0) plus every whole inch/sec in the supported
    range. Empty when speed is not adjustable.
    """
    low, high = options.speed_supported
    if not high:
        return []

    choices = [Choice("0", "Auto", options.speed_default == 0)]
    for speed in range(low, high + 1, SPEED_SCALE):
        if speed <= 0:
            continue
        inches = speed // SPEED_SCALE
        unit = "inches" if speed >= 2 * SPEED_SCALE else "inch"
        choices.append(Choice(str(inches), f"{inches} {unit}/sec",
                              speed == options.speed_default))
    return choices


def content_choices(options: DriverOptions) -> List[Choice]:
    supported = options.content_supported or sum(flag_members(Content))
    return [
        Choice(keyword(content), localize_keyword("print-content-optimize", keyword(content)),
               content == options.content_default)
        for content in members_in(Content, supported)
    ]


def scaling_choices(options: DriverOptions) -> List[Choice]:
    supported = options.scaling_supported or sum(flag_members(Scaling))
    return [
        Choice(keyword(scaling), localize_keyword("print-scaling", keyword(scaling)),
               scaling == options.scaling_default)
        for scaling in members_in(Scaling, supported)
    ]


def resolution_control(options: DriverOptions) -> ResolutionControl:
    if len(options.resolutions) == 1:
        x_res, y_res = options.resolutions[0]
        return ResolutionControl(fixed_label=format_resolution(x_res, y_res))

    return ResolutionControl(choices=[
        Choice(
            format_resolution(x_res, y_res),
            format_resolution(x_res, y_res),
            options.x_default == x_res and options.y_default == y_res,
        )
        for x_res, y_res in options.resolutions
    ])


# =============================================================================
# PAGE MODEL
# =============================================================================

@dataclass(frozen=True)
class DefaultsPage:
    """Everything the printing defaults template needs."""

    sources: List[Choice]
    orientations: List[Choice]
    color_mode: ColorModeControl
    sides: List[Choice]
    qualities: List[Choice]
    darkness: List[Choice]
    speeds: List[Choice]
    contents: List[Choice]
    scalings: List[Choice]
    resolution: ResolutionControl


def build_defaults_page(options: DriverOptions) -> DefaultsPage:
    return DefaultsPage(
        sources=source_choices(options),
        orientations=orientation_choices(options),
        color_mode=color_mode_control(options),
        sides=sides_choices(options) if show_sides(options) else [],
        qualities=quality_choices(options),
        darkness=darkness_choices(options),
        speeds=speed_choices(options),
        contents=content_choices(options),
        scalings=scaling_choices(options),
        resolution=resolution_control(options),
    )
