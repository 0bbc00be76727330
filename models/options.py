"""
Option tables for printer capabilities and state.

Capability sets (color mode, sides, content optimization, scaling, media
tracking, state reasons) are ``IntFlag`` types: a driver's supported set is
a combination of members and membership is tested with ``in``. The
numeric values match the IPP/driver bit assignments so persisted state
stays stable.

The fixed display tables below are built once at import time and are
read-only. Wherever a table is iterated for display, iteration follows
ascending member value.
"""

from __future__ import annotations

from enum import IntEnum, IntFlag
from types import MappingProxyType
from typing import List, Mapping, Optional, Type, TypeVar

F = TypeVar("F", bound=IntFlag)
E = TypeVar("E", bound=IntEnum)


# =============================================================================
# CAPABILITY FLAGS
# =============================================================================

class ColorMode(IntFlag):
    """print-color-mode values."""

    AUTO = 0x01
    AUTO_MONOCHROME = 0x02
    BI_LEVEL = 0x04
    COLOR = 0x08
    MONOCHROME = 0x10
    PROCESS_MONOCHROME = 0x20


class Content(IntFlag):
    """print-content-optimize values."""

    AUTO = 0x01
    GRAPHIC = 0x02
    PHOTO = 0x04
    TEXT = 0x08
    TEXT_AND_GRAPHIC = 0x10


class Scaling(IntFlag):
    """print-scaling values."""

    AUTO = 0x01
    AUTO_FIT = 0x02
    FILL = 0x04
    FIT = 0x08
    NONE = 0x10


class Sides(IntFlag):
    """sides values."""

    ONE_SIDED = 0x01
    TWO_SIDED_LONG_EDGE = 0x02
    TWO_SIDED_SHORT_EDGE = 0x04


class MediaTracking(IntFlag):
    """media-tracking values."""

    CONTINUOUS = 0x01
    GAP = 0x02
    MARK = 0x04
    WEB = 0x08


class PrinterReason(IntFlag):
    """printer-state-reasons bits."""

    OTHER = 0x0001
    COVER_OPEN = 0x0002
    INPUT_TRAY_MISSING = 0x0004
    MARKER_SUPPLY_EMPTY = 0x0008
    MARKER_SUPPLY_LOW = 0x0010
    MARKER_WASTE_ALMOST_FULL = 0x0020
    MARKER_WASTE_FULL = 0x0040
    MEDIA_EMPTY = 0x0080
    MEDIA_JAM = 0x0100
    MEDIA_LOW = 0x0200
    MEDIA_NEEDED = 0x0400
    SPOOL_AREA_FULL = 0x0800
    TONER_EMPTY = 0x1000
    TONER_LOW = 0x2000


# "B&W"-only drivers: the color mode control becomes a fixed label
MONOCHROME_ONLY_SETS = (
    ColorMode.AUTO | ColorMode.MONOCHROME,
    ColorMode.AUTO | ColorMode.MONOCHROME | ColorMode.AUTO_MONOCHROME,
)

# Never offered as a selectable default
HIDDEN_COLOR_MODES = ColorMode.AUTO_MONOCHROME


# =============================================================================
# ORDINAL ENUMS
# =============================================================================

class PrinterState(IntEnum):
    """printer-state values."""

    IDLE = 3
    PROCESSING = 4
    STOPPED = 5


class Quality(IntEnum):
    """print-quality values."""

    DRAFT = 3
    NORMAL = 4
    HIGH = 5


class Orientation(IntEnum):
    """orientation-requested values."""

    PORTRAIT = 3
    LANDSCAPE = 4
    REVERSE_LANDSCAPE = 5
    REVERSE_PORTRAIT = 6
    NONE = 7


class SupplyColor(IntEnum):
    """Marker colors used to paint supply level bars."""

    NO_COLOR = 0
    BLACK = 1
    CYAN = 2
    GRAY = 3
    GREEN = 4
    LIGHT_CYAN = 5
    LIGHT_GRAY = 6
    LIGHT_MAGENTA = 7
    MAGENTA = 8
    ORANGE = 9
    VIOLET = 10
    YELLOW = 11


# =============================================================================
# DISPLAY TABLES
# =============================================================================

REASON_LABELS: Mapping[PrinterReason, str] = MappingProxyType({
    PrinterReason.OTHER: "Other",
    PrinterReason.COVER_OPEN: "Cover Open",
    PrinterReason.INPUT_TRAY_MISSING: "Tray Missing",
    PrinterReason.MARKER_SUPPLY_EMPTY: "Out of Ink",
    PrinterReason.MARKER_SUPPLY_LOW: "Low Ink",
    PrinterReason.MARKER_WASTE_ALMOST_FULL: "Waste Tank Almost Full",
    PrinterReason.MARKER_WASTE_FULL: "Waste Tank Full",
    PrinterReason.MEDIA_EMPTY: "Media Empty",
    PrinterReason.MEDIA_JAM: "Media Jam",
    PrinterReason.MEDIA_LOW: "Media Low",
    PrinterReason.MEDIA_NEEDED: "Media Needed",
    PrinterReason.SPOOL_AREA_FULL: "Too Many Jobs",
    PrinterReason.TONER_EMPTY: "Out of Toner",
    PrinterReason.TONER_LOW: "Low Toner",
})

STATE_LABELS: Mapping[PrinterState, str] = MappingProxyType({
    PrinterState.IDLE: "Idle",
    PrinterState.PROCESSING: "Printing",
    PrinterState.STOPPED: "Stopped",
})

ORIENTATION_LABELS: Mapping[Orientation, str] = MappingProxyType({
    Orientation.PORTRAIT: "Portrait",
    Orientation.LANDSCAPE: "Landscape",
    Orientation.REVERSE_LANDSCAPE: "Reverse Landscape",
    Orientation.REVERSE_PORTRAIT: "Reverse Portrait",
    Orientation.NONE: "Auto",
})

_GLYPH = (
    "%3csvg xmlns='http://www.w3.org/2000/svg' width='18' height='24' viewBox='0 0 18 24'%3e"
    "%3crect fill='rgba(255,255,255,.5)' stroke='currentColor' stroke-width='1' "
    "x='0' y='0' width='18' height='24' rx='5' ry='5'/%3e"
    "%3ctext x='{x}' y='{y}' font-size='18' fill='currentColor' rotate='{rotate}'%3e{char}%3c/text%3e"
    "%3c/svg%3e"
)

ORIENTATION_GLYPHS: Mapping[Orientation, str] = MappingProxyType({
    Orientation.PORTRAIT: _GLYPH.format(x=3, y=18, rotate=0, char="A"),
    Orientation.LANDSCAPE: _GLYPH.format(x=15, y=19, rotate=-90, char="A"),
    Orientation.REVERSE_LANDSCAPE: _GLYPH.format(x=3, y=6, rotate=90, char="A"),
    Orientation.REVERSE_PORTRAIT: _GLYPH.format(x=15, y=7, rotate=180, char="A"),
    Orientation.NONE: _GLYPH.format(x=5, y=18, rotate=0, char="?"),
})

SUPPLY_BACKGROUNDS: Mapping[SupplyColor, str] = MappingProxyType({
    SupplyColor.NO_COLOR: (
        "url(data:image/png;base64,"
        "iVBORw0KGgoAAAANSUhEUgAAAAwAAAAMCAYAAABWdVznAAAAAXNSR0IArs4c"
        "6QAAAERlWElmTU0AKgAAAAgAAYdpAAQAAAABAAAAGgAAAAAAA6ABAAMAAAAB"
        "AAEAAKACAAQAAAABAAAADKADAAQAAAABAAAADAAAAAATDPpdAAAAaUlEQVQo"
        "FY2R0Q3AIAhEa7siCet0HeKQtGeiwWKR+wH0HWAsRKTHK2ZGWEpExvmJLAuD"
        "LbXWNgHFV7Zzv2sTemHjCsYmS8MfjIbOEMHOsIMnQwYehiwMw6WqNxKr6F/c"
        "oyMYm0yGHYwtHq4fKZD9DnawAAAAAElFTkSuQmCC)"
    ),
    SupplyColor.BLACK: "#222",  # not 100% black for dark mode UI
    SupplyColor.CYAN: "#0FF",
    SupplyColor.GRAY: "#777",
    SupplyColor.GREEN: "#0C0",
    SupplyColor.LIGHT_CYAN: "#7FF",
    SupplyColor.LIGHT_GRAY: "#CCC",
    SupplyColor.LIGHT_MAGENTA: "#FCF",
    SupplyColor.MAGENTA: "#F0F",
    SupplyColor.ORANGE: "#F70",
    SupplyColor.VIOLET: "#707",
    SupplyColor.YELLOW: "#FF0",
})


# =============================================================================
# KEYWORD CONVERSION
# =============================================================================

def keyword(value) -> str:
    """
    IPP keyword for a single enum/flag member.

    ColorMode.AUTO_MONOCHROME -> "auto-monochrome"
    """
    return value.name.lower().replace("_", "-")


def from_keyword(enum_type: Type[E], text: str) -> Optional[E]:
    """
    Look up the member of ``enum_type`` named by an IPP keyword.

    Returns:
        The member, or None when the keyword is unknown
    """
    if not text:
        return None
    return enum_type.__members__.get(text.strip().upper().replace("-", "_"))


def flag_members(flag_type: Type[F]) -> List[F]:
    """Every single-bit member of ``flag_type`` in ascending value order."""
    return sorted(flag_type.__members__.values(), key=int)


def members_in(flag_type: Type[F], supported: int) -> List[F]:
    """Members of ``flag_type`` present in ``supported``, ascending."""
    return [member for member in flag_members(flag_type) if member & supported]


def flags_to_keywords(flag_type: Type[F], value: int) -> List[str]:
    return [keyword(member) for member in members_in(flag_type, value)]


def flags_from_keywords(flag_type: Type[F], keywords) -> F:
    """Combine keyword names into a flag value; unknown keywords are ignored."""
    value = flag_type(0)
    for text in keywords or ():
        member = from_keyword(flag_type, text)
        if member is not None:
            value |= member
    return value
