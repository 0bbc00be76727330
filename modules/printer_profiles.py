"""
Printer Profiles Module

Default driver capabilities used when no saved printer state exists.
Ready media starts unconfigured except for the first roll, so a fresh
install shows sensible defaults on every page.
"""

from typing import List

from models.options import (
    ColorMode,
    Content,
    MediaTracking,
    Quality,
    Scaling,
    Sides,
    SupplyColor,
)
from models.printer import DriverOptions, MediaCol, PrinterIdentity, Supply


def default_label_printer() -> DriverOptions:
    """
    Thermal label printer with two rolls and a manual feed slot.

    Supports custom sizes between 0.75x0.25 and 4.25x22 inches.
    """
    first_roll = MediaCol(
        size_name="na_index-4x6_4x6in",
        size_width=10160,
        size_length=15240,
        source="main-roll",
        tracking=MediaTracking.GAP,
        type="labels",
    )
    return DriverOptions(
        color_supported=ColorMode.AUTO | ColorMode.MONOCHROME | ColorMode.AUTO_MONOCHROME,
        color_default=ColorMode.MONOCHROME,
        sides_supported=Sides.ONE_SIDED,
        sides_default=Sides.ONE_SIDED,
        content_default=Content.AUTO,
        scaling_default=Scaling.AUTO,
        tracking_supported=MediaTracking.CONTINUOUS | MediaTracking.GAP | MediaTracking.MARK,
        quality_default=Quality.NORMAL,
        darkness_configured=50,
        darkness_supported=11,
        speed_default=0,
        speed_supported=(2540, 6 * 2540),
        x_default=203,
        y_default=203,
        resolutions=[(203, 203), (300, 300)],
        media=[
            "na_index-4x6_4x6in",
            "na_5x7_5x7in",
            "oe_photo-l_3.5x5in",
            "om_small-photo_100x150mm",
            "roll_max_4.25x22in",
            "roll_min_0.75x0.25in",
        ],
        types=["labels", "labels-continuous", "continuous"],
        sources=["main-roll", "alternate-roll", "manual"],
        media_ready=[first_roll, MediaCol(), MediaCol()],
        media_default=first_roll,
        borderless=True,
        bottom_top=125,
        left_right=125,
        top_offset_supported=(-1500, 1500),
        has_supplies=True,
    )


def default_identity(printer_name: str) -> PrinterIdentity:
    return PrinterIdentity(dns_sd_name=printer_name)


def default_supplies() -> List[Supply]:
    return [
        Supply("Black Ribbon", SupplyColor.BLACK, 80, "ribbon"),
        Supply("Labels", SupplyColor.NO_COLOR, 35, "media"),
    ]

