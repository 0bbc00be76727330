"""
Keyword Localization Module

Maps IPP keywords (media sizes, types, sources, tracking, color modes,
sides, ...) to the English labels shown in the admin pages.

Usage:
    from modules.localize import localize_keyword, localize_media

    localize_keyword("media", "na_letter_8.5x11in")   # "US Letter"
    localize_keyword("media-type", "photographic-glossy")  # "Glossy Photo Paper"
    localize_media(media_col, include_source=True)
"""

from typing import Dict

from models.printer import MediaCol
from .media_sizes import HMM_PER_INCH, HMM_PER_MM, lookup_media

# Labels that do not depend on the attribute
_FIXED_LABELS: Dict[str, str] = {
    "bi-level": "B&W (no shading)",
    "monochrome": "B&W",
    "main-roll": "Main",
    "alternate-roll": "Alternate",
    "labels": "Cut Labels",
    "labels-continuous": "Continuous Labels",
    "stationery": "Plain Paper",
    "stationery-letterhead": "Letterhead",
    "one-sided": "Off",
    "two-sided-long-edge": "On (Portrait)",
    "two-sided-short-edge": "On (Landscape)",
}

# PPD names with a friendlier label; A4/A5/A6 display as-is
_SIZE_LABELS: Dict[str, str] = {
    "Letter": "US Letter",
    "Legal": "US Legal",
    "Env10": "#10 Envelope",
    "A4": "A4",
    "A5": "A5",
    "A6": "A6",
    "EnvDL": "DL Envelope",
}

UNKNOWN = "Unknown"


def _title_keyword(keyword: str) -> str:
    """"auto-monochrome" -> "Auto Monochrome"."""
    if not keyword:
        return keyword

    chars = [keyword[0].upper()]
    capitalize_next = False
    for index, char in enumerate(keyword[1:], start=1):
        if char == "-" and index + 1 < len(keyword):
            chars.append(" ")
            capitalize_next = True
        elif capitalize_next:
            chars.append(char.upper())
            capitalize_next = False
        else:
            chars.append(char)
    return "".join(chars)


def _localize_size(keyword: str) -> str:
    media = lookup_media(keyword)
    if media is None:
        return _title_keyword(keyword)

    if media.ppd in _SIZE_LABELS:
        return _SIZE_LABELS[media.ppd]

    if media.width % HMM_PER_MM == 0 and media.width % HMM_PER_INCH != 0:
        return f"{media.width // HMM_PER_MM} x {media.length // HMM_PER_MM}mm"

    return f'{media.width / HMM_PER_INCH:g} x {media.length / HMM_PER_INCH:g}"'


def localize_keyword(attrname: str, keyword: str) -> str:
    """
    Get the display label for a keyword.

    Args:
        attrname: IPP attribute the keyword belongs to ("media",
            "media-type", "media-source", "print-color-mode", ...)
        keyword: Keyword value

    Returns:
        Human-readable label
    """
    if keyword in _FIXED_LABELS:
        return _FIXED_LABELS[keyword]

    if attrname == "media-type" and keyword == "continuous":
        return "Continuous Paper"

    if keyword.startswith("photographic"):
        if keyword[12:13] == "-" and len(keyword) > 13:
            return f"{keyword[13].upper()}{keyword[14:]} Photo Paper"
        return "Photo Paper"

    if attrname == "media":
        return _localize_size(keyword)

    return _title_keyword(keyword)


def localize_media(media: MediaCol, include_source: bool = False) -> str:
    """
    Describe a media entry as "<size> (<type>)", optionally "from <source>".

    Missing size or type are shown as "Unknown".
    """
    size = localize_keyword("media", media.size_name) if media.size_name else UNKNOWN
    media_type = localize_keyword("media-type", media.type) if media.type else UNKNOWN

    if include_source:
        source = localize_keyword("media-source", media.source)
        return f"{size} ({media_type}) from {source}"

    return f"{size} ({media_type})"
