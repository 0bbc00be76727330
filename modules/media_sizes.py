"""
Media Size Registry and Resolver

Resolves PWG media size keywords to physical dimensions and handles the
custom-size range advertised by drivers.

PWG self-describing names have the form ``<class>_<name>_<W>x<L><unit>``
(e.g. ``na_letter_8.5x11in``, ``iso_a4_210x297mm``). Well-known sizes are
listed in a table that also carries the legacy/PPD name used for display;
any other well-formed name is decoded from its dimensions.

Drivers advertise a custom size range with a pair of keywords such as
``custom_min_1x1in`` / ``custom_max_4.25x22in`` or ``roll_min_...`` /
``roll_max_...``.

All dimensions are integers in hundredths of millimeters.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Sequence, Tuple

from logging_config import get_logger

logger = get_logger(__name__)

HMM_PER_INCH = 2540
HMM_PER_MM = 100

# Size selector value for a custom size
CUSTOM_SIZE = "custom"

# Prefixes of keywords that describe a custom size range rather than a size
CUSTOM_PREFIXES = ("custom_", "roll_")

# Custom range used when a min/max keyword cannot be decoded
FALLBACK_MIN = (1 * HMM_PER_INCH, 1 * HMM_PER_INCH)
FALLBACK_MAX = (9 * HMM_PER_INCH, 22 * HMM_PER_INCH)

_DIMENSIONS_RE = re.compile(r"^([0-9]+(?:\.[0-9]*)?)x([0-9]+(?:\.[0-9]*)?)(in|mm)$")


@dataclass(frozen=True)
class PwgMedia:
    """A media size from the registry."""

    pwg: str
    """PWG self-describing name."""

    ppd: Optional[str]
    """Legacy/PPD name, None for sizes decoded from their name only."""

    width: int
    length: int


_STANDARD_SIZES = (
    PwgMedia("na_letter_8.5x11in", "Letter", 21590, 27940),
    PwgMedia("na_legal_8.5x14in", "Legal", 21590, 35560),
    PwgMedia("na_executive_7.25x10.5in", "Executive", 18415, 26670),
    PwgMedia("na_ledger_11x17in", "Tabloid", 27940, 43180),
    PwgMedia("na_foolscap_8.5x13in", "FanFoldGermanLegal", 21590, 33020),
    PwgMedia("na_govt-letter_8x10in", "8x10", 20320, 25400),
    PwgMedia("na_index-3x5_3x5in", "3x5", 7620, 12700),
    PwgMedia("na_index-4x6_4x6in", "4x6", 10160, 15240),
    PwgMedia("na_5x7_5x7in", "5x7", 12700, 17780),
    PwgMedia("na_number-10_4.125x9.5in", "Env10", 10477, 24130),
    PwgMedia("na_monarch_3.875x7.5in", "EnvMonarch", 9842, 19050),
    PwgMedia("oe_photo-l_3.5x5in", "3.5x5", 8890, 12700),
    PwgMedia("iso_a3_297x420mm", "A3", 29700, 42000),
    PwgMedia("iso_a4_210x297mm", "A4", 21000, 29700),
    PwgMedia("iso_a5_148x210mm", "A5", 14800, 21000),
    PwgMedia("iso_a6_105x148mm", "A6", 10500, 14800),
    PwgMedia("iso_b5_176x250mm", "ISOB5", 17600, 25000),
    PwgMedia("jis_b5_182x257mm", "B5", 18200, 25700),
    PwgMedia("iso_c5_162x229mm", "EnvC5", 16200, 22900),
    PwgMedia("iso_dl_110x220mm", "EnvDL", 11000, 22000),
    PwgMedia("jpn_hagaki_100x148mm", "Postcard", 10000, 14800),
    PwgMedia("om_small-photo_100x150mm", "100x150mm", 10000, 15000),
)

_REGISTRY: Dict[str, PwgMedia] = {media.pwg: media for media in _STANDARD_SIZES}


# =============================================================================
# UNIT CONVERSION
# =============================================================================

def inches_to_hmm(inches: float) -> int:
    """Inches to hundredths of mm, truncated."""
    return int(HMM_PER_INCH * inches)


def hmm_to_inches(hmm: int) -> float:
    return hmm / HMM_PER_INCH


def _scan_measurement(text: str, per_unit: int) -> int:
    return int(Decimal(text) * per_unit)


# =============================================================================
# LOOKUP
# =============================================================================

def lookup_media(name: str) -> Optional[PwgMedia]:
    """
    Resolve a PWG size keyword.

    Args:
        name: PWG self-describing media name

    Returns:
        PwgMedia from the table, a PwgMedia decoded from the name's
        dimensions (``ppd`` None), or None if the name is not well formed
    """
    if not name:
        return None

    media = _REGISTRY.get(name)
    if media is not None:
        return media

    prefix, sep, dimensions = name.rpartition("_")
    if not sep or "_" not in prefix:
        return None

    match = _DIMENSIONS_RE.match(dimensions)
    if not match:
        return None

    per_unit = HMM_PER_INCH if match.group(3) == "in" else HMM_PER_MM
    try:
        width = _scan_measurement(match.group(1), per_unit)
        length = _scan_measurement(match.group(2), per_unit)
    except InvalidOperation:
        return None

    if width <= 0 or length <= 0:
        return None

    return PwgMedia(name, None, width, length)


# =============================================================================
# CUSTOM SIZES
# =============================================================================

def is_custom_keyword(name: str) -> bool:
    """True for custom_/roll_ keywords, which are not selectable sizes."""
    return name.startswith(CUSTOM_PREFIXES)


def custom_size_name(source: str, width_inches: float, length_inches: float) -> str:
    """Size name synthesized for a custom size loaded in ``source``."""
    return f"custom_{source}_{width_inches:.2f}x{length_inches:.2f}in"


def find_custom_range(media: Sequence[str]) -> Tuple[Optional[str], Optional[str]]:
    """
    Find the custom size range keywords in a driver's size list.

    Returns:
        (min_keyword, max_keyword); either may be None
    """
    min_size = None
    max_size = None

    for name in media:
        if min_size and max_size:
            break
        if not is_custom_keyword(name):
            continue
        if "_min_" in name:
            min_size = name
        elif "_max_" in name:
            max_size = name

    return min_size, max_size


def standard_sizes(media: Sequence[str]) -> List[str]:
    """Selectable size keywords: everything except custom/roll range entries."""
    return [name for name in media if not is_custom_keyword(name)]


@dataclass(frozen=True)
class CustomRange:
    """Custom size bounds in hundredths of mm."""

    min_width: int
    min_length: int
    max_width: int
    max_length: int

    def clamp(self, width: int, length: int) -> Tuple[int, int]:
        """Clamp a size into the range."""
        width = min(max(width, self.min_width), self.max_width)
        length = min(max(length, self.min_length), self.max_length)
        return width, length


def decode_custom_range(min_size: str, max_size: str) -> CustomRange:
    """
    Decode custom size bounds from the min/max keywords.

    A keyword that cannot be decoded falls back to 1x1 inches (min) or
    9x22 inches (max).
    """
    minimum = lookup_media(min_size)
    if minimum is not None:
        min_width, min_length = minimum.width, minimum.length
    else:
        logger.debug(f"Cannot decode custom minimum size {min_size!r}, using fallback")
        min_width, min_length = FALLBACK_MIN

    maximum = lookup_media(max_size)
    if maximum is not None:
        max_width, max_length = maximum.width, maximum.length
    else:
        logger.debug(f"Cannot decode custom maximum size {max_size!r}, using fallback")
        max_width, max_length = FALLBACK_MAX

    return CustomRange(min_width, min_length, max_width, max_length)
