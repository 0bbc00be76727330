"""
Form-to-Config Mapper

Translates flat form submissions (field name -> string value) into edits
of a printer's configuration. Every function here mutates the object it
is given; callers pass a private copy obtained from the printer service
and commit it afterwards.

Apply policies:
    - Identity (/config) and print defaults (/printing) are partial
      updates: a field that is absent from the submission leaves the
      stored value unchanged.
    - Ready media (/media) is a full rebuild: the ready-media table is
      reset and repopulated only from the source groups present in the
      submission.

Field-level parse failures (unknown keyword, malformed number or
resolution, unmatched source) are not errors. The affected value is left
as it was and the rest of the submission is still applied.

Units at the form boundary are human units (inches, inches/sec, percent).
"""

import html
import math
import re
from copy import deepcopy
from typing import List, Mapping, Optional, Tuple

import bleach

from models.options import (
    ColorMode,
    Content,
    MediaTracking,
    Quality,
    Scaling,
    Sides,
    from_keyword,
)
from models.printer import MANUAL_SOURCE, Contact, DriverOptions, MediaCol, PrinterIdentity
from .media_sizes import CUSTOM_SIZE, HMM_PER_INCH, custom_size_name, inches_to_hmm, lookup_media
from logging_config import get_logger

logger = get_logger(__name__)

FormSubmission = Mapping[str, str]

# print-speed: inches/sec on the form, hundredths of mm/sec stored
SPEED_SCALE = 2540

# ready<i>-top-offset / -left-offset: form value x 100 stored. This is not
# the inch conversion used for speed and must stay x 100.
OFFSET_SCALE = 100

# Storage limits for free-text identity fields
DNS_SD_NAME_MAX = 63
TEXT_FIELD_MAX = 127
CONTACT_FIELD_MAX = 255

# (form field, PrinterIdentity attribute, max length)
_IDENTITY_FIELDS = (
    ("dns_sd_name", "dns_sd_name", DNS_SD_NAME_MAX),
    ("location", "location", TEXT_FIELD_MAX),
    ("organization", "organization", TEXT_FIELD_MAX),
    ("organizational_unit", "org_unit", TEXT_FIELD_MAX),
)

_INT_RE = re.compile(r"^\s*([+-]?\d+)")
_RESOLUTION_RE = re.compile(r"^\s*([+-]?\d+)(?:x([+-]?\d+))?")


# =============================================================================
# VALUE PARSING
# =============================================================================

def _parse_int(value: Optional[str]) -> Optional[int]:
    """Leading integer of ``value`` ("600dpi" -> 600), None if there is none."""
    if value is None:
        return None
    match = _INT_RE.match(value)
    return int(match.group(1)) if match else None


def _parse_float(value: Optional[str], scale: int = 1) -> Optional[float]:
    """
    Parse a decimal form value, None if it is malformed or if
    ``value x scale`` would not be a finite number.
    """
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number * scale) else None


def parse_resolution(value: str) -> Optional[Tuple[int, int]]:
    """
    Parse a printer-resolution form value.

    "300x600dpi" -> (300, 600); "600dpi" -> (600, 600); no leading
    integer -> None.
    """
    match = _RESOLUTION_RE.match(value or "")
    if not match:
        return None

    x_res = int(match.group(1))
    y_res = int(match.group(2)) if match.group(2) is not None else x_res
    return x_res, y_res


def format_resolution(x_res: int, y_res: int) -> str:
    """Inverse of parse_resolution: "600dpi" or "300x600dpi"."""
    if x_res != y_res:
        return f"{x_res}x{y_res}dpi"
    return f"{x_res}dpi"


def _sanitize_text(text: str, max_length: int) -> str:
    """Strip markup and surrounding whitespace, truncate to max_length."""
    text = text.strip()
    if not text:
        return ""
    text = html.unescape(bleach.clean(text, tags=set(), strip=True)).strip()
    return text[:max_length]


def format_geo_uri(latitude: float, longitude: float) -> str:
    return f"geo:{latitude:g},{longitude:g}"


def parse_geo_uri(uri: Optional[str]) -> Tuple[str, str]:
    """
    Split a "geo:<lat>,<lon>" URI into its latitude/longitude strings.

    Returns ("", "") for an unset or malformed URI.
    """
    if not uri or not uri.startswith("geo:"):
        return "", ""

    parts = uri[4:].split(";", 1)[0].split(",")
    if len(parts) < 2:
        return "", ""
    return parts[0], parts[1]


# =============================================================================
# IDENTITY (/config)
# =============================================================================

def apply_config_form(identity: PrinterIdentity, form: FormSubmission) -> List[str]:
    """
    Apply a configuration page submission to a printer identity.

    Scalar fields: present and non-empty overwrites, present and empty
    clears (None), absent leaves the value alone.

    Geo-location is only touched when both geo_location_lat and
    geo_location_lon are present.

    Contact is replaced as a whole when any of contact_name,
    contact_email, contact_telephone is present; sub-fields missing from
    the submission end up blank.

    Args:
        identity: Private copy to mutate
        form: Submitted fields

    Returns:
        Names of the identity attributes that were written
    """
    changed = []

    for field, attribute, max_length in _IDENTITY_FIELDS:
        if field in form:
            setattr(identity, attribute, _sanitize_text(form[field], max_length) or None)
            changed.append(attribute)

    geo_lat = form.get("geo_location_lat")
    geo_lon = form.get("geo_location_lon")
    if geo_lat is not None and geo_lon is not None:
        if geo_lat.strip() and geo_lon.strip():
            latitude = _parse_float(geo_lat)
            longitude = _parse_float(geo_lon)
            if latitude is not None and longitude is not None:
                identity.geo_location = format_geo_uri(latitude, longitude)
                changed.append("geo_location")
            else:
                logger.debug(f"Ignoring unparsable geo-location {geo_lat!r}, {geo_lon!r}")
        else:
            identity.geo_location = None
            changed.append("geo_location")

    contact_name = form.get("contact_name")
    contact_email = form.get("contact_email")
    contact_tel = form.get("contact_telephone")
    if contact_name is not None or contact_email is not None or contact_tel is not None:
        identity.contact = Contact(
            name=_sanitize_text(contact_name or "", CONTACT_FIELD_MAX),
            email=_sanitize_text(contact_email or "", CONTACT_FIELD_MAX),
            telephone=_sanitize_text(contact_tel or "", CONTACT_FIELD_MAX),
        )
        changed.append("contact")

    return changed


# =============================================================================
# PRINT DEFAULTS (/printing)
# =============================================================================

def apply_defaults_form(options: DriverOptions, form: FormSubmission) -> List[str]:
    """
    Apply a printing defaults submission to driver options.

    Every field is optional; a missing or unparsable field leaves the
    stored default unchanged. Values are not range-checked against the
    advertised capabilities.

    Args:
        options: Private copy to mutate
        form: Submitted fields

    Returns:
        Names of the DriverOptions attributes that were written
    """
    changed = []

    def set_value(attribute: str, value) -> None:
        if value is None:
            return
        setattr(options, attribute, value)
        changed.append(attribute)

    if "orientation-requested" in form:
        set_value("orient_default", _parse_int(form["orientation-requested"]))

    if "print-color-mode" in form:
        set_value("color_default", from_keyword(ColorMode, form["print-color-mode"]))

    if "print-content-optimize" in form:
        set_value("content_default", from_keyword(Content, form["print-content-optimize"]))

    if "print-darkness" in form:
        set_value("darkness_configured", _parse_int(form["print-darkness"]))

    if "print-quality" in form:
        set_value("quality_default", from_keyword(Quality, form["print-quality"]))

    if "print-scaling" in form:
        set_value("scaling_default", from_keyword(Scaling, form["print-scaling"]))

    if "print-speed" in form:
        speed = _parse_int(form["print-speed"])
        set_value("speed_default", speed * SPEED_SCALE if speed is not None else None)

    if "sides" in form:
        set_value("sides_default", from_keyword(Sides, form["sides"]))

    if "printer-resolution" in form:
        resolution = parse_resolution(form["printer-resolution"])
        if resolution is not None:
            options.x_default, options.y_default = resolution
            changed.append("resolution_default")

    if "media-source" in form:
        index = options.source_index(form["media-source"])
        if index is not None:
            options.media_default = deepcopy(options.media_ready[index])
            changed.append("media_default")

    skipped = [name for name in form if name not in _DEFAULTS_FIELDS]
    if skipped:
        logger.debug(f"Ignoring non-default fields: {skipped}")

    return changed


_DEFAULTS_FIELDS = frozenset({
    "orientation-requested",
    "print-color-mode",
    "print-content-optimize",
    "print-darkness",
    "print-quality",
    "print-scaling",
    "print-speed",
    "sides",
    "printer-resolution",
    "media-source",
    "session",
})


# =============================================================================
# READY MEDIA (/media)
# =============================================================================

def _apply_media_group(options: DriverOptions, index: int, form: FormSubmission) -> Optional[MediaCol]:
    source = options.sources[index]
    prefix = f"ready{index}"

    size = form.get(f"{prefix}-size")
    if size is None:
        return None

    ready = MediaCol()

    if size == CUSTOM_SIZE:
        width = _parse_float(form.get(f"{prefix}-custom-width"), HMM_PER_INCH)
        length = _parse_float(form.get(f"{prefix}-custom-length"), HMM_PER_INCH)
        if width is not None and length is not None:
            ready.size_name = custom_size_name(source, width, length)
            ready.size_width = inches_to_hmm(width)
            ready.size_length = inches_to_hmm(length)
        else:
            logger.debug(f"{prefix}: custom size without usable width/length")
    else:
        media = lookup_media(size)
        if media is not None:
            ready.size_name = size
            ready.size_width = media.width
            ready.size_length = media.length
        else:
            logger.debug(f"{prefix}: unknown media size {size!r}")

    ready.source = source

    if f"{prefix}-borderless" in form:
        ready.bottom_margin = ready.top_margin = 0
        ready.left_margin = ready.right_margin = 0
    else:
        ready.bottom_margin = ready.top_margin = options.bottom_top
        ready.left_margin = ready.right_margin = options.left_right

    top_offset = _parse_float(form.get(f"{prefix}-top-offset"), OFFSET_SCALE)
    if top_offset is not None:
        ready.top_offset = int(OFFSET_SCALE * top_offset)

    left_offset = _parse_float(form.get(f"{prefix}-left-offset"), OFFSET_SCALE)
    if left_offset is not None:
        ready.left_offset = int(OFFSET_SCALE * left_offset)

    tracking = from_keyword(MediaTracking, form.get(f"{prefix}-tracking", ""))
    if tracking is not None:
        ready.tracking = tracking

    media_type = form.get(f"{prefix}-type")
    if media_type is not None:
        ready.type = media_type

    return ready


def apply_media_form(options: DriverOptions, form: FormSubmission) -> List[str]:
    """
    Rebuild the ready-media table from a media page submission.

    Every entry is reset first. A source whose ``ready<i>-size`` field is
    missing stays all-zero even if it was configured before. The manual
    feed source is never edited and always ends up empty.

    Args:
        options: Private copy to mutate
        form: Submitted fields

    Returns:
        Sources whose ready media was set from the submission
    """
    rebuilt = [MediaCol() for _ in options.sources]
    configured = []

    for index, source in enumerate(options.sources):
        if source == MANUAL_SOURCE:
            continue

        ready = _apply_media_group(options, index, form)
        if ready is not None:
            rebuilt[index] = ready
            configured.append(source)

    options.media_ready = rebuilt
    return configured
