"""
Printer configuration models.

These models describe the persistent, administrator-editable state of one
printer:
- MediaCol: media loaded in a source (the "ready media" entries) and the
  default media
- DriverOptions: capabilities (supported sets) and job defaults
- Contact / PrinterIdentity: DNS-SD name, location and contact details
- Supply: marker supply level shown on the supplies page

Units:
    Lengths are integers in hundredths of millimeters (2540 per inch).
    Speeds are hundredths of millimeters per second.

Thread Safety:
    The models are plain mutable dataclasses. They are owned by the
    printer service, which hands out deep copies and swaps edited copies
    back in under a lock (see core/guarded_state.py).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .options import (
    ColorMode,
    Content,
    MediaTracking,
    Quality,
    Scaling,
    Sides,
    SupplyColor,
    Orientation,
    flags_from_keywords,
    flags_to_keywords,
    from_keyword,
    keyword,
)

# Source keyword for the manual feed slot; it never gets a ready-media
# editor and is never offered as the default media source.
MANUAL_SOURCE = "manual"


@dataclass
class MediaCol:
    """
    Media loaded in one source (a "ready media" entry).

    An all-zero entry means the source is unconfigured.
    """

    size_name: str = ""
    """PWG size keyword, or a synthesized custom_<source>_<W>x<L>in name."""

    size_width: int = 0
    """Width in hundredths of mm."""

    size_length: int = 0
    """Length in hundredths of mm."""

    bottom_margin: int = 0
    left_margin: int = 0
    right_margin: int = 0
    top_margin: int = 0

    left_offset: int = 0
    """Left print offset in hundredths of mm."""

    top_offset: int = 0
    """Top print offset in hundredths of mm."""

    source: str = ""
    """media-source keyword this entry belongs to."""

    tracking: MediaTracking = MediaTracking(0)

    type: str = ""
    """media-type keyword, copied verbatim from the form."""

    @property
    def is_borderless(self) -> bool:
        return not (self.bottom_margin or self.left_margin
                    or self.right_margin or self.top_margin)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for the state file."""
        return {
            "size_name": self.size_name,
            "size_width": self.size_width,
            "size_length": self.size_length,
            "bottom_margin": self.bottom_margin,
            "left_margin": self.left_margin,
            "right_margin": self.right_margin,
            "top_margin": self.top_margin,
            "left_offset": self.left_offset,
            "top_offset": self.top_offset,
            "source": self.source,
            "tracking": keyword(self.tracking) if self.tracking else "",
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MediaCol":
        """Create from dictionary (e.g., from the state file)."""
        return cls(
            size_name=data.get("size_name", ""),
            size_width=int(data.get("size_width", 0)),
            size_length=int(data.get("size_length", 0)),
            bottom_margin=int(data.get("bottom_margin", 0)),
            left_margin=int(data.get("left_margin", 0)),
            right_margin=int(data.get("right_margin", 0)),
            top_margin=int(data.get("top_margin", 0)),
            left_offset=int(data.get("left_offset", 0)),
            top_offset=int(data.get("top_offset", 0)),
            source=data.get("source", ""),
            tracking=from_keyword(MediaTracking, data.get("tracking", "")) or MediaTracking(0),
            type=data.get("type", ""),
        )


@dataclass
class DriverOptions:
    """
    Driver capabilities and defaults for one printer.

    ``sources`` and ``media_ready`` are index-aligned: ``media_ready[i]``
    is the media loaded in ``sources[i]``.
    """

    # Color mode
    color_supported: ColorMode = ColorMode.AUTO | ColorMode.MONOCHROME
    color_default: ColorMode = ColorMode.AUTO

    # Duplex
    sides_supported: Sides = Sides.ONE_SIDED
    sides_default: Sides = Sides.ONE_SIDED

    # Content optimization / scaling
    content_supported: Content = (Content.AUTO | Content.GRAPHIC | Content.PHOTO
                                  | Content.TEXT | Content.TEXT_AND_GRAPHIC)
    content_default: Content = Content.AUTO
    scaling_supported: Scaling = (Scaling.AUTO | Scaling.AUTO_FIT | Scaling.FILL
                                  | Scaling.FIT | Scaling.NONE)
    scaling_default: Scaling = Scaling.AUTO

    # Media tracking
    tracking_supported: MediaTracking = MediaTracking(0)

    # Quality / orientation (ordinals)
    quality_default: int = Quality.NORMAL
    orient_default: int = Orientation.PORTRAIT

    # Darkness: configured percent and number of supported steps (0 = none)
    darkness_configured: int = 0
    darkness_supported: int = 0

    # Speed in hundredths of mm/sec; supported range (0, 0) = not adjustable
    speed_default: int = 0
    speed_supported: Tuple[int, int] = (0, 0)

    # Resolution
    x_default: int = 300
    y_default: int = 300
    resolutions: List[Tuple[int, int]] = field(default_factory=lambda: [(300, 300)])

    # Media
    media: List[str] = field(default_factory=list)
    """Supported media size keywords (may include custom_min_/max_ entries)."""

    types: List[str] = field(default_factory=list)
    """Supported media-type keywords."""

    sources: List[str] = field(default_factory=list)
    """media-source keywords, in order."""

    media_ready: List[MediaCol] = field(default_factory=list)
    media_default: MediaCol = field(default_factory=MediaCol)

    # Margins used when borderless is not selected
    borderless: bool = False
    bottom_top: int = 0
    left_right: int = 0

    # Offset ranges in hundredths of mm; (0, 0) = not supported
    left_offset_supported: Tuple[int, int] = (0, 0)
    top_offset_supported: Tuple[int, int] = (0, 0)

    has_supplies: bool = False

    def __post_init__(self):
        # Keep ready media index-aligned with the sources
        if len(self.media_ready) < len(self.sources):
            self.media_ready.extend(
                MediaCol() for _ in range(len(self.sources) - len(self.media_ready))
            )
        elif len(self.media_ready) > len(self.sources):
            del self.media_ready[len(self.sources):]

    def source_index(self, source: str) -> Optional[int]:
        """Positional index of ``source`` or None."""
        try:
            return self.sources.index(source)
        except ValueError:
            return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for the state file."""
        return {
            "color_supported": flags_to_keywords(ColorMode, self.color_supported),
            "color_default": keyword(self.color_default) if self.color_default else "",
            "sides_supported": flags_to_keywords(Sides, self.sides_supported),
            "sides_default": keyword(self.sides_default) if self.sides_default else "",
            "content_supported": flags_to_keywords(Content, self.content_supported),
            "content_default": keyword(self.content_default) if self.content_default else "",
            "scaling_supported": flags_to_keywords(Scaling, self.scaling_supported),
            "scaling_default": keyword(self.scaling_default) if self.scaling_default else "",
            "tracking_supported": flags_to_keywords(MediaTracking, self.tracking_supported),
            "quality_default": int(self.quality_default),
            "orient_default": int(self.orient_default),
            "darkness_configured": self.darkness_configured,
            "darkness_supported": self.darkness_supported,
            "speed_default": self.speed_default,
            "speed_supported": list(self.speed_supported),
            "x_default": self.x_default,
            "y_default": self.y_default,
            "resolutions": [list(res) for res in self.resolutions],
            "media": list(self.media),
            "types": list(self.types),
            "sources": list(self.sources),
            "media_ready": [media.to_dict() for media in self.media_ready],
            "media_default": self.media_default.to_dict(),
            "borderless": self.borderless,
            "bottom_top": self.bottom_top,
            "left_right": self.left_right,
            "left_offset_supported": list(self.left_offset_supported),
            "top_offset_supported": list(self.top_offset_supported),
            "has_supplies": self.has_supplies,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DriverOptions":
        """Create from dictionary (e.g., from the state file or a profile)."""
        defaults = cls()
        return cls(
            color_supported=flags_from_keywords(ColorMode, data.get("color_supported"))
            or defaults.color_supported,
            color_default=from_keyword(ColorMode, data.get("color_default", ""))
            or defaults.color_default,
            sides_supported=flags_from_keywords(Sides, data.get("sides_supported"))
            or defaults.sides_supported,
            sides_default=from_keyword(Sides, data.get("sides_default", ""))
            or defaults.sides_default,
            content_supported=flags_from_keywords(Content, data.get("content_supported"))
            or defaults.content_supported,
            content_default=from_keyword(Content, data.get("content_default", ""))
            or defaults.content_default,
            scaling_supported=flags_from_keywords(Scaling, data.get("scaling_supported"))
            or defaults.scaling_supported,
            scaling_default=from_keyword(Scaling, data.get("scaling_default", ""))
            or defaults.scaling_default,
            tracking_supported=flags_from_keywords(MediaTracking, data.get("tracking_supported")),
            quality_default=int(data.get("quality_default", defaults.quality_default)),
            orient_default=int(data.get("orient_default", defaults.orient_default)),
            darkness_configured=int(data.get("darkness_configured", 0)),
            darkness_supported=int(data.get("darkness_supported", 0)),
            speed_default=int(data.get("speed_default", 0)),
            speed_supported=tuple(data.get("speed_supported", (0, 0))),
            x_default=int(data.get("x_default", defaults.x_default)),
            y_default=int(data.get("y_default", defaults.y_default)),
            resolutions=[tuple(res) for res in data.get("resolutions", defaults.resolutions)],
            media=list(data.get("media", [])),
            types=list(data.get("types", [])),
            sources=list(data.get("sources", [])),
            media_ready=[MediaCol.from_dict(item) for item in data.get("media_ready", [])],
            media_default=MediaCol.from_dict(data.get("media_default", {})),
            borderless=bool(data.get("borderless", False)),
            bottom_top=int(data.get("bottom_top", 0)),
            left_right=int(data.get("left_right", 0)),
            left_offset_supported=tuple(data.get("left_offset_supported", (0, 0))),
            top_offset_supported=tuple(data.get("top_offset_supported", (0, 0))),
            has_supplies=bool(data.get("has_supplies", False)),
        )


@dataclass
class Contact:
    """Printer contact. Always replaced as a whole."""

    name: str = ""
    email: str = ""
    telephone: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "email": self.email, "telephone": self.telephone}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Contact":
        return cls(
            name=data.get("name", ""),
            email=data.get("email", ""),
            telephone=data.get("telephone", ""),
        )


@dataclass
class PrinterIdentity:
    """
    Administrator-editable identity of a printer.

    None means "unset" (the config form clears a field by submitting it
    empty).
    """

    dns_sd_name: Optional[str] = None
    location: Optional[str] = None
    geo_location: Optional[str] = None
    """"geo:<lat>,<lon>" URI."""

    organization: Optional[str] = None
    org_unit: Optional[str] = None
    contact: Contact = field(default_factory=Contact)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dns_sd_name": self.dns_sd_name,
            "location": self.location,
            "geo_location": self.geo_location,
            "organization": self.organization,
            "org_unit": self.org_unit,
            "contact": self.contact.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrinterIdentity":
        return cls(
            dns_sd_name=data.get("dns_sd_name"),
            location=data.get("location"),
            geo_location=data.get("geo_location"),
            organization=data.get("organization"),
            org_unit=data.get("org_unit"),
            contact=Contact.from_dict(data.get("contact", {})),
        )


@dataclass(frozen=True)
class Supply:
    """A marker supply (ink, toner, waste tank, ...)."""

    description: str
    color: SupplyColor = SupplyColor.NO_COLOR
    level: int = 0
    """Remaining level in percent."""

    type: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "color": keyword(self.color),
            "level": self.level,
            "type": self.type,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Supply":
        return cls(
            description=data.get("description", ""),
            color=from_keyword(SupplyColor, data.get("color", "")) or SupplyColor.NO_COLOR,
            level=int(data.get("level", 0)),
            type=data.get("type", ""),
        )
