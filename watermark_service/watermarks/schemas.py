"""
Pydantic schemas used by the resolver and the FastAPI app.

Input field names mirror the keys the conferencing client uses for its
interface config and its dynamic-branding store slice, so payloads can be
forwarded as-is. The snake_case attribute names are accepted as well.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

_TRUTHY_STRINGS = frozenset({"1", "true", "yes", "on"})


def lenient_flag(value: Any) -> bool:
    """
    Read a loosely-typed flag.

    Absent or unrecognised values are treated as false instead of
    failing validation.
    """
    if isinstance(value, (bool, int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_STRINGS
    return False


def lenient_url(value: Any) -> Optional[str]:
    """Anything other than a string counts as "no URL"."""
    return value if isinstance(value, str) else None


class InterfaceConfig(BaseModel):
    """
    Static deployment configuration.

    Supplied once per process and never mutated, hence frozen. Keys match
    the client's `interfaceConfig` object:

    - filmStripOnly
    - SHOW_BRAND_WATERMARK / BRAND_WATERMARK_LINK
    - SHOW_POWERED_BY
    - SHOW_JITSI_WATERMARK / SHOW_JITSI_WATERMARK_FOR_GUESTS
    - JITSI_WATERMARK_LINK / DEFAULT_LOGO_URL
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    film_strip_only: bool = Field(default=False, alias="filmStripOnly")
    show_brand_watermark: bool = Field(default=False, alias="SHOW_BRAND_WATERMARK")
    brand_watermark_link: str = Field(default="", alias="BRAND_WATERMARK_LINK")
    show_powered_by: bool = Field(default=False, alias="SHOW_POWERED_BY")
    show_jitsi_watermark: bool = Field(default=False, alias="SHOW_JITSI_WATERMARK")
    show_jitsi_watermark_for_guests: bool = Field(
        default=False, alias="SHOW_JITSI_WATERMARK_FOR_GUESTS"
    )
    jitsi_watermark_link: str = Field(default="", alias="JITSI_WATERMARK_LINK")
    default_logo_url: str = Field(default="", alias="DEFAULT_LOGO_URL")

    @field_validator(
        "film_strip_only",
        "show_brand_watermark",
        "show_powered_by",
        "show_jitsi_watermark",
        "show_jitsi_watermark_for_guests",
        mode="before",
    )
    @classmethod
    def _coerce_flags(cls, value: Any) -> bool:
        return lenient_flag(value)

    @field_validator(
        "brand_watermark_link",
        "jitsi_watermark_link",
        "default_logo_url",
        mode="before",
    )
    @classmethod
    def _coerce_links(cls, value: Any) -> str:
        return lenient_url(value) or ""


class BrandingState(BaseModel):
    """
    Snapshot of the remotely-fetched branding data.

    The fetch happens elsewhere; this is whatever it had produced at the
    time of the snapshot, so every field may be missing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    customization_ready: bool = Field(default=False, alias="customizationReady")
    customization_failed: bool = Field(default=False, alias="customizationFailed")
    use_dynamic_branding_data: bool = Field(
        default=False, alias="useDynamicBrandingData"
    )
    logo_click_url: Optional[str] = Field(default=None, alias="logoClickUrl")
    logo_image_url: Optional[str] = Field(default=None, alias="logoImageUrl")

    @field_validator(
        "customization_ready",
        "customization_failed",
        "use_dynamic_branding_data",
        mode="before",
    )
    @classmethod
    def _coerce_flags(cls, value: Any) -> bool:
        return lenient_flag(value)

    @field_validator("logo_click_url", "logo_image_url", mode="before")
    @classmethod
    def _coerce_urls(cls, value: Any) -> Optional[str]:
        return lenient_url(value)

    @property
    def customization_ok(self) -> bool:
        return self.customization_ready and not self.customization_failed


class SessionState(BaseModel):
    """
    Session facts supplied by the hosting application.

    - isGuest: the viewer has no authenticated/host privileges
    - roomActive: a conference room is joined (false on the welcome page)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    is_guest: bool = Field(default=False, alias="isGuest")
    room_active: bool = Field(default=False, alias="roomActive")

    @field_validator("is_guest", "room_active", mode="before")
    @classmethod
    def _coerce_flags(cls, value: Any) -> bool:
        return lenient_flag(value)

    @property
    def welcome_page_visible(self) -> bool:
        return not self.room_active


class BadgeState(str, Enum):
    """How a renderer should treat a badge slot."""

    HIDDEN = "hidden"
    UNLINKED = "unlinked"
    LINKED = "linked"


class _Badge(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    visible: bool = False
    link: str = ""

    @computed_field  # type: ignore[misc]
    @property
    def state(self) -> BadgeState:
        if not self.visible:
            return BadgeState.HIDDEN
        return BadgeState.LINKED if self.link else BadgeState.UNLINKED


class BrandWatermark(_Badge):
    """Customer brand badge (right-hand watermark)."""


class ProductWatermark(_Badge):
    """
    Product badge (left-hand watermark).

    `backgroundImage` is a CSS `url(...)` reference, or empty when the
    badge is hidden or no image URL is known.
    """

    background_image: str = Field(default="", alias="backgroundImage")


class PoweredByWatermark(_Badge):
    """The "powered by" credit. Its link is a fixed external URL."""


class WatermarkDecision(BaseModel):
    """
    Resolved visibility and link targets for the three badge slots.

    Renderers map each slot's `state`:

    - hidden: render nothing
    - unlinked: render the badge bare
    - linked: wrap the badge in an anchor opening a new browsing context
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    brand: BrandWatermark
    product: ProductWatermark
    powered_by: PoweredByWatermark = Field(alias="poweredBy")


class ResolveRequest(BaseModel):
    """
    Request payload for POST /watermarks/resolve.

    `config` is optional; the service falls back to its own interface
    config when it is omitted.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    config: Optional[InterfaceConfig] = None
    branding: Optional[BrandingState] = None
    session: Optional[SessionState] = None
    default_logo_url: Optional[str] = Field(default=None, alias="defaultLogoUrl")

    @field_validator("config", "branding", "session", mode="before")
    @classmethod
    def _drop_malformed_snapshots(cls, value: Any) -> Any:
        # Anything that isn't an object is read as "not supplied".
        return value if isinstance(value, (BaseModel, Mapping)) else None

    @field_validator("default_logo_url", mode="before")
    @classmethod
    def _coerce_default_logo(cls, value: Any) -> Optional[str]:
        return lenient_url(value)


class StoreResolveRequest(BaseModel):
    """
    Request payload for POST /watermarks/resolve-store.

    A missing or non-object `state` is read as an empty store.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    state: Dict[str, Any] = Field(default_factory=dict)
    default_logo_url: Optional[str] = Field(default=None, alias="defaultLogoUrl")

    @field_validator("state", mode="before")
    @classmethod
    def _coerce_state(cls, value: Any) -> Any:
        return value if isinstance(value, Mapping) else {}

    @field_validator("default_logo_url", mode="before")
    @classmethod
    def _coerce_default_logo(cls, value: Any) -> Optional[str]:
        return lenient_url(value)


class HealthResponse(BaseModel):
    """Simple health check response."""

    status: str
