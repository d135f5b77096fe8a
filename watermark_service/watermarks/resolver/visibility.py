"""
Watermark visibility decision logic.

Derives, for each of the three badge slots, whether it is shown and where
it links to. This is a pure function of its inputs:

- the static `InterfaceConfig`,
- a `BrandingState` snapshot (possibly absent),
- a `SessionState` snapshot (possibly absent).

Absent inputs behave like their all-default counterparts, so nothing here
raises. An absent session therefore means "no room joined", which keeps
the product mark visible (see `_resolve_product`).
"""

from __future__ import annotations

from typing import Optional

from ..schemas import (
    BrandingState,
    BrandWatermark,
    InterfaceConfig,
    PoweredByWatermark,
    ProductWatermark,
    SessionState,
    WatermarkDecision,
)

# Target of the "powered by" credit. Not configurable.
POWERED_BY_URL = "http://jitsi.org"


def _css_url(url: Optional[str]) -> str:
    return f"url({url})" if url else ""


def _resolve_brand(config: InterfaceConfig) -> BrandWatermark:
    if config.film_strip_only or not config.show_brand_watermark:
        return BrandWatermark(visible=False, link="")
    return BrandWatermark(visible=True, link=config.brand_watermark_link)


def _resolve_product(
    config: InterfaceConfig,
    branding: BrandingState,
    session: SessionState,
    default_logo_url: Optional[str],
) -> ProductWatermark:
    static_eligible = (
        not config.film_strip_only
        and branding.customization_ok
        and (
            config.show_jitsi_watermark
            or (session.is_guest and config.show_jitsi_watermark_for_guests)
        )
    )

    # The welcome page always carries the product mark, whatever the
    # other flags say.
    if not (static_eligible or session.welcome_page_visible):
        return ProductWatermark(visible=False, link="", background_image="")

    if branding.use_dynamic_branding_data:
        link = branding.logo_click_url or ""
        image = branding.logo_image_url
    else:
        link = config.jitsi_watermark_link
        image = default_logo_url or config.default_logo_url

    return ProductWatermark(visible=True, link=link, background_image=_css_url(image))


def _resolve_powered_by(config: InterfaceConfig) -> PoweredByWatermark:
    if not config.show_powered_by:
        return PoweredByWatermark(visible=False, link="")
    return PoweredByWatermark(visible=True, link=POWERED_BY_URL)


def resolve(
    config: InterfaceConfig,
    branding: Optional[BrandingState] = None,
    session: Optional[SessionState] = None,
    default_logo_url: Optional[str] = None,
) -> WatermarkDecision:
    """
    Compute the watermark decision for one set of inputs.

    `default_logo_url` is the caller-supplied product logo; when it is
    empty the config's `DEFAULT_LOGO_URL` is used instead. It only
    matters when dynamic branding is not in use.

    Each slot is resolved independently. Repeated calls with equal inputs
    return equal decisions.
    """
    branding = branding if branding is not None else BrandingState()
    session = session if session is not None else SessionState()

    return WatermarkDecision(
        brand=_resolve_brand(config),
        product=_resolve_product(config, branding, session, default_logo_url),
        powered_by=_resolve_powered_by(config),
    )
