from watermarks.resolver.visibility import POWERED_BY_URL, resolve
from watermarks.schemas import BadgeState, BrandingState, InterfaceConfig, SessionState

IN_ROOM = SessionState(isGuest=False, roomActive=True)
READY = BrandingState(customizationReady=True, customizationFailed=False)


def _config(**overrides) -> InterfaceConfig:
    values = {
        "filmStripOnly": False,
        "SHOW_BRAND_WATERMARK": False,
        "BRAND_WATERMARK_LINK": "",
        "SHOW_POWERED_BY": False,
        "SHOW_JITSI_WATERMARK": False,
        "SHOW_JITSI_WATERMARK_FOR_GUESTS": False,
        "JITSI_WATERMARK_LINK": "https://jitsi.org",
        "DEFAULT_LOGO_URL": "images/watermark.svg",
    }
    values.update(overrides)
    return InterfaceConfig(**values)


def test_brand_hidden_by_default():
    decision = resolve(_config(), READY, IN_ROOM)
    assert decision.brand.visible is False
    assert decision.brand.link == ""
    assert decision.brand.state is BadgeState.HIDDEN


def test_brand_visible_without_link_is_unlinked():
    decision = resolve(_config(SHOW_BRAND_WATERMARK=True, BRAND_WATERMARK_LINK=""), READY, IN_ROOM)
    assert decision.brand.visible is True
    assert decision.brand.link == ""
    assert decision.brand.state is BadgeState.UNLINKED


def test_brand_visible_with_link():
    config = _config(SHOW_BRAND_WATERMARK=True, BRAND_WATERMARK_LINK="https://acme.example")
    decision = resolve(config, READY, IN_ROOM)
    assert decision.brand.link == "https://acme.example"
    assert decision.brand.state is BadgeState.LINKED


def test_brand_link_dropped_when_hidden():
    # A configured link must not leak through when the badge is off.
    config = _config(SHOW_BRAND_WATERMARK=False, BRAND_WATERMARK_LINK="https://acme.example")
    decision = resolve(config, READY, IN_ROOM)
    assert decision.brand.visible is False
    assert decision.brand.link == ""


def test_film_strip_only_hides_brand_and_static_product():
    config = _config(
        filmStripOnly=True,
        SHOW_BRAND_WATERMARK=True,
        BRAND_WATERMARK_LINK="https://acme.example",
        SHOW_JITSI_WATERMARK=True,
    )
    decision = resolve(config, READY, IN_ROOM)
    assert decision.brand.state is BadgeState.HIDDEN
    assert decision.product.state is BadgeState.HIDDEN


def test_film_strip_only_product_still_shown_on_welcome_page():
    config = _config(filmStripOnly=True, SHOW_JITSI_WATERMARK=True)
    decision = resolve(config, READY, SessionState(roomActive=False))
    assert decision.brand.visible is False
    assert decision.product.visible is True


def test_product_visible_in_room_when_enabled_and_customization_ready():
    decision = resolve(_config(SHOW_JITSI_WATERMARK=True), READY, IN_ROOM)
    assert decision.product.visible is True
    assert decision.product.link == "https://jitsi.org"
    assert decision.product.background_image == "url(images/watermark.svg)"
    assert decision.product.state is BadgeState.LINKED


def test_product_visible_for_guest_when_guest_flag_set():
    config = _config(SHOW_JITSI_WATERMARK=False, SHOW_JITSI_WATERMARK_FOR_GUESTS=True)
    decision = resolve(config, READY, SessionState(isGuest=True, roomActive=True))
    assert decision.product.visible is True


def test_product_hidden_for_non_guest_when_only_guest_flag_set():
    config = _config(SHOW_JITSI_WATERMARK=False, SHOW_JITSI_WATERMARK_FOR_GUESTS=True)
    decision = resolve(config, READY, IN_ROOM)
    assert decision.product.visible is False
    assert decision.product.link == ""
    assert decision.product.background_image == ""


def test_product_hidden_in_room_until_customization_ready():
    config = _config(SHOW_JITSI_WATERMARK=True)
    decision = resolve(config, BrandingState(customizationReady=False), IN_ROOM)
    assert decision.product.visible is False


def test_product_hidden_in_room_when_customization_failed():
    config = _config(SHOW_JITSI_WATERMARK=True)
    failed = BrandingState(customizationReady=True, customizationFailed=True)
    decision = resolve(config, failed, IN_ROOM)
    assert decision.product.visible is False


def test_welcome_page_always_shows_product_mark():
    # Intentional: before a room is joined the product mark is the
    # branding fallback and ignores every other flag.
    config = _config(filmStripOnly=True, SHOW_JITSI_WATERMARK=False)
    failed = BrandingState(customizationReady=False, customizationFailed=True)
    decision = resolve(config, failed, SessionState(roomActive=False))
    assert decision.product.visible is True


def test_dynamic_branding_with_empty_click_url_is_unlinked():
    branding = BrandingState(
        customizationReady=True,
        useDynamicBrandingData=True,
        logoClickUrl="",
        logoImageUrl="https://x/logo.png",
    )
    decision = resolve(_config(SHOW_JITSI_WATERMARK=True), branding, IN_ROOM)
    assert decision.product.visible is True
    assert decision.product.link == ""
    assert decision.product.state is BadgeState.UNLINKED
    assert decision.product.background_image == "url(https://x/logo.png)"


def test_dynamic_branding_click_url_used_as_link():
    branding = BrandingState(
        customizationReady=True,
        useDynamicBrandingData=True,
        logoClickUrl="https://tenant.example",
        logoImageUrl="https://tenant.example/logo.png",
    )
    decision = resolve(_config(SHOW_JITSI_WATERMARK=True), branding, IN_ROOM)
    assert decision.product.link == "https://tenant.example"
    assert decision.product.state is BadgeState.LINKED


def test_dynamic_branding_ignores_caller_default_logo():
    branding = BrandingState(
        customizationReady=True,
        useDynamicBrandingData=True,
        logoImageUrl="https://tenant.example/logo.png",
    )
    decision = resolve(
        _config(SHOW_JITSI_WATERMARK=True),
        branding,
        IN_ROOM,
        default_logo_url="images/custom.svg",
    )
    assert decision.product.background_image == "url(https://tenant.example/logo.png)"
    assert decision.product.link == ""


def test_caller_default_logo_overrides_config_default():
    decision = resolve(
        _config(SHOW_JITSI_WATERMARK=True),
        READY,
        IN_ROOM,
        default_logo_url="images/custom.svg",
    )
    assert decision.product.background_image == "url(images/custom.svg)"


def test_empty_caller_default_logo_falls_back_to_config():
    decision = resolve(_config(SHOW_JITSI_WATERMARK=True), READY, IN_ROOM, default_logo_url="")
    assert decision.product.background_image == "url(images/watermark.svg)"


def test_static_product_without_link_is_unlinked():
    config = _config(SHOW_JITSI_WATERMARK=True, JITSI_WATERMARK_LINK="")
    decision = resolve(config, READY, IN_ROOM)
    assert decision.product.visible is True
    assert decision.product.state is BadgeState.UNLINKED


def test_missing_image_url_gives_empty_background():
    branding = BrandingState(customizationReady=True, useDynamicBrandingData=True)
    decision = resolve(_config(SHOW_JITSI_WATERMARK=True), branding, IN_ROOM)
    assert decision.product.visible is True
    assert decision.product.background_image == ""


def test_powered_by_follows_config_only():
    shown = resolve(_config(SHOW_POWERED_BY=True), READY, IN_ROOM)
    assert shown.powered_by.visible is True
    assert shown.powered_by.link == POWERED_BY_URL

    hidden = resolve(_config(SHOW_POWERED_BY=False, filmStripOnly=False), READY, SessionState())
    assert hidden.powered_by.visible is False
    assert hidden.powered_by.link == ""


def test_absent_branding_and_session_do_not_raise():
    decision = resolve(_config(SHOW_JITSI_WATERMARK=True))
    # No session means no room joined, so the welcome-page rule applies.
    assert decision.product.visible is True
    assert decision.brand.visible is False


def test_resolve_is_idempotent():
    config = _config(SHOW_BRAND_WATERMARK=True, SHOW_JITSI_WATERMARK=True, SHOW_POWERED_BY=True)
    assert resolve(config, READY, IN_ROOM) == resolve(config, READY, IN_ROOM)


def test_resolve_does_not_mutate_inputs():
    config = _config(SHOW_JITSI_WATERMARK=True)
    before = (config.model_dump(), READY.model_dump(), IN_ROOM.model_dump())
    resolve(config, READY, IN_ROOM, default_logo_url="images/custom.svg")
    assert (config.model_dump(), READY.model_dump(), IN_ROOM.model_dump()) == before


def test_resolve_writes_nothing(capsys):
    resolve(InterfaceConfig())
    resolve(_config(SHOW_BRAND_WATERMARK=True, SHOW_POWERED_BY=True), READY, IN_ROOM)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
