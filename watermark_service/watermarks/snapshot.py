"""
Adapter from a client store snapshot to resolver inputs.

The conferencing client keeps the relevant facts in three store slices:

    features/base/jwt          -> isGuest
    features/dynamic-branding  -> customization flags, logo URLs
    features/base/conference   -> room (truthy while a room is joined)

`snapshot_from_store` pulls those out into `BrandingState` and
`SessionState`. Missing or non-mapping slices are read as empty.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from .resolver.visibility import resolve
from .schemas import BrandingState, InterfaceConfig, SessionState, WatermarkDecision

JWT_SLICE = "features/base/jwt"
BRANDING_SLICE = "features/dynamic-branding"
CONFERENCE_SLICE = "features/base/conference"

_BRANDING_KEYS = (
    "customizationReady",
    "customizationFailed",
    "useDynamicBrandingData",
    "logoClickUrl",
    "logoImageUrl",
)


def _slice(state: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(state, Mapping):
        return {}
    value = state.get(name)
    return value if isinstance(value, Mapping) else {}


def snapshot_from_store(state: Any) -> Tuple[BrandingState, SessionState]:
    jwt = _slice(state, JWT_SLICE)
    branding = _slice(state, BRANDING_SLICE)
    conference = _slice(state, CONFERENCE_SLICE)

    branding_state = BrandingState(
        **{key: branding[key] for key in _BRANDING_KEYS if key in branding}
    )
    session_state = SessionState(
        isGuest=jwt.get("isGuest", False),
        # Any truthy room object counts as joined.
        roomActive=bool(conference.get("room")),
    )
    return branding_state, session_state


def resolve_from_store(
    config: InterfaceConfig,
    state: Any,
    default_logo_url: Optional[str] = None,
) -> WatermarkDecision:
    """Snapshot the store and resolve the watermarks in one step."""
    branding, session = snapshot_from_store(state)
    return resolve(config, branding, session, default_logo_url=default_logo_url)
