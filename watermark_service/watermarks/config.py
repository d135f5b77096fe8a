"""
Configuration for the watermark service.

The interface config is read from `WATERMARKS_*` environment variables
once, at import time, and treated as read-only for the rest of the
process. `load_interface_config` is exposed so callers (and tests) can
build one from an explicit mapping instead.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from .schemas import InterfaceConfig

ENV_PREFIX = "WATERMARKS_"

# Deployment defaults, keyed by interface config name. Each one can be
# overridden with `WATERMARKS_<NAME>`; `filmStripOnly` is read from
# `WATERMARKS_FILM_STRIP_ONLY`.
DEFAULTS = {
    "filmStripOnly": "false",
    "SHOW_BRAND_WATERMARK": "false",
    "BRAND_WATERMARK_LINK": "",
    "SHOW_POWERED_BY": "false",
    "SHOW_JITSI_WATERMARK": "true",
    "SHOW_JITSI_WATERMARK_FOR_GUESTS": "true",
    "JITSI_WATERMARK_LINK": "https://jitsi.org",
    "DEFAULT_LOGO_URL": "images/watermark.svg",
}

_ENV_NAMES = {
    "filmStripOnly": "FILM_STRIP_ONLY",
}


def env_name(key: str) -> str:
    return ENV_PREFIX + _ENV_NAMES.get(key, key)


def load_interface_config(environ: Optional[Mapping[str, str]] = None) -> InterfaceConfig:
    """
    Build an `InterfaceConfig` from environment variables.

    Flags accept 1/true/yes/on (any case) as true; anything else is false.
    Unset variables take the value from `DEFAULTS`.
    """
    if environ is None:
        environ = os.environ
    values = {key: environ.get(env_name(key), default) for key, default in DEFAULTS.items()}
    return InterfaceConfig(**values)


INTERFACE_CONFIG: InterfaceConfig = load_interface_config()

# HTTP listener used by `main.run`.
HOST: str = os.environ.get("WATERMARKS_HOST", "0.0.0.0")
PORT: int = int(os.environ.get("WATERMARKS_PORT", "8080"))
