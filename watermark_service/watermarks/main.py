"""
FastAPI app for the watermark visibility service.

Endpoints:
- GET /health
- GET /config
- POST /watermarks/resolve
- POST /watermarks/resolve-store
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import HOST, INTERFACE_CONFIG, PORT
from .resolver.visibility import resolve
from .schemas import (
    HealthResponse,
    InterfaceConfig,
    ResolveRequest,
    StoreResolveRequest,
    WatermarkDecision,
)
from .snapshot import resolve_from_store

logger = structlog.get_logger()

app = FastAPI(
    title="Watermark Visibility Service",
    version="0.1.0",
    description="Decides which conference watermarks to show and where they link to.",
)

# Permissive CORS for dev; tighten this later if needed.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Process-wide interface config; tests may swap it out.
app.state.interface_config = INTERFACE_CONFIG


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Simple health-check endpoint."""
    return HealthResponse(status="ok")


@app.get("/config", response_model=InterfaceConfig)
async def interface_config() -> InterfaceConfig:
    """Return the interface config requests fall back to."""
    return app.state.interface_config


@app.post("/watermarks/resolve", response_model=WatermarkDecision)
async def resolve_watermarks(req: ResolveRequest) -> WatermarkDecision:
    """
    Resolve the watermarks for explicit branding and session snapshots.

    A request without `config` is resolved against the service's own
    interface config. Omitted `branding`/`session` are treated as
    absent, not as errors.
    """
    config: InterfaceConfig = req.config or app.state.interface_config
    decision = resolve(
        config,
        req.branding,
        req.session,
        default_logo_url=req.default_logo_url,
    )
    logger.info(
        "resolve_request",
        config_override=req.config is not None,
        brand=decision.brand.state.value,
        product=decision.product.state.value,
        powered_by=decision.powered_by.state.value,
    )
    return decision


@app.post("/watermarks/resolve-store", response_model=WatermarkDecision)
async def resolve_watermarks_from_store(req: StoreResolveRequest) -> WatermarkDecision:
    """Resolve the watermarks from a raw client store snapshot."""
    decision = resolve_from_store(
        app.state.interface_config,
        req.state,
        default_logo_url=req.default_logo_url,
    )
    logger.info(
        "resolve_store_request",
        slices=sorted(req.state),
        brand=decision.brand.state.value,
        product=decision.product.state.value,
        powered_by=decision.powered_by.state.value,
    )
    return decision


def run() -> None:
    """
    Convenience entrypoint if you want to run via:

        python -m watermarks.main

    or via the `watermark-service` console_script defined in pyproject.toml.
    """
    import uvicorn

    uvicorn.run(
        "watermarks.main:app",
        host=HOST,
        port=PORT,
        reload=False,
    )


if __name__ == "__main__":
    run()
