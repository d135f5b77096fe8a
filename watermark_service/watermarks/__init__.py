"""
Top-level package for the watermark visibility service.

The decision logic lives in `resolver.visibility.resolve`; `main.py`
exposes it over HTTP:

- GET /health
- GET /config
- POST /watermarks/resolve
- POST /watermarks/resolve-store
"""
