"""
api
===

FastAPI routers and HTTP endpoint definitions for the complexity estimator.

Modules
-------
analyzer_routes
    Router for /analyze, /growth-curve, /self-check and /health.

Design
------
Thin controllers: endpoints receive requests, delegate to the services and
domain layers, and return their models. Engine-level errors travel inside
``AnalysisResult.error``; only unexpected failures become HTTP errors.

Usage
-----
    from complexity_estimator.api import router
    app.include_router(router)
"""

from .analyzer_routes import router

__all__ = ["router"]
