# app/adapters/api/routers/__init__.py
"""
API Route Definitions.

- `rendering`: Endpoints for template rendering and pronoun table inspection.
- `health`: System health checks.
"""

from . import health
from . import rendering

__all__ = [
    "health",
    "rendering",
]
