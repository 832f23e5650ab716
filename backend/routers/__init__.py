"""Routers module - FastAPI route handlers"""

from . import analysis, config, diff

__all__ = ["analysis", "config", "diff"]
