"""HTTP API for carve-log."""

from .app import create_app

__all__ = ["create_app"]
