"""Monthly staff shift board."""

from .app import create_app

__all__ = ["create_app"]
