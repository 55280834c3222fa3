"""Web API for terragraph (requires the ``web`` extra)."""

from terragraph.web.app import create_app

__all__ = ["create_app"]
