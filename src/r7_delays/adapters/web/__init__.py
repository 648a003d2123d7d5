"""Web adapters."""

from .api_app import StarletteWebAdapter

__all__ = ["StarletteWebAdapter"]
