"""Aggregate application use cases."""

from .notifications import cleanup_duplicate_notifications

__all__ = ["cleanup_duplicate_notifications"]
