"""Notification cleanup service package."""
