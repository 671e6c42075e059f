"""Plugins built on the geometry core."""
