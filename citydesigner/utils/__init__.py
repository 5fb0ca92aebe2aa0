"""Utility package: logging, spatial indexing, collision helpers and JSON import/export."""
