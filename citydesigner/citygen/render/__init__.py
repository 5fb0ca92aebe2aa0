"""Rendering package for city visualization.

This package provides a top-down 2D preview of a generated layout.
"""
from citydesigner.citygen.render.preview import render_layout, save_preview

__all__ = ['render_layout', 'save_preview']
