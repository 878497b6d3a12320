"""Rendering collaborators for simulated series."""

from .scales import SceneGeometry, chart_frame, linear_scale, scene_geometry, value_domain

__all__ = ["SceneGeometry", "chart_frame", "linear_scale", "scene_geometry", "value_domain"]
