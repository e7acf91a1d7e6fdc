"""
export.
=======

Does: Serialize chart colors back to stylesheet text.
"""

from __future__ import annotations

from .serializer import active_color_count, fit_config, generate_css

__all__ = ["generate_css", "fit_config", "active_color_count"]
