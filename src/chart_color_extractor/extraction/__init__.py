# chart_color_extractor/extraction/__init__.py

"""
extraction.
===========

Does: Group the color extraction stack (color space, stylesheet scanning,
      palette generation, manual token import, export, orchestration).
"""
from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
