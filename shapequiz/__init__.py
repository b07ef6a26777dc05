"""shapequiz package initialization.

A shapes, sizes and colors quiz engine for young learners: question
generation, difficulty scheduling, scoring and the per-play session.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
