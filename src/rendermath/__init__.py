"""
rendermath - 3D math value types for real-time rendering.

This package provides vectors, quaternions, 4x4 matrices, colors, planes,
viewports, frustums and curve helpers, each with an allocating API and a
zero-allocation ``*_to_ref`` API for render loops.
"""

from rendermath.version import __version__

__all__ = ["__version__"]
