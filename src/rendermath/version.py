"""Version information for rendermath."""

__version__ = "0.1.0"
