"""Utility modules for rendermath."""

from rendermath.utils.io import load_yaml, save_yaml
from rendermath.utils.time import Timer, time_operation

__all__ = [
    "load_yaml",
    "save_yaml",
    "Timer",
    "time_operation",
]
