"""Input drivers, display profiles and utilities for a mesh device user interface."""

__version__ = "0.1.0"