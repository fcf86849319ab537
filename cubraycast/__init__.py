"""Grid raycasting maze explorer driven by .cub scene files."""

__version__ = "0.1.0"
__all__ = ["__version__"]