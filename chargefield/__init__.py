"""Interactive two-dimensional electric field simulator with a field sensor and menu."""

__version__ = "0.1.0"