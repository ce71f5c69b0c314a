"""Animated model of a 5.25-inch floppy disk drive and a WD1793 register panel."""

__version__ = "1.0.0"

__all__ = ["__version__"]