"""Capacitated vehicle routing: VRPLIB reading, Clarke & Wright savings and local search."""

__version__ = "0.1.0"
__all__ = ["__version__"]