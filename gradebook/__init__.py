"""Student record keeping with averages that drop the lowest score."""

__version__ = "0.1.0"
__all__ = ["records", "cli"]