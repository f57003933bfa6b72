"""Store a day's recorded driving-sensor JSON exports in database tables."""

__version__ = "0.1.0"
__all__ = ["__version__"]