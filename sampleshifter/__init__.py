"""Scan audio sample files, categorize them by name and copy them into folders."""

__version__ = "0.1.0"
__all__ = ["categorizer", "cli", "config", "scanner", "stats"]